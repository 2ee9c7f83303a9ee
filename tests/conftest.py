from __future__ import annotations

import copy

import pytest

from raster_ops import config


@pytest.fixture(autouse=True)
def _restore_config():
    saved = {
        "execution": copy.deepcopy(config.EXECUTION_CONFIG),
        "operators": copy.deepcopy(config.OPERATOR_CONFIG),
        "logging": copy.deepcopy(config.LOGGING_CONFIG),
    }
    yield
    config.EXECUTION_CONFIG.clear()
    config.EXECUTION_CONFIG.update(saved["execution"])
    config.OPERATOR_CONFIG.clear()
    config.OPERATOR_CONFIG.update(saved["operators"])
    config.LOGGING_CONFIG.clear()
    config.LOGGING_CONFIG.update(saved["logging"])
