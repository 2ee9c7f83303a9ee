from __future__ import annotations

import json
import logging

import pytest

from raster_ops import config
from raster_ops.config import OpsConfig, OpsConfigError, resolve_max_workers, setup_logger


def test_defaults_match_module_dictionaries() -> None:
    cfg = OpsConfig()
    assert cfg.get("operators", "sobel_edge_threshold") == 1e-5
    assert cfg.get("operators", "sobel_legacy_sampling") is False
    assert cfg.get("execution", "missing", "fallback") == "fallback"


def test_file_then_dict_overrides(tmp_path) -> None:
    path = tmp_path / "ops.json"
    path.write_text(json.dumps({"execution": {"max_workers": 2, "min_rows_per_chunk": 4}}))
    cfg = OpsConfig(config_dict={"execution": {"max_workers": 3}}, config_file=str(path))
    assert cfg.get("execution", "max_workers") == 3
    assert cfg.get("execution", "min_rows_per_chunk") == 4
    # module defaults are untouched until apply()
    assert config.EXECUTION_CONFIG["max_workers"] is None


def test_apply_updates_module_configuration() -> None:
    OpsConfig(config_dict={"operators": {"sobel_legacy_sampling": True}}).apply()
    assert config.OPERATOR_CONFIG["sobel_legacy_sampling"] is True


def test_unknown_section_rejected() -> None:
    with pytest.raises(OpsConfigError):
        OpsConfig(config_dict={"pipeline": {}})


def test_setup_logger_adds_console_next_to_file_handler(tmp_path) -> None:
    logger = logging.getLogger("raster_ops")
    before = list(logger.handlers)
    file_handler = logging.FileHandler(tmp_path / "ops.log")
    logger.addHandler(file_handler)
    try:
        setup_logger("INFO")
        consoles = [h for h in logger.handlers
                    if type(h) is logging.StreamHandler and h not in before]
        assert len(consoles) == 1
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)


def test_resolve_max_workers(monkeypatch) -> None:
    assert resolve_max_workers(3) == 3
    monkeypatch.setitem(config.EXECUTION_CONFIG, "max_workers", 5)
    assert resolve_max_workers() == 5
    monkeypatch.setitem(config.EXECUTION_CONFIG, "max_workers", None)
    assert resolve_max_workers() >= 1


def test_setup_logger_adds_one_handler() -> None:
    logger = logging.getLogger("raster_ops")
    before = list(logger.handlers)
    try:
        setup_logger("DEBUG")
        setup_logger("DEBUG")
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
