from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = fh.read().splitlines()

setup(
    name="raster_ops",
    version="0.1.0",
    author="raster_ops contributors",
    description="Pixel-grid operators over floating-point raster images for heightmap pipelines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["raster_ops", "raster_ops.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)
