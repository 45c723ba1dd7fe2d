[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwcnet"
version = "0.1.0"
description = "Small HWC-layout neural network layers: convolution, linear, patch embedding and activations"
requires-python = ">=3.10"
keywords = ["neural network", "convolution", "tensor", "inference", "hwc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hwcnet = "hwcnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hwcnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
