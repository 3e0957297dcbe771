"""
Core Utilities Package

This package exposes the essential components for build configuration,
logging, reproducibility, recipe I/O and project constants.
"""

# Configuration
from .config import ActivationKind, BuildConfig, LossKind, Recipe, validate

# Constants
from .constants import (
    CLIPPED_RELU_CEILING,
    CONV_KERNEL_SIZE,
    DEFAULT_NET_DEPTH,
    DEFAULT_NET_WIDTH,
    LEAKY_RELU_SLOPE,
    LOGGER_NAME,
)

# Environment
from .environment import make_generator, set_seed

# Input/Output Utilities
from .io import load_config_from_yaml, save_config_as_yaml

# Logging
from .logger import Logger, LogStyle, log_build_header, log_network_summary

__all__ = [
    # Configuration
    "ActivationKind",
    "BuildConfig",
    "LossKind",
    "Recipe",
    "validate",
    # Constants
    "LOGGER_NAME",
    "CONV_KERNEL_SIZE",
    "LEAKY_RELU_SLOPE",
    "CLIPPED_RELU_CEILING",
    "DEFAULT_NET_DEPTH",
    "DEFAULT_NET_WIDTH",
    # Environment
    "make_generator",
    "set_seed",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
    # Logging
    "Logger",
    "LogStyle",
    "log_build_header",
    "log_network_summary",
]
