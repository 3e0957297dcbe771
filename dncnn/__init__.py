"""
DnCNN Builder: declarative DnCNN denoiser specifications.

Top-level convenience API re-exporting the most commonly used components
from subpackages, so users and the ``dncnn`` CLI can write:

    from dncnn import build_network, to_torch
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("dncnn-builder")

from .architectures import (
    ActivationLayer,
    ConvLayer,
    InputLayer,
    LayerDescriptor,
    LossLayer,
    NormalizationLayer,
    assemble,
    build_network,
    init_conv,
    summarize,
    to_torch,
)
from .core import ActivationKind, BuildConfig, LossKind, make_generator, set_seed, validate
from .exceptions import (
    DnCNNConfigError,
    DnCNNError,
    InvalidActivationKind,
    InvalidDepth,
    InvalidImageSize,
    InvalidLossKind,
    InvalidWidth,
)

__all__ = [
    "__version__",
    # Entry points
    "build_network",
    "assemble",
    "validate",
    "summarize",
    "to_torch",
    "init_conv",
    # Configuration
    "BuildConfig",
    "ActivationKind",
    "LossKind",
    # Descriptors
    "LayerDescriptor",
    "InputLayer",
    "ConvLayer",
    "ActivationLayer",
    "NormalizationLayer",
    "LossLayer",
    # Reproducibility
    "make_generator",
    "set_seed",
    # Errors
    "DnCNNError",
    "DnCNNConfigError",
    "InvalidImageSize",
    "InvalidDepth",
    "InvalidWidth",
    "InvalidActivationKind",
    "InvalidLossKind",
]
