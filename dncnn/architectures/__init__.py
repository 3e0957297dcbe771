"""
Architectures Package.

DnCNN layer-descriptor assembly, weight initialization and optional
PyTorch materialization.
"""

from .activations import select_activation
from .descriptors import (
    ActivationLayer,
    ConvLayer,
    InputLayer,
    LayerDescriptor,
    LossLayer,
    NormalizationLayer,
)
from .factory import assemble, build_network, summarize
from .initializers import he_std, init_conv
from .losses import select_loss
from .torch_backend import to_torch

__all__ = [
    "build_network",
    "assemble",
    "summarize",
    "select_activation",
    "select_loss",
    "init_conv",
    "he_std",
    "to_torch",
    "LayerDescriptor",
    "InputLayer",
    "ConvLayer",
    "ActivationLayer",
    "NormalizationLayer",
    "LossLayer",
]
