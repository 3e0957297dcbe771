"""
PyTorch Materialization.

Turns a DnCNN descriptor sequence into an executable ``nn.Sequential`` and
its loss criterion, copying the pre-initialized convolution parameters.
Descriptor weights use ``(kh, kw, in, out)``; ``nn.Conv2d`` expects
``(out, in, kh, kw)``, so tensors are permuted on the way in.

The ``zerocenter`` input normalization depends on training-set statistics
and is left to the data pipeline; the input stage materializes as identity.
Modules are created on CPU; device placement belongs to the caller.
"""

from __future__ import annotations

from typing import Sequence

import torch
import torch.nn as nn

from ..core import ActivationKind, LossKind
from .descriptors import (
    ActivationLayer,
    ConvLayer,
    InputLayer,
    LayerDescriptor,
    LossLayer,
    NormalizationLayer,
)


def to_torch(layers: Sequence[LayerDescriptor]) -> tuple[nn.Sequential, nn.Module]:
    """
    Materialize descriptors into a PyTorch model and criterion.

    Args:
        layers: Descriptor sequence ending with a :class:`LossLayer`.

    Returns:
        ``(model, criterion)``; the model maps ``(N, C, H, W)`` to the same shape.

    Raises:
        ValueError: If the sequence has no terminal loss layer.
        TypeError: On an unknown descriptor.
    """
    if not layers or not isinstance(layers[-1], LossLayer):
        raise ValueError("Descriptor sequence must end with a loss layer.")

    modules = [_to_module(layer) for layer in layers[:-1]]
    model = nn.Sequential(*[m for m in modules if m is not None])
    return model, _to_criterion(layers[-1])


def _to_module(layer: LayerDescriptor) -> nn.Module | None:
    """Map one non-terminal descriptor to its module (None for the input stage)."""
    if isinstance(layer, InputLayer):
        return None

    if isinstance(layer, ConvLayer):
        conv = nn.Conv2d(
            layer.in_channels,
            layer.out_channels,
            kernel_size=layer.kernel,
            padding=layer.padding,
        )
        with torch.no_grad():
            conv.weight.copy_(layer.weights.permute(3, 2, 0, 1))
            conv.bias.copy_(layer.bias.reshape(-1))
        return conv

    if isinstance(layer, NormalizationLayer):
        return nn.BatchNorm2d(layer.num_channels)

    if isinstance(layer, ActivationLayer):
        if layer.activation is ActivationKind.STANDARD:
            return nn.ReLU()
        if layer.activation is ActivationKind.LEAKY:
            return nn.LeakyReLU(negative_slope=layer.parameter)
        if layer.activation is ActivationKind.CLIPPED:
            return nn.Hardtanh(min_val=0.0, max_val=layer.parameter)

    raise TypeError(f"Cannot materialize layer descriptor: {layer!r}")


def _to_criterion(layer: LossLayer) -> nn.Module:
    """Map the terminal descriptor to a loss criterion."""
    if layer.loss is LossKind.MEAN_SQUARED_ERROR:
        return nn.MSELoss()
    raise TypeError(f"Cannot materialize loss descriptor: {layer!r}")
