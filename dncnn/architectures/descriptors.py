"""
Layer Descriptors.

Closed set of immutable value objects, one per layer kind, that together
describe a DnCNN network for an external execution framework. Each variant
carries a ``kind`` discriminator so consumers can dispatch without
inspecting class hierarchies:

    >>> for layer in layers:
    ...     match layer.kind:
    ...         case "conv":
    ...             ...

Weight tensors follow the ``(kernel_h, kernel_w, in_channels, out_channels)``
layout; biases are ``(1, 1, out_channels)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

import torch

from ..core import CONV_KERNEL_SIZE, ActivationKind, LossKind


@dataclass(frozen=True, slots=True)
class InputLayer:
    """
    Image input stage.

    Attributes:
        shape: Input geometry as ``(height, width, channels)``.
        normalization: Input normalization applied by the consumer
            (``"zerocenter"`` subtracts the training-set mean image).
    """

    kind: ClassVar[str] = "input"

    shape: tuple[int, int, int]
    normalization: str = "zerocenter"


@dataclass(frozen=True, slots=True, eq=False)
class ConvLayer:
    """
    2D convolution with ``same`` padding and pre-initialized parameters.

    Equality is identity-based: tensors do not support boolean comparison.

    Attributes:
        in_channels: Number of input feature maps.
        out_channels: Number of filters.
        weights: Tensor of shape ``(kh, kw, in_channels, out_channels)``.
        bias: Tensor of shape ``(1, 1, out_channels)``.
        kernel: Spatial kernel size ``(kh, kw)``.
        padding: Padding mode; output spatial size equals input size.
    """

    kind: ClassVar[str] = "conv"

    in_channels: int
    out_channels: int
    weights: torch.Tensor
    bias: torch.Tensor
    kernel: tuple[int, int] = CONV_KERNEL_SIZE
    padding: str = "same"

    @property
    def num_parameters(self) -> int:
        """Number of trainable scalars (weights + bias)."""
        return self.weights.numel() + self.bias.numel()


@dataclass(frozen=True, slots=True)
class ActivationLayer:
    """
    Rectifier stage.

    Attributes:
        activation: Rectifier variant.
        parameter: Negative slope (leaky) or upper ceiling (clipped);
            None for the standard rectifier.
    """

    kind: ClassVar[str] = "activation"

    activation: ActivationKind
    parameter: float | None = None


@dataclass(frozen=True, slots=True)
class NormalizationLayer:
    """Batch normalization over ``num_channels`` feature maps."""

    kind: ClassVar[str] = "normalization"

    num_channels: int

    @property
    def num_parameters(self) -> int:
        """Learnable scale and offset per channel."""
        return 2 * self.num_channels


@dataclass(frozen=True, slots=True)
class LossLayer:
    """Terminal regression stage comparing prediction and target."""

    kind: ClassVar[str] = "loss"

    loss: LossKind


LayerDescriptor = Union[InputLayer, ConvLayer, ActivationLayer, NormalizationLayer, LossLayer]
