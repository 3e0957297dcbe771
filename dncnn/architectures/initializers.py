"""
Convolution Weight Initialization.

He (variance-scaling) initialization for rectifier networks: each weight is
drawn i.i.d. from ``Normal(0, 2 / (kernel_h * kernel_w * fan))`` with the fan
taken from the number of output channels, which keeps activation variance
stable across the depth of the stack. Biases start at zero.

Reference:
    He, K., Zhang, X., Ren, S., & Sun, J. (2015). Delving Deep into
    Rectifiers: Surpassing Human-Level Performance on ImageNet
    Classification. ICCV.
"""

from __future__ import annotations

import math

import torch

from ..core import CONV_KERNEL_SIZE


def he_std(kernel: tuple[int, int], fan: int) -> float:
    """Standard deviation ``sqrt(2 / (kh * kw * fan))``."""
    return math.sqrt(2.0 / (kernel[0] * kernel[1] * fan))


def init_conv(
    in_channels: int,
    out_channels: int,
    kernel: tuple[int, int] = CONV_KERNEL_SIZE,
    fan_channels: int | None = None,
    generator: torch.Generator | None = None,
    dtype: torch.dtype = torch.float32,
) -> tuple[torch.Tensor, torch.Tensor]:
    """
    Draw fresh weights and a zero bias for one convolutional layer.

    Args:
        in_channels: Number of input feature maps.
        out_channels: Number of filters.
        kernel: Spatial kernel size ``(kh, kw)``.
        fan_channels: Channel count used for the fan; defaults to
            ``out_channels``. Pass the hidden width to scale a narrow output
            convolution like the hidden ones (the reference DnCNN recipe).
            The assembler always uses the default.
        generator: Random source. When None, torch's global generator is used.
        dtype: Floating point type of the returned tensors.

    Returns:
        ``(weights, bias)`` with shapes ``(kh, kw, in, out)`` and ``(1, 1, out)``.
    """
    fan = out_channels if fan_channels is None else fan_channels
    shape = (kernel[0], kernel[1], in_channels, out_channels)

    weights = torch.randn(shape, generator=generator, dtype=dtype) * he_std(kernel, fan)
    bias = torch.zeros((1, 1, out_channels), dtype=dtype)
    return weights, bias
