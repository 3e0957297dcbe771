"""
DnCNN Architecture Factory.

Assembles the ordered layer-descriptor sequence of a DnCNN denoiser from a
validated :class:`BuildConfig`. The network follows a VGG-style plain stack
of 3x3 convolutions:

    Input → [Conv → Act] → [Conv → BN → Act] × (depth - 2) → Conv → Loss

Every convolution gets independently drawn He-initialized weights; the
activation and loss variants are resolved through their registries.

Key Components:

- ``build_network``: Public entry point (raw parameters → descriptors)
- ``assemble``: Pure assembler (BuildConfig → descriptors)
- ``summarize``: Plain per-layer rows for logging and the CLI

Example:
    >>> from dncnn import build_network
    >>> layers = build_network([128, 128, 3], net_depth=17, relu_type="leaky")
    >>> len(layers)
    50

References:
    Zhang, K., Zuo, W., Chen, Y., Meng, D., & Zhang, L. (2017). Beyond a
    Gaussian denoiser: Residual learning of deep CNN for image denoising.
    IEEE Transactions on Image Processing, 26(7), 3142-3155.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import torch

from ..core import (
    CONV_KERNEL_SIZE,
    DEFAULT_NET_DEPTH,
    DEFAULT_NET_WIDTH,
    LOGGER_NAME,
    BuildConfig,
    LogStyle,
    log_build_header,
    log_network_summary,
    make_generator,
    validate,
)
from ..exceptions import DnCNNConfigError, DnCNNError
from .activations import ActivationFactory, select_activation
from .descriptors import (
    ActivationLayer,
    ConvLayer,
    InputLayer,
    LayerDescriptor,
    LossLayer,
    NormalizationLayer,
)
from .initializers import init_conv
from .losses import select_loss

# LOGGER CONFIGURATION
logger = logging.getLogger(LOGGER_NAME)


# PUBLIC ENTRY POINT
def build_network(
    image_size: Any,
    net_depth: int = DEFAULT_NET_DEPTH,
    net_width: int = DEFAULT_NET_WIDTH,
    relu_type: str = "relu",
    loss_function: str = "mse",
    *,
    generator: torch.Generator | None = None,
    seed: int | None = None,
    verbose: bool = True,
) -> list[LayerDescriptor]:
    """
    Validate build parameters and assemble a DnCNN layer sequence.

    Args:
        image_size: Input size as ``n``, ``(h, w)`` or ``(h, w, c)``.
        net_depth: Number of convolutional layers (>= 2).
        net_width: Number of filters of each hidden convolution (>= 1).
        relu_type: Rectifier variant: ``relu``, ``leaky`` or ``clipped``.
        loss_function: Terminal loss: ``mse``.
        generator: Random source for weight initialization.
        seed: Seed for a private generator; cannot be combined with ``generator``.
        verbose: Log the build header and the per-layer summary.

    Returns:
        Ordered list of layer descriptors.

    Raises:
        InvalidImageSize, InvalidDepth, InvalidWidth, InvalidActivationKind,
        InvalidLossKind: On invalid parameters, before any tensor is drawn.
        ValueError: If both ``generator`` and ``seed`` are given.
    """
    if generator is not None and seed is not None:
        raise ValueError("Pass either 'generator' or 'seed', not both.")

    try:
        cfg = validate(
            image_size,
            depth=net_depth,
            width=net_width,
            activation=relu_type,
            loss=loss_function,
        )
    except DnCNNError as e:
        logger.error(f" {LogStyle.FAILURE} {e}")
        raise

    if seed is not None:
        generator = make_generator(seed)

    if verbose:
        log_build_header(cfg, logger_instance=logger)

    layers = assemble(cfg, generator=generator)

    if verbose:
        log_network_summary(summarize(layers), logger_instance=logger)

    return layers


# ASSEMBLY
def assemble(
    cfg: BuildConfig, generator: torch.Generator | None = None
) -> list[LayerDescriptor]:
    """
    Compose the DnCNN layer stack described by ``cfg``.

    Args:
        cfg: Validated build configuration.
        generator: Random source for weight initialization.

    Returns:
        ``[Input, Conv, Act, (Conv, BN, Act) × (depth - 2), Conv, Loss]``.

    Raises:
        DnCNNConfigError: If ``cfg.depth`` leaves no room for the first and
            last convolutions.
    """
    if cfg.num_interior_blocks < 0:
        raise DnCNNConfigError(f"net_depth should be an integer >= 2, got {cfg.depth}")

    get_activation = select_activation(cfg.activation_kind)
    get_loss = select_loss(cfg.loss_kind)
    channels, width = cfg.channels, cfg.width

    layers: list[LayerDescriptor] = [InputLayer(shape=cfg.image_shape)]

    # Block A: conv + activation
    layers += _conv_block(channels, width, get_activation, generator, normalize=False)

    # Block B: conv + BN + activation, fresh weights per repetition
    for _ in range(cfg.num_interior_blocks):
        layers += _conv_block(width, width, get_activation, generator, normalize=True)

    # Block C: conv back to image channels
    layers.append(_conv(width, channels, generator))

    layers.append(get_loss())
    return layers


def summarize(layers: Sequence[LayerDescriptor]) -> list[dict[str, Any]]:
    """
    Flatten descriptors into table rows.

    Args:
        layers: Assembled descriptor sequence.

    Returns:
        One dict per layer with ``index``, ``kind``, ``detail`` and ``params``.
    """
    rows = []
    for index, layer in enumerate(layers, start=1):
        params = 0
        if isinstance(layer, InputLayer):
            h, w, c = layer.shape
            detail = f"{h}x{w}x{c} ({layer.normalization})"
        elif isinstance(layer, ConvLayer):
            kh, kw = layer.kernel
            detail = f"{kh}x{kw} {layer.in_channels} → {layer.out_channels} ({layer.padding})"
            params = layer.num_parameters
        elif isinstance(layer, NormalizationLayer):
            detail = f"batchnorm {layer.num_channels}"
            params = layer.num_parameters
        elif isinstance(layer, ActivationLayer):
            detail = layer.activation.value
            if layer.parameter is not None:
                detail += f" ({layer.parameter:g})"
        elif isinstance(layer, LossLayer):
            detail = layer.loss.value
        else:
            raise TypeError(f"Unknown layer descriptor: {type(layer).__name__}")
        rows.append({"index": index, "kind": layer.kind, "detail": detail, "params": params})
    return rows


# INTERNAL HELPERS
def _conv(
    in_channels: int, out_channels: int, generator: torch.Generator | None
) -> ConvLayer:
    """Create a ``same``-padded convolution with freshly drawn weights."""
    weights, bias = init_conv(
        in_channels, out_channels, kernel=CONV_KERNEL_SIZE, generator=generator
    )
    return ConvLayer(
        in_channels=in_channels,
        out_channels=out_channels,
        weights=weights,
        bias=bias,
        kernel=CONV_KERNEL_SIZE,
    )


def _conv_block(
    in_channels: int,
    out_channels: int,
    get_activation: ActivationFactory,
    generator: torch.Generator | None,
    normalize: bool,
) -> list[LayerDescriptor]:
    """Conv, optional batch normalization, then one activation."""
    block: list[LayerDescriptor] = [_conv(in_channels, out_channels, generator)]
    if normalize:
        block.append(NormalizationLayer(num_channels=out_channels))
    block.append(get_activation())
    return block
