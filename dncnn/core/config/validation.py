"""
Build Parameter Validation.

Normalizes raw, user-facing build parameters into a canonical
:class:`BuildConfig`. Every check runs before any tensor is allocated, so a
failed build never leaves partial results behind.

Normalization rules:

- ``image_size``: a scalar ``n`` becomes ``(n, n, 1)``, a pair ``(h, w)``
  becomes ``(h, w, 1)`` and a triple is kept as-is.
- ``activation`` / ``loss``: accept the enum member, its value, or the short
  alias used by the public entry point (``relu``, ``mse``), case-insensitively.

Each rejected parameter raises its own :mod:`dncnn.exceptions` subclass, with
a message naming the parameter, the received value and the accepted values.
"""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Integral
from typing import Any, Final

from ...exceptions import (
    InvalidActivationKind,
    InvalidDepth,
    InvalidImageSize,
    InvalidLossKind,
    InvalidWidth,
)
from ..constants import DEFAULT_NET_DEPTH, DEFAULT_NET_WIDTH, MIN_NET_DEPTH, MIN_NET_WIDTH
from .build_config import ActivationKind, BuildConfig, LossKind

# ALIAS TABLES
ACTIVATION_ALIASES: Final[dict[str, ActivationKind]] = {
    "relu": ActivationKind.STANDARD,
    "standard": ActivationKind.STANDARD,
    "leaky": ActivationKind.LEAKY,
    "clipped": ActivationKind.CLIPPED,
}

LOSS_ALIASES: Final[dict[str, LossKind]] = {
    "mse": LossKind.MEAN_SQUARED_ERROR,
    "mean_squared_error": LossKind.MEAN_SQUARED_ERROR,
}


# PUBLIC API
def validate(
    image_size: Any,
    depth: Any = DEFAULT_NET_DEPTH,
    width: Any = DEFAULT_NET_WIDTH,
    activation: Any = ActivationKind.STANDARD,
    loss: Any = LossKind.MEAN_SQUARED_ERROR,
) -> BuildConfig:
    """
    Validate raw build parameters and produce a canonical configuration.

    Args:
        image_size: Integer or sequence of 1 to 3 positive integers.
        depth: Number of convolutional layers (integer >= 2).
        width: Number of filters per hidden convolution (integer >= 1).
        activation: Rectifier variant tag or :class:`ActivationKind`.
        loss: Loss variant tag or :class:`LossKind`.

    Returns:
        Frozen :class:`BuildConfig`.

    Raises:
        InvalidImageSize: Wrong length or non-integer ``image_size``.
        InvalidDepth: ``depth`` is not an integer >= 2.
        InvalidWidth: ``width`` is not an integer >= 1.
        InvalidActivationKind: Unrecognized ``activation``.
        InvalidLossKind: Unrecognized ``loss``.
    """
    return BuildConfig(
        image_shape=normalize_image_size(image_size),
        depth=_check_integer("net_depth", depth, MIN_NET_DEPTH, InvalidDepth),
        width=_check_integer("net_width", width, MIN_NET_WIDTH, InvalidWidth),
        activation_kind=resolve_activation_kind(activation),
        loss_kind=resolve_loss_kind(loss),
    )


def normalize_image_size(image_size: Any) -> tuple[int, int, int]:
    """
    Canonicalize ``image_size`` to ``(height, width, channels)``.

    Args:
        image_size: Integer or sequence of 1 to 3 positive integers.

    Returns:
        Three-element tuple of plain ints.

    Raises:
        InvalidImageSize: If the value is not numeric, has the wrong length,
            or holds non-positive entries.
    """
    if _is_integer(image_size):
        dims = [image_size]
    elif isinstance(image_size, Sequence) and not isinstance(image_size, (str, bytes)):
        dims = list(image_size)
    elif hasattr(image_size, "tolist"):
        # numpy arrays and torch tensors
        flat = image_size.tolist()
        dims = flat if isinstance(flat, list) else [flat]
    else:
        raise InvalidImageSize(
            f"image_size should be an integer or a sequence of 1 to 3 integers, "
            f"got {type(image_size).__name__}: {image_size!r}"
        )

    if not all(_is_integer(d) and d > 0 for d in dims):
        raise InvalidImageSize(
            f"image_size entries should be positive integers, got {image_size!r}"
        )

    if len(dims) == 1:
        n = int(dims[0])
        return (n, n, 1)
    if len(dims) == 2:
        return (int(dims[0]), int(dims[1]), 1)
    if len(dims) == 3:
        return (int(dims[0]), int(dims[1]), int(dims[2]))

    raise InvalidImageSize(
        f"image_size should have 1, 2 or 3 elements (height, width, channels), "
        f"got {len(dims)}: {image_size!r}"
    )


def resolve_activation_kind(activation: Any) -> ActivationKind:
    """
    Map an activation tag to :class:`ActivationKind`.

    Raises:
        InvalidActivationKind: If the tag is not recognized.
    """
    return _resolve(
        activation, ActivationKind, ACTIVATION_ALIASES, "relu_type", InvalidActivationKind
    )


def resolve_loss_kind(loss: Any) -> LossKind:
    """
    Map a loss tag to :class:`LossKind`.

    Raises:
        InvalidLossKind: If the tag is not recognized.
    """
    return _resolve(loss, LossKind, LOSS_ALIASES, "loss_function", InvalidLossKind)


# INTERNAL HELPERS
def _is_integer(value: Any) -> bool:
    """True for integral numbers, excluding ``bool``."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_integer(name: str, value: Any, minimum: int, error_cls: type[Exception]) -> int:
    """Return ``value`` as ``int`` if it is an integer >= ``minimum``."""
    if not _is_integer(value) or value < minimum:
        raise error_cls(f"{name} should be an integer >= {minimum}, got {value!r}")
    return int(value)


def _resolve(value, enum_cls, aliases, name, error_cls):
    """Resolve an enum member, its value or an alias, case-insensitively."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        kind = aliases.get(value.strip().lower())
        if kind is not None:
            return kind
    accepted = ", ".join(f'"{a}"' for a in aliases)
    raise error_cls(f"{name} should be one of the following: {accepted}; got {value!r}")
