"""
Activation Selection.

Maps an :class:`ActivationKind` to a zero-argument factory producing the
matching :class:`ActivationLayer`. Hyperparameters of the leaky and clipped
rectifiers are fixed design constants, not user settings.
"""

from __future__ import annotations

import functools
from typing import Callable

from ..core import CLIPPED_RELU_CEILING, LEAKY_RELU_SLOPE, ActivationKind
from ..exceptions import InvalidActivationKind
from .descriptors import ActivationLayer

ActivationFactory = Callable[[], ActivationLayer]

_ACTIVATION_REGISTRY: dict[ActivationKind, ActivationFactory] = {
    ActivationKind.STANDARD: functools.partial(ActivationLayer, ActivationKind.STANDARD),
    ActivationKind.LEAKY: functools.partial(
        ActivationLayer, ActivationKind.LEAKY, LEAKY_RELU_SLOPE
    ),
    ActivationKind.CLIPPED: functools.partial(
        ActivationLayer, ActivationKind.CLIPPED, CLIPPED_RELU_CEILING
    ),
}


def select_activation(kind: ActivationKind) -> ActivationFactory:
    """
    Resolve the activation factory for ``kind``.

    Args:
        kind: Rectifier variant.

    Returns:
        Zero-argument callable returning a new :class:`ActivationLayer`.

    Raises:
        InvalidActivationKind: If ``kind`` has no registered factory.
    """
    factory = _ACTIVATION_REGISTRY.get(kind)
    if factory is None:
        raise InvalidActivationKind(
            f"relu_type should be one of the following: "
            f"{', '.join(k.value for k in _ACTIVATION_REGISTRY)}; got {kind!r}"
        )
    return factory
