"""
Loss Selection.

Maps a :class:`LossKind` to a factory for the terminal :class:`LossLayer`.
"""

from __future__ import annotations

import functools
from typing import Callable

from ..core import LossKind
from ..exceptions import InvalidLossKind
from .descriptors import LossLayer

LossFactory = Callable[[], LossLayer]

_LOSS_REGISTRY: dict[LossKind, LossFactory] = {
    LossKind.MEAN_SQUARED_ERROR: functools.partial(LossLayer, LossKind.MEAN_SQUARED_ERROR),
}


def select_loss(kind: LossKind) -> LossFactory:
    """
    Resolve the loss factory for ``kind``.

    Raises:
        InvalidLossKind: If ``kind`` has no registered factory.
    """
    factory = _LOSS_REGISTRY.get(kind)
    if factory is None:
        raise InvalidLossKind(
            f"loss_function should be one of the following: "
            f"{', '.join(k.value for k in _LOSS_REGISTRY)}; got {kind!r}"
        )
    return factory
