"""
Configuration Package Initialization.

Flat public API for the build configuration, its enumerations, the
parameter validator and the YAML recipe schema.

Example:
    >>> from dncnn.core.config import validate
    >>> cfg = validate([128, 128, 3], depth=17, width=64, activation="relu")
    >>> cfg.image_shape
    (128, 128, 3)
"""

from .build_config import ActivationKind, BuildConfig, LossKind
from .recipe import Recipe
from .validation import (
    ACTIVATION_ALIASES,
    LOSS_ALIASES,
    normalize_image_size,
    resolve_activation_kind,
    resolve_loss_kind,
    validate,
)

__all__ = [
    "ActivationKind",
    "BuildConfig",
    "LossKind",
    "Recipe",
    "ACTIVATION_ALIASES",
    "LOSS_ALIASES",
    "normalize_image_size",
    "resolve_activation_kind",
    "resolve_loss_kind",
    "validate",
]
