"""
Recipe Schema.

User-facing manifest mirroring the keyword arguments of
:func:`dncnn.build_network`. Recipes are loaded from YAML by the CLI and
converted into a canonical :class:`BuildConfig` through the same validator
used by the Python entry point, so both surfaces reject bad input with the
same typed errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_NET_DEPTH, DEFAULT_NET_WIDTH
from .build_config import BuildConfig
from .validation import validate


class Recipe(BaseModel):
    """
    Raw build parameters as written in a YAML recipe.

    Values are kept loosely typed on purpose: semantic checks are delegated
    to :func:`~dncnn.core.config.validation.validate` so that each rejected
    field surfaces as its dedicated exception.

    Attributes:
        image_size: Integer or list of 1 to 3 integers.
        net_depth: Number of convolutional layers.
        net_width: Number of filters of each hidden convolution.
        relu_type: Rectifier variant ('relu', 'leaky', 'clipped').
        loss_function: Terminal loss ('mse').
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    image_size: Any = Field(description="Input image size: n, [h, w] or [h, w, c].")
    net_depth: Any = Field(default=DEFAULT_NET_DEPTH, description="Number of conv layers.")
    net_width: Any = Field(default=DEFAULT_NET_WIDTH, description="Filters per hidden conv.")
    relu_type: Any = Field(default="relu", description="One of: relu, leaky, clipped.")
    loss_function: Any = Field(default="mse", description="One of: mse.")

    @classmethod
    def from_yaml(cls, path: Path, overrides: dict[str, Any] | None = None) -> "Recipe":
        """
        Load a recipe from YAML, applying optional flat key overrides.

        Args:
            path: Recipe file path.
            overrides: Mapping of field name to value, applied after loading.

        Returns:
            Parsed :class:`Recipe`.
        """
        from ..io import load_config_from_yaml

        data = load_config_from_yaml(path) or {}
        if overrides:
            data = {**data, **overrides}
        return cls(**data)

    def to_build_config(self) -> BuildConfig:
        """Validate the raw values into a :class:`BuildConfig`."""
        return validate(
            self.image_size,
            depth=self.net_depth,
            width=self.net_width,
            activation=self.relu_type,
            loss=self.loss_function,
        )
