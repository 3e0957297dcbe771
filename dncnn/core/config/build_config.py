"""
Build Configuration Module.

Declarative, immutable schema for a single DnCNN construction request.
A ``BuildConfig`` is produced by :func:`~dncnn.core.config.validation.validate`
once the raw parameters have been normalized, and is then passed by value to
the architecture assembler. It is never shared between invocations.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_NET_DEPTH, DEFAULT_NET_WIDTH
from .types import ImageShape, NetDepth, NetWidth


# VARIANT ENUMERATIONS
class ActivationKind(str, Enum):
    """Rectifier variants available for the hidden blocks."""

    STANDARD = "standard"
    LEAKY = "leaky"
    CLIPPED = "clipped"


class LossKind(str, Enum):
    """Regression losses available for the terminal layer."""

    MEAN_SQUARED_ERROR = "mean_squared_error"


# BUILD CONFIGURATION
class BuildConfig(BaseModel):
    """
    Canonical, validated parameters for one network build.

    Attributes:
        image_shape: Input geometry as ``(height, width, channels)``.
        depth: Total number of convolutional layers (>= 2).
        width: Number of filters of every hidden convolution (>= 1).
        activation_kind: Rectifier variant used after hidden convolutions.
        loss_kind: Terminal regression loss.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    image_shape: ImageShape = Field(
        description="Input image geometry as (height, width, channels).",
    )

    depth: NetDepth = Field(
        default=DEFAULT_NET_DEPTH,
        description="Number of convolutional layers of the whole network.",
    )

    width: NetWidth = Field(
        default=DEFAULT_NET_WIDTH,
        description="Number of filters of each hidden convolutional layer.",
    )

    activation_kind: ActivationKind = Field(
        default=ActivationKind.STANDARD,
        description="Rectifier variant placed after every hidden convolution.",
    )

    loss_kind: LossKind = Field(
        default=LossKind.MEAN_SQUARED_ERROR,
        description="Loss used by the terminal regression layer.",
    )

    @property
    def channels(self) -> int:
        """Number of color channels (1 for grayscale, 3 for RGB)."""
        return self.image_shape[2]

    @property
    def num_interior_blocks(self) -> int:
        """Number of conv+BN+activation blocks between the first and last conv."""
        return self.depth - 2
