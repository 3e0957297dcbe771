"""
Semantic Type Definitions & Validation Primitives.

Pydantic ``Annotated`` aliases shared by the build configuration and the
recipe schema. Boundaries mirror the structural requirements of the
architecture: a network needs at least an input-adjacent and an output
convolution, and every image dimension must be a positive integer.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..constants import MIN_NET_DEPTH, MIN_NET_WIDTH

# GENERIC PRIMITIVES
PositiveInt = Annotated[int, Field(gt=0)]

# MODEL GEOMETRY
ImageShape = tuple[PositiveInt, PositiveInt, PositiveInt]
NetDepth = Annotated[int, Field(ge=MIN_NET_DEPTH)]
NetWidth = Annotated[int, Field(ge=MIN_NET_WIDTH)]
