"""
Environment & Reproducibility Layer.

Seeding helpers for deterministic weight initialization.
"""

from .reproducibility import make_generator, set_seed

__all__ = [
    "make_generator",
    "set_seed",
]
