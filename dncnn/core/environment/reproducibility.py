"""
Reproducibility Environment.

Weight initialization is the only random step of a network build. It draws
from either an explicitly injected ``torch.Generator`` or torch's global
generator. This module provides both routes to determinism:

    Local (preferred):
        ``make_generator(seed)`` returns a private generator that can be
        passed to :func:`dncnn.build_network` without touching global state.

    Global:
        ``set_seed(seed)`` seeds Python's ``random``, NumPy and torch, for
        callers that rely on the ambient generator.
"""

import logging
import random

import numpy as np
import torch

from ..constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


# REPRODUCIBILITY LOGIC
def set_seed(seed: int) -> None:
    """Seed all global PRNGs (Python, NumPy, PyTorch CPU + CUDA).

    Args:
        seed: The seed value to set across all PRNGs.
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)

    logger.debug(f"Global PRNGs seeded with {seed}")


def make_generator(seed: int | None = None) -> torch.Generator:
    """Create a private CPU ``torch.Generator``.

    Args:
        seed: Seed for the generator. When None, the generator is seeded
            non-deterministically.

    Returns:
        A fresh generator owned by the caller.
    """
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator
