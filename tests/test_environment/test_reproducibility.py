"""
Test Suite for Reproducibility Utilities.
"""

import random
from unittest.mock import patch

import numpy as np
import pytest
import torch

from dncnn.core import make_generator, set_seed


@pytest.mark.unit
def test_set_seed_reproducibility_cpu():
    """set_seed makes Python, NumPy and torch global draws repeatable."""
    set_seed(123)
    a1, b1, c1 = random.random(), np.random.rand(), torch.rand(1)

    set_seed(123)
    a2, b2, c2 = random.random(), np.random.rand(), torch.rand(1)

    assert a1 == a2
    assert b1 == b2
    assert torch.equal(c1, c2)


@pytest.mark.unit
def test_set_seed_seeds_cuda_when_available():
    with (
        patch("torch.cuda.is_available", return_value=True),
        patch("torch.cuda.manual_seed_all") as mock_cuda_seed,
    ):
        set_seed(5)

    mock_cuda_seed.assert_any_call(5)


@pytest.mark.unit
def test_make_generator_seeded():
    a = torch.randn(4, generator=make_generator(9))
    b = torch.randn(4, generator=make_generator(9))

    assert torch.equal(a, b)


@pytest.mark.unit
def test_make_generator_does_not_touch_global_state():
    torch.manual_seed(0)
    expected = torch.rand(1)

    torch.manual_seed(0)
    torch.randn(10, generator=make_generator(1))

    assert torch.equal(torch.rand(1), expected)


@pytest.mark.unit
def test_make_generator_unseeded_differs():
    a = torch.randn(8, generator=make_generator())
    b = torch.randn(8, generator=make_generator())

    assert not torch.equal(a, b)
