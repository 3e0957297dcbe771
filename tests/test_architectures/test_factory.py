"""
Test Suite for the DnCNN Architecture Factory.

Validates layer ordering, counts, channel wiring, weight independence and
the logging behavior of the public entry point.
"""

from __future__ import annotations

import pytest
import torch

from dncnn import (
    ActivationKind,
    ActivationLayer,
    BuildConfig,
    ConvLayer,
    InputLayer,
    LossKind,
    LossLayer,
    NormalizationLayer,
    assemble,
    build_network,
    summarize,
)
from dncnn.core import LOGGER_NAME, make_generator
from dncnn.exceptions import (
    DnCNNConfigError,
    InvalidActivationKind,
    InvalidDepth,
    InvalidLossKind,
)


def _convs(layers):
    return [layer for layer in layers if isinstance(layer, ConvLayer)]


# STRUCTURE
@pytest.mark.unit
def test_default_network_has_fifty_layers():
    """depth=17, width=64: 1 + 2 + 15*3 + 1 + 1 = 50 descriptors."""
    layers = build_network([32, 32, 1], verbose=False)

    assert len(layers) == 50
    assert len(_convs(layers)) == 17


@pytest.mark.unit
@pytest.mark.parametrize("depth", [2, 3, 5, 10])
def test_layer_count_formula(depth):
    layers = build_network(16, net_depth=depth, net_width=4, verbose=False)

    assert len(layers) == 1 + 2 + 3 * (depth - 2) + 1 + 1
    assert len(_convs(layers)) == depth


@pytest.mark.unit
def test_layer_ordering():
    """Input, [Conv, Act], [Conv, BN, Act] x (depth-2), Conv, Loss."""
    layers = build_network(16, net_depth=4, net_width=4, verbose=False)

    assert [layer.kind for layer in layers] == [
        "input",
        "conv", "activation",
        "conv", "normalization", "activation",
        "conv", "normalization", "activation",
        "conv",
        "loss",
    ]  # fmt: skip
    assert isinstance(layers[0], InputLayer)
    assert isinstance(layers[-1], LossLayer)


@pytest.mark.unit
def test_depth_two_has_no_normalization():
    """The first and last blocks never carry a normalization stage."""
    layers = build_network(16, net_depth=2, net_width=4, verbose=False)

    assert [layer.kind for layer in layers] == ["input", "conv", "activation", "conv", "loss"]
    assert not any(isinstance(layer, NormalizationLayer) for layer in layers)


# CHANNEL WIRING
@pytest.mark.unit
@pytest.mark.parametrize("image_size, channels", [(16, 1), ([16, 12], 1), ([16, 12, 3], 3)])
def test_first_and_last_conv_match_image_channels(image_size, channels):
    convs = _convs(build_network(image_size, net_depth=4, net_width=8, verbose=False))

    assert convs[0].in_channels == channels
    assert convs[0].out_channels == 8
    assert convs[-1].in_channels == 8
    assert convs[-1].out_channels == channels
    assert convs[-1].weights.shape == (3, 3, 8, channels)
    assert convs[-1].bias.shape == (1, 1, channels)


@pytest.mark.unit
def test_interior_conv_shapes():
    """Interior convs are width -> width with (3,3,w,w) weights and (1,1,w) bias."""
    convs = _convs(build_network([20, 20, 3], net_depth=6, net_width=10, verbose=False))

    for conv in convs[1:-1]:
        assert conv.in_channels == conv.out_channels == 10
        assert conv.weights.shape == (3, 3, 10, 10)
        assert conv.bias.shape == (1, 1, 10)
        assert conv.kernel == (3, 3)
        assert conv.padding == "same"
        assert torch.count_nonzero(conv.bias) == 0


@pytest.mark.unit
def test_consecutive_convs_chain():
    """Each conv's out_channels feeds the next conv's in_channels."""
    convs = _convs(build_network([8, 8, 3], net_depth=7, net_width=5, verbose=False))

    for prev, nxt in zip(convs, convs[1:]):
        assert prev.out_channels == nxt.in_channels


@pytest.mark.unit
def test_normalization_sized_to_width():
    layers = build_network(8, net_depth=5, net_width=6, verbose=False)
    norms = [layer for layer in layers if isinstance(layer, NormalizationLayer)]

    assert len(norms) == 3
    assert all(norm.num_channels == 6 for norm in norms)


@pytest.mark.unit
def test_input_layer_shape():
    layers = build_network([5, 6], verbose=False, net_depth=2, net_width=1)

    assert layers[0].shape == (5, 6, 1)
    assert layers[0].normalization == "zerocenter"


# VARIANTS
@pytest.mark.unit
@pytest.mark.parametrize(
    "relu_type, kind, parameter",
    [
        ("relu", ActivationKind.STANDARD, None),
        ("leaky", ActivationKind.LEAKY, 0.01),
        ("clipped", ActivationKind.CLIPPED, 10.0),
    ],
)
def test_activation_variant_used_everywhere(relu_type, kind, parameter):
    layers = build_network(8, net_depth=5, net_width=2, relu_type=relu_type, verbose=False)
    acts = [layer for layer in layers if isinstance(layer, ActivationLayer)]

    assert len(acts) == 4
    assert all(act.activation is kind and act.parameter == parameter for act in acts)


@pytest.mark.unit
def test_loss_layer_is_mse():
    layers = build_network(8, net_depth=2, net_width=2, verbose=False)

    assert layers[-1].loss is LossKind.MEAN_SQUARED_ERROR


# WEIGHTS
@pytest.mark.unit
def test_interior_weights_are_independent():
    """Repeated interior blocks draw fresh tensors, never shared copies."""
    convs = _convs(build_network(8, net_depth=5, net_width=4, verbose=False))
    interior = convs[1:-1]

    for a, b in zip(interior, interior[1:]):
        assert a.weights is not b.weights
        assert not torch.equal(a.weights, b.weights)


@pytest.mark.unit
def test_successive_builds_differ_only_in_weights():
    first = build_network(8, net_depth=4, net_width=4, verbose=False)
    second = build_network(8, net_depth=4, net_width=4, verbose=False)

    assert [layer.kind for layer in first] == [layer.kind for layer in second]
    for a, b in zip(_convs(first), _convs(second)):
        assert a.weights.shape == b.weights.shape
        assert not torch.equal(a.weights, b.weights)


@pytest.mark.unit
def test_seed_makes_weights_reproducible():
    first = build_network(8, net_depth=4, net_width=4, seed=7, verbose=False)
    second = build_network(8, net_depth=4, net_width=4, seed=7, verbose=False)

    for a, b in zip(_convs(first), _convs(second)):
        assert torch.equal(a.weights, b.weights)


@pytest.mark.unit
def test_injected_generator_is_used():
    first = build_network(8, net_depth=3, net_width=4, generator=make_generator(3), verbose=False)
    second = build_network(8, net_depth=3, net_width=4, generator=make_generator(3), verbose=False)

    for a, b in zip(_convs(first), _convs(second)):
        assert torch.equal(a.weights, b.weights)


@pytest.mark.unit
def test_seed_and_generator_are_exclusive():
    with pytest.raises(ValueError, match="either"):
        build_network(8, generator=make_generator(1), seed=1, verbose=False)


# ERRORS
@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"net_depth": 1}, InvalidDepth),
        ({"relu_type": "tanh"}, InvalidActivationKind),
        ({"loss_function": "mae"}, InvalidLossKind),
    ],
)
def test_build_network_rejects_invalid_parameters(kwargs, error):
    with pytest.raises(error):
        build_network(8, verbose=False, **kwargs)


@pytest.mark.unit
def test_invalid_parameters_draw_no_weights():
    """Validation fails before any random draw, leaving the global RNG untouched."""
    torch.manual_seed(0)
    expected = torch.rand(1)
    torch.manual_seed(0)

    with pytest.raises(InvalidDepth):
        build_network(8, net_depth=0, verbose=False)

    assert torch.equal(torch.rand(1), expected)


@pytest.mark.unit
def test_assemble_consistency_check():
    """assemble refuses a config that bypassed validation with depth < 2."""
    cfg = BuildConfig.model_construct(
        image_shape=(8, 8, 1),
        depth=1,
        width=4,
        activation_kind=ActivationKind.STANDARD,
        loss_kind=LossKind.MEAN_SQUARED_ERROR,
    )

    with pytest.raises(DnCNNConfigError, match="net_depth"):
        assemble(cfg)


# LOGGING
@pytest.mark.unit
def test_build_network_logs_summary(caplog):
    with caplog.at_level("INFO", logger=LOGGER_NAME):
        build_network([16, 16, 3], net_depth=3, net_width=4)

    assert "Input: 16x16x3" in caplog.text
    assert "activation=standard" in caplog.text
    assert "8 layers" in caplog.text


@pytest.mark.unit
def test_build_network_quiet(caplog):
    with caplog.at_level("INFO", logger=LOGGER_NAME):
        build_network(16, net_depth=3, net_width=4, verbose=False)

    assert caplog.text == ""


@pytest.mark.unit
def test_build_network_logs_validation_errors(caplog):
    with caplog.at_level("ERROR", logger=LOGGER_NAME):
        with pytest.raises(InvalidActivationKind):
            build_network(16, relu_type="tanh")

    assert "relu_type" in caplog.text


# SUMMARY
@pytest.mark.unit
def test_summarize_rows():
    layers = build_network([8, 8, 1], net_depth=3, net_width=4, relu_type="leaky", verbose=False)
    rows = summarize(layers)

    assert [row["index"] for row in rows] == list(range(1, len(layers) + 1))
    assert rows[0]["detail"] == "8x8x1 (zerocenter)"
    assert rows[1]["params"] == 3 * 3 * 1 * 4 + 4
    assert rows[2]["detail"] == "leaky (0.01)"
    assert rows[4]["params"] == 2 * 4
    assert rows[-1]["detail"] == "mean_squared_error"


@pytest.mark.unit
def test_summarize_rejects_unknown_descriptor():
    with pytest.raises(TypeError, match="Unknown layer descriptor"):
        summarize([object()])
