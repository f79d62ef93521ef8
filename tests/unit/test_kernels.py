"""Unit tests for kernel definitions and per-axis weight tables."""

import numpy as np
import pytest

from pyfastresize.errors import UnknownKernel
from pyfastresize.rastermanip import (
    KERNEL_TABLE,
    ResamplingKernel,
    compute_axis_weights,
    get_kernel,
    kernel_names,
)

ALL_KERNELS = list(ResamplingKernel)


def _dense(indices, weights, in_size):
    """Expand a tap table into an (out_size, in_size) matrix."""
    dense = np.zeros((indices.shape[0], in_size))
    for o in range(indices.shape[0]):
        for k in range(indices.shape[1]):
            dense[o, indices[o, k]] += weights[o, k]
    return dense


def test_kernel_names_sorted():
    assert kernel_names() == ["box", "cubic", "lanczos", "linear", "nearest"]


def test_get_kernel_by_name_and_member():
    assert get_kernel("lanczos") is ResamplingKernel.LANCZOS
    assert get_kernel(" Cubic ") is ResamplingKernel.CUBIC
    assert get_kernel(ResamplingKernel.BOX) is ResamplingKernel.BOX


def test_unknown_kernel():
    with pytest.raises(UnknownKernel) as exc_info:
        get_kernel("bicubic")
    assert exc_info.value.name == "bicubic"
    assert "nearest" in exc_info.value.available
    assert "bicubic" in str(exc_info.value)


def test_support_radii():
    assert KERNEL_TABLE[ResamplingKernel.NEAREST].support == 0.0
    assert KERNEL_TABLE[ResamplingKernel.LINEAR].support == 1.0
    assert KERNEL_TABLE[ResamplingKernel.CUBIC].support == 2.0
    assert KERNEL_TABLE[ResamplingKernel.BOX].support == 0.5
    assert KERNEL_TABLE[ResamplingKernel.LANCZOS].support == 3.0


def test_weight_function_values():
    cubic = KERNEL_TABLE[ResamplingKernel.CUBIC].weight
    lanczos = KERNEL_TABLE[ResamplingKernel.LANCZOS].weight
    linear = KERNEL_TABLE[ResamplingKernel.LINEAR].weight

    x = np.array([0.0, 0.5, 1.0, 2.0, 2.5])
    np.testing.assert_allclose(cubic(x), [1.0, 0.5625, 0.0, 0.0, 0.0])
    np.testing.assert_allclose(linear(x), [1.0, 0.5, 0.0, 0.0, 0.0])

    lz = lanczos(np.array([0.0, 1.0, -2.0, 3.0, 4.0]))
    assert np.array_equal(lz, [1.0, 0.0, 0.0, 0.0, 0.0])
    assert lanczos(np.array([0.5]))[0] > 0
    assert lanczos(np.array([1.5]))[0] < 0


@pytest.mark.parametrize("kernel", ALL_KERNELS)
@pytest.mark.parametrize("in_size,out_size", [(7, 7), (10, 3), (3, 10), (50, 17), (1, 5), (5, 1)])
def test_weights_normalised_and_in_bounds(kernel, in_size, out_size):
    indices, weights = compute_axis_weights(in_size, out_size, kernel)
    assert indices.shape == weights.shape
    assert indices.shape[0] == out_size
    assert indices.min() >= 0
    assert indices.max() < in_size
    np.testing.assert_allclose(weights.sum(axis=1), 1.0, rtol=0, atol=1e-12)


@pytest.mark.parametrize("kernel", ALL_KERNELS)
def test_unity_scale_is_identity(kernel):
    """At scale 1 every output draws only from its co-located input."""
    indices, weights = compute_axis_weights(9, 9, kernel)
    assert np.array_equal(_dense(indices, weights, 9), np.eye(9))


def test_box_downscale_averages_pairs():
    indices, weights = compute_axis_weights(8, 4, "box")
    dense = _dense(indices, weights, 8)
    expected = np.zeros((4, 8))
    for o in range(4):
        expected[o, 2 * o] = expected[o, 2 * o + 1] = 0.5
    np.testing.assert_allclose(dense, expected)


def test_linear_upscale_clamps_edges():
    indices, weights = compute_axis_weights(2, 4, "linear")
    dense = _dense(indices, weights, 2)
    np.testing.assert_allclose(
        dense, [[1.0, 0.0], [0.75, 0.25], [0.25, 0.75], [0.0, 1.0]]
    )


def test_nearest_downscale_picks_centers():
    indices, weights = compute_axis_weights(9, 3, "nearest")
    assert indices[:, 0].tolist() == [1, 4, 7]
    assert np.all(weights == 1.0)


def test_downscale_widens_support():
    """The kernel is stretched by the scale ratio on downscale."""
    up, _ = compute_axis_weights(100, 100, "lanczos")
    down, _ = compute_axis_weights(100, 25, "lanczos")
    assert down.shape[1] > up.shape[1]


def test_invalid_axis_sizes():
    with pytest.raises(ValueError):
        compute_axis_weights(0, 4, "linear")
    with pytest.raises(ValueError):
        compute_axis_weights(4, 0, "linear")
