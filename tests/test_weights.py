import numpy as np
import pytest

from hwcnet.conv import conv2d
from hwcnet.linear import linear
from hwcnet.weights import (
    conv_bias,
    linear_bias,
    linear_weight,
    patch_weight,
    sample_input,
)


def test_sample_input_counts_up_in_hwc_order():
    tensor = sample_input()
    assert tensor.shape == (8, 8, 3)
    assert np.array_equal(tensor.data.reshape(-1), np.arange(192, dtype=np.float32))
    assert tensor.data[1, 0, 0] == 24.0
    assert tensor.data[7, 7, 2] == 191.0


def test_sample_input_is_a_fresh_copy_each_time():
    first = sample_input()
    first.data[0, 0, 0] = -1.0
    assert sample_input().data[0, 0, 0] == 0.0


def test_patch_weight_shape_and_taps():
    weight = patch_weight()
    assert (weight.oc, weight.inc, weight.h, weight.w) == (3, 3, 3, 3)
    assert np.array_equal(weight.data[0, 1, 1], [1.0, 0.0, 0.0])
    assert np.array_equal(weight.data[1, 1, 1], [1.0, 1.0, 1.0])
    assert np.array_equal(weight.data[2, 0, 0], [1.0, 1.0, 1.0])
    assert np.array_equal(weight.data[2, 2, 2], [100.0, 100.0, 100.0])
    assert weight.data.sum() == pytest.approx(1 + 3 + 3 + 300)


def test_conv_bias_values():
    bias = conv_bias()
    assert bias.oc == 3
    assert np.allclose(bias.data, [0.1, -0.5, 0.01])


def test_linear_weight_is_sparse_with_documented_entries():
    weight = linear_weight()
    assert (weight.oc, weight.inc, weight.h, weight.w) == (2, 3, 8, 8)
    flat = weight.data.reshape(2, 192)
    assert np.count_nonzero(flat) == 5
    assert flat[0, 10] == pytest.approx(0.5)
    assert flat[0, 11] == pytest.approx(-0.5)
    assert flat[0, 20] == pytest.approx(0.25)
    assert flat[1, 100] == pytest.approx(0.1)
    assert flat[1, 101] == pytest.approx(10.0)


def test_linear_bias_values():
    bias = linear_bias()
    assert bias.oc == 2
    assert np.allclose(bias.data, [-4.5, 5.55])


def test_linear_worked_example_from_parameters():
    result = linear(sample_input(), linear_weight(), linear_bias())
    assert result.shape == (1, 1, 2)
    assert result.data[0, 0, 0] == pytest.approx(0.0, abs=1e-4)
    assert result.data[0, 0, 1] == pytest.approx(1025.55, rel=1e-5)


def test_sample_convolution_channels_follow_their_taps():
    data = sample_input().data
    result = conv2d(sample_input(), patch_weight(), conv_bias(), 1, 1)
    assert result.shape == (8, 8, 3)
    assert np.allclose(result.data[:, :, 0], data[:, :, 0] + 0.1)
    assert np.allclose(result.data[:, :, 1], data.sum(axis=2) - 0.5)


def test_sample_convolution_corner_channel_uses_zero_padding():
    data = sample_input().data
    result = conv2d(sample_input(), patch_weight(), conv_bias(), 1, 1)
    # Top-left output: the up-left tap is padding, only the down-right tap counts.
    assert result.data[0, 0, 2] == pytest.approx(100 * data[1, 1].sum() + 0.01, rel=1e-6)
    # Bottom-right output: the down-right tap is padding.
    assert result.data[7, 7, 2] == pytest.approx(data[6, 6].sum() + 0.01, rel=1e-6)
    # Interior: both taps lie inside the image.
    expected = data[2, 3].sum() + 100 * data[4, 5].sum() + 0.01
    assert result.data[3, 4, 2] == pytest.approx(expected, rel=1e-6)