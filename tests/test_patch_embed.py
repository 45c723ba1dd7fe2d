import numpy as np
import pytest

from hwcnet.conv import conv2d
from hwcnet.patch_embed import patch_embedding
from hwcnet.tensor import Tensor, WeightTensor


def _sample_input() -> Tensor:
    return Tensor(8, 8, 3, np.arange(192, dtype=np.float32))


def _random_weight(kernel: int, oc: int = 4, inc: int = 3) -> WeightTensor:
    rng = np.random.default_rng(11)
    data = rng.standard_normal((oc, kernel, kernel, inc)).astype(np.float32)
    return WeightTensor(oc, inc, kernel, kernel, data)


def test_pointwise_identity_returns_input():
    image = _sample_input()
    weight = WeightTensor(3, 3, 1, 1, np.eye(3, dtype=np.float32).reshape(3, 1, 1, 3))
    out = patch_embedding(image, weight)
    np.testing.assert_array_equal(out.data, image.data)


def test_top_left_selector_picks_patch_corners():
    image = _sample_input()
    data = np.zeros((1, 2, 2, 3), dtype=np.float32)
    data[0, 0, 0, 0] = 1.0
    out = patch_embedding(image, WeightTensor(1, 3, 2, 2, data))
    assert out.shape == (4, 4, 1)
    np.testing.assert_array_equal(out.data[..., 0], image.data[::2, ::2, 0])


@pytest.mark.parametrize("kernel", [2, 4])
def test_matches_strided_convolution(kernel):
    image = _sample_input()
    weight = _random_weight(kernel)
    patched = patch_embedding(image, weight)
    convolved = conv2d(image, weight, None, kernel, 0)
    assert patched.shape == convolved.shape
    np.testing.assert_allclose(patched.data, convolved.data, rtol=1e-4, atol=1e-3)


def test_incomplete_patches_are_dropped():
    image = Tensor(7, 5, 3, np.arange(105, dtype=np.float32))
    weight = _random_weight(2)
    out = patch_embedding(image, weight)
    assert out.shape == (3, 2, 4)
    cropped = Tensor(6, 4, 3, image.data[:6, :4])
    np.testing.assert_allclose(out.data, patch_embedding(cropped, weight).data, rtol=1e-6)


def test_empty_kernel_is_rejected():
    with pytest.raises(ValueError):
        patch_embedding(_sample_input(), WeightTensor(3, 3, 0, 0))


def test_zero_output_channels_are_rejected():
    with pytest.raises(ValueError):
        patch_embedding(_sample_input(), WeightTensor(0, 3, 2, 2))


def test_missing_input_is_rejected():
    with pytest.raises(ValueError):
        patch_embedding(None, _random_weight(2))


def test_channel_mismatch_is_rejected():
    with pytest.raises(ValueError):
        patch_embedding(_sample_input(), _random_weight(2, inc=2))