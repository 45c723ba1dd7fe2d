"""Two-dimensional convolution over HWC tensors."""

from __future__ import annotations

import warnings

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from hwcnet.activations import Activation, apply_activation
from hwcnet.tensor import DTYPE, BiasTensor, Tensor, WeightTensor


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _output_size(
    input_tensor: Tensor,
    weight: WeightTensor,
    bias: BiasTensor | None,
    stride: int,
    padding: int,
) -> tuple[int, int]:
    if input_tensor is None or weight is None:
        raise ValueError("an input tensor and a weight tensor are required")
    kernel = weight.h
    if (
        kernel <= 0
        or weight.oc <= 0
        or stride <= 0
        or padding < 0
        or (bias is not None and bias.oc != weight.oc)
    ):
        raise ValueError("invalid convolution arguments")
    if weight.w != kernel:
        raise ValueError(f"only square kernels are supported, got {weight.h}x{weight.w}")
    if weight.inc != input_tensor.c:
        raise ValueError(
            f"weight expects {weight.inc} input channels but the tensor has {input_tensor.c}"
        )
    out_h = _trunc_div(input_tensor.h + 2 * padding - kernel, stride) + 1
    out_w = _trunc_div(input_tensor.w + 2 * padding - kernel, stride) + 1
    if out_h <= 0 or out_w <= 0:
        raise ValueError("kernel size exceeds the padded input size")
    return out_h, out_w


def _convolve(
    input_tensor: Tensor,
    weight: WeightTensor,
    bias: BiasTensor | None,
    stride: int,
    padding: int,
) -> tuple[int, int, np.ndarray]:
    out_h, out_w = _output_size(input_tensor, weight, bias, stride, padding)
    kernel = weight.h
    # Positions outside the image contribute nothing, exactly as zero padding would.
    extra_h = max(0, (out_h - 1) * stride + kernel - (input_tensor.h + 2 * padding))
    extra_w = max(0, (out_w - 1) * stride + kernel - (input_tensor.w + 2 * padding))
    padded = np.pad(
        input_tensor.data,
        ((padding, padding + extra_h), (padding, padding + extra_w), (0, 0)),
    )
    windows = sliding_window_view(padded, (kernel, kernel), axis=(0, 1))
    windows = windows[: (out_h - 1) * stride + 1 : stride, : (out_w - 1) * stride + 1 : stride]
    result = np.einsum("hwcij,oijc->hwo", windows, weight.data).astype(DTYPE)
    if bias is not None:
        result += bias.data
    return out_h, out_w, result


def conv2d(
    input_tensor: Tensor,
    weight: WeightTensor,
    bias: BiasTensor | None,
    stride: int,
    padding: int,
) -> Tensor:
    """Convolve ``input_tensor`` with a square kernel, adding ``bias`` if given."""
    out_h, out_w, result = _convolve(input_tensor, weight, bias, stride, padding)
    return Tensor(out_h, out_w, weight.oc, result)


def conv2d_bn_act(
    input_tensor: Tensor,
    weight: WeightTensor,
    bias: BiasTensor | None,
    stride: int,
    padding: int,
    act,
) -> Tensor:
    """Convolve with batch-norm-folded weights, then apply ``act``.

    ``act`` may be "RELU", "RELU6" or "SiLU"; anything else, including None,
    applies no activation and emits a RuntimeWarning.
    """
    _output_size(input_tensor, weight, bias, stride, padding)
    activation = Activation(act)
    if activation is Activation.NONE:
        warnings.warn("no activation selected", RuntimeWarning, stacklevel=2)
    out_h, out_w, result = _convolve(input_tensor, weight, bias, stride, padding)
    return Tensor(out_h, out_w, weight.oc, apply_activation(result, activation))