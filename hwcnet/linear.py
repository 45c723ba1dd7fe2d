"""Fully connected layer over a whole HWC tensor."""

from __future__ import annotations

import numpy as np

from hwcnet.tensor import DTYPE, BiasTensor, Tensor, WeightTensor


def linear(input_tensor: Tensor, weight: WeightTensor, bias: BiasTensor | None) -> Tensor:
    """Apply a dense layer to the flattened input, giving a 1x1xOC tensor.

    The weight's H*W*INC must equal the input's element count, and both must
    use the same element order (HWC).
    """
    if input_tensor is None or weight is None:
        raise ValueError("an input tensor and a weight tensor are required")
    input_size = input_tensor.h * input_tensor.w * input_tensor.c
    expected_size = weight.h * weight.w * weight.inc
    if weight.oc <= 0 or input_size != expected_size:
        raise ValueError(
            f"input holds {input_size} values but the weight expects {expected_size}"
        )
    if bias is not None and bias.oc != weight.oc:
        raise ValueError(f"bias has {bias.oc} values but the weight has {weight.oc} outputs")
    matrix = weight.data.reshape(weight.oc, input_size)
    result = (matrix @ input_tensor.data.reshape(input_size)).astype(DTYPE)
    if bias is not None:
        result += bias.data
    return Tensor(1, 1, weight.oc, result)