"""Non-overlapping patch embedding (superseded by conv2d with stride = kernel)."""

from __future__ import annotations

import numpy as np

from hwcnet.tensor import DTYPE, Tensor, WeightTensor


def patch_embedding(input_tensor: Tensor, weight: WeightTensor) -> Tensor:
    """Project each kernel-sized patch of the input to ``weight.oc`` channels.

    Rows and columns that do not fill a whole patch are dropped; there is no
    padding and no bias.
    """
    if input_tensor is None or weight is None:
        raise ValueError("an input tensor and a weight tensor are required")
    kernel = weight.h
    if kernel <= 0 or weight.oc <= 0:
        raise ValueError("invalid patch embedding arguments")
    if weight.w != kernel:
        raise ValueError(f"only square kernels are supported, got {weight.h}x{weight.w}")
    if weight.inc != input_tensor.c:
        raise ValueError(
            f"weight expects {weight.inc} input channels but the tensor has {input_tensor.c}"
        )
    out_h = input_tensor.h // kernel
    out_w = input_tensor.w // kernel
    cropped = input_tensor.data[: out_h * kernel, : out_w * kernel]
    patches = cropped.reshape(out_h, kernel, out_w, kernel, input_tensor.c)
    result = np.einsum("hiwjc,oijc->hwo", patches, weight.data).astype(DTYPE)
    return Tensor(out_h, out_w, weight.oc, result)