"""Built-in sample input and layer parameters used by the demo command."""

from __future__ import annotations

import numpy as np

from hwcnet.tensor import DTYPE, BiasTensor, Tensor, WeightTensor

SAMPLE_H, SAMPLE_W, SAMPLE_C = 8, 8, 3

# Layout [OC][H][W][INC] for a 3x3 kernel over 3 input channels.
_PATCH_EMBED_WEIGHT = (
    # OC 0: only the centre tap of input channel 0.
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   1.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    # OC 1: the centre tap of every input channel.
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   1.0, 1.0, 1.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    # OC 2: top-left corner, plus the bottom-right corner scaled by 100.
    1.0, 1.0, 1.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,   0.0, 0.0, 0.0,   100.0, 100.0, 100.0,
)

_CONV_BIAS = (0.1, -0.5, 0.01)

# Sparse dense-layer weights over the 192-value sample input.
#   OC 0: 10*0.5 + 11*-0.5 + 20*0.25 = 4.5, cancelled by its bias to 0.0
#   OC 1: 100*0.1 + 101*10.0 = 1020.0, plus its bias gives 1025.55
_LINEAR_OUTPUTS = 2
_LINEAR_WEIGHT_ENTRIES = {
    10: 0.5,
    11: -0.5,
    20: 0.25,
    192 + 100: 0.1,
    192 + 101: 10.0,
}

_LINEAR_BIAS = (-4.5, 5.55)


def sample_input() -> Tensor:
    """An 8x8x3 HWC tensor whose elements count up from 0 to 191."""
    count = SAMPLE_H * SAMPLE_W * SAMPLE_C
    return Tensor(SAMPLE_H, SAMPLE_W, SAMPLE_C, np.arange(count, dtype=DTYPE))


def patch_weight() -> WeightTensor:
    """The 3x3 convolution weights for three input and three output channels."""
    return WeightTensor(oc=3, inc=3, h=3, w=3, data=_PATCH_EMBED_WEIGHT)


def conv_bias() -> BiasTensor:
    """The bias applied with :func:`patch_weight`."""
    return BiasTensor(oc=3, data=_CONV_BIAS)


def linear_weight() -> WeightTensor:
    """Dense-layer weights mapping the 8x8x3 sample input to two outputs."""
    size = SAMPLE_H * SAMPLE_W * SAMPLE_C
    flat = np.zeros(_LINEAR_OUTPUTS * size, dtype=DTYPE)
    for index, value in _LINEAR_WEIGHT_ENTRIES.items():
        flat[index] = value
    return WeightTensor(oc=_LINEAR_OUTPUTS, inc=SAMPLE_C, h=SAMPLE_H, w=SAMPLE_W, data=flat)


def linear_bias() -> BiasTensor:
    """The bias applied with :func:`linear_weight`."""
    return BiasTensor(oc=_LINEAR_OUTPUTS, data=_LINEAR_BIAS)