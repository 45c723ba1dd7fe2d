"""Element-wise activation functions for tensors."""

from __future__ import annotations

from enum import Enum

import numpy as np

from hwcnet.tensor import DTYPE, Tensor


class Activation(Enum):
    """Activation choices; any unrecognised name means no activation."""

    NONE = "NONE"
    RELU = "RELU"
    RELU6 = "RELU6"
    SILU = "SiLU"

    @classmethod
    def _missing_(cls, value: object) -> "Activation":
        return cls.NONE


def apply_activation(values, activation) -> np.ndarray:
    """Return a new float32 array with ``activation`` applied to ``values``."""
    array = np.array(values, dtype=DTYPE)
    kind = Activation(activation)
    if kind is Activation.RELU:
        return np.where(array < 0, DTYPE(0), array)
    if kind is Activation.RELU6:
        return np.where(array < 0, DTYPE(0), np.where(array > 6, DTYPE(6), array))
    if kind is Activation.SILU:
        with np.errstate(over="ignore"):
            return (array / (DTYPE(1) + np.exp(-array))).astype(DTYPE)
    return array


def _apply_in_place(tensor: Tensor, activation: Activation) -> Tensor:
    tensor.data[...] = apply_activation(tensor.data, activation)
    return tensor


def relu(tensor: Tensor) -> Tensor:
    """Clip negative values to zero, in place; returns the same tensor."""
    return _apply_in_place(tensor, Activation.RELU)


def relu6(tensor: Tensor) -> Tensor:
    """Clip values into [0, 6], in place; returns the same tensor."""
    return _apply_in_place(tensor, Activation.RELU6)


def silu(tensor: Tensor) -> Tensor:
    """Replace each x with x / (1 + e^-x), in place; returns the same tensor."""
    return _apply_in_place(tensor, Activation.SILU)