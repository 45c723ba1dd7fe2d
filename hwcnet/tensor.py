"""HWC feature-map tensors and the weight and bias tensors applied to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

DTYPE = np.float32


def _check_dims(**dims: int) -> None:
    for name, value in dims.items():
        if value < 0:
            raise ValueError(f"dimension {name} must not be negative, got {value}")


def _as_block(data: Iterable[float] | np.ndarray, shape: tuple[int, ...], what: str) -> np.ndarray:
    """Copy ``data`` into a float32 array of ``shape``, checking its size."""
    array = np.array(data, dtype=DTYPE)
    expected = int(np.prod(shape))
    if array.size != expected:
        raise ValueError(
            f"{what} holds {array.size} values but shape {shape} needs {expected}"
        )
    return array.reshape(shape)


def _bracket(values: Iterable[float], width: int) -> str:
    return "[" + ",".join(f"{float(v):{width}.2f}" for v in values) + "] "


@dataclass(eq=False)
class Tensor:
    """An image or feature map stored height-first in HWC order."""

    h: int
    w: int
    c: int
    data: np.ndarray | None = None

    def __post_init__(self) -> None:
        _check_dims(h=self.h, w=self.w, c=self.c)
        if self.data is None:
            self.data = np.zeros(self.shape, dtype=DTYPE)
        else:
            self.data = _as_block(self.data, self.shape, "tensor data")

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.h, self.w, self.c)

    def format(self, show_contents: bool) -> str:
        """Describe the tensor's shape and, optionally, its values row by row."""
        text = (
            "=== Tensor Structure ===\n"
            f"  Address : {id(self):#x}\n"
            f"  Data    : {self.data.ctypes.data:#x}\n"
            f"  Shape   : H={self.h}, W={self.w}, C={self.c}\n"
        )
        if show_contents:
            rows = ["--- Data Content ---\n"]
            for index, row in enumerate(self.data):
                pixels = "".join(_bracket(pixel, 7) for pixel in row)
                rows.append(f"Row {index:2d}: {pixels}\n")
            rows.append("========================\n\n")
            text += "".join(rows)
        return text


@dataclass(eq=False)
class WeightTensor:
    """Convolution or linear weights laid out as [OC][H][W][INC]."""

    oc: int
    inc: int
    h: int
    w: int
    data: np.ndarray | None = None

    def __post_init__(self) -> None:
        _check_dims(oc=self.oc, inc=self.inc, h=self.h, w=self.w)
        if self.data is None:
            self.data = np.zeros(self.shape, dtype=DTYPE)
        else:
            self.data = _as_block(self.data, self.shape, "weight data")

    @property
    def shape(self) -> tuple[int, int, int, int]:
        return (self.oc, self.h, self.w, self.inc)

    def format(self, show_contents: bool) -> str:
        """Describe the weights' shape and, optionally, each filter."""
        text = (
            "=== W_Tensor Structure ===\n"
            f"  Address : {id(self):#x}\n"
            f"  Data    : {self.data.ctypes.data:#x}\n"
            f"  Shape   : OC={self.oc}, INC={self.inc}, H={self.h}, W={self.w}\n"
        )
        if show_contents:
            parts = ["--- Data Content (Format: [INC0, INC1...]) ---\n"]
            for oc, kernel in enumerate(self.data):
                parts.append(f"Filter {oc:2d} (OC={oc}):\n")
                for index, row in enumerate(kernel):
                    cells = "".join(_bracket(cell, 6) for cell in row)
                    parts.append(f"  Row {index:2d}: {cells}\n")
                parts.append("-" * 32 + "\n")
            text += "".join(parts)
        return text


@dataclass(eq=False)
class BiasTensor:
    """One bias value per output channel."""

    oc: int
    data: np.ndarray | None = None

    def __post_init__(self) -> None:
        _check_dims(oc=self.oc)
        if self.data is None:
            self.data = np.zeros(self.oc, dtype=DTYPE)
        else:
            self.data = _as_block(self.data, (self.oc,), "bias data")

    def format(self, show_contents: bool) -> str:
        """Describe the bias length and, optionally, its values."""
        text = "=== B_Tensor Structure ===\n" f"  Shape : OC={self.oc}\n"
        if show_contents:
            text += "  Data  : [ " + ", ".join(f"{float(v):6.2f}" for v in self.data)
        return text + " ]\n\n"


def make_tensor(h: int, w: int, c: int) -> Tensor:
    """Create a zero-filled tensor of the given shape."""
    return Tensor(h, w, c)


def tensor_from_array(h: int, w: int, c: int, init_data: Iterable[float] | np.ndarray) -> Tensor:
    """Create a tensor holding a copy of ``init_data``, which must have h*w*c values."""
    if init_data is None:
        raise ValueError("init_data is missing")
    return Tensor(h, w, c, init_data)