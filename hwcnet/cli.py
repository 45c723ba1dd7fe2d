"""Command that runs the sample input through the sample convolution."""

from __future__ import annotations

import argparse
import sys

from hwcnet.conv import conv2d
from hwcnet.weights import conv_bias, patch_weight, sample_input


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="hwcnet",
        description=(
            "Show the built-in 8x8x3 sample input and 3x3 convolution parameters, "
            "then the result of convolving them with stride 1 and padding 1."
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Print the sample tensors and the convolution result; returns the exit status."""
    _parser().parse_args(argv)
    out = sys.stdout

    features = sample_input()
    weight = patch_weight()
    bias = conv_bias()

    out.write(features.format(True))
    out.write(weight.format(True))
    out.write(bias.format(True))

    result = conv2d(features, weight, bias, 1, 1)
    out.write(result.format(True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())