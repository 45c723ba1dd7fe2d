"""Convolution, linear, patch-embedding and activation layers for HWC feature maps."""

__version__ = "0.1.0"
__all__ = ["tensor", "activations", "conv", "linear", "patch_embed", "weights", "cli"]