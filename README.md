# hwcnet

Small building blocks for running convolutional networks on feature maps
stored in height–width–channel (HWC) order, built on NumPy with `float32`
values.

## What it provides

- `hwcnet.tensor`
  - `Tensor(h, w, c, data=None)`: a feature map whose `data` is an
    `h × w × c` array. Without `data` it is zero-filled.
  - `WeightTensor(oc, inc, h, w, data=None)`: filters whose `data` is laid
    out as `oc × h × w × inc`.
  - `BiasTensor(oc, data=None)`: one value per output channel.
  - `make_tensor(h, w, c)` gives a zero-filled tensor;
    `tensor_from_array(h, w, c, init_data)` copies `init_data`, which must
    hold exactly `h*w*c` values.
  - Each class has `format(show_contents)`, which returns a text
    description of its shape and, if asked, its values.
- `hwcnet.activations`
  - `relu`, `relu6` and `silu` change a tensor in place and return it.
  - `Activation` enum (`NONE`, `RELU`, `RELU6`, `SILU`, with the values
    `"RELU"`, `"RELU6"` and `"SiLU"`); any other name maps to `NONE`.
  - `apply_activation(values, activation)` returns a new array.
- `hwcnet.conv`
  - `conv2d(input_tensor, weight, bias, stride, padding)`: square kernels,
    any stride, zero padding. `bias` may be `None`.
  - `conv2d_bn_act(input_tensor, weight, bias, stride, padding, act)`: the
    same convolution followed by an activation. It expects batch
    normalisation to be folded into the weights already. If `act` is not
    `"RELU"`, `"RELU6"` or `"SiLU"` (including `None`), no activation is
    applied and a `RuntimeWarning` is issued.
- `hwcnet.linear`
  - `linear(input_tensor, weight, bias)`: a fully connected layer over the
    whole flattened HWC input. It returns a `1 × 1 × oc` tensor. The
    weight's `h*w*inc` must equal the input's element count.
- `hwcnet.patch_embed`
  - `patch_embedding(input_tensor, weight)`: a non-overlapping patch
    projection with the stride equal to the kernel size. It has no padding
    and no bias. Rows and columns that do not fill a whole patch are
    dropped. `conv2d` covers the same case more generally.
- `hwcnet.weights`
  - `sample_input()`: an 8 × 8 × 3 tensor counting from 0 to 191.
  - `patch_weight()` and `conv_bias()`: an example 3 × 3 convolution with
    three input and three output channels.
  - `linear_weight()` and `linear_bias()`: an example dense layer from the
    sample input to two outputs.

Invalid arguments raise `ValueError`. This covers:

- non-positive kernel sizes, channel counts or strides;
- negative padding;
- non-square kernels;
- a mismatch between the weight's input channels and the tensor's channels;
- a bias length that does not match the number of output channels;
- a kernel larger than the padded input;
- data of the wrong size.

## Example

```python
from hwcnet.conv import conv2d
from hwcnet.weights import sample_input, patch_weight, conv_bias

features = conv2d(sample_input(), patch_weight(), conv_bias(), stride=1, padding=1)
print(features.format(True))
```

## Command line

```
hwcnet
```

The command runs the sample input through the example 3 × 3 convolution
with stride 1 and padding 1. It prints the input, the weights, the bias and
the resulting feature map. It takes no options other than `--help`.

## What it does not do

- It does not load weights or images from files. Parameters are given as
  arrays or taken from `hwcnet.weights`.
- It does not train. It only runs forward computations.
- It has no pointwise-only or depthwise convolution functions. A 1 × 1
  kernel with `conv2d` serves for pointwise convolution.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```