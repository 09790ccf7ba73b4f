from torch import Tensor

from ._bits import as_uint32, check_clear, check_integer_tensor, stack_pair


def deinterleave_16bit(codes: Tensor) -> Tensor:
    r"""Deinterleave 16-bit Morton codes into two 8-bit coordinates.

    Extracts x from the even bits and y from the odd bits of each code. This
    is the inverse of :func:`interleave_16bit`.

    Mathematical Definition
    -----------------------

    .. math::

        x = \sum_{i=0}^{7} \text{bit}_{2i}(\text{morton}) \cdot 2^i

        y = \sum_{i=0}^{7} \text{bit}_{2i+1}(\text{morton}) \cdot 2^i

    Parameters
    ----------
    codes : Tensor, shape (...)
        Integer Morton codes. Bits above position 15 must be zero.

    Returns
    -------
    Tensor, shape (..., 2), dtype=int64
        Coordinates, ``[..., 0]`` is x and ``[..., 1]`` is y, each in [0, 256).

    Examples
    --------
    >>> deinterleave_16bit(torch.tensor([0, 1, 2, 3, 65535]))
    tensor([[  0,   0],
            [  1,   0],
            [  0,   1],
            [  1,   1],
            [255, 255]])

    Round-trip:

    >>> coords = torch.tensor([[5, 10], [200, 17]])
    >>> deinterleave_16bit(interleave_16bit(coords))
    tensor([[  5,  10],
            [200,  17]])

    Notes
    -----
    - The precondition on the high bits is the caller's responsibility. With
      assertions enabled (the default, i.e. without ``python -O``) a violation
      raises ``AssertionError``; otherwise the result is well defined but
      meaningless.
    - The code is copied into the high half shifted so that its odd bits land
      on even positions, then three xor/shift/mask rounds (shifts 1, 2, 4)
      compact both halves at once: x ends up in bits [0, 8) and y in bits
      [16, 24).

    See Also
    --------
    interleave_16bit : Interleave two 8-bit coordinates
    deinterleave_8bit : Deinterleave 8-bit Morton codes
    """
    check_integer_tensor(codes, "codes")

    i = as_uint32(codes)

    if __debug__:
        check_clear(i, 0xFFFF0000, "deinterleave_16bit")

    j = ((i << 15) | i) & 0x55555555
    j = ((j >> 1) ^ j) & 0x33333333
    j = ((j >> 2) ^ j) & 0x0F0F0F0F
    j = ((j >> 4) ^ j) & 0x00FF00FF

    return stack_pair(j & 0xFF, (j >> 16) & 0xFF)
