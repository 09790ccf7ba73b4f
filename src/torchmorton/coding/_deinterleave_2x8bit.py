from torch import Tensor

from ._bits import as_uint32, check_clear, check_integer_tensor, stack_pair

# Keeps the 8-bit code of each 16-bit lane. Applied before the first shift so
# that no bit of lane 0 can be carried into lane 1.
_LANE_GUARD = 0x00FF00FF


def deinterleave_2x8bit(codes: Tensor) -> Tensor:
    r"""Deinterleave two packed 8-bit Morton codes at once.

    Each element holds two independent 8-bit codes, one in each 16-bit lane:
    lane 0 in bits [0, 16) and lane 1 in bits [16, 32). Both lanes are
    deinterleaved in parallel within the same 32-bit word.

    Parameters
    ----------
    codes : Tensor, shape (...)
        Packed codes ``a | (b << 16)`` with ``a`` and ``b`` 8-bit Morton codes.
        Bits 8 to 15 of each lane must be zero.

    Returns
    -------
    Tensor, shape (..., 2), dtype=int64
        ``[..., 0]`` holds both x results packed the same way as the input
        (lane 0's x in bits [0, 4), lane 1's x in bits [16, 20)); ``[..., 1]``
        holds both y results.

    Examples
    --------
    >>> a, b = 0b00010001, 0b11111110
    >>> deinterleave_2x8bit(torch.tensor([a | (b << 16)]))
    tensor([[917509, 983040]])

    Here lane 0 decodes to (x, y) = (5, 0) and lane 1 to (14, 15), so the x
    word is ``5 | (14 << 16)`` and the y word is ``0 | (15 << 16)``.

    Notes
    -----
    - Bits 8 to 15 of each lane (input bits 8-15 and 24-31) are outside the
      domain, not just the lane's top bit (15 and 31). All of them are
      cleared before the first shift. With assertions enabled a packed code
      with any of those bits set raises ``AssertionError``.
    - The final mask ``0x000f000f`` isolates the 4-bit result in each lane.

    See Also
    --------
    deinterleave_8bit : Deinterleave a single 8-bit code
    """
    check_integer_tensor(codes, "codes")

    i = as_uint32(codes)

    if __debug__:
        check_clear(i, 0xFF00FF00, "deinterleave_2x8bit")

    j = i & _LANE_GUARD
    j = ((j << 7) | j) & 0x55555555
    j = ((j >> 1) ^ j) & 0x33333333
    j = ((j >> 2) ^ j) & 0x0F0F0F0F

    return stack_pair(j & 0x000F000F, (j >> 8) & 0x000F000F)
