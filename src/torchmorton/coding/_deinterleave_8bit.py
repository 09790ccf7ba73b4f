from torch import Tensor

from ._bits import as_uint32, check_clear, check_integer_tensor, stack_pair


def deinterleave_8bit(codes: Tensor) -> Tensor:
    r"""Deinterleave 8-bit Morton codes into two 4-bit coordinates.

    Parameters
    ----------
    codes : Tensor, shape (...)
        Integer Morton codes. Bits above position 7 must be zero.

    Returns
    -------
    Tensor, shape (..., 2), dtype=int64
        Coordinates, ``[..., 0]`` is x and ``[..., 1]`` is y, each in [0, 16).

    Examples
    --------
    >>> deinterleave_8bit(torch.tensor([0, 1, 2, 12, 255]))
    tensor([[ 0,  0],
            [ 1,  0],
            [ 0,  1],
            [ 2,  2],
            [15, 15]])

    Notes
    -----
    Same technique as :func:`deinterleave_16bit`, one level smaller: two
    compaction rounds instead of three. It costs about as much as
    :func:`deinterleave_2x8bit`, which handles two codes per element; prefer
    this only when a second code is not available at the same time.

    See Also
    --------
    deinterleave_2x8bit : Deinterleave two packed 8-bit codes at once
    """
    check_integer_tensor(codes, "codes")

    i = as_uint32(codes)

    if __debug__:
        check_clear(i, 0xFFFFFF00, "deinterleave_8bit")

    j = ((i << 7) | i) & 0x00005555
    j = ((j >> 1) ^ j) & 0x33333333
    j = ((j >> 2) ^ j) & 0x0F0F0F0F

    return stack_pair(j & 0xF, (j >> 8) & 0xF)
