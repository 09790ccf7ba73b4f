from torch import Tensor

from ._bits import split_pair


def interleave_16bit(coordinates: Tensor) -> Tensor:
    r"""Interleave two 8-bit coordinates into a 16-bit Morton code.

    Bit :math:`2i` of the result is bit :math:`i` of x and bit :math:`2i + 1`
    is bit :math:`i` of y, for :math:`i \in [0, 8)`.

    Parameters
    ----------
    coordinates : Tensor, shape (..., 2)
        Integer coordinates, ``[..., 0]`` is x and ``[..., 1]`` is y. Only the
        low 8 bits of each component are used; higher bits are ignored.

    Returns
    -------
    Tensor, shape (...), dtype=int64
        Morton codes in [0, 2^16). Bits above 15 are always zero.

    Examples
    --------
    >>> interleave_16bit(torch.tensor([[1, 0], [0, 1], [3, 0], [255, 255]]))
    tensor([    1,     2,     5, 65535])

    >>> interleave_16bit(torch.tensor([0b10110010, 0b01001101]))
    tensor(26022)

    Notes
    -----
    x and y are packed into one word as ``(y << 16) | x`` and both halves are
    spread at once. The xor form of the spread is equivalent to the or form
    because the shifted bit groups never overlap. The final fold
    ``(j >> 15) | (j & 0xffff)`` moves y's spread bits from the high half
    into the odd positions of the low half.

    See Also
    --------
    deinterleave_16bit : Inverse of this operation
    interleave_32bit : Interleave two 16-bit coordinates
    """
    x, y = split_pair(coordinates)

    j = ((y & 0xFF) << 16) | (x & 0xFF)
    j = ((j << 4) ^ j) & 0x0F0F0F0F
    j = ((j << 2) ^ j) & 0x33333333
    j = ((j << 1) ^ j) & 0x55555555

    return (j >> 15) | (j & 0xFFFF)
