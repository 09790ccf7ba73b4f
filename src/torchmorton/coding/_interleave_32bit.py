from torch import Tensor

from ._bits import split_pair


def _spread_16bit(v: Tensor) -> Tensor:
    # Insert one zero bit between each of the low 16 bits of ``v``.
    v = v & 0x0000FFFF
    v = (v | (v << 8)) & 0x00FF00FF
    v = (v | (v << 4)) & 0x0F0F0F0F
    v = (v | (v << 2)) & 0x33333333
    v = (v | (v << 1)) & 0x55555555

    return v


def interleave_32bit(coordinates: Tensor) -> Tensor:
    r"""Interleave two 16-bit coordinates into a 32-bit Morton code.

    Mathematical Definition
    -----------------------
    For coordinates (x, y), the Morton code is

    .. math::

        \text{morton} = \sum_{i=0}^{15} \left[ x_i \cdot 2^{2i} + y_i \cdot 2^{2i+1} \right]

    where :math:`x_i, y_i` are the i-th bits of x and y.

    Parameters
    ----------
    coordinates : Tensor, shape (..., 2)
        Integer coordinates, ``[..., 0]`` is x and ``[..., 1]`` is y. Only the
        low 16 bits of each component are used; higher bits are ignored.

    Returns
    -------
    Tensor, shape (...), dtype=int64
        Morton codes in [0, 2^32).

    Examples
    --------
    >>> coords = torch.tensor([[0, 0], [1, 0], [0, 1], [1, 1], [2, 2]])
    >>> interleave_32bit(coords)
    tensor([ 0,  1,  2,  3, 12])

    >>> interleave_32bit(torch.tensor([0xFFFF, 0xFFFF]))
    tensor(4294967295)

    Notes
    -----
    - Each coordinate is spread with four shift/or/mask rounds (group
      spacing 8, 4, 2, 1), then the two spread words are combined as
      ``x | (y << 1)``. The cost does not depend on the input values.
    - Negative coordinates are reinterpreted as unsigned 32-bit words before
      masking, matching a C cast to ``uint32_t``.

    See Also
    --------
    interleave_16bit : Interleave two 8-bit coordinates
    """
    x, y = split_pair(coordinates)

    return _spread_16bit(x) | (_spread_16bit(y) << 1)
