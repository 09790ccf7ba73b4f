"""Fixed-width word helpers shared by the Morton coding operators.

PyTorch has no general-purpose ``uint32`` arithmetic, so every operator works
on ``int64`` tensors holding unsigned 32-bit words. Inputs are reinterpreted
with :func:`as_uint32`; afterwards every step of the bit-twiddling sequences
ends in a mask that keeps the value inside 32 bits, which reproduces
``uint32_t`` wraparound exactly.
"""

import torch
from torch import Tensor

UINT32_MASK = 0xFFFFFFFF


def check_integer_tensor(input: Tensor, name: str) -> None:
    """Raise if ``input`` is not an integer tensor."""
    if not isinstance(input, Tensor):
        raise TypeError(
            f"{name} must be a Tensor, got {type(input).__name__}"
        )

    if (
        input.is_floating_point()
        or input.is_complex()
        or input.dtype == torch.bool
    ):
        raise TypeError(
            f"{name} must be an integer tensor, got dtype {input.dtype}"
        )


def as_uint32(input: Tensor) -> Tensor:
    """Reinterpret an integer tensor as unsigned 32-bit words (int64)."""
    return input.to(torch.int64) & UINT32_MASK


def split_pair(coordinates: Tensor) -> tuple[Tensor, Tensor]:
    """Split a ``(..., 2)`` coordinate tensor into x and y words."""
    check_integer_tensor(coordinates, "coordinates")

    if coordinates.dim() == 0 or coordinates.shape[-1] != 2:
        raise ValueError(
            f"coordinates must have shape (..., 2), "
            f"got {tuple(coordinates.shape)}"
        )

    words = as_uint32(coordinates)

    return words[..., 0], words[..., 1]


def stack_pair(x: Tensor, y: Tensor) -> Tensor:
    return torch.stack([x, y], dim=-1)


def check_clear(words: Tensor, mask: int, name: str) -> None:
    """Assert that no bit of ``mask`` is set in any element of ``words``.

    Only called from ``if __debug__:`` blocks, so the check disappears when
    Python runs with ``-O``. Meta tensors carry no data and tracing under
    ``torch.compile`` cannot branch on values; both skip the check.
    """
    if words.is_meta or torch.compiler.is_compiling():
        return

    assert not torch.any(words & mask), (
        f"{name}: input has bits set in {mask:#010x}, "
        f"which must be zero for this operator"
    )
