"""Testing utilities for Morton coding operators.

Provides a bit-by-bit reference implementation to check the operators
against, and hypothesis strategies that draw values from each operator's
input domain.

Example usage:

    import hypothesis

    from torchmorton.coding import deinterleave_16bit, interleave_16bit
    from torchmorton.testing import strategies

    @hypothesis.given(strategies.coordinate_pairs(bits=8))
    def test_round_trip(pair):
        ...
"""

from . import strategies
from ._reference import reference_deinterleave, reference_interleave

__all__ = [
    "reference_deinterleave",
    "reference_interleave",
    "strategies",
]
