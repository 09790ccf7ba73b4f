from ._deinterleave_2x8bit import deinterleave_2x8bit
from ._deinterleave_8bit import deinterleave_8bit
from ._deinterleave_16bit import deinterleave_16bit
from ._interleave_16bit import interleave_16bit
from ._interleave_32bit import interleave_32bit

__all__ = [
    "deinterleave_2x8bit",
    "deinterleave_8bit",
    "deinterleave_16bit",
    "interleave_16bit",
    "interleave_32bit",
]
