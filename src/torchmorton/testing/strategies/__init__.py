"""Hypothesis strategies for Morton coding operator testing."""

from ._available_devices import available_devices
from ._coordinate_pairs import coordinate_pairs
from ._morton_codes import morton_codes
from ._packed_code_pairs import packed_code_pairs

__all__ = [
    "available_devices",
    "coordinate_pairs",
    "morton_codes",
    "packed_code_pairs",
]
