"""torchmorton: PyTorch operators for Morton (Z-order) codes."""

from . import coding

__all__ = [
    "coding",
]

__version__ = "0.1.0"
