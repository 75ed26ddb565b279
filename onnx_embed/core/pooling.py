"""
onnx-embed :: Pooling

How per-token embeddings collapse into one vector.
Only the choice lives here; the arithmetic belongs to the inference code.

INL - 2025
"""

from enum import Enum


class Pooling(str, Enum):
    """Pooling strategy."""
    CLS = "cls"      # first token
    MEAN = "mean"    # attention-masked mean

    @classmethod
    def parse(cls, name: str) -> "Pooling":
        try:
            return cls(name.lower())
        except ValueError:
            available = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown pooling: {name}. Available: {available}") from None
