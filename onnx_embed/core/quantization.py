"""
onnx-embed :: Quantization

Which precision scheme the exported graph was produced with.

Modes:
  - NONE:    full-precision weights and outputs
  - STATIC:  weights and activations quantized at export time
  - DYNAMIC: activations quantized per batch at run time; outputs
             depend on batch composition, so callers should embed
             one batch at a time

INL - 2025
"""

from enum import Enum


class QuantizationMode(str, Enum):
    """Quantization mode of an ONNX graph."""
    NONE = "none"
    STATIC = "static"
    DYNAMIC = "dynamic"

    @classmethod
    def parse(cls, name: str) -> "QuantizationMode":
        try:
            return cls(name.lower())
        except ValueError:
            available = ", ".join(q.value for q in cls)
            raise ValueError(f"Unknown quantization: {name}. Available: {available}") from None
