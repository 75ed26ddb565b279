"""
onnx-embed :: User-Defined Model

"Bring your own" embedding model: an ONNX source, its tokenizer files,
and the choices the catalog would otherwise supply.

    model = (
        UserDefinedEmbeddingModel.new(onnx_bytes, TokenizerFiles.from_directory(d))
        .with_pooling(Pooling.MEAN)
        .with_quantization(QuantizationMode.DYNAMIC)
    )

Same builder discipline as the options: each with_*() returns a new
value. The descriptor is consumed by TextEmbedding.try_new_from_user_defined;
do not reuse it afterwards.

INL - 2025
"""

from dataclasses import dataclass, replace
from typing import Optional

from onnx_embed.core.output import OutputKey
from onnx_embed.core.pooling import Pooling
from onnx_embed.core.quantization import QuantizationMode
from onnx_embed.core.source import OnnxSource, as_onnx_source
from onnx_embed.core.tokenizer import TokenizerFiles


@dataclass(frozen=True)
class UserDefinedEmbeddingModel:
    """
    Supports both in-memory ONNX bytes and file paths (for models with
    external data). pooling=None defers to the assembler's default.
    """
    onnx_source: OnnxSource
    tokenizer_files: TokenizerFiles
    pooling: Optional[Pooling] = None
    quantization: QuantizationMode = QuantizationMode.NONE
    output_key: Optional[OutputKey] = None

    @classmethod
    def new(cls, onnx_source, tokenizer_files: TokenizerFiles) -> "UserDefinedEmbeddingModel":
        """Create from ONNX bytes, a file path, or an OnnxSource."""
        return cls(
            onnx_source=as_onnx_source(onnx_source),
            tokenizer_files=tokenizer_files,
        )

    def with_quantization(self, quantization: QuantizationMode) -> "UserDefinedEmbeddingModel":
        return replace(self, quantization=quantization)

    def with_pooling(self, pooling: Pooling) -> "UserDefinedEmbeddingModel":
        return replace(self, pooling=pooling)

    def with_output_key(self, output_key: OutputKey) -> "UserDefinedEmbeddingModel":
        return replace(self, output_key=output_key)
