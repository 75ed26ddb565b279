"""
onnx-embed: Model-source and initialization-option resolution for ONNX embedding models.

Two ways in, one way out:

  Catalog:       named model  → TextInitOptions      ┐
  User-defined:  bytes / path → InitOptionsUserDefined ├→ TextEmbedding
                 + tokenizer files                    ┘

Everything before TextEmbedding is a plain value. Nothing is read,
validated or loaded until the handle is assembled.

INL - 2025
"""

__version__ = "0.1.0"

from onnx_embed.core.source import OnnxSource, MemorySource, FileSource, as_onnx_source
from onnx_embed.core.tokenizer import TokenizerFiles
from onnx_embed.core.pooling import Pooling
from onnx_embed.core.quantization import QuantizationMode
from onnx_embed.core.output import OutputKey, OnlyOne, ByOrder, ByName
from onnx_embed.core.options import (
    DEFAULT_MAX_LENGTH,
    InitOptionsWithLength,
    TextInitOptions,
    SparseInitOptions,
    RerankInitOptions,
    InitOptionsUserDefined,
)
from onnx_embed.models.user_defined import UserDefinedEmbeddingModel
from onnx_embed.engine.text_embedding import TextEmbedding

__all__ = [
    "OnnxSource", "MemorySource", "FileSource", "as_onnx_source",
    "TokenizerFiles",
    "Pooling",
    "QuantizationMode",
    "OutputKey", "OnlyOne", "ByOrder", "ByName",
    "DEFAULT_MAX_LENGTH",
    "InitOptionsWithLength", "TextInitOptions", "SparseInitOptions", "RerankInitOptions",
    "InitOptionsUserDefined",
    "UserDefinedEmbeddingModel",
    "TextEmbedding",
]
