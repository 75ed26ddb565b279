"""
onnx-embed :: Core

Configuration values and the boundaries that consume them.
  - source: where ONNX bytes come from (memory / file)
  - options: catalog and user-defined init options
  - registry: model families and the named-model catalog
  - tokenizer: tokenizer artifacts → live tokenizer
  - session: OnnxSource → onnxruntime session
"""

from onnx_embed.core.source import OnnxSource, MemorySource, FileSource, as_onnx_source
from onnx_embed.core.options import (
    DEFAULT_MAX_LENGTH, InitOptionsWithLength, TextInitOptions,
    SparseInitOptions, RerankInitOptions, InitOptionsUserDefined,
)
from onnx_embed.core.registry import (
    ModelFamily, TextEmbeddingFamily, SparseTextEmbeddingFamily, RerankerFamily,
    ModelInfo, register_model, get_model_info, get_family, list_models,
)
from onnx_embed.core.tokenizer import TokenizerFiles, load_tokenizer
from onnx_embed.core.session import build_session, needs_token_type_ids
