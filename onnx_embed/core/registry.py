"""
onnx-embed :: Model Registry

Catalog of named models, grouped into families.

Each family declares its own default max length as a class attribute,
so options bound to a family pick it up without consulting the catalog:

    class TextEmbeddingFamily(ModelFamily):
        MAX_LENGTH = 512

To add a new model:
    register_model("org/model", family=TextEmbeddingFamily, dim=384,
                   model_file="onnx/model.onnx", pooling=Pooling.MEAN)

INL - 2025
"""

from typing import ClassVar, Dict, List, Optional, Tuple, Type
from dataclasses import dataclass

from onnx_embed.core.output import OutputKey
from onnx_embed.core.pooling import Pooling
from onnx_embed.core.quantization import QuantizationMode


# =========================================================================
# Families
# =========================================================================

class ModelFamily:
    """A group of catalog models sharing defaults."""
    NAME: ClassVar[str]
    MAX_LENGTH: ClassVar[int]
    DEFAULT_MODEL: ClassVar[str]


class TextEmbeddingFamily(ModelFamily):
    NAME = "text"
    MAX_LENGTH = 512
    DEFAULT_MODEL = "Xenova/bge-small-en-v1.5"


class SparseTextEmbeddingFamily(ModelFamily):
    NAME = "sparse"
    MAX_LENGTH = 512
    DEFAULT_MODEL = "Qdrant/Splade_PP_en_v1"


class RerankerFamily(ModelFamily):
    NAME = "rerank"
    MAX_LENGTH = 512
    DEFAULT_MODEL = "BAAI/bge-reranker-base"


FAMILIES: Dict[str, Type[ModelFamily]] = {
    f.NAME: f for f in (TextEmbeddingFamily, SparseTextEmbeddingFamily, RerankerFamily)
}


# =========================================================================
# Catalog entries
# =========================================================================

@dataclass(frozen=True)
class ModelInfo:
    """A registered model."""
    model_code: str                   # e.g. "Xenova/bge-small-en-v1.5"
    family: Type[ModelFamily]
    dim: Optional[int]                # None for sparse models
    description: str
    model_file: str                   # relative to the model directory
    additional_files: Tuple[str, ...] = ()
    pooling: Optional[Pooling] = None
    quantization: QuantizationMode = QuantizationMode.NONE
    output_key: Optional[OutputKey] = None


_REGISTRY: Dict[str, ModelInfo] = {}


def register_model(
    model_code: str,
    family: Type[ModelFamily],
    model_file: str,
    dim: Optional[int] = None,
    description: str = "",
    additional_files: Tuple[str, ...] = (),
    pooling: Optional[Pooling] = None,
    quantization: QuantizationMode = QuantizationMode.NONE,
    output_key: Optional[OutputKey] = None,
):
    """
    Register a catalog model.

    Args:
        model_code: unique model name (e.g. "Xenova/all-MiniLM-L6-v2")
        family: family class the model belongs to
        model_file: ONNX file path relative to the model directory
        dim: embedding dimension
        description: model description
        additional_files: external data files shipped next to model_file
        pooling: default pooling when the caller sets none
        quantization: quantization mode of the exported graph
        output_key: output tensor selector for multi-output graphs
    """
    _REGISTRY[model_code] = ModelInfo(
        model_code=model_code,
        family=family,
        dim=dim,
        description=description,
        model_file=model_file,
        additional_files=tuple(additional_files),
        pooling=pooling,
        quantization=quantization,
        output_key=output_key,
    )


def get_model_info(model_code: str) -> ModelInfo:
    """Get a registered model entry."""
    if model_code not in _REGISTRY:
        available = ", ".join(_REGISTRY.keys())
        raise ValueError(f"Unknown model: {model_code}. Available: {available}")
    return _REGISTRY[model_code]


def get_family(name: str) -> Type[ModelFamily]:
    """Get a family class by its short name ("text", "sparse", "rerank")."""
    if name not in FAMILIES:
        available = ", ".join(FAMILIES.keys())
        raise ValueError(f"Unknown model family: {name}. Available: {available}")
    return FAMILIES[name]


def list_models(family: Optional[Type[ModelFamily]] = None) -> List[ModelInfo]:
    """List registered models, optionally restricted to one family."""
    return [
        info for info in _REGISTRY.values()
        if family is None or info.family is family
    ]


# =========================================================================
# Built-in registrations
# Other code can call register_model() to add more.
# =========================================================================

register_model(
    model_code="Xenova/all-MiniLM-L6-v2",
    family=TextEmbeddingFamily,
    dim=384,
    description="Sentence Transformer model, MiniLM-L6-v2",
    model_file="onnx/model.onnx",
    pooling=Pooling.MEAN,
)

register_model(
    model_code="Xenova/bge-small-en-v1.5",
    family=TextEmbeddingFamily,
    dim=384,
    description="v1.5 release of the fast and default English model",
    model_file="onnx/model.onnx",
    pooling=Pooling.CLS,
)

register_model(
    model_code="Qdrant/bge-small-en-v1.5-onnx-Q",
    family=TextEmbeddingFamily,
    dim=384,
    description="Quantized v1.5 release of the fast and default English model",
    model_file="model_optimized.onnx",
    pooling=Pooling.CLS,
    quantization=QuantizationMode.STATIC,
)

register_model(
    model_code="Xenova/bge-base-en-v1.5",
    family=TextEmbeddingFamily,
    dim=768,
    description="v1.5 release of the base English model",
    model_file="onnx/model.onnx",
    pooling=Pooling.CLS,
)

register_model(
    model_code="nomic-ai/nomic-embed-text-v1.5",
    family=TextEmbeddingFamily,
    dim=768,
    description="v1.5 release of the 8192 context length english model",
    model_file="onnx/model.onnx",
    pooling=Pooling.MEAN,
)

register_model(
    model_code="Xenova/multilingual-e5-small",
    family=TextEmbeddingFamily,
    dim=384,
    description="Small model of multilingual E5 Text Embeddings",
    model_file="onnx/model.onnx",
    pooling=Pooling.MEAN,
)

register_model(
    model_code="Qdrant/Splade_PP_en_v1",
    family=SparseTextEmbeddingFamily,
    description="Splade sparse vector model for commercial use, v1",
    model_file="model.onnx",
)

register_model(
    model_code="BAAI/bge-reranker-base",
    family=RerankerFamily,
    description="reranker model for English and Chinese",
    model_file="onnx/model.onnx",
)
