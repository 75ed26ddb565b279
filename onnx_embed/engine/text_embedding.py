"""
onnx-embed :: TextEmbedding

The resolved runtime handle: a live tokenizer, a live onnxruntime
session, and the pooling / quantization / output-key decisions that
inference code needs.

Assembly, for both paths:
  1. tokenizer   ← TokenizerFiles + max_length
  2. session     ← OnnxSource + execution providers
  3. token_type_ids required?  ← session input names
  4. pooling / quantization / output_key carried unchanged

A failure in 1 or 2 raises RuntimeError; no partial handle is returned.

INL - 2025
"""

from pathlib import Path
from typing import List, Optional, Union

from onnx_embed.core.logging import get_logger
from onnx_embed.core.options import InitOptionsUserDefined, TextInitOptions
from onnx_embed.core.output import OutputKey, select_output
from onnx_embed.core.pooling import Pooling
from onnx_embed.core.quantization import QuantizationMode
from onnx_embed.core.registry import (
    ModelInfo, TextEmbeddingFamily, get_model_info, list_models,
)
from onnx_embed.core.session import build_session, needs_token_type_ids, output_names
from onnx_embed.core.source import FileSource, OnnxSource, describe_source
from onnx_embed.core.tokenizer import TokenizerFiles, load_tokenizer
from onnx_embed.models.user_defined import UserDefinedEmbeddingModel

logger = get_logger("onnx_embed.engine")


class TextEmbedding:
    """Assembled text embedding model, ready for inference."""

    def __init__(
        self,
        tokenizer,
        session,
        need_token_type_ids: bool,
        pooling: Optional[Pooling] = None,
        quantization: QuantizationMode = QuantizationMode.NONE,
        output_key: Optional[OutputKey] = None,
    ):
        self.tokenizer = tokenizer
        self.session = session
        self.need_token_type_ids = need_token_type_ids
        self.pooling = pooling
        self.quantization = quantization
        self.output_key = output_key

    def __repr__(self) -> str:
        return (
            f"TextEmbedding(pooling={self.pooling}, quantization={self.quantization.value}, "
            f"output_key={self.output_key}, need_token_type_ids={self.need_token_type_ids})"
        )

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @classmethod
    def try_new(
        cls,
        options: TextInitOptions,
        model_dir: Union[str, Path],
    ) -> "TextEmbedding":
        """
        Catalog path: assemble a named model whose files are already in
        model_dir (tokenizer files at the top, ONNX file at the catalog's
        model_file path). Nothing is downloaded.

        Raises:
            ValueError: unknown model, or not a text embedding model
            FileNotFoundError: tokenizer or external data files missing from model_dir
            RuntimeError: tokenizer or session construction failed
        """
        info = get_model_info(options.model_name)
        if info.family is not TextEmbeddingFamily:
            raise ValueError(
                f"{info.model_code} is a {info.family.NAME} model, not a text embedding model"
            )

        model_dir = Path(model_dir)
        model_path = model_dir / info.model_file

        # External data files live next to the ONNX file
        for name in info.additional_files:
            extra_path = model_path.parent / name
            if not extra_path.is_file():
                raise FileNotFoundError(f"External data file not found: {extra_path}")

        tokenizer_files = TokenizerFiles.from_directory(model_dir)
        logger.info(f"catalog model {info.model_code} from {model_dir}", extra={"model": info.model_code})

        return cls._assemble(
            source=FileSource(model_path),
            tokenizer_files=tokenizer_files,
            options=InitOptionsUserDefined.from_init_options(options),
            pooling=info.pooling,
            quantization=info.quantization,
            output_key=info.output_key,
        )

    @classmethod
    def try_new_from_user_defined(
        cls,
        model: UserDefinedEmbeddingModel,
        options: Optional[InitOptionsUserDefined] = None,
    ) -> "TextEmbedding":
        """
        User-defined path: assemble from caller-supplied ONNX source and
        tokenizer files. `model` is consumed.

        Raises:
            RuntimeError: tokenizer or session construction failed
        """
        if options is None:
            options = InitOptionsUserDefined.new()
        return cls._assemble(
            source=model.onnx_source,
            tokenizer_files=model.tokenizer_files,
            options=options,
            pooling=model.pooling,
            quantization=model.quantization,
            output_key=model.output_key,
        )

    @classmethod
    def _assemble(
        cls,
        source: OnnxSource,
        tokenizer_files: TokenizerFiles,
        options: InitOptionsUserDefined,
        pooling: Optional[Pooling],
        quantization: QuantizationMode,
        output_key: Optional[OutputKey],
    ) -> "TextEmbedding":
        providers = list(options.execution_providers)
        logger.info(
            f"assembling: source={describe_source(source)} "
            f"providers={providers or 'default'} max_length={options.max_length}",
            extra={"extra_data": {
                "source": describe_source(source),
                "providers": providers,
                "max_length": options.max_length,
            }},
        )

        try:
            tokenizer = load_tokenizer(tokenizer_files, options.max_length)
        except Exception as exc:
            raise RuntimeError(f"Failed to build tokenizer: {exc}") from exc

        try:
            session = build_session(source, providers)
        except Exception as exc:
            raise RuntimeError(
                f"Failed to build ONNX session from {describe_source(source)}: {exc}"
            ) from exc

        need_token_type_ids = needs_token_type_ids(session)
        logger.debug(f"  token_type_ids required: {need_token_type_ids}")

        return cls(
            tokenizer=tokenizer,
            session=session,
            need_token_type_ids=need_token_type_ids,
            pooling=pooling,
            quantization=quantization,
            output_key=output_key,
        )

    # -----------------------------------------------------------------
    # Catalog helpers
    # -----------------------------------------------------------------

    @staticmethod
    def list_supported_models() -> List[ModelInfo]:
        return list_models(TextEmbeddingFamily)

    @staticmethod
    def get_model_info(model_code: str) -> ModelInfo:
        return get_model_info(model_code)

    @staticmethod
    def get_default_pooling(model_code: str) -> Optional[Pooling]:
        """Default pooling the catalog records for a model."""
        return get_model_info(model_code).pooling

    # -----------------------------------------------------------------
    # Resolved decisions
    # -----------------------------------------------------------------

    def resolved_pooling(self, default: Pooling = Pooling.CLS) -> Pooling:
        """Pooling to apply: the configured one, else `default`."""
        return self.pooling if self.pooling is not None else default

    def output_name(self) -> str:
        """Name of the session output to read embeddings from."""
        return select_output(self.output_key, output_names(self.session))
