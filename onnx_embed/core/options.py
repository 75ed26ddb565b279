"""
onnx-embed :: Initialization Options

Two option types with the same shape:

  InitOptionsWithLength   — catalog models; max_length defaults to the
                            family's MAX_LENGTH (TextInitOptions, ...)
  InitOptionsUserDefined  — bring-your-own models; max_length defaults
                            to DEFAULT_MAX_LENGTH

Both are frozen builders. Every with_*() returns a new value; treat the
value you called it on as consumed and keep only the result:

    options = TextInitOptions.new().with_max_length(256)

Catalog options convert one way into user-defined options via
InitOptionsUserDefined.from_init_options(). There is no inverse: a
user-defined model has no family to take a default from.

max_length is not validated here. An invalid value fails when the
tokenizer is built, not when the options are.

INL - 2025
"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Iterable, Optional, Tuple, Type

from onnx_embed.core.registry import (
    ModelFamily, TextEmbeddingFamily, SparseTextEmbeddingFamily, RerankerFamily,
)

DEFAULT_MAX_LENGTH = 512

# Anything onnxruntime accepts in `providers=`: a name such as
# "CUDAExecutionProvider", or a (name, options) pair. Order is priority.
ExecutionProvider = Any


def _provider_tuple(execution_providers) -> Tuple[ExecutionProvider, ...]:
    # A lone name is one provider, not a sequence of characters
    if isinstance(execution_providers, str):
        return (execution_providers,)
    return tuple(execution_providers)


@dataclass(frozen=True)
class InitOptionsWithLength:
    """Options for a catalog model. Subclasses bind FAMILY."""
    FAMILY: ClassVar[Type[ModelFamily]] = TextEmbeddingFamily

    model_name: str
    execution_providers: Tuple[ExecutionProvider, ...] = ()
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def new(cls, model_name: Optional[str] = None):
        """Defaults: family's default model and MAX_LENGTH, no providers."""
        return cls(
            model_name=model_name if model_name is not None else cls.FAMILY.DEFAULT_MODEL,
            execution_providers=(),
            max_length=cls.FAMILY.MAX_LENGTH,
        )

    def with_model_name(self, model_name: str):
        return replace(self, model_name=model_name)

    def with_execution_providers(self, execution_providers: Iterable[ExecutionProvider]):
        return replace(self, execution_providers=_provider_tuple(execution_providers))

    def with_max_length(self, max_length: int):
        return replace(self, max_length=max_length)


@dataclass(frozen=True)
class TextInitOptions(InitOptionsWithLength):
    """Options for initializing a catalog TextEmbedding model."""
    FAMILY: ClassVar[Type[ModelFamily]] = TextEmbeddingFamily


@dataclass(frozen=True)
class SparseInitOptions(InitOptionsWithLength):
    FAMILY: ClassVar[Type[ModelFamily]] = SparseTextEmbeddingFamily


@dataclass(frozen=True)
class RerankInitOptions(InitOptionsWithLength):
    FAMILY: ClassVar[Type[ModelFamily]] = RerankerFamily


@dataclass(frozen=True)
class InitOptionsUserDefined:
    """
    Options for initializing a UserDefinedEmbeddingModel.

    Model files are held by the UserDefinedEmbeddingModel itself.
    """
    execution_providers: Tuple[ExecutionProvider, ...] = ()
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def new(cls) -> "InitOptionsUserDefined":
        return cls()

    @classmethod
    def from_init_options(cls, options: InitOptionsWithLength) -> "InitOptionsUserDefined":
        """Reuse a catalog model's execution providers and max length."""
        return cls(
            execution_providers=tuple(options.execution_providers),
            max_length=options.max_length,
        )

    def with_execution_providers(
        self, execution_providers: Iterable[ExecutionProvider]
    ) -> "InitOptionsUserDefined":
        return replace(self, execution_providers=_provider_tuple(execution_providers))

    def with_max_length(self, max_length: int) -> "InitOptionsUserDefined":
        return replace(self, max_length=max_length)
