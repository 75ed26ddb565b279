"""
onnx-embed :: Session

Build the onnxruntime InferenceSession from a resolved OnnxSource.

  MemorySource → InferenceSession(bytes)
  FileSource   → InferenceSession(path)   external data resolved next to path

An empty provider list lets onnxruntime pick its default (CPU).

INL - 2025
"""

import os
from typing import Sequence

import onnxruntime as ort

from onnx_embed.core.source import OnnxSource, MemorySource, FileSource

TOKEN_TYPE_IDS = "token_type_ids"


def build_session_options() -> ort.SessionOptions:
    """Full graph optimization, one intra-op thread per CPU."""
    options = ort.SessionOptions()
    options.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_ALL
    options.intra_op_num_threads = os.cpu_count() or 1
    return options


def build_session(
    source: OnnxSource,
    execution_providers: Sequence = (),
) -> ort.InferenceSession:
    """
    Create an inference session.

    Args:
        source: where the ONNX graph lives
        execution_providers: ordered providers, most preferred first

    Raises:
        whatever onnxruntime raises for malformed graphs, missing files
        or unavailable providers
    """
    if isinstance(source, MemorySource):
        model = source.data
    elif isinstance(source, FileSource):
        model = str(source.path)
    else:
        raise TypeError(f"Unsupported ONNX source: {source!r}")

    providers = list(execution_providers) or None
    return ort.InferenceSession(
        model,
        sess_options=build_session_options(),
        providers=providers,
    )


def needs_token_type_ids(session) -> bool:
    """True if the graph declares a token_type_ids input."""
    return any(inp.name == TOKEN_TYPE_IDS for inp in session.get_inputs())


def output_names(session) -> list:
    return [out.name for out in session.get_outputs()]
