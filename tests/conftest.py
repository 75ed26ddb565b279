"""
onnx-embed :: Test fixtures

  - tokenizer_files: a tiny WordLevel tokenizer with its three JSON configs
  - make_onnx_model: builds a small int64 ONNX graph with chosen inputs/outputs
  - model_dir: a directory laid out like a catalog download

INL - 2025
"""

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import onnx
from onnx import helper, TensorProto, numpy_helper
import numpy as np
from tokenizers import Tokenizer
from tokenizers.models import WordLevel
from tokenizers.pre_tokenizers import Whitespace

from onnx_embed.core.tokenizer import TokenizerFiles


VOCAB = {"[PAD]": 0, "[UNK]": 1, "[CLS]": 2, "[SEP]": 3, "hello": 4, "world": 5}


def build_tokenizer_json() -> bytes:
    tokenizer = Tokenizer(WordLevel(VOCAB, unk_token="[UNK]"))
    tokenizer.pre_tokenizer = Whitespace()
    return tokenizer.to_str().encode("utf-8")


def build_tokenizer_files(model_max_length=512, pad_token="[PAD]", pad_token_id=0) -> TokenizerFiles:
    special_tokens_map = {
        "cls_token": "[CLS]",
        "sep_token": {
            "content": "[SEP]",
            "single_word": False,
            "lstrip": False,
            "rstrip": False,
            "normalized": False,
        },
        "pad_token": "[PAD]",
        "unk_token": "[UNK]",
    }
    tokenizer_config = {"model_max_length": model_max_length, "pad_token": pad_token}
    return TokenizerFiles(
        tokenizer_file=build_tokenizer_json(),
        config_file=json.dumps({"pad_token_id": pad_token_id}).encode(),
        special_tokens_map_file=json.dumps(special_tokens_map).encode(),
        tokenizer_config_file=json.dumps(tokenizer_config).encode(),
    )


def build_onnx_model(
    inputs=("input_ids", "attention_mask", "token_type_ids"),
    outputs=("last_hidden_state",),
    with_initializer=False,
) -> onnx.ModelProto:
    """Sum of all int64 inputs, copied to every output."""
    graph_inputs = [
        helper.make_tensor_value_info(name, TensorProto.INT64, ["batch", "seq"])
        for name in inputs
    ]
    graph_outputs = [
        helper.make_tensor_value_info(name, TensorProto.INT64, ["batch", "seq"])
        for name in outputs
    ]

    nodes = []
    initializers = []
    current = inputs[0]
    for i, name in enumerate(inputs[1:]):
        out = f"sum_{i}"
        nodes.append(helper.make_node("Add", [current, name], [out]))
        current = out
    if with_initializer:
        initializers.append(numpy_helper.from_array(np.array([1], dtype=np.int64), name="bias"))
        nodes.append(helper.make_node("Add", [current, "bias"], ["biased"]))
        current = "biased"
    for name in outputs:
        nodes.append(helper.make_node("Identity", [current], [name]))

    graph = helper.make_graph(nodes, "tiny", graph_inputs, graph_outputs, initializer=initializers)
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    model.ir_version = 8
    onnx.checker.check_model(model)
    return model


@pytest.fixture
def tokenizer_files():
    return build_tokenizer_files()


@pytest.fixture
def make_onnx_model():
    return build_onnx_model


@pytest.fixture
def onnx_bytes():
    return build_onnx_model().SerializeToString()


@pytest.fixture
def model_dir(tmp_path):
    """Catalog-style layout for Xenova/bge-small-en-v1.5: onnx/model.onnx + tokenizer files."""
    files = build_tokenizer_files()
    (tmp_path / "tokenizer.json").write_bytes(files.tokenizer_file)
    (tmp_path / "config.json").write_bytes(files.config_file)
    (tmp_path / "special_tokens_map.json").write_bytes(files.special_tokens_map_file)
    (tmp_path / "tokenizer_config.json").write_bytes(files.tokenizer_config_file)
    (tmp_path / "onnx").mkdir()
    (tmp_path / "onnx" / "model.onnx").write_bytes(build_onnx_model().SerializeToString())
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """setup_logging() attaches handlers to the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("onnx_embed")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
