"""
onnx-embed :: Test User-Defined Model + Value Types

Tests:
  - UserDefinedEmbeddingModel.new defaults
  - with_quantization / with_pooling / with_output_key builders
  - Pooling / QuantizationMode parsing
  - OutputKey resolution against output names

INL - 2025
"""

import pytest
import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from onnx_embed.core.output import OnlyOne, ByOrder, ByName, select_output
from onnx_embed.core.pooling import Pooling
from onnx_embed.core.quantization import QuantizationMode
from onnx_embed.core.source import MemorySource, FileSource
from onnx_embed.core.tokenizer import TokenizerFiles
from onnx_embed.models.user_defined import UserDefinedEmbeddingModel


class TestUserDefinedEmbeddingModel:
    def test_new_defaults(self):
        model = UserDefinedEmbeddingModel.new(bytes([0, 1, 2, 3]), TokenizerFiles.empty())
        assert model.onnx_source == MemorySource(bytes([0, 1, 2, 3]))
        assert model.tokenizer_files == TokenizerFiles.empty()
        assert model.quantization == QuantizationMode.NONE
        assert model.pooling is None
        assert model.output_key is None

    def test_new_from_path(self):
        model = UserDefinedEmbeddingModel.new(Path("m/model.onnx"), TokenizerFiles.empty())
        assert model.onnx_source == FileSource(Path("m/model.onnx"))

    def test_new_from_source(self):
        source = FileSource(Path("m/model.onnx"))
        assert UserDefinedEmbeddingModel.new(source, TokenizerFiles.empty()).onnx_source is source

    def test_builders_order_independent(self):
        base = UserDefinedEmbeddingModel.new(b"x", TokenizerFiles.empty())
        a = base.with_quantization(QuantizationMode.DYNAMIC).with_pooling(Pooling.MEAN)
        b = base.with_pooling(Pooling.MEAN).with_quantization(QuantizationMode.DYNAMIC)
        assert a == b
        assert a.quantization == QuantizationMode.DYNAMIC
        assert a.pooling == Pooling.MEAN

    def test_builders_leave_original(self):
        base = UserDefinedEmbeddingModel.new(b"x", TokenizerFiles.empty())
        base.with_pooling(Pooling.CLS).with_output_key(ByName("sentence_embedding"))
        assert base.pooling is None
        assert base.output_key is None

    def test_output_key(self):
        model = UserDefinedEmbeddingModel.new(b"x", TokenizerFiles.empty()).with_output_key(ByOrder(1))
        assert model.output_key == ByOrder(1)

    def test_no_validation_of_bundle(self):
        files = TokenizerFiles(b"garbage", b"", b"", b"")
        model = UserDefinedEmbeddingModel.new(b"", files)
        assert model.tokenizer_files is files


class TestEnums:
    def test_pooling_parse(self):
        assert Pooling.parse("CLS") is Pooling.CLS
        assert Pooling.parse("mean") is Pooling.MEAN
        with pytest.raises(ValueError, match="Unknown pooling"):
            Pooling.parse("max")

    def test_quantization_parse(self):
        assert QuantizationMode.parse("Static") is QuantizationMode.STATIC
        with pytest.raises(ValueError, match="Unknown quantization"):
            QuantizationMode.parse("int4")


class TestSelectOutput:
    NAMES = ["last_hidden_state", "sentence_embedding"]

    def test_default_first(self):
        assert select_output(None, self.NAMES) == "last_hidden_state"

    def test_only_one(self):
        assert select_output(OnlyOne(), ["out"]) == "out"
        with pytest.raises(ValueError):
            select_output(OnlyOne(), self.NAMES)

    def test_by_order(self):
        assert select_output(ByOrder(1), self.NAMES) == "sentence_embedding"
        with pytest.raises(ValueError):
            select_output(ByOrder(2), self.NAMES)
        with pytest.raises(ValueError):
            select_output(ByOrder(-1), self.NAMES)

    def test_by_name(self):
        assert select_output(ByName("sentence_embedding"), self.NAMES) == "sentence_embedding"
        with pytest.raises(ValueError, match="not found"):
            select_output(ByName("pooler_output"), self.NAMES)

    def test_no_outputs(self):
        with pytest.raises(ValueError):
            select_output(None, [])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
