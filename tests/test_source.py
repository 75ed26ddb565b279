"""
onnx-embed :: Test Model Source

Tests:
  - bytes-like input → MemorySource holding exactly those bytes
  - path-like input (str, Path) → FileSource with equal values
  - existing sources pass through unchanged
  - unsupported types are rejected
  - value semantics (equality, hashing)

INL - 2025
"""

import pytest
import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from onnx_embed.core.source import (
    MemorySource, FileSource, as_onnx_source, describe_source,
)


class TestMemorySource:
    def test_bytes(self):
        source = as_onnx_source(b"\x00\x01\x02\x03")
        assert source == MemorySource(bytes([0, 1, 2, 3]))

    def test_bytearray_and_memoryview(self):
        data = bytearray([9, 8, 7])
        assert as_onnx_source(data) == MemorySource(b"\x09\x08\x07")
        assert as_onnx_source(memoryview(b"abc")) == MemorySource(b"abc")

    def test_bytearray_copied(self):
        data = bytearray(b"abc")
        source = as_onnx_source(data)
        data[0] = ord("z")
        assert source.data == b"abc"

    def test_empty_bytes_still_memory(self):
        # No content sniffing: even empty bytes are an in-memory graph
        assert isinstance(as_onnx_source(b""), MemorySource)

    def test_path_like_bytes_content_not_treated_as_path(self):
        assert as_onnx_source(b"/tmp/model.onnx") == MemorySource(b"/tmp/model.onnx")

    def test_repr_hides_payload(self):
        assert repr(MemorySource(b"x" * 10)) == "MemorySource(<10 bytes>)"


class TestFileSource:
    def test_path(self):
        p = Path("models/model.onnx")
        assert as_onnx_source(p) == FileSource(p)

    def test_str_and_path_equal(self):
        assert as_onnx_source("models/model.onnx") == as_onnx_source(Path("models/model.onnx"))

    def test_no_existence_check(self):
        source = as_onnx_source("/nonexistent/model.onnx")
        assert source == FileSource(Path("/nonexistent/model.onnx"))


class TestConversion:
    def test_passthrough(self):
        mem = MemorySource(b"abc")
        f = FileSource(Path("a.onnx"))
        assert as_onnx_source(mem) is mem
        assert as_onnx_source(f) is f

    @pytest.mark.parametrize("value", [123, None, [0, 1, 2], {"path": "x"}])
    def test_rejects_other_types(self, value):
        with pytest.raises(TypeError):
            as_onnx_source(value)

    def test_hashable(self):
        sources = {MemorySource(b"a"), MemorySource(b"a"), FileSource(Path("x"))}
        assert len(sources) == 2

    def test_memory_and_file_never_equal(self):
        assert MemorySource(b"x.onnx") != FileSource(Path("x.onnx"))

    def test_describe(self):
        assert describe_source(MemorySource(b"abcd")) == "memory (4 bytes)"
        assert describe_source(FileSource(Path("m.onnx"))) == "file (m.onnx)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
