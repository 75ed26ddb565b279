"""
onnx-embed :: Model Source

Where the ONNX graph comes from. Exactly two options:

  MemorySource(data)  — graph bytes already in memory
  FileSource(path)    — graph on disk (external .onnx_data files are
                        resolved next to it by onnxruntime)

The variant follows the Python type of the input, never its content:
bytes-like → memory, path-like → file. Nothing is read here.

INL - 2025
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class MemorySource:
    """ONNX model loaded into memory as bytes."""
    data: bytes

    def __repr__(self) -> str:
        return f"MemorySource(<{len(self.data)} bytes>)"


@dataclass(frozen=True)
class FileSource:
    """Path to an ONNX model file on disk (supports external data files)."""
    path: Path


OnnxSource = Union[MemorySource, FileSource]


def as_onnx_source(value) -> OnnxSource:
    """
    Convert bytes, a path, or an existing source into an OnnxSource.

    Args:
        value: bytes / bytearray / memoryview, str / os.PathLike,
            or a MemorySource / FileSource (returned unchanged)

    Raises:
        TypeError: for any other type
    """
    if isinstance(value, (MemorySource, FileSource)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return MemorySource(bytes(value))
    if isinstance(value, (str, os.PathLike)):
        return FileSource(Path(value))
    raise TypeError(
        f"Cannot build an ONNX source from {type(value).__name__}; "
        "expected bytes or a filesystem path"
    )


def describe_source(source: OnnxSource) -> str:
    """Short human-readable description for logs."""
    if isinstance(source, MemorySource):
        return f"memory ({len(source.data)} bytes)"
    return f"file ({source.path})"
