"""
onnx-embed :: Output Key

Selects which named tensor to read from a graph with several outputs.

  OnlyOne()     — the graph must have exactly one output
  ByOrder(i)    — the i-th output
  ByName(name)  — the output called `name`

INL - 2025
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class OnlyOne:
    pass


@dataclass(frozen=True)
class ByOrder:
    index: int


@dataclass(frozen=True)
class ByName:
    name: str


OutputKey = Union[OnlyOne, ByOrder, ByName]


def select_output(key: Optional[OutputKey], output_names: Sequence[str]) -> str:
    """
    Resolve an output key against the graph's output names.

    A missing key selects the first output.

    Raises:
        ValueError: if the key does not match the graph
    """
    names = list(output_names)
    if not names:
        raise ValueError("Graph has no outputs")

    if key is None:
        return names[0]

    if isinstance(key, OnlyOne):
        if len(names) != 1:
            raise ValueError(f"Expected exactly one output, graph has {len(names)}: {names}")
        return names[0]

    if isinstance(key, ByOrder):
        if not 0 <= key.index < len(names):
            raise ValueError(f"Output index {key.index} out of range for {len(names)} outputs")
        return names[key.index]

    if isinstance(key, ByName):
        if key.name not in names:
            raise ValueError(f"Output '{key.name}' not found. Available: {', '.join(names)}")
        return key.name

    raise TypeError(f"Unsupported output key: {key!r}")
