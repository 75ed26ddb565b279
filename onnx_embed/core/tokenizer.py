"""
onnx-embed :: Tokenizer

Raw tokenizer artifacts and the step that turns them into a live
HuggingFace fast tokenizer (tokenizers library).

TokenizerFiles is an opaque bundle: it is carried untouched until
load_tokenizer() parses it.

INL - 2025
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from tokenizers import AddedToken, Tokenizer

from onnx_embed.core.logging import get_logger

logger = get_logger("onnx_embed.tokenizer")

TOKENIZER_FILE = "tokenizer.json"
CONFIG_FILE = "config.json"
SPECIAL_TOKENS_MAP_FILE = "special_tokens_map.json"
TOKENIZER_CONFIG_FILE = "tokenizer_config.json"


@dataclass(frozen=True)
class TokenizerFiles:
    """The four files needed to rebuild a tokenizer, as raw bytes."""
    tokenizer_file: bytes
    config_file: bytes
    special_tokens_map_file: bytes
    tokenizer_config_file: bytes

    def __repr__(self) -> str:
        sizes = ", ".join(
            f"{name}=<{len(getattr(self, name))} bytes>"
            for name in ("tokenizer_file", "config_file",
                         "special_tokens_map_file", "tokenizer_config_file")
        )
        return f"TokenizerFiles({sizes})"

    @classmethod
    def empty(cls) -> "TokenizerFiles":
        return cls(b"", b"", b"", b"")

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "TokenizerFiles":
        """
        Read tokenizer.json, config.json, special_tokens_map.json and
        tokenizer_config.json from a local model directory.
        """
        directory = Path(directory)
        blobs = []
        for name in (TOKENIZER_FILE, CONFIG_FILE, SPECIAL_TOKENS_MAP_FILE, TOKENIZER_CONFIG_FILE):
            path = directory / name
            if not path.is_file():
                raise FileNotFoundError(f"Tokenizer file not found: {path}")
            blobs.append(path.read_bytes())
        return cls(*blobs)


def _parse_json(blob: bytes, name: str) -> dict:
    try:
        data = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Malformed {name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Malformed {name}: expected a JSON object")
    return data


def _token_content(value, name: str) -> str:
    # Tokens appear either as plain strings or as {"content": ...} objects
    if isinstance(value, dict):
        if "content" not in value:
            raise ValueError(f"Malformed {name}: token object has no 'content'")
        return value["content"]
    return value


def load_tokenizer(files: TokenizerFiles, max_length: int) -> Tokenizer:
    """
    Build a padded, truncating tokenizer from raw artifacts.

    Truncation length is min(max_length, model_max_length from
    tokenizer_config.json). Padding pads to the longest sequence
    of each batch.

    Raises:
        ValueError: max_length <= 0, malformed JSON, or missing keys
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")

    config = _parse_json(files.config_file, CONFIG_FILE)
    special_tokens_map = _parse_json(files.special_tokens_map_file, SPECIAL_TOKENS_MAP_FILE)
    tokenizer_config = _parse_json(files.tokenizer_config_file, TOKENIZER_CONFIG_FILE)

    if "model_max_length" not in tokenizer_config:
        raise ValueError(f"{TOKENIZER_CONFIG_FILE} has no 'model_max_length'")
    try:
        model_max_length = int(float(tokenizer_config["model_max_length"]))
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Malformed {TOKENIZER_CONFIG_FILE}: bad 'model_max_length' "
            f"{tokenizer_config['model_max_length']!r}"
        ) from exc
    max_length = min(max_length, model_max_length)

    pad_id = int(config.get("pad_token_id") or 0)
    pad_token = _token_content(tokenizer_config.get("pad_token") or "[PAD]", TOKENIZER_CONFIG_FILE)

    try:
        tokenizer = Tokenizer.from_str(files.tokenizer_file.decode("utf-8"))
    except Exception as exc:
        raise ValueError(f"Malformed {TOKENIZER_FILE}: {exc}") from exc

    tokenizer.enable_padding(pad_id=pad_id, pad_token=pad_token)
    tokenizer.enable_truncation(max_length=max_length)

    added = []
    for value in special_tokens_map.values():
        if isinstance(value, str):
            added.append(AddedToken(value, special=True))
        elif isinstance(value, dict):
            added.append(AddedToken(
                _token_content(value, SPECIAL_TOKENS_MAP_FILE),
                single_word=value.get("single_word", False),
                lstrip=value.get("lstrip", False),
                rstrip=value.get("rstrip", False),
                normalized=value.get("normalized", False),
                special=True,
            ))
    tokenizer.add_special_tokens(added)

    logger.debug(
        f"tokenizer: max_length={max_length} pad_token={pad_token!r} "
        f"pad_id={pad_id} special_tokens={len(added)}"
    )
    return tokenizer
