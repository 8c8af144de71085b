"""Image reference normalizer.

The API delivers a product's images either as a real JSON array or as a
string that itself encodes an array, and sometimes as garbage. The raw
value is classified once into a tagged input (``RawText`` or ``RawList``)
and resolved here into a clean tuple of trimmed, non-empty strings.

Normalization is pure and never raises. Whether a URL is actually usable
(http/https) is decided at render time, not here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class RawText:
    """Image data that arrived as a string encoding a list."""

    text: str


@dataclass(frozen=True)
class RawList:
    """Image data that arrived as an already parsed sequence."""

    items: tuple[Any, ...]


ImageInput = Union[RawText, RawList]


# --- Decoding results ---------------------------------------------------------


@dataclass(frozen=True)
class Decoded:
    value: Any


class _DecodeFailed:
    def __repr__(self) -> str:
        return "DECODE_FAILED"


DECODE_FAILED = _DecodeFailed()

DecodeResult = Union[Decoded, _DecodeFailed]


def classify(raw: object) -> ImageInput | None:
    """Resolve a raw field value into a tagged input, or None if unusable."""
    if isinstance(raw, str):
        return RawText(raw)
    if isinstance(raw, (list, tuple)):
        return RawList(tuple(raw))
    return None


def decode_text(text: str) -> DecodeResult:
    """Decode a string-encoded list into a Decoded value or DECODE_FAILED."""
    if not text.strip():
        return DECODE_FAILED
    # deeply nested input exhausts the decoder stack (RecursionError)
    try:
        return Decoded(json.loads(text))
    except (ValueError, RecursionError):
        return DECODE_FAILED


def normalize_input(value: ImageInput | None) -> tuple[str, ...]:
    """Normalize an already classified image input."""
    if isinstance(value, RawText):
        result = decode_text(value.text)
        if not isinstance(result, Decoded) or not isinstance(result.value, list):
            return ()
        items: tuple[Any, ...] = tuple(result.value)
    elif isinstance(value, RawList):
        items = value.items
    else:
        return ()

    cleaned = (item.strip() for item in items if isinstance(item, str))
    return tuple(url for url in cleaned if url)


def normalize(raw: object) -> tuple[str, ...]:
    """Turn a raw ``images`` field into an ordered tuple of URL strings."""
    return normalize_input(classify(raw))
