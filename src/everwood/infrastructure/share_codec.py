"""Share-link codec for design configurations.

Two wire formats, both JSON compressed with lz-string's URI-safe encoding
so the token can go straight into a query parameter:

* verbose (``?share=``): the share state exactly as produced by
  ``DesignConfiguration.to_share_state``.
* short (``?s=``): abbreviated keys, enum values replaced by their index in
  the lookup tables below, booleans as 0/1 and palette hex values without
  their leading ``#``.

The lookup tables are part of the wire format. Links already issued depend
on their order, so entries may only be appended; any other change requires
bumping SHORT_FORMAT_VERSION and keeping the old tables for decoding.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any
from urllib.parse import parse_qs

from lzstring import LZString

__all__ = [
    "COLOR_PATTERNS",
    "ORIENTATIONS",
    "PATTERN_STYLES",
    "SHIPPING_SPEEDS",
    "SHORT_FORMAT_VERSION",
    "SHORT_KEYS",
    "STYLES",
    "ShareTokenError",
    "compress_json_for_url",
    "decode_short_state",
    "decode_state",
    "decompress_json_from_url",
    "encode_short_state",
    "encode_state",
    "extract_state_from_short_url",
    "extract_state_from_url",
    "from_short_state",
    "generate_shareable_url",
    "generate_short_shareable_url",
    "parse_share_link",
    "to_short_state",
]

logger = logging.getLogger(__name__)

SHORT_FORMAT_VERSION = 1

SHORT_KEYS: dict[str, str] = {
    "dimensions": "d",
    "selectedDesign": "sd",
    "shippingSpeed": "ss",
    "colorPattern": "cp",
    "orientation": "o",
    "isReversed": "ir",
    "customPalette": "pal",
    "isRotated": "rot",
    "patternStyle": "ps",
    "style": "st",
    "useMini": "um",
}

SHIPPING_SPEEDS: tuple[str, ...] = ("standard", "expedited", "rushed")
COLOR_PATTERNS: tuple[str, ...] = (
    "striped",
    "gradient",
    "checkerboard",
    "random",
    "fade",
    "center-fade",
)
ORIENTATIONS: tuple[str, ...] = ("horizontal", "vertical")
PATTERN_STYLES: tuple[str, ...] = ("tiled", "geometric")
STYLES: tuple[str, ...] = ("geometric", "tiled", "striped")

_ENUM_TABLES: dict[str, tuple[str, ...]] = {
    "shippingSpeed": SHIPPING_SPEEDS,
    "colorPattern": COLOR_PATTERNS,
    "orientation": ORIENTATIONS,
    "style": STYLES,
}
_BOOLEAN_FIELDS: tuple[str, ...] = ("isReversed", "isRotated", "useMini")

DEFAULT_SHARE_PATH = "/order"
VERBOSE_PARAM = "share"
SHORT_PARAM = "s"

_lz = LZString()


class ShareTokenError(ValueError):
    """Raised when a share token cannot be turned back into share state.

    Attributes:
        stage: Where decoding failed: "decompress", "json" or "shape".
        token: The offending token.
    """

    def __init__(self, message: str, stage: str, token: str | None = None) -> None:
        self.stage = stage
        self.token = token
        super().__init__(message)


# -----------------------------------------------------------------------------
# Compression
# -----------------------------------------------------------------------------


def compress_json_for_url(json_string: str) -> str:
    """Compress a JSON string into a URL-safe token."""
    return _lz.compressToEncodedURIComponent(json_string)


def decompress_json_from_url(compressed: str) -> str:
    """Inverse of compress_json_for_url.

    Raises:
        ShareTokenError: If the token is corrupt, truncated or empty.
    """
    if not isinstance(compressed, str) or not compressed:
        raise ShareTokenError("Share token is empty", stage="decompress", token=compressed)
    try:
        decompressed = _lz.decompressFromEncodedURIComponent(compressed)
    except Exception as e:  # lzstring reports corrupt input as lookup/index errors
        raise ShareTokenError(
            f"Failed to decompress share token: {e}", stage="decompress", token=compressed
        ) from e
    if not decompressed:
        raise ShareTokenError("Decompression failed", stage="decompress", token=compressed)
    return decompressed


def _dumps(data: Mapping[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"))


def _loads(token: str) -> dict[str, Any]:
    json_string = decompress_json_from_url(token)
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ShareTokenError(
            f"Share token does not contain valid JSON: {e.msg}", stage="json", token=token
        ) from e
    if not isinstance(data, dict):
        raise ShareTokenError(
            "Share token does not contain a JSON object", stage="shape", token=token
        )
    return data


# -----------------------------------------------------------------------------
# Verbose format
# -----------------------------------------------------------------------------


def encode_state(state: Mapping[str, Any]) -> str:
    """Encode share state in the verbose format."""
    return compress_json_for_url(_dumps(_plain(state)))


def decode_state(token: str) -> dict[str, Any]:
    """Decode a verbose token back into share state."""
    return _loads(token)


# -----------------------------------------------------------------------------
# Short format
# -----------------------------------------------------------------------------


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _strip_hash(hex_value: str) -> str:
    return hex_value[1:] if hex_value.startswith("#") else hex_value


def _with_hash(hex_value: str) -> str:
    return hex_value if hex_value.startswith("#") else f"#{hex_value}"


def _lookup(table: Sequence[str], index: Any) -> str | None:
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if 0 <= index < len(table):
        return table[index]
    return None


def to_short_state(state: Mapping[str, Any]) -> dict[str, Any]:
    """Apply the short-format key and value transform.

    Fields missing from ``state`` (or None) are left out.
    """
    state = _plain(state)
    short: dict[str, Any] = {}

    dimensions = state.get("dimensions")
    if dimensions is not None:
        short[SHORT_KEYS["dimensions"]] = [dimensions["width"], dimensions["height"]]

    if state.get("selectedDesign") is not None:
        short[SHORT_KEYS["selectedDesign"]] = state["selectedDesign"]

    for field_name, table in _ENUM_TABLES.items():
        value = state.get(field_name)
        if value in table:
            short[SHORT_KEYS[field_name]] = table.index(value)

    pattern_style = state.get("patternStyle")
    if pattern_style is not None:
        short[SHORT_KEYS["patternStyle"]] = 0 if pattern_style == "tiled" else 1

    for field_name in _BOOLEAN_FIELDS:
        value = state.get(field_name)
        if value is not None:
            short[SHORT_KEYS[field_name]] = 1 if value else 0

    palette = state.get("customPalette")
    if palette is not None:
        entries: list[Any] = []
        for color in palette:
            hex_value = _strip_hash(color["hex"])
            name = color.get("name")
            entries.append([hex_value, name] if name else hex_value)
        short[SHORT_KEYS["customPalette"]] = entries

    return short


def from_short_state(short: Mapping[str, Any]) -> dict[str, Any]:
    """Invert to_short_state.

    Unknown indices and malformed values decode to absent fields, and one
    malformed palette entry drops the whole palette. The caller decides
    whether the result is complete enough to use.
    """
    state: dict[str, Any] = {}

    dimensions = short.get(SHORT_KEYS["dimensions"])
    if isinstance(dimensions, list) and len(dimensions) == 2:
        state["dimensions"] = {"width": dimensions[0], "height": dimensions[1]}

    if short.get(SHORT_KEYS["selectedDesign"]) is not None:
        state["selectedDesign"] = short[SHORT_KEYS["selectedDesign"]]

    for field_name, table in _ENUM_TABLES.items():
        value = _lookup(table, short.get(SHORT_KEYS[field_name]))
        if value is not None:
            state[field_name] = value

    pattern_style = _lookup(PATTERN_STYLES, short.get(SHORT_KEYS["patternStyle"]))
    if pattern_style is not None:
        state["patternStyle"] = pattern_style

    for field_name in _BOOLEAN_FIELDS:
        value = short.get(SHORT_KEYS[field_name])
        if value in (0, 1) and not isinstance(value, float):
            state[field_name] = value == 1

    palette = short.get(SHORT_KEYS["customPalette"])
    if isinstance(palette, list):
        colors: list[dict[str, str]] = []
        for entry in palette:
            if isinstance(entry, str):
                colors.append({"hex": _with_hash(entry)})
            elif isinstance(entry, list) and len(entry) == 2 and isinstance(entry[0], str):
                colors.append({"hex": _with_hash(entry[0]), "name": entry[1]})
            else:
                logger.warning(f"Malformed palette entry {entry!r}; dropping the palette")
                break
        else:
            state["customPalette"] = colors

    return state


def encode_short_state(state: Mapping[str, Any]) -> str:
    """Encode share state in the short format."""
    return compress_json_for_url(_dumps(to_short_state(state)))


def decode_short_state(token: str) -> dict[str, Any]:
    """Decode a short token back into share state."""
    return from_short_state(_loads(token))


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------


def _build_url(origin: str, path: str, param: str, token: str) -> str:
    return f"{origin.rstrip('/')}/{path.lstrip('/')}?{param}={token}"


def generate_shareable_url(
    state: Mapping[str, Any], origin: str = "", path: str = DEFAULT_SHARE_PATH
) -> str:
    """Build a verbose share link: ``<origin>/order?share=<token>``."""
    return _build_url(origin, path, VERBOSE_PARAM, encode_state(state))


def generate_short_shareable_url(
    state: Mapping[str, Any], origin: str = "", path: str = DEFAULT_SHARE_PATH
) -> str:
    """Build a short share link: ``<origin>/order?s=<token>``."""
    return _build_url(origin, path, SHORT_PARAM, encode_short_state(state))


def extract_state_from_url(token: str) -> dict[str, Any]:
    """Decode the value of a ``share`` query parameter."""
    try:
        return decode_state(token)
    except ShareTokenError as e:
        logger.warning(f"Failed to extract state from share token ({e.stage}): {e}")
        raise


def extract_state_from_short_url(token: str) -> dict[str, Any]:
    """Decode the value of an ``s`` query parameter."""
    try:
        return decode_short_state(token)
    except ShareTokenError as e:
        logger.warning(f"Failed to extract state from short share token ({e.stage}): {e}")
        raise


def parse_share_link(link: str) -> dict[str, Any]:
    """Decode a full share link, a bare query string or a bare verbose token.

    The query parameter picks the format: ``s`` for short, ``share`` for
    verbose. Input without either parameter is treated as a verbose token.
    """
    link = link.strip()
    query = link.split("?", 1)[1] if "?" in link else link
    params = parse_qs(query, keep_blank_values=True)

    if params.get(SHORT_PARAM):
        return extract_state_from_short_url(params[SHORT_PARAM][0])
    if params.get(VERBOSE_PARAM):
        return extract_state_from_url(params[VERBOSE_PARAM][0])
    return extract_state_from_url(link)
