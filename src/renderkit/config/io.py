# topmark:header:start
#
#   project      : RenderKit
#   file         : io.py
#   file_relpath : src/renderkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration documents.

Parsing and rendering are done with `tomlkit`; parsed documents are returned
as plain `dict` structures. TOML has no `null` value, so `None` entries are
stripped when rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from renderkit.config.logging import get_logger
from renderkit.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from renderkit.config.logging import RenderKitLogger

TomlTable = dict[str, Any]

logger: RenderKitLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse a TOML document into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", source, exc)
        raise ConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem (UTF-8).

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        for k_any, v_any in cast("Mapping[object, object]", value).items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    if isinstance(value, (list, tuple)):
        return [_strip_none_for_toml(v) for v in cast("list[object]", value) if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))
