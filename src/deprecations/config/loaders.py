# topmark:header:start
#
#   project      : Deprecations
#   file         : loaders.py
#   file_relpath : src/deprecations/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is read from ``deprecations.toml`` or from the
``[tool.deprecations]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from deprecations.config.keys import Toml
from deprecations.config.logging import get_logger
from deprecations.config.model import DeprecationsConfig
from deprecations.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from deprecations.config.logging import DeprecationsLogger
    from deprecations.config.model import TomlTable

logger: DeprecationsLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the deprecations table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.deprecations]`` (``None`` if absent);
    any other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    section: Any = tool.get(Toml.SECTION_DEPRECATIONS)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest configuration file, walking up from ``start``.

    In each directory ``deprecations.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.deprecations]`` table.

    Args:
        start: Directory to start from (defaults to the current directory).

    Returns:
        The configuration file, or ``None`` if there is none.
    """
    here: Path = (start if start is not None else Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_section(load_toml_dict(pyproject), pyproject) is not None:
            return pyproject
    return None


def read_config(path: Path) -> DeprecationsConfig:
    """Read a configuration file strictly.

    Raises:
        ValueError: If the file cannot be parsed or holds an invalid value.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data: TomlTable = cast("TomlTable", tomlkit.parse(text).unwrap())
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        raise ValueError(f"Cannot parse {path}: {e}") from e
    section: TomlTable | None = extract_section(data, path)
    return DeprecationsConfig.from_dict(section or {}, source=path)


def load_config(path: Path | None = None, *, start: Path | None = None) -> DeprecationsConfig:
    """Load configuration leniently.

    If ``path`` is None the nearest file is discovered from ``start``. Unreadable
    files and invalid values are logged and the defaults are used instead.
    """
    if path is None:
        path = find_config_file(start)
        if path is None:
            logger.debug("No deprecations configuration found; using defaults")
            return DeprecationsConfig()
    try:
        config: DeprecationsConfig = read_config(path)
    except ValueError as e:
        logger.error("Ignoring invalid deprecations configuration: %s", e)
        return DeprecationsConfig()
    logger.debug("Loaded deprecations configuration from %s", path)
    return config


def render_config_toml(config: DeprecationsConfig, *, for_pyproject: bool = False) -> str:
    """Render ``config`` as TOML text.

    Args:
        config: The configuration to render.
        for_pyproject: If True, nest the output under ``[tool.deprecations]``.
    """
    table: TomlTable = config.to_dict()
    if for_pyproject:
        table = {Toml.SECTION_TOOL: {Toml.SECTION_DEPRECATIONS: table}}
    return tomlkit.dumps(table)
