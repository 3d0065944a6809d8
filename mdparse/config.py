"""Configuration loader for mdparse.

Options are resolved in priority order: **CLI flags > project > user > defaults**.

1. **Project-level**: ``.mdparse.yml`` next to (or above) the input file.
2. **User-level**: ``~/.mdparse/config.yml``.
3. **Built-in defaults**: the :class:`ParseOptions` field defaults.

Both files share the same format::

    # .mdparse.yml  or  ~/.mdparse/config.yml
    parse:
      gfm: true
      breaks: false
      sanitize: true
      linkify: true
      legacy_sanitize: false
      unique_anchors: true
    output:
      format: json     # json | html | toc
      indent: 2

Project-level values override user-level values.  CLI flags override both.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from mdparse.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".mdparse.yml"
USER_CONFIG_DIR = Path.home() / ".mdparse"
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.yml"

OUTPUT_FORMATS = ("json", "html", "toc")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseOptions:
    """Switches recognised by the parser and renderer."""

    gfm: bool = True  # tables + strikethrough
    breaks: bool = False  # join paragraph lines with <br>
    sanitize: bool = True  # HTML-escape inline source text
    linkify: bool = True  # wrap bare http(s) URLs in anchors
    # Escape the whole transformed string, generated tags included.
    legacy_sanitize: bool = False
    unique_anchors: bool = True  # suffix repeated header anchors with -1, -2

    def merged(self, **overrides: bool | None) -> ParseOptions:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


@dataclass
class OutputConfig:
    """Output sub-configuration for the CLI."""

    format: str = "json"
    indent: int = 2


@dataclass
class MdparseConfig:
    """Top-level configuration container (parse + output)."""

    parse: ParseOptions = field(default_factory=ParseOptions)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Where the effective config was loaded from (None = defaults only).
    project_config_path: str | None = None
    user_config_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"parse": asdict(self.parse), "output": asdict(self.output)}


# ---------------------------------------------------------------------------
# Public loaders
# ---------------------------------------------------------------------------


def load_config(
    source_path: str | Path | None = None,
    config_path: str | Path | None = None,
) -> MdparseConfig:
    """Load merged configuration (project > user > defaults).

    Parameters
    ----------
    source_path:
        Input file (or directory) whose location is searched for
        ``.mdparse.yml``.  When *None*, only the user-level file (and
        defaults) are considered.
    config_path:
        Explicit config file path.  When given, *only* this file is
        loaded and it must exist.
    """
    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        raw = _load_yaml(path)
        cfg = _raw_to_config(raw)
        cfg.project_config_path = str(config_path)
        logger.debug("Loaded explicit config %s", path)
        return cfg

    user_raw = _load_yaml(USER_CONFIG_PATH)
    user_source = str(USER_CONFIG_PATH) if user_raw else None

    project_raw: dict | None = None
    project_source: str | None = None
    if source_path is not None:
        project_path = _find_project_config(source_path)
        if project_path is not None:
            project_raw = _load_yaml(project_path)
            project_source = str(project_path)

    cfg = _raw_to_config(_merge_raw(project_raw, user_raw))
    cfg.project_config_path = project_source
    cfg.user_config_path = user_source
    logger.debug(
        "Resolved config (project=%s, user=%s)", project_source, user_source
    )
    return cfg


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _find_project_config(source_path: str | Path) -> Path | None:
    """Search for ``.mdparse.yml`` beside *source_path* and in its ancestors."""
    p = Path(source_path).expanduser().resolve()
    start = p if p.is_dir() else p.parent
    candidates = [start / CONFIG_FILENAME]
    for parent in start.parents:
        candidates.append(parent / CONFIG_FILENAME)
        if (parent / ".git").exists():
            break
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _load_yaml(path: Path) -> dict | None:
    """Load a YAML file, returning *None* on missing/invalid files."""
    path = path.expanduser()
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return None
    return raw if isinstance(raw, dict) else None


def _merge_raw(project: dict | None, user: dict | None) -> dict:
    """Merge project and user raw dicts section by section (project wins)."""
    base: dict = {}
    for layer in (user, project):
        if not layer:
            continue
        for key in ("parse", "output"):
            section = layer.get(key)
            if isinstance(section, dict):
                base.setdefault(key, {}).update(section)
    return base


def _section(raw: dict, key: str) -> dict:
    section = raw.get(key, {})
    return section if isinstance(section, dict) else {}


_TRUE_STRINGS = ("true", "yes", "on")
_FALSE_STRINGS = ("false", "no", "off")


def _as_bool(value: Any) -> bool | None:
    """Map a YAML scalar to a bool, or *None* when it is not one."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _raw_to_config(raw: dict | None) -> MdparseConfig:
    """Convert a raw YAML dict to an ``MdparseConfig``."""
    if not raw:
        return MdparseConfig()

    parse_raw = _section(raw, "parse")
    known = {f.name for f in fields(ParseOptions)}
    flags: dict[str, bool] = {}
    for key, value in parse_raw.items():
        if key not in known:
            continue
        flag = _as_bool(value)
        if flag is None:
            logger.warning("Ignoring parse.%s=%r, expected true or false", key, value)
            continue
        flags[key] = flag
    parse_opts = ParseOptions(**flags)

    output_raw = _section(raw, "output")
    fmt = str(output_raw.get("format", "json")).lower()
    if fmt not in OUTPUT_FORMATS:
        logger.warning("Unknown output format %r, using json", fmt)
        fmt = "json"
    try:
        indent = int(output_raw.get("indent", 2))
    except (TypeError, ValueError):
        indent = 2

    return MdparseConfig(
        parse=parse_opts,
        output=OutputConfig(format=fmt, indent=indent),
    )
