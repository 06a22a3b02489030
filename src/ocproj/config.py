"""
Configuration loading for ocproj.

Settings come from three layers, lowest precedence first: built-in
defaults, an optional YAML file, and environment variables.  The result
is a single ``Settings`` object built once in ``main`` and passed to
every component.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import ConfigError

__all__ = [
    "DEFAULT_BGCOLOR",
    "DEFAULT_FGCOLOR",
    "Settings",
    "default_config_path",
    "load_config_file",
    "load_settings",
]

logger = logging.getLogger(__name__)

# Highlight for the current project: yellow on black.
DEFAULT_FGCOLOR = "\033[33m"
DEFAULT_BGCOLOR = "\033[40m"

# Environment variable names
ENV_CONFIG = "OCPROJ_CONFIG"
ENV_CLIENT = "KUBECTL"
ENV_FORCE_COLOR = "_OCPROJ_FORCE_COLOR"
ENV_NO_COLOR = "NO_COLOR"
ENV_IGNORE_FZF = "OCPROJ_IGNORE_FZF"
ENV_FGCOLOR = "OCPROJ_CURRENT_FGCOLOR"
ENV_BGCOLOR = "OCPROJ_CURRENT_BGCOLOR"
ENV_DEBUG = "OCPROJ_DEBUG"
ENV_LOG_FILE = "OCPROJ_LOG_FILE"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one invocation."""

    cache_base: Path
    client_bin: str | None = None
    force_color: bool = False
    no_color: bool = False
    ignore_fzf: bool = False
    current_fg: str = DEFAULT_FGCOLOR
    current_bg: str = DEFAULT_BGCOLOR
    debug: bool = False
    log_file: str | None = None


def _home(environ: Mapping[str, str]) -> Path:
    home = environ.get("HOME")
    return Path(home) if home else Path.home()


def default_config_path(environ: Mapping[str, str]) -> Path:
    """Return the config file location honouring OCPROJ_CONFIG and XDG_CONFIG_HOME."""
    if environ.get(ENV_CONFIG):
        return Path(environ[ENV_CONFIG]).expanduser()
    xdg = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else _home(environ) / ".config"
    return base / "ocproj" / "config.yaml"


def _expect(value, kind: type, label: str):
    if value is not None and not isinstance(value, kind):
        raise ConfigError(f"{label} must be a {kind.__name__}")
    return value


def load_config_file(path: Path) -> dict:
    """Load and validate the YAML config file.

    A missing file yields an empty dict.

    Raises:
        ConfigError: If the file cannot be parsed or has values of the wrong type.
    """
    if not path.is_file():
        logger.debug("No config file at %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    _expect(cfg.get("client"), str, "client")
    _expect(cfg.get("cache_dir"), str, "cache_dir")
    _expect(cfg.get("ignore_fzf"), bool, "ignore_fzf")
    colors = _expect(cfg.get("colors"), dict, "colors") or {}
    _expect(colors.get("current_fg"), str, "colors.current_fg")
    _expect(colors.get("current_bg"), str, "colors.current_bg")

    logger.debug("Config loaded from %s", path)
    return cfg


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build the ``Settings`` for this process from file and environment."""
    if environ is None:
        environ = os.environ

    cfg = load_config_file(default_config_path(environ))
    colors = cfg.get("colors") or {}

    if environ.get("XDG_CACHE_HOME"):
        cache_base = Path(environ["XDG_CACHE_HOME"])
    elif cfg.get("cache_dir"):
        cache_base = Path(cfg["cache_dir"]).expanduser()
    else:
        cache_base = _home(environ) / ".kube"

    return Settings(
        cache_base=cache_base,
        client_bin=environ.get(ENV_CLIENT) or cfg.get("client"),
        force_color=bool(environ.get(ENV_FORCE_COLOR)),
        no_color=bool(environ.get(ENV_NO_COLOR)),
        ignore_fzf=bool(environ.get(ENV_IGNORE_FZF)) or bool(cfg.get("ignore_fzf")),
        current_fg=environ.get(ENV_FGCOLOR) or colors.get("current_fg") or DEFAULT_FGCOLOR,
        current_bg=environ.get(ENV_BGCOLOR) or colors.get("current_bg") or DEFAULT_BGCOLOR,
        debug=bool(environ.get(ENV_DEBUG)),
        log_file=environ.get(ENV_LOG_FILE) or None,
    )
