"""Configuration loading for mdlink (config.yaml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import yaml

from .logging import get_logger

CONFIG_ENV_VAR = "MDLINK_CONFIG"

DEFAULT_CONFIG_TEXT = """\
# mdlink configuration
github:
  # Used when a bare issue title such as "Fix login flow #123" is converted.
  default_org: ""
  default_repo: ""
  # Display overrides keyed by "org/repo" (matched case-insensitively).
  mappings: {}
    # "my-org/my-long-repository-name": "my-org/repo"

jira:
  # Base URL of the JIRA site, e.g. "https://example.atlassian.net".
  domain: ""
  # Project keys that bare issue keys are allowed to link to.
  projects: []

url:
  # Link labels keyed by domain; dots may be written as underscores.
  domain_mappings:
    youtube.com: "YouTube"
"""

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub defaults and display mappings."""

    default_org: str = ""
    default_repo: str = ""
    mappings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mappings", MappingProxyType(dict(self.mappings)))


@dataclass(frozen=True)
class JiraConfig:
    """JIRA site and the project keys allowed for bare issue keys."""

    domain: str = ""
    projects: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "projects", tuple(self.projects))


@dataclass(frozen=True)
class UrlConfig:
    """Display names for generic URLs keyed by underscore-normalized domain."""

    domain_mappings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "domain_mappings", MappingProxyType(dict(self.domain_mappings))
        )


@dataclass(frozen=True)
class LinkConfig:
    """Represents the settings defined in config.yaml."""

    github: GitHubConfig = field(default_factory=GitHubConfig)
    jira: JiraConfig = field(default_factory=JiraConfig)
    url: UrlConfig = field(default_factory=UrlConfig)


def default_config_path() -> Path:
    """Return the config path used when none is given explicitly."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "mdlink" / "config.yaml"


def default_config() -> LinkConfig:
    """Return the configuration written to disk on first run."""
    return parse_config(yaml.safe_load(DEFAULT_CONFIG_TEXT))


def load_config(config_path: Optional[Path] = None) -> LinkConfig:
    """Load configuration from disk.

    Without an explicit path the default location is used and bootstrapped with
    :data:`DEFAULT_CONFIG_TEXT` when missing. An explicit path must exist.
    """
    if config_path is None:
        config_file = default_config_path()
        if not config_file.exists():
            _write_default_config(config_file)
    else:
        config_file = config_path.expanduser()
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")

    logger.debug("Loading configuration from %s", config_file)
    return parse_config(_read_config(config_file))


def parse_config(data: Any) -> LinkConfig:
    """Build a :class:`LinkConfig` from already-decoded YAML data."""
    if data is None:
        return LinkConfig()
    if not isinstance(data, dict):
        raise ConfigError("config.yaml must contain a mapping at the root")

    github_data = _as_dict(data.get("github"))
    github = GitHubConfig(
        default_org=_as_str(github_data.get("default_org")) or "",
        default_repo=_as_str(github_data.get("default_repo")) or "",
        mappings={
            key.lower(): value
            for key, value in _as_str_mapping(github_data.get("mappings")).items()
        },
    )

    jira_data = _as_dict(data.get("jira"))
    jira = JiraConfig(
        domain=(_as_str(jira_data.get("domain")) or "").rstrip("/"),
        projects=tuple(_as_str_list(jira_data.get("projects"))),
    )

    url_data = _as_dict(data.get("url"))
    url = UrlConfig(
        domain_mappings={
            normalize_domain_key(key): value
            for key, value in _as_str_mapping(url_data.get("domain_mappings")).items()
        },
    )

    return LinkConfig(github=github, jira=jira, url=url)


def normalize_domain_key(domain: str) -> str:
    """Return the lookup key for a domain: lowercase with dots as underscores."""
    return domain.replace(".", "_").lower()


def _write_default_config(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to create default config at {path}: {exc}") from exc
    logger.info("Created default configuration at %s", path)


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_mapping(value: Any) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, item in _as_dict(value).items():
        key_str = _as_str(key)
        item_str = _as_str(item)
        if key_str and item_str is not None:
            result[key_str] = item_str
    return result


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "ConfigError",
    "GitHubConfig",
    "JiraConfig",
    "LinkConfig",
    "UrlConfig",
    "default_config",
    "default_config_path",
    "load_config",
    "normalize_domain_key",
    "parse_config",
]
