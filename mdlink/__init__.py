"""Turn pasted URLs, issue keys and phone numbers into Markdown links."""

from .config import ConfigError, LinkConfig, load_config
from .pipeline import Decision, convert, explain, process
from .renderers import RenderError

__all__ = [
    "ConfigError",
    "Decision",
    "LinkConfig",
    "RenderError",
    "convert",
    "explain",
    "load_config",
    "process",
]
