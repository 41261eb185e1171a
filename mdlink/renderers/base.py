"""Renderer contract shared by the built-in renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..arbitration import score_for
from ..config import LinkConfig
from ..models import Detection

RenderFunction = Callable[[Detection, LinkConfig], str]


class RenderError(RuntimeError):
    """Raised when a renderer receives a detection that breaks its contract."""


@dataclass(frozen=True)
class Renderer:
    """A named render function bound to the configuration it links against."""

    name: str
    config: LinkConfig
    render_function: RenderFunction

    def vote(self, detection: Detection) -> int:
        """Return how well this renderer suits ``detection`` (0 = cannot render)."""
        return score_for(self.name, detection)

    def render(self, detection: Detection) -> str:
        """Produce the Markdown for ``detection``."""
        return self.render_function(detection, self.config)


def markdown_link(label: str, target: str) -> str:
    return f"[{label}]({target})"


__all__ = ["RenderError", "RenderFunction", "Renderer", "markdown_link"]
