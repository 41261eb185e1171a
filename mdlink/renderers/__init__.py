"""Built-in renderers and the registry that binds them to a configuration."""

from __future__ import annotations

from typing import Dict, List

from ..arbitration import (
    DEEP_LINK_RENDERER,
    JIRA_DESCRIPTION_RENDERER,
    JIRA_KEY_RENDERER,
    PASSTHROUGH_RENDERER,
    PHONE_RENDERER,
    URL_RENDERER,
)
from ..config import LinkConfig
from .base import RenderError, RenderFunction, Renderer, markdown_link
from .deep_link import render_deep_link
from .jira import render_jira_key, render_jira_key_with_description
from .passthrough import render_passthrough
from .phone import render_phone
from .urls import render_url

# Registration order decides which renderer wins a tied vote.
RENDER_FUNCTIONS: Dict[str, RenderFunction] = {
    URL_RENDERER: render_url,
    JIRA_DESCRIPTION_RENDERER: render_jira_key_with_description,
    JIRA_KEY_RENDERER: render_jira_key,
    PHONE_RENDERER: render_phone,
    DEEP_LINK_RENDERER: render_deep_link,
    PASSTHROUGH_RENDERER: render_passthrough,
}


def build_renderers(config: LinkConfig) -> List[Renderer]:
    """Return the built-in renderers, in registration order, bound to ``config``."""
    return [
        Renderer(name=name, config=config, render_function=function)
        for name, function in RENDER_FUNCTIONS.items()
    ]


__all__ = [
    "RENDER_FUNCTIONS",
    "RenderError",
    "Renderer",
    "build_renderers",
    "markdown_link",
]
