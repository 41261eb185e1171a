"""Renderer of last resort: echoes the input unchanged."""

from __future__ import annotations

from ..config import LinkConfig
from ..models import Detection


def render_passthrough(detection: Detection, config: LinkConfig) -> str:
    return detection.original_input


__all__ = ["render_passthrough"]
