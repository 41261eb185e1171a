"""Renderer for Raycast deep links."""

from __future__ import annotations

from ..config import LinkConfig
from ..models import DeepLinkDetection, Detection
from .base import markdown_link


def render_deep_link(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, DeepLinkDetection):
        return detection.original_input

    label = "Raycast"
    if detection.is_note:
        label = "Raycast Note"
    elif detection.is_ai_chat:
        label = "Raycast AI"
    return markdown_link(label, detection.original_input)


__all__ = ["render_deep_link"]
