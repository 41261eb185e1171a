"""Detector for ``raycast://`` deep links."""

from __future__ import annotations

from typing import Optional

from ..config import LinkConfig
from ..models import DeepLinkDetection, Detection
from .urls import split_url

RAYCAST_SCHEME = "raycast://"
AI_CHAT_PATH = "extensions/raycast/raycast-ai/ai-chat"
NOTE_PATH = "extensions/raycast/raycast-notes/raycast-notes"


def detect_deep_link(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize a Raycast deep link and flag AI chats and notes."""
    if split_url(text, (RAYCAST_SCHEME,)) is None:
        return None
    return DeepLinkDetection(
        original_input=text,
        confidence=85,
        is_ai_chat=AI_CHAT_PATH in text,
        is_note=NOTE_PATH in text,
    )


__all__ = ["detect_deep_link"]
