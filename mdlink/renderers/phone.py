"""Renderer for phone numbers as ``tel:`` links."""

from __future__ import annotations

from ..config import LinkConfig
from ..models import PHONE_KINDS, Detection, PhoneDetection
from .base import RenderError, markdown_link


def render_phone(detection: Detection, config: LinkConfig) -> str:
    """Render ``[formatted](tel:number)``.

    A phone detection without its display text or tel number was built
    inconsistently, so this raises :class:`RenderError` instead of falling back.
    """
    if detection.kind not in PHONE_KINDS:
        return detection.original_input
    if not isinstance(detection, PhoneDetection):
        raise RenderError(f"{detection.kind.value} detection is not a phone record")
    if not detection.formatted_display:
        raise RenderError("missing formatted_display in phone detection")
    if not detection.tel_url:
        raise RenderError("missing tel_url in phone detection")
    return markdown_link(detection.formatted_display, f"tel:{detection.tel_url}")


__all__ = ["render_phone"]
