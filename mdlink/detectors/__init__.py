"""Built-in detectors and the registry that runs them."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ..config import LinkConfig
from ..logging import get_logger
from ..models import Detection
from .deep_link import detect_deep_link
from .github_paste import detect_github_paste
from .jira import detect_jira_key, detect_jira_key_with_description
from .phone import detect_phone
from .urls import detect_url

Detector = Callable[[str, LinkConfig], Optional[Detection]]

logger = get_logger("detectors")

# Registration order decides which detection wins a tied vote.
DETECTORS: Dict[str, Detector] = {
    "url": detect_url,
    "github_paste": detect_github_paste,
    "jira_key": detect_jira_key,
    "jira_key_with_description": detect_jira_key_with_description,
    "phone": detect_phone,
    "deep_link": detect_deep_link,
}


def run_detectors(
    text: str,
    config: LinkConfig,
    detectors: Optional[Dict[str, Detector]] = None,
) -> List[Detection]:
    """Run every detector against ``text`` and collect the records they produce."""
    registry = DETECTORS if detectors is None else detectors
    detections: List[Detection] = []
    for name, detect in registry.items():
        detection = detect(text, config)
        if detection is None:
            continue
        logger.debug(
            "Detector %s found %s (confidence %d): %s",
            name,
            detection.kind.value,
            detection.confidence,
            detection.attributes(),
        )
        detections.append(detection)
    return detections


__all__ = ["DETECTORS", "Detector", "run_detectors"]
