"""Vote table and winner selection across (detection, renderer) pairs.

Every renderer's suitability score lives in :data:`VOTE_TABLE`. A renderer
scores a detection only when the table names it for the detection's kind; the
passthrough renderer scores :data:`PASSTHROUGH_SCORE` for anything.

Ties are broken by position: detections in detector-registration order are
scanned in the outer loop, renderers in renderer-registration order in the
inner loop, and only a strictly higher score replaces the current best.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from .models import Detection, DetectionKind

URL_RENDERER = "url"
JIRA_DESCRIPTION_RENDERER = "jira_description"
JIRA_KEY_RENDERER = "jira_key"
PHONE_RENDERER = "phone"
DEEP_LINK_RENDERER = "deep_link"
PASSTHROUGH_RENDERER = "passthrough"

PASSTHROUGH_SCORE = 1

# None means "use the detection's own confidence".
RECORD_CONFIDENCE: Optional[int] = None

VOTE_TABLE: Dict[DetectionKind, Tuple[str, Optional[int]]] = {
    DetectionKind.GITHUB_URL: (URL_RENDERER, 90),
    DetectionKind.GITHUB_PASTE: (URL_RENDERER, 95),
    DetectionKind.JIRA_URL: (URL_RENDERER, 90),
    DetectionKind.JIRA_COMMENT: (URL_RENDERER, 95),
    DetectionKind.NOTION_URL: (URL_RENDERER, 85),
    DetectionKind.URL: (URL_RENDERER, 50),
    DetectionKind.JIRA_KEY_WITH_DESCRIPTION: (JIRA_DESCRIPTION_RENDERER, 98),
    DetectionKind.JIRA_KEY: (JIRA_KEY_RENDERER, 95),
    DetectionKind.PHONE_7: (PHONE_RENDERER, RECORD_CONFIDENCE),
    DetectionKind.PHONE_10: (PHONE_RENDERER, RECORD_CONFIDENCE),
    DetectionKind.PHONE_11: (PHONE_RENDERER, RECORD_CONFIDENCE),
    DetectionKind.DEEP_LINK: (DEEP_LINK_RENDERER, 85),
}


class Votable(Protocol):
    """A named renderer as seen by arbitration."""

    name: str

    def vote(self, detection: Detection) -> int:
        ...

    def render(self, detection: Detection) -> str:
        ...


@dataclass(frozen=True)
class Vote:
    """One renderer's score for one detection."""

    detection: Detection
    renderer: Votable
    score: int


def score_for(renderer_name: str, detection: Detection) -> int:
    """Return the score ``renderer_name`` gives ``detection`` (0 = cannot render)."""
    if renderer_name == PASSTHROUGH_RENDERER:
        return PASSTHROUGH_SCORE
    owner, score = VOTE_TABLE.get(detection.kind, ("", 0))
    if owner != renderer_name:
        return 0
    if score is None:
        return detection.confidence
    return score


def collect_votes(
    detections: Sequence[Detection], renderers: Sequence[Votable]
) -> List[Vote]:
    """Ask every renderer to vote on every detection, detections first."""
    return [
        Vote(detection=detection, renderer=renderer, score=renderer.vote(detection))
        for detection in detections
        for renderer in renderers
    ]


def select_winner(votes: Iterable[Vote]) -> Optional[Vote]:
    """Return the first vote with the strictly highest positive score."""
    best: Optional[Vote] = None
    for vote in votes:
        if vote.score > (best.score if best is not None else 0):
            best = vote
    return best


__all__ = [
    "DEEP_LINK_RENDERER",
    "JIRA_DESCRIPTION_RENDERER",
    "JIRA_KEY_RENDERER",
    "PASSTHROUGH_RENDERER",
    "PASSTHROUGH_SCORE",
    "PHONE_RENDERER",
    "URL_RENDERER",
    "VOTE_TABLE",
    "Votable",
    "Vote",
    "collect_votes",
    "score_for",
    "select_winner",
]
