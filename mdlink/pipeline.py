"""Convert one text fragment into Markdown: detect, vote, render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .arbitration import Vote, collect_votes, select_winner
from .config import LinkConfig
from .detectors import run_detectors
from .inputs import strip_tel_scheme
from .logging import get_logger
from .models import Detection
from .renderers import Renderer, build_renderers

logger = get_logger("pipeline")


@dataclass(frozen=True)
class Decision:
    """Everything arbitration saw for one input, plus the winning vote."""

    text: str
    detections: Tuple[Detection, ...]
    votes: Tuple[Vote, ...]
    winner: Optional[Vote]

    def render(self) -> str:
        """Render the winner, or echo the input when nothing claimed it."""
        if self.winner is None:
            return self.text
        return self.winner.renderer.render(self.winner.detection)


def explain(
    text: str,
    config: LinkConfig,
    renderers: Optional[Sequence[Renderer]] = None,
) -> Decision:
    """Run detection and voting for ``text`` without rendering."""
    trimmed = text.strip()
    detections = run_detectors(trimmed, config)
    active = list(renderers) if renderers is not None else build_renderers(config)
    votes = collect_votes(detections, active)
    winner = select_winner(votes)

    if winner is None:
        logger.debug("No renderer claimed input; echoing it unchanged")
    else:
        logger.debug(
            "Renderer %s won with score %d for %s",
            winner.renderer.name,
            winner.score,
            winner.detection.kind.value,
        )
    return Decision(
        text=trimmed,
        detections=tuple(detections),
        votes=tuple(votes),
        winner=winner,
    )


def process(text: str, config: LinkConfig) -> str:
    """Return the Markdown for ``text``, or the trimmed text when nothing matches."""
    return explain(text, config).render()


def convert(text: str, config: LinkConfig) -> str:
    """Like :func:`process`, but accepts ``tel:`` URIs as phone numbers."""
    return process(strip_tel_scheme(text), config)


__all__ = ["Decision", "convert", "explain", "process"]
