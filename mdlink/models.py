"""Detection records passed from detectors to renderers.

Each detected content shape has its own frozen record type carrying only the
fields that shape needs. Every record shares ``original_input`` (the text the
detector examined) and ``confidence`` (0-100, set by the detector).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional


class DetectionKind(str, Enum):
    """Closed set of content shapes the detectors recognize."""

    URL = "url"
    GITHUB_URL = "github_url"
    GITHUB_PASTE = "github_paste"
    JIRA_URL = "jira_url"
    JIRA_COMMENT = "jira_comment"
    NOTION_URL = "notion_url"
    JIRA_KEY = "jira_key"
    JIRA_KEY_WITH_DESCRIPTION = "jira_key_with_description"
    PHONE_7 = "phone_7"
    PHONE_10 = "phone_10"
    PHONE_11 = "phone_11"
    DEEP_LINK = "deep_link"


PHONE_KINDS = frozenset(
    {DetectionKind.PHONE_7, DetectionKind.PHONE_10, DetectionKind.PHONE_11}
)

# Field names exposed under a different attribute name.
_ATTRIBUTE_ALIASES = {
    "issue_type": "type",
    "is_ai_chat": "isAIChat",
    "is_note": "isNote",
}
_COMMON_FIELDS = {"original_input", "confidence", "kind"}


@dataclass(frozen=True)
class Detection:
    """Base for every detection record."""

    original_input: str
    confidence: int

    kind: ClassVar[DetectionKind]

    def attributes(self) -> Dict[str, Any]:
        """Return the detector-specific fields as a flat attribute mapping."""
        result: Dict[str, Any] = {}
        for item in fields(self):
            if item.name in _COMMON_FIELDS:
                continue
            value = getattr(self, item.name)
            if value is None:
                continue
            result[_ATTRIBUTE_ALIASES.get(item.name, item.name)] = value
        return result


@dataclass(frozen=True)
class UrlDetection(Detection):
    """Any http(s) URL without a more specific shape."""

    domain: str

    kind: ClassVar[DetectionKind] = DetectionKind.URL


@dataclass(frozen=True)
class GitHubUrlDetection(Detection):
    """A github.com repository, issue, pull request or commit URL."""

    org: str
    repo: str
    issue_type: Optional[str] = None
    number: Optional[str] = None

    kind: ClassVar[DetectionKind] = DetectionKind.GITHUB_URL


@dataclass(frozen=True)
class GitHubPasteDetection(Detection):
    """An issue title copied from the GitHub web UI or typed by hand."""

    org: str
    repo: str
    title: str
    number: str
    issue_type: str = "issues"

    kind: ClassVar[DetectionKind] = DetectionKind.GITHUB_PASTE


@dataclass(frozen=True)
class JiraUrlDetection(Detection):
    """A ``/browse/KEY-123`` URL on the configured JIRA site."""

    issue_key: str

    kind: ClassVar[DetectionKind] = DetectionKind.JIRA_URL


@dataclass(frozen=True)
class JiraCommentDetection(Detection):
    """A JIRA issue URL focused on a single comment."""

    issue_key: str
    comment_id: str

    kind: ClassVar[DetectionKind] = DetectionKind.JIRA_COMMENT


@dataclass(frozen=True)
class NotionUrlDetection(Detection):
    """A notion.so page URL; ``title`` is None when the slug has no page id."""

    title: Optional[str] = None

    kind: ClassVar[DetectionKind] = DetectionKind.NOTION_URL


@dataclass(frozen=True)
class JiraKeyDetection(Detection):
    """A bare issue key such as ``PROJ-123``."""

    issue_key: str
    project: str

    kind: ClassVar[DetectionKind] = DetectionKind.JIRA_KEY


@dataclass(frozen=True)
class JiraKeyWithDescriptionDetection(Detection):
    """An issue key, a blank line, then the issue summary."""

    issue_key: str
    project: str
    description: str

    kind: ClassVar[DetectionKind] = DetectionKind.JIRA_KEY_WITH_DESCRIPTION


@dataclass(frozen=True)
class PhoneDetection(Detection):
    """A 7, 10 or 11 digit phone number in one of the accepted layouts.

    All three lengths share this record; ``kind`` tells them apart.
    """

    kind: DetectionKind  # type: ignore[misc]
    raw_number: str
    formatted_display: str
    tel_url: str
    is_exact_match: bool


@dataclass(frozen=True)
class DeepLinkDetection(Detection):
    """A ``raycast://`` deep link."""

    is_ai_chat: bool = False
    is_note: bool = False

    kind: ClassVar[DetectionKind] = DetectionKind.DEEP_LINK


__all__ = [
    "DeepLinkDetection",
    "Detection",
    "DetectionKind",
    "GitHubPasteDetection",
    "GitHubUrlDetection",
    "JiraCommentDetection",
    "JiraKeyDetection",
    "JiraKeyWithDescriptionDetection",
    "JiraUrlDetection",
    "NotionUrlDetection",
    "PHONE_KINDS",
    "PhoneDetection",
    "UrlDetection",
]
