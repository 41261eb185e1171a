"""Detector for http(s) URLs, with GitHub, JIRA and Notion sub-shapes."""

from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import SplitResult, parse_qs, unquote, urlsplit

from ..config import LinkConfig
from ..models import (
    Detection,
    GitHubUrlDetection,
    JiraCommentDetection,
    JiraUrlDetection,
    NotionUrlDetection,
    UrlDetection,
)

GITHUB_HOST = "github.com"
NOTION_HOST_MARKER = "notion.so"
GITHUB_ITEM_TYPES = {"pull", "issues", "commit"}

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_HOST_CHARS = re.compile(r"[\s\"<>\\^`{|}]")
_JIRA_BROWSE_PATTERN = re.compile(r"/browse/([A-Z]+-\d+)", re.ASCII)
_NOTION_SLUG_PATTERN = re.compile(r"(.+)-[0-9a-f]{32}")


def split_url(text: str, schemes: tuple[str, ...]) -> Optional[SplitResult]:
    """Return the parsed URL when ``text`` is a well-formed URL with one of ``schemes``."""
    if not text.startswith(schemes):
        return None
    if _CONTROL_CHARS.search(text):
        return None
    try:
        parts = urlsplit(text)
        parts.port  # noqa: B018 - raises ValueError for malformed ports
    except ValueError:
        return None
    if _INVALID_HOST_CHARS.search(url_host(parts)):
        return None
    return parts


def url_host(parts: SplitResult) -> str:
    """Return host[:port] from the netloc with any userinfo removed, case preserved."""
    return parts.netloc.rpartition("@")[2]


def detect_url(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize an http(s) URL and classify it by host and path."""
    parts = split_url(text, ("http://", "https://"))
    if parts is None:
        return None

    host = url_host(parts)
    segments = _path_segments(parts.path)

    if host.lower() == GITHUB_HOST and len(segments) >= 2:
        return _github_detection(text, segments)

    if _is_jira_host(host, config):
        match = _JIRA_BROWSE_PATTERN.search(parts.path)
        if match:
            return _jira_detection(text, parts, match.group(1))

    if NOTION_HOST_MARKER in host.lower():
        return NotionUrlDetection(
            original_input=text,
            confidence=85,
            title=_notion_title(segments),
        )

    return UrlDetection(original_input=text, confidence=50, domain=host)


def _path_segments(path: str) -> List[str]:
    stripped = path.strip("/")
    return [unquote(segment) for segment in stripped.split("/")] if stripped else []


def _github_detection(text: str, segments: List[str]) -> Detection:
    org, repo = segments[0], segments[1]
    issue_type: Optional[str] = None
    number: Optional[str] = None
    if len(segments) >= 4 and segments[2] in GITHUB_ITEM_TYPES and segments[3]:
        issue_type, number = segments[2], segments[3]
    return GitHubUrlDetection(
        original_input=text,
        confidence=90,
        org=org,
        repo=repo,
        issue_type=issue_type,
        number=number,
    )


def _is_jira_host(host: str, config: LinkConfig) -> bool:
    domain = config.jira.domain
    if not domain:
        return False
    jira_parts = split_url(domain, ("http://", "https://"))
    if jira_parts is None:
        return False
    return url_host(jira_parts).lower() == host.lower()


def _jira_detection(text: str, parts: SplitResult, issue_key: str) -> Detection:
    comment_ids = parse_qs(parts.query).get("focusedCommentId", [])
    comment_id = comment_ids[0] if comment_ids else ""
    if comment_id:
        return JiraCommentDetection(
            original_input=text,
            confidence=95,
            issue_key=issue_key,
            comment_id=comment_id,
        )
    return JiraUrlDetection(original_input=text, confidence=90, issue_key=issue_key)


def _notion_title(segments: List[str]) -> Optional[str]:
    # Notion page URLs look like /<workspace>/<Page-Title>-<32 hex page id>.
    if len(segments) < 2:
        return None
    match = _NOTION_SLUG_PATTERN.fullmatch(segments[-1])
    if not match:
        return None
    return match.group(1).replace("-", " ")


__all__ = ["detect_url", "split_url", "url_host"]
