"""Renderer for the URL family: GitHub, JIRA, Notion and generic links."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from ..config import LinkConfig, normalize_domain_key
from ..detectors.urls import split_url, url_host
from ..models import (
    Detection,
    DetectionKind,
    GitHubPasteDetection,
    GitHubUrlDetection,
    JiraCommentDetection,
    JiraUrlDetection,
    NotionUrlDetection,
)
from .base import markdown_link

GITHUB_BASE_URL = "https://github.com"
COMMIT_LABEL_LENGTH = 7
STRIPPED_HOST_PREFIXES = ("www.", "ww3.")


def render_url(detection: Detection, config: LinkConfig) -> str:
    handler = _HANDLERS.get(detection.kind)
    if handler is None:
        return detection.original_input
    return handler(detection, config)


def lookup_casefold(mapping: Mapping[str, str], key: str) -> Optional[str]:
    """Return the value whose key equals ``key`` ignoring case."""
    folded = key.casefold()
    for candidate, value in mapping.items():
        if candidate.casefold() == folded:
            return value
    return None


def display_repo(org: str, repo: str, config: LinkConfig) -> str:
    """Return ``org/repo`` or its configured display override."""
    org_repo = f"{org}/{repo}"
    return lookup_casefold(config.github.mappings, org_repo) or org_repo


def render_generic(detection: Detection, config: LinkConfig) -> str:
    url = detection.original_input
    parts = split_url(url, ("http://", "https://"))
    if parts is None:
        return url

    domain = url_host(parts)
    for prefix in STRIPPED_HOST_PREFIXES:
        if domain.startswith(prefix):
            domain = domain[len(prefix):]
            break

    label = lookup_casefold(config.url.domain_mappings, normalize_domain_key(domain))
    return markdown_link(label or domain, url)


def _render_github(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, GitHubUrlDetection) or not (detection.org and detection.repo):
        return render_generic(detection, config)

    label = display_repo(detection.org, detection.repo, config)
    number = detection.number
    if number:
        if detection.issue_type == "commit" and len(number) > COMMIT_LABEL_LENGTH:
            number = number[:COMMIT_LABEL_LENGTH]
        label = f"{label}#{number}"
    return markdown_link(label, detection.original_input)


def _render_github_paste(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, GitHubPasteDetection):
        return detection.original_input
    if not all((detection.org, detection.repo, detection.title, detection.number)):
        return detection.original_input

    # The pasted text carries no URL, so link the canonical issue page.
    url = "/".join(
        (GITHUB_BASE_URL, detection.org, detection.repo, detection.issue_type, detection.number)
    )
    label = f"{display_repo(detection.org, detection.repo, config)}#{detection.number}: {detection.title}"
    return markdown_link(label, url)


def _render_jira_url(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, JiraUrlDetection) or not detection.issue_key:
        return render_generic(detection, config)
    return markdown_link(detection.issue_key, detection.original_input)


def _render_jira_comment(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, JiraCommentDetection) or not detection.issue_key:
        return render_generic(detection, config)
    return markdown_link(f"{detection.issue_key} comment", detection.original_input)


def _render_notion(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, NotionUrlDetection) or not detection.title:
        return render_generic(detection, config)
    return markdown_link(detection.title, detection.original_input)


_HANDLERS: Dict[DetectionKind, Callable[[Detection, LinkConfig], str]] = {
    DetectionKind.GITHUB_URL: _render_github,
    DetectionKind.GITHUB_PASTE: _render_github_paste,
    DetectionKind.JIRA_URL: _render_jira_url,
    DetectionKind.JIRA_COMMENT: _render_jira_comment,
    DetectionKind.NOTION_URL: _render_notion,
    DetectionKind.URL: render_generic,
}


__all__ = ["display_repo", "lookup_casefold", "render_generic", "render_url"]
