"""Renderers that link bare JIRA issue keys to the configured JIRA site."""

from __future__ import annotations

from ..config import LinkConfig
from ..models import Detection, JiraKeyDetection, JiraKeyWithDescriptionDetection
from .base import markdown_link


def issue_url(issue_key: str, config: LinkConfig) -> str:
    return f"{config.jira.domain}/browse/{issue_key}"


def render_jira_key(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, JiraKeyDetection) or not detection.issue_key:
        return detection.original_input
    return markdown_link(detection.issue_key, issue_url(detection.issue_key, config))


def render_jira_key_with_description(detection: Detection, config: LinkConfig) -> str:
    if not isinstance(detection, JiraKeyWithDescriptionDetection):
        return detection.original_input
    if not detection.issue_key or not detection.description:
        return detection.original_input
    return markdown_link(
        f"{detection.issue_key}: {detection.description}",
        issue_url(detection.issue_key, config),
    )


__all__ = ["issue_url", "render_jira_key", "render_jira_key_with_description"]
