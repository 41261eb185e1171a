"""Detectors for bare JIRA issue keys, optionally followed by a description."""

from __future__ import annotations

import re
from typing import Optional

from ..config import LinkConfig
from ..logging import get_logger
from ..models import Detection, JiraKeyDetection, JiraKeyWithDescriptionDetection

logger = get_logger("detectors.jira")

_ISSUE_KEY_PATTERN = re.compile(r"[A-Z]+-\d+", re.ASCII)


def is_issue_key(value: str) -> bool:
    return bool(_ISSUE_KEY_PATTERN.fullmatch(value))


def project_of(issue_key: str) -> str:
    return issue_key.split("-", 1)[0]


def detect_jira_key(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize ``PROJ-123`` when ``PROJ`` is a configured project."""
    issue_key = text.strip()
    if not is_issue_key(issue_key):
        return None

    project = project_of(issue_key)
    if not _is_configured(project, config):
        return None

    return JiraKeyDetection(
        original_input=text,
        confidence=95,
        issue_key=issue_key,
        project=project,
    )


def detect_jira_key_with_description(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize an issue key line, a blank line, then a description.

    Description lines are trimmed and joined with single spaces.
    """
    lines = text.strip().split("\n")
    if len(lines) < 3:
        return None

    issue_key = lines[0].strip()
    if not is_issue_key(issue_key) or lines[1].strip():
        return None

    description_lines = [line.strip() for line in lines[2:] if line.strip()]
    if not description_lines:
        return None

    project = project_of(issue_key)
    if not _is_configured(project, config):
        return None

    return JiraKeyWithDescriptionDetection(
        original_input=text,
        confidence=98,
        issue_key=issue_key,
        project=project,
        description=" ".join(description_lines),
    )


def _is_configured(project: str, config: LinkConfig) -> bool:
    if project in config.jira.projects:
        return True
    logger.debug("Ignoring issue key for unconfigured JIRA project %s", project)
    return False


__all__ = ["detect_jira_key", "detect_jira_key_with_description", "is_issue_key"]
