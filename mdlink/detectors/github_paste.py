"""Detector for GitHub issue titles pasted from the web UI or typed by hand.

Two shapes are recognized:

* a simple title line, ``[username] <title> #<number>``, linked against the
  configured default org/repo;
* a multi-line copy of a GitHub page, where the org and repo names appear on
  their own lines somewhere above the ``<title> #<number>`` line.

The username check relies on a fixed list of common English words to tell a
handle apart from the first word of a title. It is a heuristic: titles that
start with any other word are split as if that word were a username.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..config import LinkConfig
from ..logging import get_logger
from ..models import Detection, GitHubPasteDetection

logger = get_logger("detectors.github_paste")

NAVIGATION_CHROME = (
    "Type / to search",
    "Pull requests",
    "Discussions",
    "Actions",
    "Projects",
    "Wiki",
    "Security",
    "Insights",
    "Settings",
)

COMMON_WORDS = frozenset(
    {
        "adds",
        "fixes",
        "updates",
        "removes",
        "creates",
        "deletes",
        "implements",
        "enhances",
        "refactors",
        "only",
        "some",
        "the",
        "and",
        "with",
        "for",
        "from",
        "this",
        "that",
    }
)

_ORG_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?")
_REPO_PATTERN = re.compile(r"[a-zA-Z0-9._-]+")
_USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9_-]*[a-zA-Z0-9])?")
_ISSUE_LINE_PATTERN = re.compile(r"(.+)\s+#(\d+)\s*", re.ASCII)
_USERNAME_LINE_PATTERN = re.compile(r"([a-zA-Z0-9_-]+)\s+(.+)\s+#(\d+)\s*", re.ASCII)

MAX_NAME_LENGTH = 39
MAX_REPO_LENGTH = 100
MAX_SIMPLE_LINES = 3


def detect_github_paste(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize a GitHub issue title, either simple or inside a UI paste."""
    lines = _split_lines(text)
    if is_simple_issue_title(text):
        return _parse_simple(text, lines, config)
    if not _looks_like_ui_paste(lines):
        return None
    return _parse_ui_paste(text, lines)


def is_valid_github_name(value: str) -> bool:
    """Return True when ``value`` could be a GitHub organization or user name."""
    return 0 < len(value) <= MAX_NAME_LENGTH and bool(_ORG_PATTERN.fullmatch(value))


def is_valid_repo_name(value: str) -> bool:
    """Return True when ``value`` could be a GitHub repository name."""
    return 0 < len(value) <= MAX_REPO_LENGTH and bool(_REPO_PATTERN.fullmatch(value))


def is_github_username(value: str) -> bool:
    """Return True when ``value`` looks like a handle rather than a common word."""
    if not 0 < len(value) <= MAX_NAME_LENGTH:
        return False
    if not _USERNAME_PATTERN.fullmatch(value):
        return False
    return value.lower() not in COMMON_WORDS


def has_issue_title_with_number(line: str) -> bool:
    return bool(_ISSUE_LINE_PATTERN.fullmatch(line.strip()))


def has_username_prefix(line: str) -> bool:
    stripped = line.strip()
    if not _USERNAME_LINE_PATTERN.fullmatch(stripped):
        return False
    words = stripped.split()
    # username, at least one title word, #number
    if len(words) < 3:
        return False
    return is_github_username(words[0])


def extract_issue_title_and_number(line: str) -> Tuple[str, str]:
    match = _ISSUE_LINE_PATTERN.fullmatch(line.strip())
    if not match:
        return "", ""
    return match.group(1).strip(), match.group(2)


def extract_username_and_issue(line: str) -> Tuple[str, str]:
    match = _USERNAME_LINE_PATTERN.fullmatch(line.strip())
    if not match or not is_github_username(match.group(1)):
        return "", ""
    return match.group(2).strip(), match.group(3)


def is_simple_issue_title(text: str) -> bool:
    """Return True for a short fragment holding exactly one issue title line."""
    lines = _split_lines(text)
    if len(lines) > MAX_SIMPLE_LINES:
        return False

    if len(lines) == 1:
        line = lines[0].strip()
        return has_username_prefix(line) or has_issue_title_with_number(line)

    has_chrome = False
    issue_lines = 0
    name_lines = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if any(marker in line for marker in NAVIGATION_CHROME):
            has_chrome = True
        if has_username_prefix(line) or has_issue_title_with_number(line):
            issue_lines += 1
        elif is_valid_github_name(line) or is_valid_repo_name(line):
            name_lines += 1

    if has_chrome or name_lines >= 2:
        return False
    return issue_lines == 1


def _split_lines(text: str) -> List[str]:
    return text.strip().split("\n")


def _looks_like_ui_paste(lines: List[str]) -> bool:
    if len(lines) < 3:
        return False

    has_org = has_repo = has_title = False
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        has_org = has_org or is_valid_github_name(line)
        has_repo = has_repo or is_valid_repo_name(line)
        has_title = has_title or has_issue_title_with_number(line)
    return has_org and has_repo and has_title


def _parse_simple(text: str, lines: List[str], config: LinkConfig) -> Optional[Detection]:
    title = number = ""
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if has_username_prefix(line):
            title, number = extract_username_and_issue(line)
            if title and number:
                break
        if has_issue_title_with_number(line):
            title, number = extract_issue_title_and_number(line)
            if title and number:
                break

    if not title or not number:
        return None

    org = config.github.default_org
    repo = config.github.default_repo
    if not org or not repo:
        logger.debug("Issue title found but no default GitHub org/repo is configured")
        return None

    return GitHubPasteDetection(
        original_input=text,
        confidence=95,
        org=org,
        repo=repo,
        title=title,
        number=number,
    )


def _parse_ui_paste(text: str, lines: List[str]) -> Optional[Detection]:
    title = number = ""
    for raw in lines:
        if has_issue_title_with_number(raw):
            title, number = extract_issue_title_and_number(raw)
            break
    if not title or not number:
        return None

    # GitHub page copies list the owner first and the repository second.
    org = repo = ""
    for raw in lines:
        line = raw.strip()
        if not line or title in line:
            continue
        if not org:
            if is_valid_github_name(line):
                org = line
            continue
        if is_valid_repo_name(line) and line != org:
            repo = line
            break

    if not org or not repo:
        return None

    return GitHubPasteDetection(
        original_input=text,
        confidence=90,
        org=org,
        repo=repo,
        title=title,
        number=number,
    )


__all__ = [
    "COMMON_WORDS",
    "NAVIGATION_CHROME",
    "detect_github_paste",
    "is_github_username",
    "is_simple_issue_title",
    "is_valid_github_name",
    "is_valid_repo_name",
]
