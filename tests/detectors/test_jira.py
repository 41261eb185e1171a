"""Tests for the JIRA issue key detectors."""

from __future__ import annotations

from mdlink.config import LinkConfig
from mdlink.detectors.jira import (
    detect_jira_key,
    detect_jira_key_with_description,
    is_issue_key,
)
from mdlink.models import JiraKeyDetection, JiraKeyWithDescriptionDetection


def test_is_issue_key_requires_uppercase_project() -> None:
    assert is_issue_key("PLAT-192")
    assert not is_issue_key("plat-192")
    assert not is_issue_key("PLAT-")
    assert not is_issue_key("PLAT192")
    assert not is_issue_key("PLAT-192 extra")


def test_detect_jira_key_for_configured_project(config: LinkConfig) -> None:
    detection = detect_jira_key("PLAT-192", config)

    assert isinstance(detection, JiraKeyDetection)
    assert detection.confidence == 95
    assert detection.attributes() == {"issue_key": "PLAT-192", "project": "PLAT"}


def test_detect_jira_key_trims_surrounding_whitespace(config: LinkConfig) -> None:
    detection = detect_jira_key("  SPEED-7\n", config)

    assert isinstance(detection, JiraKeyDetection)
    assert detection.issue_key == "SPEED-7"


def test_detect_jira_key_rejects_unconfigured_project(config: LinkConfig) -> None:
    assert detect_jira_key("INVALID-123", config) is None
    assert detect_jira_key("PLAT-192", LinkConfig()) is None


def test_detect_description_joins_lines(config: LinkConfig) -> None:
    text = "PLAT-192\n\nUpdate the login flow\n  for SSO users  \n\nand admins"
    detection = detect_jira_key_with_description(text, config)

    assert isinstance(detection, JiraKeyWithDescriptionDetection)
    assert detection.confidence == 98
    assert detection.issue_key == "PLAT-192"
    assert detection.description == "Update the login flow for SSO users and admins"


def test_detect_description_requires_blank_second_line(config: LinkConfig) -> None:
    assert detect_jira_key_with_description("PLAT-192\nDescription\nMore", config) is None


def test_detect_description_requires_three_lines(config: LinkConfig) -> None:
    assert detect_jira_key_with_description("PLAT-192\n\n", config) is None
    assert detect_jira_key_with_description("PLAT-192", config) is None


def test_detect_description_rejects_unconfigured_project(config: LinkConfig) -> None:
    assert detect_jira_key_with_description("OTHER-1\n\nSomething", config) is None
