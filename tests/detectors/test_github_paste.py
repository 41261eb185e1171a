"""Tests for the GitHub UI paste detector."""

from __future__ import annotations

from dataclasses import replace

from mdlink.config import LinkConfig
from mdlink.detectors.github_paste import (
    detect_github_paste,
    is_github_username,
    is_simple_issue_title,
    is_valid_github_name,
    is_valid_repo_name,
)
from mdlink.models import GitHubPasteDetection

UI_PASTE = """CompanyCam
companycam-mobile

Type / to search
Code
Issues
78
Pull requests
12
Actions
Projects
Wiki
Security
7
Insights
A specific Logger.error call in the SSO login workflow doesn't seem to log data to Datadog #6549"""


def test_simple_title_uses_default_repository(config: LinkConfig) -> None:
    detection = detect_github_paste("adds blinc ddagent file #15407", config)

    assert isinstance(detection, GitHubPasteDetection)
    assert detection.confidence == 95
    assert detection.attributes() == {
        "org": "CompanyCam",
        "repo": "Company-Cam-API",
        "title": "adds blinc ddagent file",
        "number": "15407",
        "type": "issues",
    }


def test_simple_title_drops_username_prefix(config: LinkConfig) -> None:
    for text in (
        "courtneylw adds blinc ddagent file #15407",
        "plat_188 adds blinc ddagent file #15407",
    ):
        detection = detect_github_paste(text, config)
        assert isinstance(detection, GitHubPasteDetection)
        assert detection.title == "adds blinc ddagent file"
        assert detection.number == "15407"


def test_simple_title_requires_default_repository(config: LinkConfig) -> None:
    no_repo = replace(config, github=replace(config.github, default_repo=""))

    assert detect_github_paste("adds blinc ddagent file #15407", no_repo) is None


def test_ui_paste_reads_org_and_repo_lines(config: LinkConfig) -> None:
    detection = detect_github_paste(UI_PASTE, config)

    assert isinstance(detection, GitHubPasteDetection)
    assert detection.confidence == 90
    assert detection.org == "CompanyCam"
    assert detection.repo == "companycam-mobile"
    assert detection.number == "6549"
    assert detection.title.startswith("A specific Logger.error call")
    assert detection.title.endswith("to Datadog")


def test_ui_paste_keeps_username_in_title(config: LinkConfig) -> None:
    text = "CompanyCam\nCompany-Cam-API\n\nType / to search\ncourtneylw adds blinc ddagent file #15407"
    detection = detect_github_paste(text, config)

    assert isinstance(detection, GitHubPasteDetection)
    assert detection.repo == "Company-Cam-API"
    assert detection.title == "courtneylw adds blinc ddagent file"


def test_navigation_chrome_forces_ui_paste(config: LinkConfig) -> None:
    text = "Settings\nFix the thing #12"

    assert not is_simple_issue_title(text)
    assert detect_github_paste(text, config) is None


def test_no_issue_number_is_not_detected(config: LinkConfig) -> None:
    assert detect_github_paste("just a sentence", config) is None
    assert detect_github_paste("CompanyCam\nrepo\nno number here", config) is None


def test_ui_paste_without_repo_line_is_rejected(config: LinkConfig) -> None:
    text = "CompanyCam\n\nType / to search\nSome title #5"

    assert detect_github_paste(text, config) is None


def test_name_helpers() -> None:
    assert is_valid_github_name("CompanyCam")
    assert not is_valid_github_name("-leading")
    assert not is_valid_github_name("a" * 40)
    assert is_valid_repo_name("my.repo_name-2")
    assert not is_valid_repo_name("has space")
    assert is_github_username("plat_188")
    assert not is_github_username("adds")
    assert not is_github_username("Fixes")
    assert not is_github_username("_underscore")
