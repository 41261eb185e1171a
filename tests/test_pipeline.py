"""End-to-end conversion tests."""

from __future__ import annotations

import pytest

from mdlink.config import LinkConfig
from mdlink.models import DetectionKind
from mdlink.pipeline import convert, explain, process

GITHUB_UI_PASTE = """CompanyCam
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


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (
            "https://github.com/CompanyCam/Company-Cam-API/pull/15217",
            "[CompanyCam/API#15217](https://github.com/CompanyCam/Company-Cam-API/pull/15217)",
        ),
        (
            "https://github.com/pedropark99/zig-book",
            "[pedropark99/zig-book](https://github.com/pedropark99/zig-book)",
        ),
        (
            "https://companycam.atlassian.net/browse/PLAT-192",
            "[PLAT-192](https://companycam.atlassian.net/browse/PLAT-192)",
        ),
        (
            "https://companycam.atlassian.net/browse/PLAT-192?focusedCommentId=20266",
            "[PLAT-192 comment](https://companycam.atlassian.net/browse/PLAT-192?focusedCommentId=20266)",
        ),
        (
            "https://www.notion.so/ws/VS-Code-Setup-for-Standard-rb-RubyLSP-654a6b070ae74ac3ad400c6d571507c0",
            "[VS Code Setup for Standard rb RubyLSP]"
            "(https://www.notion.so/ws/VS-Code-Setup-for-Standard-rb-RubyLSP-654a6b070ae74ac3ad400c6d571507c0)",
        ),
        (
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "[YouTube](https://www.youtube.com/watch?v=dQw4w9WgXcQ)",
        ),
        (
            "http://ww3.domain.tld/path",
            "[domain.tld](http://ww3.domain.tld/path)",
        ),
        (
            "PLAT-192",
            "[PLAT-192](https://companycam.atlassian.net/browse/PLAT-192)",
        ),
        (
            "SPEED-12\n\nMake uploads faster\non slow networks",
            "[SPEED-12: Make uploads faster on slow networks]"
            "(https://companycam.atlassian.net/browse/SPEED-12)",
        ),
        (
            "courtneylw adds blinc ddagent file #15407",
            "[CompanyCam/API#15407: adds blinc ddagent file]"
            "(https://github.com/CompanyCam/Company-Cam-API/issues/15407)",
        ),
        (
            GITHUB_UI_PASTE,
            "[CompanyCam/mobile#6549: A specific Logger.error call in the SSO login workflow "
            "doesn't seem to log data to Datadog]"
            "(https://github.com/CompanyCam/companycam-mobile/issues/6549)",
        ),
        ("(890) 123-4567", "[890-123-4567](tel:8901234567)"),
        ("1-890-123-4567", "[1-890-123-4567](tel:+18901234567)"),
        ("123.4567", "[123-4567](tel:1234567)"),
        (
            "raycast://extensions/raycast/raycast-ai/ai-chat",
            "[Raycast AI](raycast://extensions/raycast/raycast-ai/ai-chat)",
        ),
    ],
)
def test_process_renders_expected_markdown(text: str, expected: str, config: LinkConfig) -> None:
    assert process(text, config) == expected


@pytest.mark.parametrize(
    "text",
    [
        "INVALID-123",
        "890 123 4567",
        "just some words",
        "TEL:1234567",
        "https://example.com is a good site",
        "https://exa mple.com/x",
    ],
)
def test_process_echoes_unrecognized_input(text: str, config: LinkConfig) -> None:
    assert process(text, config) == text


def test_process_trims_input(config: LinkConfig) -> None:
    assert process("  hello world \n", config) == "hello world"
    assert process("   ", config) == ""


def test_convert_strips_tel_scheme(config: LinkConfig) -> None:
    assert convert("tel:+18901234567", config) == "[+1-890-123-4567](tel:+18901234567)"
    assert convert("  tel:890-123-4567  ", config) == "[890-123-4567](tel:8901234567)"
    assert convert("tel:", config) == ""
    assert convert("TEL:1234567", config) == "TEL:1234567"


def test_process_is_deterministic(config: LinkConfig) -> None:
    text = "https://github.com/CompanyCam/Company-Cam-API/pull/15217"

    assert {process(text, config) for _ in range(5)} == {process(text, config)}


def test_explain_reports_winning_vote(config: LinkConfig) -> None:
    decision = explain("SPEED-12\n\nMake uploads faster", config)

    assert decision.winner is not None
    assert decision.winner.renderer.name == "jira_description"
    assert decision.winner.score == 98
    assert decision.winner.detection.kind is DetectionKind.JIRA_KEY_WITH_DESCRIPTION
    assert len(decision.votes) == len(decision.detections) * 6


def test_explain_without_detections_has_no_winner(config: LinkConfig) -> None:
    decision = explain("nothing here", config)

    assert decision.detections == ()
    assert decision.votes == ()
    assert decision.winner is None
    assert decision.render() == "nothing here"


def test_explain_uses_supplied_renderers(config: LinkConfig) -> None:
    decision = explain("PLAT-192", config, renderers=[])

    assert len(decision.detections) == 1
    assert decision.winner is None
    assert decision.render() == "PLAT-192"


def test_github_paste_without_defaults_falls_back(empty_config: LinkConfig) -> None:
    assert process("adds blinc ddagent file #15407", empty_config) == (
        "adds blinc ddagent file #15407"
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1234567", "[123-4567](tel:1234567)"),
        ("1 (890) 123-4567", "[1-890-123-4567](tel:+18901234567)"),
        ("+7(890)1234567", "[+7-890-123-4567](tel:+78901234567)"),
    ],
)
def test_process_renders_phone_numbers(text: str, expected: str, config: LinkConfig) -> None:
    assert process(text, config) == expected


def test_github_url_without_mapping(empty_config: LinkConfig) -> None:
    url = "https://github.com/CompanyCam/Company-Cam-API/pull/15217"

    assert process(url, empty_config) == f"[CompanyCam/Company-Cam-API#15217]({url})"


@pytest.mark.parametrize("number", ["1", "42", "10007"])
def test_bare_jira_keys_link_only_configured_projects(number: str, config: LinkConfig) -> None:
    assert process(f"SPEED-{number}", config) == (
        f"[SPEED-{number}](https://companycam.atlassian.net/browse/SPEED-{number})"
    )
    assert process(f"OTHER-{number}", config) == f"OTHER-{number}"
