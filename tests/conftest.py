from __future__ import annotations

import pytest

from mdlink.config import GitHubConfig, JiraConfig, LinkConfig, UrlConfig


@pytest.fixture
def config() -> LinkConfig:
    """Configuration shared by the end-to-end and renderer tests."""
    return LinkConfig(
        github=GitHubConfig(
            default_org="CompanyCam",
            default_repo="Company-Cam-API",
            mappings={
                "companycam/company-cam-api": "CompanyCam/API",
                "companycam/companycam-mobile": "CompanyCam/mobile",
            },
        ),
        jira=JiraConfig(
            domain="https://companycam.atlassian.net",
            projects=("PLAT", "SPEED"),
        ),
        url=UrlConfig(
            domain_mappings={
                "companycam_slack_com": "slack",
                "youtube_com": "YouTube",
            },
        ),
    )


@pytest.fixture
def empty_config() -> LinkConfig:
    return LinkConfig()
