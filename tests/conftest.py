"""Shared test fixtures for the wp-jobs-monitor test suite."""

import os

import pytest

from config import Settings
from models import JobRecord

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def make_job():
    """Factory fixture for creating JobRecord instances with defaults."""

    def _make(**overrides):
        link = overrides.pop("link", "https://jobs.wordpress.net/job/123")
        defaults = {
            "id": link,
            "title": "Support Engineer",
            "link": link,
            "job_type": "Full Time",
            "location": "Anywhere",
            "date_posted": "Oct 15",
        }
        defaults.update(overrides)
        return JobRecord(**defaults)

    return _make


@pytest.fixture
def seen_path(tmp_path):
    """Location for a seen-jobs file that does not exist yet."""
    return str(tmp_path / "seen-jobs.json")


@pytest.fixture
def settings(seen_path):
    return Settings(
        email_user="monitor@example.com",
        email_pass="app-password",
        email_to="me@example.com",
        seen_jobs_path=seen_path,
    )


def load_fixture(filename):
    """Load a fixture file by name."""
    path = os.path.join(FIXTURES_DIR, filename)
    with open(path, encoding="utf-8") as f:
        return f.read()
