"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest

from snarf.cli.app import create_cli_app
from snarf.cli.state import CLIState
from snarf.domain.jobs import JobResult
from snarf.manager import FeedManager, RunReport


@pytest.fixture
def sample_report(make_job, tmp_path: Path) -> RunReport:
    """A report with two downloads and one skip."""
    destination = tmp_path / "my_show"
    return RunReport(
        feed_title="My Show",
        destination=destination,
        results=(
            JobResult.downloaded(make_job("Ep 1", sequence_index=2), destination / "ep_1.mp3"),
            JobResult.no_enclosure(make_job("Ep 2", sequence_index=1)),
            JobResult.downloaded(make_job("Ep 3", sequence_index=0), destination / "ep_3.mp3"),
        ),
        elapsed_seconds=1.5,
    )


@pytest.fixture
def mock_feed_manager(mocker, sample_report):
    """Provide fully mocked FeedManager with spec for type safety."""
    mock = mocker.AsyncMock(spec=FeedManager)
    # Configure context manager behavior
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = None
    mock.sync.return_value = sample_report
    return mock


@pytest.fixture
def manager_calls() -> list[dict]:
    """Keyword arguments of every manager factory call."""
    return []


@pytest.fixture
def cli_state_with_mock_manager(test_settings, mock_feed_manager, manager_calls):
    """CLIState that returns the mocked manager."""

    def mock_manager_factory(**kwargs):
        manager_calls.append(kwargs)
        return mock_feed_manager

    return CLIState(test_settings, manager_factory=mock_manager_factory)


@pytest.fixture
def app_with_mock_manager(cli_state_with_mock_manager):
    """CLI app with mocked manager factory for testing."""
    return create_cli_app(state=cli_state_with_mock_manager)
