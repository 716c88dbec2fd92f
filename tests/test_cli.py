"""
Tests for the command-line entry point.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from conftest import THREAD_URL
from slack_archiver import cli
from slack_archiver.config import Settings
from slack_archiver.errors import ThreadFetchError
from slack_archiver.models.archive import PipelineResult, PipelineState


@pytest.fixture
def settings(monkeypatch, tmp_path):
    settings = Settings(slack_bot_token="xoxb-test", output_dir=str(tmp_path), _env_file=None)
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    return settings


@pytest.fixture
def fake_pipeline(monkeypatch):
    pipeline = MagicMock()
    pipeline.run = AsyncMock()
    pipeline_cls = MagicMock()
    pipeline_cls.from_settings.return_value = pipeline
    monkeypatch.setattr(cli, "ArchivePipeline", pipeline_cls)
    return pipeline_cls, pipeline


def test_missing_url_exits_non_zero(settings, capsys):
    assert cli.main([]) == 1
    assert "Slack thread URL" in capsys.readouterr().err


def test_invalid_url_exits_non_zero(settings, capsys):
    assert cli.main(["https://example.com/not-slack"]) == 1
    assert "Invalid Slack permalink" in capsys.readouterr().err


def test_missing_token_exits_non_zero(monkeypatch, tmp_path, capsys):
    empty = Settings(slack_bot_token="", output_dir=str(tmp_path), _env_file=None)
    monkeypatch.setattr(cli, "get_settings", lambda: empty)

    assert cli.main([THREAD_URL]) == 1
    assert "SLACK_BOT_TOKEN" in capsys.readouterr().err


def test_success(settings, fake_pipeline, tmp_path, capsys):
    pipeline_cls, pipeline = fake_pipeline
    pipeline.run.return_value = PipelineResult(
        success=True,
        state=PipelineState.DONE,
        channel_id="C123ABC",
        thread_ts="1741754154.975769",
        thread_id="1741754154975769",
        bundle_dir=str(tmp_path / "1741754154975769"),
        archive_path=str(tmp_path / "1741754154975769" / "1741754154975769_archive.zip"),
        message_count=3,
        images_planned=3,
        images_downloaded=2,
        images_failed=1,
    )

    assert cli.main([THREAD_URL, str(tmp_path)]) == 0

    pipeline_cls.from_settings.assert_called_once_with(settings, output_dir=str(tmp_path))
    pipeline.run.assert_awaited_once_with(THREAD_URL)
    out = capsys.readouterr().out
    assert "images: 2/3 downloaded" in out
    assert "1741754154975769_archive.zip" in out


def test_failure_reports_cause(settings, fake_pipeline, capsys):
    _, pipeline = fake_pipeline
    error = ThreadFetchError("Slack API error fetching thread: channel_not_found")
    error.__cause__ = RuntimeError("underlying")
    pipeline.run.side_effect = error

    assert cli.main([THREAD_URL]) == 1

    err = capsys.readouterr().err
    assert "channel_not_found" in err
    assert "underlying" in err
