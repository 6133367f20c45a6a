"""Logging coverage so dropped rows and summaries are visible to operators."""
import logging

import pytest

import betterme.core.logging as logging_utils
from betterme.processing.pipeline import build_dashboard


def test_pipeline_logs_summary(sample_csv_text: str, caplog):
    caplog.set_level("INFO")

    build_dashboard(sample_csv_text)

    assert any("Scored 5 entries through 2026-03-06" in message for message in caplog.messages)
    assert any("Dropped 1 rows" in message for message in caplog.messages)


def test_pipeline_logs_empty_export(caplog):
    caplog.set_level("WARNING")

    build_dashboard("Date,Steps\n")

    assert "no data rows" in caplog.text


def test_configure_logging_reads_env_level(monkeypatch: pytest.MonkeyPatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logging_utils.configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]

    logging_utils.configure_logging("warning")
    assert captured["level"] == "WARNING"
