"""Unit tests for the task service."""

import json
from unittest.mock import MagicMock

import pytest
from loguru import logger

from infoarena_companion.config import Settings
from infoarena_companion.domain.exceptions import UnsupportedURLError
from infoarena_companion.services import TaskService, create_task_service

URL = "https://www.infoarena.ro/problema/fact"


def test_service_rejects_unclaimed_url():
    parser = MagicMock()
    parser.get_match_patterns.return_value = ["https://infoarena.ro/problema/*"]
    service = TaskService(parser=parser)

    with pytest.raises(UnsupportedURLError):
        service.parse_task("https://codeforces.com/problemset/problem/500/A", "<html></html>")

    parser.parse.assert_not_called()


def test_service_delegates_to_parser():
    parser = MagicMock()
    parser.get_match_patterns.return_value = ["https://www.infoarena.ro/problema/*"]
    service = TaskService(parser=parser)

    result = service.parse_task(URL, "<html></html>")

    parser.parse.assert_called_once_with(URL, "<html></html>")
    assert result is parser.parse.return_value


def test_create_task_service_parses_page(batch_page):
    service = create_task_service(Settings(judge_name="infoarena"))

    task = service.parse_task(URL, batch_page)
    data = json.loads(service.to_json(task))

    assert data["group"] == "infoarena - ONI 2003, clasa a IX-a"
    assert data["url"] == URL
    assert len(data["tests"]) == 2


def test_explicit_settings_keep_host_logging(batch_page):
    messages = []
    handler_id = logger.add(messages.append, level="INFO")
    try:
        create_task_service(Settings()).parse_task(URL, batch_page)
    finally:
        logger.remove(handler_id)

    assert any("Successfully parsed problem" in message for message in messages)


def test_default_settings_configure_logging(monkeypatch):
    configure = MagicMock()
    monkeypatch.setattr("infoarena_companion.services.configure_logging", configure)
    monkeypatch.setenv("INFOARENA_LOG_LEVEL", "warning")

    create_task_service()

    configure.assert_called_once_with("WARNING")
