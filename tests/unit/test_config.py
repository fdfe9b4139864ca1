"""Unit tests for settings loading and logging setup."""

import sys

from loguru import logger

from infoarena_companion.config import Settings, configure_logging, load_settings


def test_defaults(monkeypatch):
    for name in ("INFOARENA_LOG_LEVEL", "INFOARENA_JUDGE_NAME", "INFOARENA_JAVA_MAIN_CLASS"):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INFOARENA_LOG_LEVEL", "debug")
    monkeypatch.setenv("INFOARENA_JUDGE_NAME", "infoarena.ro")
    monkeypatch.setenv("INFOARENA_JAVA_MAIN_CLASS", "Solution")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.judge_name == "infoarena.ro"
    assert settings.java_main_class == "Solution"


def test_configure_logging_filters_by_level(capsys):
    try:
        configure_logging("WARNING")
        logger.info("details table located")
        logger.warning("time limit not recognized")

        err = capsys.readouterr().err
        assert "time limit not recognized" in err
        assert "details table located" not in err
    finally:
        logger.remove()
        logger.add(sys.__stderr__)
