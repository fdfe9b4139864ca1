"""Runtime configuration loaded from the environment."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    judge_name: str = "InfoArena"
    java_main_class: str = "Main"


def load_settings() -> Settings:
    """Read settings from environment variables, including a local .env file."""
    load_dotenv()

    return Settings(
        log_level=os.getenv("INFOARENA_LOG_LEVEL", Settings.log_level).upper(),
        judge_name=os.getenv("INFOARENA_JUDGE_NAME", Settings.judge_name),
        java_main_class=os.getenv("INFOARENA_JAVA_MAIN_CLASS", Settings.java_main_class),
    )


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
