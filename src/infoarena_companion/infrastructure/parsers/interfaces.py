"""Protocol interfaces for parsers."""

from typing import Protocol

from infoarena_companion.domain.models import Task
from infoarena_companion.domain.task_builder import TaskBuilder


class ProblemParserProtocol(Protocol):
    """Protocol for site-specific problem page parsers."""

    def get_match_patterns(self) -> list[str]:
        """URL globs this parser claims."""
        ...

    def parse(self, url: str, html: str, task: TaskBuilder | None = None) -> Task:
        """Parse page markup into a finalized task."""
        ...
