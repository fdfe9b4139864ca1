"""Service for turning problem pages into tasks."""

from loguru import logger

from infoarena_companion.domain.exceptions import UnsupportedURLError
from infoarena_companion.domain.models import Task
from infoarena_companion.infrastructure.parsers import (
    ProblemParserProtocol,
    URLMatcher,
)


class TaskService:
    """Service for parsing pages handed over by a host."""

    def __init__(self, *, parser: ProblemParserProtocol):
        """Initialize service with dependencies."""
        self.parser = parser
        self.matcher = URLMatcher(parser.get_match_patterns())

    def supports(self, url: str) -> bool:
        return self.matcher.matches(url)

    def parse_task(self, url: str, html: str) -> Task:
        """Parse page markup into a task, rejecting URLs the parser does not claim."""
        logger.debug(f"Parsing task via service: {url}")

        if not self.supports(url):
            raise UnsupportedURLError(
                f"Unrecognized problem URL: {url}. "
                f"Expected one of: {', '.join(self.matcher.patterns)}"
            )

        return self.parser.parse(url, html)

    @staticmethod
    def to_json(task: Task) -> str:
        """Serialize task into Competitive Companion JSON."""
        return task.to_json()
