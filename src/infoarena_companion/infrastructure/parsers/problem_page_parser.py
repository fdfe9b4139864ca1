"""Parser for extracting tasks from InfoArena problem pages."""

from bs4 import BeautifulSoup
from loguru import logger

from infoarena_companion.domain.exceptions import ParsingError
from infoarena_companion.domain.models import Task
from infoarena_companion.domain.task_builder import TaskBuilder

from .interfaces import ProblemParserProtocol
from .layout import parse_document
from .metadata_extractor import MetadataExtractor
from .sample_extractor import SampleExtractor
from .title_extractor import TitleExtractor

JUDGE_NAME = "InfoArena"


class InfoArenaProblemParser(ProblemParserProtocol):
    """Parser for extracting task data from InfoArena problem HTML pages."""

    MATCH_PATTERNS = [f"https://{domain}infoarena.ro/problema/*" for domain in ("", "www.")]

    def __init__(
        self,
        judge_name: str = JUDGE_NAME,
        java_main_class: str = "Main",
        title_extractor: TitleExtractor | None = None,
        metadata_extractor: MetadataExtractor | None = None,
        sample_extractor: SampleExtractor | None = None,
    ):
        """
        Initialize parser.

        Args:
            judge_name: Name used as the task group prefix
            java_main_class: Main class written into the Java language settings
            title_extractor: Extractor for the problem name
            metadata_extractor: Extractor for limits and IO mode
            sample_extractor: Extractor for sample tests
        """
        self.judge_name = judge_name
        self.java_main_class = java_main_class
        self.title_extractor = title_extractor or TitleExtractor()
        self.metadata_extractor = metadata_extractor or MetadataExtractor()
        self.sample_extractor = sample_extractor or SampleExtractor()

    def get_match_patterns(self) -> list[str]:
        return list(self.MATCH_PATTERNS)

    def create_builder(self) -> TaskBuilder:
        return TaskBuilder(self.judge_name, java_main_class=self.java_main_class)

    def parse(self, url: str, html: str, task: TaskBuilder | None = None) -> Task:
        """
        Parse problem page markup into a task.

        Fields are written into ``task`` as soon as they are extracted, so a
        caller that passes its own builder can inspect the partial result when
        a :class:`ParsingError` is raised.
        """
        logger.debug(f"Parsing problem page: {url}")

        if task is None:
            task = self.create_builder()
        task.set_url(url)

        try:
            soup = parse_document(html)

            task.set_name(self.title_extractor.extract(soup))
            self._apply_metadata(soup, task)

            for sample in self.sample_extractor.extract(html):
                task.add_test(sample.input, sample.output)

        except ParsingError as e:
            logger.error(f"Failed to parse problem page {url}: {e}")
            raise

        result = task.build()
        logger.info(f"Successfully parsed problem: {result.name} ({url})")
        return result

    def _apply_metadata(self, soup: BeautifulSoup, task: TaskBuilder) -> None:
        metadata = self.metadata_extractor.extract(soup)

        task.set_input(self.metadata_extractor.input_config(metadata))
        task.set_output(self.metadata_extractor.output_config(metadata))
        task.set_interactive(metadata.interactive)
        task.set_category(metadata.category)
        task.set_time_limit(metadata.time_limit_ms)
        task.set_memory_limit(metadata.memory_limit_mb)
