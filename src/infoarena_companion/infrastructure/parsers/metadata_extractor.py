"""Extraction of limits and IO mode from the problem details table."""

import re

from bs4 import BeautifulSoup
from loguru import logger

from infoarena_companion.domain.exceptions import InsufficientDataError, MissingElementError
from infoarena_companion.domain.models import (
    InputConfig,
    OutputConfig,
    ProblemFiles,
    ProblemMetadata,
)

from .layout import (
    DETAILS_SCHEMA,
    DETAILS_TABLE_SELECTOR,
    DetailsTableSchema,
    detect_interactive,
    table_body,
)
from .text import trim_zero_width

TIME_LIMIT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*sec", re.IGNORECASE)
MEMORY_LIMIT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*KB", re.IGNORECASE)


class MetadataExtractor:
    """Decodes the fixed-layout details table of a problem page.

    The table lists, among other things, the input/output file names, the
    problem source, the time limit per test and the memory limit. Cells are
    addressed through a :class:`DetailsTableSchema`.
    """

    def __init__(self, schema: DetailsTableSchema = DETAILS_SCHEMA):
        self.schema = schema

    def extract(self, soup: BeautifulSoup) -> ProblemMetadata:
        """Locate and decode the details table."""
        cells = self._extract_cells(soup)

        metadata = ProblemMetadata(
            files=self._decode_files(cells[self.schema.files]),
            category=cells[self.schema.category],
            time_limit_seconds=self._decode_time_limit(cells[self.schema.time_limit]),
            memory_limit_kb=self._decode_memory_limit(cells[self.schema.memory_limit]),
            interactive=detect_interactive(soup),
        )

        logger.debug(f"Decoded problem metadata: {metadata}")
        return metadata

    @staticmethod
    def input_config(metadata: ProblemMetadata) -> InputConfig:
        """Interactive problems always talk over standard streams."""
        file_name = metadata.files.input
        if metadata.interactive or not file_name.endswith(".in"):
            return InputConfig(type="stdin")
        return InputConfig(type="file", file_name=file_name)

    @staticmethod
    def output_config(metadata: ProblemMetadata) -> OutputConfig:
        file_name = metadata.files.output
        if metadata.interactive or not file_name.endswith(".out"):
            return OutputConfig(type="stdout")
        return OutputConfig(type="file", file_name=file_name)

    def _extract_cells(self, soup: BeautifulSoup) -> list[str]:
        table = soup.select_one(DETAILS_TABLE_SELECTOR)
        if not table:
            raise MissingElementError("Details table not found")

        cells = [cell.get_text().strip() for cell in table_body(table).find_all("td")]
        if len(cells) < self.schema.min_cells:
            raise InsufficientDataError(
                f"Insufficient details found in the table: expected at least "
                f"{self.schema.min_cells} cells, found {len(cells)}"
            )

        return cells

    def _decode_files(self, text: str) -> ProblemFiles:
        """Decode an "input-file, output-file" pair."""
        names = text.split(",")
        input_name = trim_zero_width(names[0])
        output_name = trim_zero_width(names[1]) if len(names) > 1 else ""
        return ProblemFiles(input=input_name, output=output_name)

    def _decode_time_limit(self, text: str) -> float:
        match = TIME_LIMIT_PATTERN.search(text)
        if not match:
            logger.warning(f"Time limit not recognized in {text!r}, using 0")
            return 0.0
        return float(match.group(1))

    def _decode_memory_limit(self, text: str) -> int:
        match = MEMORY_LIMIT_PATTERN.search(text)
        if not match:
            logger.warning(f"Memory limit not recognized in {text!r}, using 0")
            return 0
        # Fractional kilobytes are dropped
        return int(float(match.group(1)))
