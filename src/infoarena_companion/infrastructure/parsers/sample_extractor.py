"""Extraction of sample tests from the example table."""

from bs4 import Tag
from loguru import logger

from infoarena_companion.domain.exceptions import MissingElementError, NoTestCasesError
from infoarena_companion.domain.models import SampleCase

from .layout import (
    EXAMPLE_TABLE_SELECTOR,
    STDIN_HEADER,
    detect_interactive,
    parse_document,
    table_body,
)
from .text import trim_zero_width


class SampleExtractor:
    """Reads the example table that follows an h2 heading.

    Batch problems get one sample per row. Interactive problems show a single
    conversation split over rows, one exchange per row, and get one sample
    holding the whole conversation.
    """

    def extract(self, html: str) -> list[SampleCase]:
        """Parse markup on its own and extract the samples."""
        soup = parse_document(html)

        table = soup.select_one(EXAMPLE_TABLE_SELECTOR)
        if not table:
            raise MissingElementError("Example table not found")

        rows = table_body(table).find_all("tr")
        if not rows:
            raise NoTestCasesError("No test cases found in the example table")

        input_first = self._is_stdin_first(rows[0])

        if detect_interactive(soup):
            samples = [self._extract_interactive(rows[1:], input_first)]
        else:
            samples = self._extract_batch(rows[1:])

        logger.debug(f"Extracted {len(samples)} sample(s)")
        return samples

    @staticmethod
    def _is_stdin_first(header_row: Tag) -> bool:
        headers = [trim_zero_width(cell.get_text()) for cell in header_row.find_all("th")]
        return bool(headers) and headers[0] == STDIN_HEADER

    @staticmethod
    def _row_texts(row: Tag) -> tuple[str, str] | None:
        cells = row.find_all("td")
        if len(cells) < 2:
            return None
        return trim_zero_width(cells[0].get_text()), trim_zero_width(cells[1].get_text())

    def _extract_batch(self, rows: list[Tag]) -> list[SampleCase]:
        samples = []
        for row in rows:
            texts = self._row_texts(row)
            if texts is None:
                # TODO: find out whether short rows are only layout artifacts or hide real samples
                logger.warning("Skipping example row with fewer than two cells")
                continue
            samples.append(SampleCase(input=texts[0], output=texts[1]))
        return samples

    def _extract_interactive(self, rows: list[Tag], input_first: bool) -> SampleCase:
        left = ""
        right = ""
        for row in rows:
            texts = self._row_texts(row)
            if texts is None:
                continue
            left += texts[0] + "\n"
            right += texts[1] + "\n"

        # Empty cells leave doubled newlines
        left = left.replace("\n\n", "\n")
        right = right.replace("\n\n", "\n")

        if input_first:
            return SampleCase(input=left, output=right)
        return SampleCase(input=right, output=left)
