"""Extraction of the problem name."""

from bs4 import BeautifulSoup
from loguru import logger

from infoarena_companion.domain.exceptions import MissingElementError

from .layout import TITLE_HEADING_INDEX


class TitleExtractor:
    """Reads the problem name from the second h1 of the page."""

    def extract(self, soup: BeautifulSoup) -> str:
        headings = soup.find_all("h1")
        if len(headings) <= TITLE_HEADING_INDEX:
            raise MissingElementError(
                f"Title element not found: expected at least {TITLE_HEADING_INDEX + 1} h1 headings, "
                f"found {len(headings)}"
            )

        title = headings[TITLE_HEADING_INDEX].get_text().strip()
        logger.debug(f"Extracted title: {title}")
        return title
