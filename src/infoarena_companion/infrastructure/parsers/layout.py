"""Page layout conventions of InfoArena problem pages."""

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag
from loguru import logger

# The first h1 is the site banner; the problem name is the second one.
TITLE_HEADING_INDEX = 1

# Interactive problems carry the marker at the start of the second h2.
INTERACTIVE_HEADING_INDEX = 1
INTERACTIVE_MARKER = "Interac"

# First header cell of the example table reading "stdin" means input is on the left.
STDIN_HEADER = "stdin"

DETAILS_TABLE_SELECTOR = 'table[cellspacing="0"]'
EXAMPLE_TABLE_SELECTOR = "h2 + table.example"


@dataclass(frozen=True)
class DetailsTableSchema:
    """Positions of the decoded fields among the details table cells."""

    files: int = 1
    category: int = 3
    time_limit: int = 9
    memory_limit: int = 11
    min_cells: int = 12


DETAILS_SCHEMA = DetailsTableSchema()


def parse_document(html: str) -> BeautifulSoup:
    """Parse page markup into a document tree."""
    return BeautifulSoup(html, "lxml")


def table_body(table: Tag) -> Tag:
    """Return the table's tbody, or the table itself when the markup omits it."""
    return table.find("tbody") or table


def detect_interactive(soup: BeautifulSoup) -> bool:
    """Check whether the page describes an interactive problem."""
    headings = soup.find_all("h2")
    if len(headings) <= INTERACTIVE_HEADING_INDEX:
        return False

    text = headings[INTERACTIVE_HEADING_INDEX].get_text()
    interactive = text.startswith(INTERACTIVE_MARKER)
    logger.debug(f"Interactive marker heading: {text!r} -> {interactive}")
    return interactive
