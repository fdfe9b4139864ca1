"""Parsers for extracting task data from problem pages."""

from .interfaces import ProblemParserProtocol
from .layout import DetailsTableSchema, detect_interactive, parse_document
from .metadata_extractor import MetadataExtractor
from .problem_page_parser import InfoArenaProblemParser
from .sample_extractor import SampleExtractor
from .text import trim_zero_width
from .title_extractor import TitleExtractor
from .url_matcher import URLMatcher

__all__ = [
    "DetailsTableSchema",
    "InfoArenaProblemParser",
    "MetadataExtractor",
    "ProblemParserProtocol",
    "SampleExtractor",
    "TitleExtractor",
    "URLMatcher",
    "detect_interactive",
    "parse_document",
    "trim_zero_width",
]
