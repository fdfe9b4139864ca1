"""Glob matching of URLs against the patterns a parser claims."""

import re
from fnmatch import translate

from loguru import logger


class URLMatcher:
    """Decides whether a URL belongs to a parser.

    Patterns are globs where ``*`` matches any run of characters, e.g.
    ``https://infoarena.ro/problema/*``.
    """

    def __init__(self, patterns: list[str]):
        self.patterns = list(patterns)
        self._compiled = [re.compile(translate(pattern)) for pattern in self.patterns]

    def matches(self, url: str) -> bool:
        """Check URL against every pattern."""
        matched = any(regex.match(url) for regex in self._compiled)
        logger.debug(f"URL {url} matched: {matched}")
        return matched
