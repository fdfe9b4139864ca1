"""Exceptions raised while extracting tasks from problem pages."""


class ParsingError(ValueError):
    """Error parsing HTML content of a problem page."""

    pass


class MissingElementError(ParsingError):
    """A required structural anchor (heading, table) is absent from the page."""

    pass


class InsufficientDataError(ParsingError):
    """A table exists but holds fewer cells than the page layout requires."""

    pass


class NoTestCasesError(ParsingError):
    """The example table is present but has no rows."""

    pass


class UnsupportedURLError(ParsingError):
    """URL is not claimed by any of the parser's match patterns."""

    pass
