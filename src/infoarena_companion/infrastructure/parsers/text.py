"""Text normalization shared by the extractors."""

import re

# Zero-width space/non-joiner/joiner and the byte order mark
ZERO_WIDTH_PATTERN = re.compile(r"[\u200b-\u200d\ufeff]")


def trim_zero_width(text: str) -> str:
    """Remove invisible characters left by copy-pasted page content, then strip."""
    return ZERO_WIDTH_PATTERN.sub("", text).strip()
