"""Value objects for data decoded from a problem page."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemFiles:
    """Input/output file names listed in the details table."""

    input: str
    output: str


@dataclass(frozen=True)
class ProblemMetadata:
    """Limits and IO mode decoded from the details table."""

    files: ProblemFiles
    category: str
    time_limit_seconds: float = 0
    memory_limit_kb: int = 0
    interactive: bool = False

    @property
    def time_limit_ms(self) -> int:
        """Time limit in milliseconds."""
        return round(self.time_limit_seconds * 1000)

    @property
    def memory_limit_mb(self) -> int:
        """Memory limit in megabytes, rounded up."""
        return math.ceil(self.memory_limit_kb / 1024)


@dataclass(frozen=True)
class SampleCase:
    """One example input/output pair."""

    input: str
    output: str
