"""Domain models package."""

from .problem import ProblemFiles, ProblemMetadata, SampleCase
from .task import Batch, InputConfig, JavaConfig, Languages, OutputConfig, Task, TestCase

__all__ = [
    "Batch",
    "InputConfig",
    "JavaConfig",
    "Languages",
    "OutputConfig",
    "ProblemFiles",
    "ProblemMetadata",
    "SampleCase",
    "Task",
    "TestCase",
]
