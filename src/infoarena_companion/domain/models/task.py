"""Pydantic schemas for the finalized task record."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TestCase(_CamelModel):
    """Sample test shown on the problem page."""

    __test__ = False

    input: str
    output: str


class InputConfig(_CamelModel):
    """Where the solution reads its input from."""

    type: Literal["stdin", "file"] = "stdin"
    file_name: str | None = None


class OutputConfig(_CamelModel):
    """Where the solution writes its output to."""

    type: Literal["stdout", "file"] = "stdout"
    file_name: str | None = None


class JavaConfig(_CamelModel):
    main_class: str = "Main"
    task_class: str = ""


class Languages(_CamelModel):
    java: JavaConfig = Field(default_factory=JavaConfig)


class Batch(_CamelModel):
    id: str
    size: int = 1


class Task(_CamelModel):
    """Task record in the shape Competitive Companion sends to editors."""

    name: str
    group: str
    url: str
    interactive: bool = False
    memory_limit: int
    time_limit: int
    tests: list[TestCase] = Field(default_factory=list)
    test_type: Literal["single", "multiNumber"] = "single"
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    languages: Languages = Field(default_factory=Languages)
    batch: Batch

    def to_json(self) -> str:
        """Serialize with camelCase keys, omitting unset file names."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
