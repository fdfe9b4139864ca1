"""Incremental builder for task records."""

import re
import uuid

from loguru import logger

from .models.task import (
    Batch,
    InputConfig,
    JavaConfig,
    Languages,
    OutputConfig,
    Task,
    TestCase,
)


class TaskBuilder:
    """Accumulates task fields as a parser produces them.

    Every setter returns the builder so calls can be chained. Fields stay
    readable while the builder is being filled, which lets a caller inspect a
    half-built task after a parse failure.
    """

    def __init__(self, judge: str, java_main_class: str = "Main"):
        self.judge = judge
        self.category = ""
        self.group = judge
        self.name = ""
        self.url = ""
        self.interactive = False
        self.memory_limit = 1024
        self.time_limit = 1000
        self.tests: list[TestCase] = []
        self.input = InputConfig()
        self.output = OutputConfig()
        self.java_main_class = java_main_class
        self.java_task_class = ""

    def set_name(self, name: str) -> "TaskBuilder":
        self.name = name
        self.java_task_class = self._to_task_class(name)
        return self

    def set_url(self, url: str) -> "TaskBuilder":
        self.url = url
        return self

    def set_category(self, category: str) -> "TaskBuilder":
        self.category = category
        self.group = f"{self.judge} - {category}" if category else self.judge
        return self

    def set_interactive(self, interactive: bool) -> "TaskBuilder":
        self.interactive = interactive
        return self

    def set_time_limit(self, time_limit: int) -> "TaskBuilder":
        """Set time limit in milliseconds."""
        self.time_limit = time_limit
        return self

    def set_memory_limit(self, memory_limit: int) -> "TaskBuilder":
        """Set memory limit in megabytes."""
        self.memory_limit = memory_limit
        return self

    def set_input(self, config: InputConfig) -> "TaskBuilder":
        self.input = config
        return self

    def set_output(self, config: OutputConfig) -> "TaskBuilder":
        self.output = config
        return self

    def add_test(self, input: str, output: str) -> "TaskBuilder":
        self.tests.append(TestCase(input=input, output=output))
        return self

    def build(self) -> Task:
        """Finalize into an immutable task record."""
        task = Task(
            name=self.name,
            group=self.group,
            url=self.url,
            interactive=self.interactive,
            memory_limit=self.memory_limit,
            time_limit=self.time_limit,
            tests=list(self.tests),
            input=self.input,
            output=self.output,
            languages=Languages(
                java=JavaConfig(main_class=self.java_main_class, task_class=self.java_task_class)
            ),
            # Derived from the URL so that parsing the same page twice gives the same record
            batch=Batch(id=str(uuid.uuid5(uuid.NAMESPACE_URL, self.url)), size=1),
        )

        logger.debug(f"Built task '{task.name}' with {len(task.tests)} test(s)")
        return task

    @staticmethod
    def _to_task_class(name: str) -> str:
        """Turn a problem name into a Java class name, e.g. "Suma si produs" -> "SumaSiProdus"."""
        words = re.findall(r"[A-Za-z0-9]+", name)
        task_class = "".join(word[0].upper() + word[1:] for word in words)

        if not task_class or task_class[0].isdigit():
            task_class = "Task" + task_class

        return task_class
