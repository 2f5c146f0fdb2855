from typing import Any

from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ChildStatusReference:
    name: str
    pipeline_task_name: str = ""
    kind: str = "TaskRun"


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class PipelineRunStatus:
    child_references: list[ChildStatusReference] = Field(default_factory=list)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class PipelineRun(Resource):
    API_VERSION = "tekton.dev/v1beta1"
    KIND = "PipelineRun"
    PLURAL = "pipelineruns"

    status: PipelineRunStatus = Field(default_factory=PipelineRunStatus)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class TaskRunResult:
    name: str
    # string or structured (array/object) payload, not interpreted here
    value: Any = None


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class TaskRunStatus:
    task_results: list[TaskRunResult] = Field(default_factory=list)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class TaskRun(Resource):
    API_VERSION = "tekton.dev/v1beta1"
    KIND = "TaskRun"
    PLURAL = "taskruns"

    status: TaskRunStatus = Field(default_factory=TaskRunStatus)

    def get_result(self, name: str) -> Any | None:
        return next((r.value for r in self.status.task_results if r.name == name), None)
