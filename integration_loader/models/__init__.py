from .resource import ObjectMeta, Resource
from .application import Application
from .component import Component
from .snapshot import Snapshot, SnapshotComponent
from .environment import Environment
from .deployment_target import DeploymentTarget, DeploymentTargetClaim, DeploymentTargetClass
from .integration_test_scenario import IntegrationTestScenario
from .pipeline_run import ChildStatusReference, PipelineRun, TaskRun, TaskRunResult
from .snapshot_environment_binding import SnapshotEnvironmentBinding
from .release import Release, ReleasePlan
from .wrappers import ResourceList

RESOURCE_TYPES: dict[str, type[Resource]] = {
    cls.KIND: cls
    for cls in (
        Application,
        Component,
        Snapshot,
        Environment,
        DeploymentTargetClass,
        DeploymentTarget,
        DeploymentTargetClaim,
        IntegrationTestScenario,
        PipelineRun,
        TaskRun,
        SnapshotEnvironmentBinding,
        ReleasePlan,
        Release,
    )
}

__all__ = [
    "ObjectMeta",
    "Resource",
    "Application",
    "Component",
    "Snapshot",
    "SnapshotComponent",
    "Environment",
    "DeploymentTargetClass",
    "DeploymentTarget",
    "DeploymentTargetClaim",
    "IntegrationTestScenario",
    "ChildStatusReference",
    "PipelineRun",
    "TaskRun",
    "TaskRunResult",
    "SnapshotEnvironmentBinding",
    "ReleasePlan",
    "Release",
    "ResourceList",
    "RESOURCE_TYPES",
]
