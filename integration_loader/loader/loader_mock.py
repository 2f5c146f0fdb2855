from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, override

from integration_loader.clients.object_store import ObjectStore
from integration_loader.loader.errors import MockNotConfiguredError
from integration_loader.loader.loader import Loader, ObjectLoader
from integration_loader.models import (
    Application,
    Component,
    DeploymentTarget,
    DeploymentTargetClaim,
    DeploymentTargetClass,
    Environment,
    IntegrationTestScenario,
    PipelineRun,
    Release,
    ReleasePlan,
    Snapshot,
    SnapshotEnvironmentBinding,
    TaskRun,
)


class Shape(Enum):
    ONE = auto()
    OPTIONAL = auto()
    MANY = auto()


class Unset(Enum):
    UNSET = auto()


UNSET = Unset.UNSET


class MockKey(Enum):
    """Identity of a stubbable operation and the result it must produce.

    Each operation has its own key, so stubbing one never affects another
    operation returning the same type.
    """

    ALL_ENVIRONMENTS = ("get_all_environments", Environment, Shape.MANY)
    RELEASES_WITH_SNAPSHOT = ("get_releases_with_snapshot", Release, Shape.MANY)
    APPLICATION_COMPONENTS = ("get_all_application_components", Component, Shape.MANY)
    SNAPSHOT_COMPONENTS = ("get_all_snapshot_components", Component, Shape.MANY)
    APPLICATION_FROM_SNAPSHOT = ("get_application_from_snapshot", Application, Shape.ONE)
    COMPONENT_FROM_SNAPSHOT = ("get_component_from_snapshot", Component, Shape.ONE)
    COMPONENT_FROM_PIPELINE_RUN = ("get_component_from_pipeline_run", Component, Shape.ONE)
    APPLICATION_FROM_PIPELINE_RUN = ("get_application_from_pipeline_run", Application, Shape.ONE)
    APPLICATION_FROM_COMPONENT = ("get_application_from_component", Application, Shape.ONE)
    ENVIRONMENT_FROM_PIPELINE_RUN = ("get_environment_from_integration_pipeline_run", Environment, Shape.ONE)
    SNAPSHOT_FROM_PIPELINE_RUN = ("get_snapshot_from_pipeline_run", Snapshot, Shape.ONE)
    DEPLOYMENT_TARGET_CLASS = ("find_available_deployment_target_class", DeploymentTargetClass, Shape.ONE)
    ALL_INTEGRATION_TEST_SCENARIOS = (
        "get_all_integration_test_scenarios_for_application",
        IntegrationTestScenario,
        Shape.MANY,
    )
    REQUIRED_INTEGRATION_TEST_SCENARIOS = (
        "get_required_integration_test_scenarios_for_application",
        IntegrationTestScenario,
        Shape.MANY,
    )
    DEPLOYMENT_TARGET_CLAIM = ("get_deployment_target_claim_for_environment", DeploymentTargetClaim, Shape.ONE)
    DEPLOYMENT_TARGET = ("get_deployment_target_for_deployment_target_claim", DeploymentTarget, Shape.ONE)
    SNAPSHOT_ENVIRONMENT_BINDING = (
        "find_existing_snapshot_environment_binding",
        SnapshotEnvironmentBinding,
        Shape.OPTIONAL,
    )
    SNAPSHOT_SCENARIO_PIPELINE_RUNS = ("get_all_pipeline_runs_for_snapshot_and_scenario", PipelineRun, Shape.MANY)
    BUILD_PIPELINE_RUNS = ("get_all_build_pipeline_runs_for_component", PipelineRun, Shape.MANY)
    ALL_SNAPSHOTS = ("get_all_snapshots", Snapshot, Shape.MANY)
    AUTO_RELEASE_PLANS = ("get_auto_release_plans_for_application", ReleasePlan, Shape.MANY)
    PIPELINE_RUN_TASK_RUNS = ("get_all_task_runs_for_pipeline_run", TaskRun, Shape.MANY)

    def __init__(self, operation: str, resource_type: type, shape: Shape):
        self.operation: str = operation
        self.resource_type: type = resource_type
        self.shape: Shape = shape

    def accepts(self, resource: Any) -> bool:
        match self.shape:
            case Shape.ONE:
                return isinstance(resource, self.resource_type)
            case Shape.OPTIONAL:
                return resource is None or isinstance(resource, self.resource_type)
            case Shape.MANY:
                return isinstance(resource, list) and all(isinstance(r, self.resource_type) for r in resource)


@dataclass(frozen=True)
class MockData:
    """Canned outcome for one operation.

    ``resource`` is checked against the key when the stub is built. An entry
    with an ``err`` raises it; an entry with neither is a broken test and
    fails the call with ``MockNotConfiguredError``.
    """

    key: MockKey
    resource: Any = UNSET
    err: Exception | None = None

    def __post_init__(self):
        if self.resource is not UNSET and not self.key.accepts(self.resource):
            expected = self.key.resource_type.__name__
            if self.key.shape is Shape.MANY:
                expected = f"list[{expected}]"
            raise TypeError(
                f"Mocked resource for {self.key.name} must be {expected}, got {type(self.resource).__name__}"
            )


class MockLoader(ObjectLoader):
    """ObjectLoader answering stubbed operations from canned data.

    Operations without a stub fall through to the wrapped loader, so a test
    can replace a single hop of a call chain and keep the rest real. The stub
    mapping is read-only once built; ``with_mocks`` derives a new loader.
    """

    def __init__(self, mocks: Iterable[MockData] = (), loader: ObjectLoader | None = None):
        self.loader: ObjectLoader = loader or Loader()
        # later entries for the same key win
        self.mocks: Mapping[MockKey, MockData] = MappingProxyType({m.key: m for m in mocks})

    def with_mocks(self, *mocks: MockData) -> "MockLoader":
        return MockLoader([*self.mocks.values(), *mocks], loader=self.loader)

    def _resolve(self, key: MockKey, *args: Any) -> Any:
        data = self.mocks.get(key)
        if data is None:
            return getattr(self.loader, key.operation)(*args)
        if data.err is not None:
            raise data.err
        if data.resource is UNSET:
            raise MockNotConfiguredError(f"Mocked data for {key.name} has neither a resource nor an error")
        if key.shape is Shape.MANY:
            return list(data.resource)
        return data.resource

    @override
    def get_all_environments(self, client: ObjectStore, application: Application) -> list[Environment]:
        return self._resolve(MockKey.ALL_ENVIRONMENTS, client, application)

    @override
    def get_releases_with_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> list[Release]:
        return self._resolve(MockKey.RELEASES_WITH_SNAPSHOT, client, snapshot)

    @override
    def get_all_application_components(self, client: ObjectStore, application: Application) -> list[Component]:
        return self._resolve(MockKey.APPLICATION_COMPONENTS, client, application)

    @override
    def get_all_snapshot_components(self, client: ObjectStore, snapshot: Snapshot) -> list[Component]:
        return self._resolve(MockKey.SNAPSHOT_COMPONENTS, client, snapshot)

    @override
    def get_application_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Application:
        return self._resolve(MockKey.APPLICATION_FROM_SNAPSHOT, client, snapshot)

    @override
    def get_component_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Component:
        return self._resolve(MockKey.COMPONENT_FROM_SNAPSHOT, client, snapshot)

    @override
    def get_component_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Component:
        return self._resolve(MockKey.COMPONENT_FROM_PIPELINE_RUN, client, pipeline_run)

    @override
    def get_application_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Application:
        return self._resolve(MockKey.APPLICATION_FROM_PIPELINE_RUN, client, pipeline_run)

    @override
    def get_application_from_component(self, client: ObjectStore, component: Component) -> Application:
        return self._resolve(MockKey.APPLICATION_FROM_COMPONENT, client, component)

    @override
    def get_environment_from_integration_pipeline_run(
        self, client: ObjectStore, pipeline_run: PipelineRun
    ) -> Environment:
        return self._resolve(MockKey.ENVIRONMENT_FROM_PIPELINE_RUN, client, pipeline_run)

    @override
    def get_snapshot_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Snapshot:
        return self._resolve(MockKey.SNAPSHOT_FROM_PIPELINE_RUN, client, pipeline_run)

    @override
    def find_available_deployment_target_class(self, client: ObjectStore) -> DeploymentTargetClass:
        return self._resolve(MockKey.DEPLOYMENT_TARGET_CLASS, client)

    @override
    def get_all_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        return self._resolve(MockKey.ALL_INTEGRATION_TEST_SCENARIOS, client, application)

    @override
    def get_required_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        return self._resolve(MockKey.REQUIRED_INTEGRATION_TEST_SCENARIOS, client, application)

    @override
    def get_deployment_target_claim_for_environment(
        self, client: ObjectStore, environment: Environment
    ) -> DeploymentTargetClaim:
        return self._resolve(MockKey.DEPLOYMENT_TARGET_CLAIM, client, environment)

    @override
    def get_deployment_target_for_deployment_target_claim(
        self, client: ObjectStore, claim: DeploymentTargetClaim
    ) -> DeploymentTarget:
        return self._resolve(MockKey.DEPLOYMENT_TARGET, client, claim)

    @override
    def find_existing_snapshot_environment_binding(
        self, client: ObjectStore, application: Application, environment: Environment
    ) -> SnapshotEnvironmentBinding | None:
        return self._resolve(MockKey.SNAPSHOT_ENVIRONMENT_BINDING, client, application, environment)

    @override
    def get_all_pipeline_runs_for_snapshot_and_scenario(
        self, client: ObjectStore, snapshot: Snapshot, scenario: IntegrationTestScenario
    ) -> list[PipelineRun]:
        return self._resolve(MockKey.SNAPSHOT_SCENARIO_PIPELINE_RUNS, client, snapshot, scenario)

    @override
    def get_all_build_pipeline_runs_for_component(
        self, client: ObjectStore, component: Component
    ) -> list[PipelineRun]:
        return self._resolve(MockKey.BUILD_PIPELINE_RUNS, client, component)

    @override
    def get_all_snapshots(self, client: ObjectStore, application: Application) -> list[Snapshot]:
        return self._resolve(MockKey.ALL_SNAPSHOTS, client, application)

    @override
    def get_auto_release_plans_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[ReleasePlan]:
        return self._resolve(MockKey.AUTO_RELEASE_PLANS, client, application)

    @override
    def get_all_task_runs_for_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> list[TaskRun]:
        return self._resolve(MockKey.PIPELINE_RUN_TASK_RUNS, client, pipeline_run)
