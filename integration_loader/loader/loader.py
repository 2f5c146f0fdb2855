import logging
from abc import ABC, abstractmethod
from typing import override

from integration_loader.clients.object_store import ObjectStore, R
from integration_loader.loader import labels
from integration_loader.loader.errors import MissingReferenceError, NotFoundError
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
    Resource,
    Snapshot,
    SnapshotEnvironmentBinding,
    TaskRun,
)
from integration_loader.models.deployment_target import DEVSANDBOX_PROVISIONER
from integration_loader.utils.label_selector import LabelSelector, not_in
from integration_loader.utils.logging import setup_logger


class ObjectLoader(ABC):
    """Relationship queries over the pipeline object graph.

    Every operation takes the store first and resolves inside the namespace
    of its input object. Single-object operations raise ``NotFoundError``
    when the related object is missing; list operations return an empty list
    when nothing is related. Store errors propagate unchanged.
    """

    @abstractmethod
    def get_all_environments(self, client: ObjectStore, application: Application) -> list[Environment]:
        ...

    @abstractmethod
    def get_releases_with_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> list[Release]:
        ...

    @abstractmethod
    def get_all_application_components(self, client: ObjectStore, application: Application) -> list[Component]:
        ...

    @abstractmethod
    def get_all_snapshot_components(self, client: ObjectStore, snapshot: Snapshot) -> list[Component]:
        ...

    @abstractmethod
    def get_application_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Application:
        ...

    @abstractmethod
    def get_component_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Component:
        ...

    @abstractmethod
    def get_component_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Component:
        ...

    @abstractmethod
    def get_application_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Application:
        ...

    @abstractmethod
    def get_application_from_component(self, client: ObjectStore, component: Component) -> Application:
        ...

    @abstractmethod
    def get_environment_from_integration_pipeline_run(
        self, client: ObjectStore, pipeline_run: PipelineRun
    ) -> Environment:
        ...

    @abstractmethod
    def get_snapshot_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Snapshot:
        ...

    @abstractmethod
    def find_available_deployment_target_class(self, client: ObjectStore) -> DeploymentTargetClass:
        ...

    @abstractmethod
    def get_all_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        ...

    @abstractmethod
    def get_required_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        ...

    @abstractmethod
    def get_deployment_target_claim_for_environment(
        self, client: ObjectStore, environment: Environment
    ) -> DeploymentTargetClaim:
        ...

    @abstractmethod
    def get_deployment_target_for_deployment_target_claim(
        self, client: ObjectStore, claim: DeploymentTargetClaim
    ) -> DeploymentTarget:
        ...

    @abstractmethod
    def find_existing_snapshot_environment_binding(
        self, client: ObjectStore, application: Application, environment: Environment
    ) -> SnapshotEnvironmentBinding | None:
        ...

    @abstractmethod
    def get_all_pipeline_runs_for_snapshot_and_scenario(
        self, client: ObjectStore, snapshot: Snapshot, scenario: IntegrationTestScenario
    ) -> list[PipelineRun]:
        ...

    @abstractmethod
    def get_all_build_pipeline_runs_for_component(
        self, client: ObjectStore, component: Component
    ) -> list[PipelineRun]:
        ...

    @abstractmethod
    def get_all_snapshots(self, client: ObjectStore, application: Application) -> list[Snapshot]:
        ...

    @abstractmethod
    def get_auto_release_plans_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[ReleasePlan]:
        ...

    @abstractmethod
    def get_all_task_runs_for_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> list[TaskRun]:
        ...


class Loader(ObjectLoader):
    def __init__(self):
        self.logger: logging.Logger = setup_logger("Loader")

    @override
    def get_all_environments(self, client: ObjectStore, application: Application) -> list[Environment]:
        return self._list(client, Environment, namespace=application.namespace)

    @override
    def get_releases_with_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> list[Release]:
        releases = self._list(client, Release, namespace=snapshot.namespace)
        return [r for r in releases if r.spec.snapshot == snapshot.name]

    @override
    def get_all_application_components(self, client: ObjectStore, application: Application) -> list[Component]:
        components = self._list(client, Component, namespace=application.namespace)
        return [c for c in components if c.spec.application == application.name]

    @override
    def get_all_snapshot_components(self, client: ObjectStore, snapshot: Snapshot) -> list[Component]:
        # Components of the same application may have been added after the
        # snapshot was taken, only the ones it actually lists belong to it.
        components = self._list(client, Component, namespace=snapshot.namespace)
        members = snapshot.component_names
        return [
            c for c in components if c.spec.application == snapshot.spec.application and c.name in members
        ]

    @override
    def get_application_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Application:
        name = self._require(snapshot.spec.application, Application, "spec.application", snapshot)
        return self._get(client, Application, name, snapshot)

    @override
    def get_component_from_snapshot(self, client: ObjectStore, snapshot: Snapshot) -> Component:
        name = self._from_label(snapshot, labels.COMPONENT_LABEL, Component)
        return self._get(client, Component, name, snapshot)

    @override
    def get_component_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Component:
        name = self._from_label(pipeline_run, labels.COMPONENT_LABEL, Component)
        return self._get(client, Component, name, pipeline_run)

    @override
    def get_application_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Application:
        name = self._from_label(pipeline_run, labels.APPLICATION_LABEL, Application)
        return self._get(client, Application, name, pipeline_run)

    @override
    def get_application_from_component(self, client: ObjectStore, component: Component) -> Application:
        name = self._require(component.spec.application, Application, "spec.application", component)
        return self._get(client, Application, name, component)

    @override
    def get_environment_from_integration_pipeline_run(
        self, client: ObjectStore, pipeline_run: PipelineRun
    ) -> Environment:
        name = self._from_label(pipeline_run, labels.ENVIRONMENT_LABEL, Environment)
        return self._get(client, Environment, name, pipeline_run)

    @override
    def get_snapshot_from_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> Snapshot:
        name = self._from_label(pipeline_run, labels.SNAPSHOT_LABEL, Snapshot)
        return self._get(client, Snapshot, name, pipeline_run)

    @override
    def find_available_deployment_target_class(self, client: ObjectStore) -> DeploymentTargetClass:
        # TODO: confirm the tie-break with the environment provisioning owners
        # if more than one devsandbox class can exist; listing order wins today.
        classes = self._list(client, DeploymentTargetClass)
        found = next((c for c in classes if c.spec.provisioner == DEVSANDBOX_PROVISIONER), None)
        if found is None:
            raise NotFoundError(
                DeploymentTargetClass.KIND,
                "",
                message=f"No DeploymentTargetClass with provisioner {DEVSANDBOX_PROVISIONER} found",
            )
        return found

    @override
    def get_all_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        scenarios = self._list(client, IntegrationTestScenario, namespace=application.namespace)
        return [s for s in scenarios if s.spec.application == application.name]

    @override
    def get_required_integration_test_scenarios_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[IntegrationTestScenario]:
        # scenarios without the optional label are required
        selector = LabelSelector(requirements=(not_in(labels.OPTIONAL_SCENARIO_LABEL, "true"),))
        scenarios = self._list(client, IntegrationTestScenario, namespace=application.namespace, selector=selector)
        return [s for s in scenarios if s.spec.application == application.name]

    @override
    def get_deployment_target_claim_for_environment(
        self, client: ObjectStore, environment: Environment
    ) -> DeploymentTargetClaim:
        name = self._require(
            environment.claim_name,
            DeploymentTargetClaim,
            "spec.configuration.target.deploymentTargetClaim.claimName",
            environment,
        )
        return self._get(client, DeploymentTargetClaim, name, environment)

    @override
    def get_deployment_target_for_deployment_target_claim(
        self, client: ObjectStore, claim: DeploymentTargetClaim
    ) -> DeploymentTarget:
        name = self._require(claim.spec.target_name, DeploymentTarget, "spec.targetName", claim)
        return self._get(client, DeploymentTarget, name, claim)

    @override
    def find_existing_snapshot_environment_binding(
        self, client: ObjectStore, application: Application, environment: Environment
    ) -> SnapshotEnvironmentBinding | None:
        bindings = self._list(client, SnapshotEnvironmentBinding, namespace=application.namespace)
        return next(
            (
                b
                for b in bindings
                if b.spec.environment == environment.name and b.spec.application == application.name
            ),
            None,
        )

    @override
    def get_all_pipeline_runs_for_snapshot_and_scenario(
        self, client: ObjectStore, snapshot: Snapshot, scenario: IntegrationTestScenario
    ) -> list[PipelineRun]:
        # build runs carry the same snapshot and scenario labels
        selector = LabelSelector(
            match_labels={
                labels.PIPELINE_TYPE_LABEL: labels.PIPELINE_TYPE_TEST,
                labels.SNAPSHOT_LABEL: snapshot.name,
                labels.SCENARIO_LABEL: scenario.name,
            }
        )
        return self._list(client, PipelineRun, namespace=snapshot.namespace, selector=selector)

    @override
    def get_all_build_pipeline_runs_for_component(
        self, client: ObjectStore, component: Component
    ) -> list[PipelineRun]:
        selector = LabelSelector(
            match_labels={
                labels.PIPELINE_TYPE_LABEL: labels.PIPELINE_TYPE_BUILD,
                labels.COMPONENT_LABEL: component.name,
            }
        )
        return self._list(client, PipelineRun, namespace=component.namespace, selector=selector)

    @override
    def get_all_snapshots(self, client: ObjectStore, application: Application) -> list[Snapshot]:
        snapshots = self._list(client, Snapshot, namespace=application.namespace)
        return [s for s in snapshots if s.spec.application == application.name]

    @override
    def get_auto_release_plans_for_application(
        self, client: ObjectStore, application: Application
    ) -> list[ReleasePlan]:
        # only an explicit "false" opts a plan out, a missing label means auto-release
        selector = LabelSelector(requirements=(not_in(labels.AUTO_RELEASE_LABEL, "false"),))
        plans = self._list(client, ReleasePlan, namespace=application.namespace, selector=selector)
        return [p for p in plans if p.spec.application == application.name]

    @override
    def get_all_task_runs_for_pipeline_run(self, client: ObjectStore, pipeline_run: PipelineRun) -> list[TaskRun]:
        return [
            self._get(client, TaskRun, ref.name, pipeline_run)
            for ref in pipeline_run.status.child_references
            if ref.kind == TaskRun.KIND
        ]

    def _list(
        self,
        client: ObjectStore,
        resource_type: type[R],
        namespace: str = "",
        selector: LabelSelector | None = None,
    ) -> list[R]:
        resources = client.list(resource_type, namespace=namespace, selector=selector)
        self.logger.debug(
            f"Listed {len(resources)} {resource_type.PLURAL} in namespace {namespace!r} selector {str(selector or '')!r}"
        )
        return resources

    def _get(self, client: ObjectStore, resource_type: type[R], name: str, owner: Resource) -> R:
        self.logger.debug(f"Resolving {resource_type.KIND} {name} for {owner.KIND} {owner.namespace}/{owner.name}")
        return client.get(resource_type, name, namespace=owner.namespace)

    @staticmethod
    def _from_label(owner: Resource, label: str, resource_type: type[Resource]) -> str:
        return Loader._require(owner.labels.get(label, ""), resource_type, f"label {label}", owner)

    @staticmethod
    def _require(name: str, resource_type: type[Resource], reference: str, owner: Resource) -> str:
        if not name:
            raise MissingReferenceError(resource_type.KIND, reference, f"{owner.KIND} {owner.namespace}/{owner.name}")
        return name
