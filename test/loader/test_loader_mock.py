import os
from unittest.mock import MagicMock

import pytest

from integration_loader.clients.in_memory_store import InMemoryStore
from integration_loader.loader import (
    Loader,
    MockData,
    MockKey,
    MockLoader,
    MockNotConfiguredError,
    NotFoundError,
    ObjectLoader,
)
from integration_loader.models import (
    Application,
    Component,
    Environment,
    IntegrationTestScenario,
    ObjectMeta,
    PipelineRun,
    ReleasePlan,
    Snapshot,
    SnapshotEnvironmentBinding,
)

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
NAMESPACE = "default"


@pytest.fixture
def store():
    return InMemoryStore.from_file(os.path.join(ASSETS_DIR, "pipeline-graph.yaml"))


@pytest.fixture
def snapshot(store):
    return store.get(Snapshot, "snapshot-sample", NAMESPACE)


@pytest.fixture
def application(store):
    return store.get(Application, "application-sample", NAMESPACE)


@pytest.fixture
def pipeline_run(store):
    return store.get(PipelineRun, "pipelinerun-sample", NAMESPACE)


def meta(name):
    return ObjectMeta(name=name, namespace=NAMESPACE)


def resolve_deployment(loader: ObjectLoader, client, pipeline_run):
    """Walks pipeline run -> snapshot -> application -> components, and the environment chain."""
    snapshot = loader.get_snapshot_from_pipeline_run(client, pipeline_run)
    application = loader.get_application_from_snapshot(client, snapshot)
    components = loader.get_all_snapshot_components(client, snapshot)
    environment = loader.get_environment_from_integration_pipeline_run(client, pipeline_run)
    claim = loader.get_deployment_target_claim_for_environment(client, environment)
    target = loader.get_deployment_target_for_deployment_target_claim(client, claim)
    return application, components, target


def test_mock_loader_is_an_object_loader():
    assert isinstance(MockLoader(), ObjectLoader)
    assert isinstance(MockLoader().loader, Loader)


def test_unmocked_operations_fall_through(store, snapshot, application):
    loader = MockLoader()
    assert loader.get_application_from_snapshot(store, snapshot) == application
    assert [c.name for c in loader.get_all_snapshot_components(store, snapshot)] == ["component-sample"]


def test_mocked_resource_is_returned(store, snapshot):
    mocked = Application(metadata=meta("mocked-application"))
    loader = MockLoader([MockData(MockKey.APPLICATION_FROM_SNAPSHOT, resource=mocked)])
    assert loader.get_application_from_snapshot(store, snapshot) is mocked


def test_mocked_error_is_raised(store, snapshot):
    error = NotFoundError("Application", "application-sample", NAMESPACE)
    loader = MockLoader([MockData(MockKey.APPLICATION_FROM_SNAPSHOT, err=error)])
    with pytest.raises(NotFoundError) as exc_info:
        loader.get_application_from_snapshot(store, snapshot)
    assert exc_info.value is error


def test_mocked_operations_never_touch_the_store(snapshot):
    client = MagicMock()
    mocked = [Component(metadata=meta("mocked-component"))]
    loader = MockLoader([MockData(MockKey.SNAPSHOT_COMPONENTS, resource=mocked)])

    assert loader.get_all_snapshot_components(client, snapshot) == mocked
    client.get.assert_not_called()
    client.list.assert_not_called()


def test_stub_overrides_one_hop_of_a_call_chain(store, pipeline_run):
    error = RuntimeError("application lookup failed")
    loader = MockLoader([MockData(MockKey.APPLICATION_FROM_SNAPSHOT, err=error)])
    spy = MagicMock(wraps=store)

    with pytest.raises(RuntimeError, match="application lookup failed"):
        resolve_deployment(loader, spy, pipeline_run)

    # the snapshot hop before the stubbed one still queried the store
    spy.get.assert_called_once_with(Snapshot, "snapshot-sample", namespace=NAMESPACE)


def test_unstubbed_hops_still_resolve_for_real(store, pipeline_run):
    mocked_components = [Component(metadata=meta("mocked-component"))]
    loader = MockLoader([MockData(MockKey.SNAPSHOT_COMPONENTS, resource=mocked_components)])

    application, components, target = resolve_deployment(loader, store, pipeline_run)

    assert application.name == "application-sample"
    assert components == mocked_components
    assert target.name == "dt-sample"


def test_multiple_stubs_coexist(store, snapshot, application):
    mocked_env = Environment(metadata=meta("mocked-env"))
    mocked_plans = [ReleasePlan(metadata=meta("mocked-plan"))]
    loader = MockLoader(
        [
            MockData(MockKey.ALL_ENVIRONMENTS, resource=[mocked_env]),
            MockData(MockKey.AUTO_RELEASE_PLANS, resource=mocked_plans),
        ]
    )

    assert loader.get_all_environments(store, application) == [mocked_env]
    assert loader.get_auto_release_plans_for_application(store, application) == mocked_plans
    assert loader.get_application_from_snapshot(store, snapshot) == application


def test_operations_sharing_a_result_type_are_stubbed_independently(store, pipeline_run):
    mocked_env = Environment(metadata=meta("mocked-env"))
    loader = MockLoader([MockData(MockKey.ALL_ENVIRONMENTS, resource=[mocked_env])])

    environment = loader.get_environment_from_integration_pipeline_run(store, pipeline_run)

    assert environment.name == "test-env"


def test_unset_mock_fails_loudly(store, snapshot):
    loader = MockLoader([MockData(MockKey.APPLICATION_FROM_SNAPSHOT)])
    with pytest.raises(MockNotConfiguredError, match="APPLICATION_FROM_SNAPSHOT"):
        loader.get_application_from_snapshot(store, snapshot)


def test_unset_mock_is_not_a_loader_error(store, snapshot):
    loader = MockLoader([MockData(MockKey.COMPONENT_FROM_SNAPSHOT)])
    with pytest.raises(AssertionError):
        loader.get_component_from_snapshot(store, snapshot)


@pytest.mark.parametrize(
    "key,resource",
    [
        (MockKey.APPLICATION_FROM_SNAPSHOT, Component(metadata=ObjectMeta(name="wrong"))),
        (MockKey.SNAPSHOT_COMPONENTS, Component(metadata=ObjectMeta(name="not-a-list"))),
        (MockKey.SNAPSHOT_COMPONENTS, [Application(metadata=ObjectMeta(name="wrong-item"))]),
        (MockKey.DEPLOYMENT_TARGET_CLASS, None),
    ],
)
def test_mock_data_rejects_wrong_result_type(key, resource):
    with pytest.raises(TypeError, match=key.name):
        MockData(key, resource=resource)


def test_optional_result_can_be_mocked_as_none(store, application):
    loader = MockLoader([MockData(MockKey.SNAPSHOT_ENVIRONMENT_BINDING, resource=None)])
    environment = store.get(Environment, "test-env", NAMESPACE)
    assert loader.find_existing_snapshot_environment_binding(store, application, environment) is None


def test_optional_result_can_be_mocked_with_a_binding(store, application):
    binding = SnapshotEnvironmentBinding(metadata=meta("mocked-binding"))
    loader = MockLoader([MockData(MockKey.SNAPSHOT_ENVIRONMENT_BINDING, resource=binding)])
    environment = store.get(Environment, "test-env", NAMESPACE)
    assert loader.find_existing_snapshot_environment_binding(store, application, environment) is binding


def test_with_mocks_does_not_mutate_original(store, snapshot, application):
    base = MockLoader()
    mocked = Application(metadata=meta("mocked-application"))

    derived = base.with_mocks(MockData(MockKey.APPLICATION_FROM_SNAPSHOT, resource=mocked))

    assert derived.get_application_from_snapshot(store, snapshot) is mocked
    assert base.get_application_from_snapshot(store, snapshot) == application
    assert MockKey.APPLICATION_FROM_SNAPSHOT not in base.mocks
    assert derived.loader is base.loader


def test_mocks_mapping_is_read_only():
    loader = MockLoader()
    with pytest.raises(TypeError):
        loader.mocks[MockKey.ALL_SNAPSHOTS] = MockData(MockKey.ALL_SNAPSHOTS, resource=[])


def test_later_mock_for_same_key_wins(store, snapshot):
    first = Application(metadata=meta("first"))
    second = Application(metadata=meta("second"))
    loader = MockLoader(
        [
            MockData(MockKey.APPLICATION_FROM_SNAPSHOT, resource=first),
            MockData(MockKey.APPLICATION_FROM_SNAPSHOT, resource=second),
        ]
    )
    assert loader.get_application_from_snapshot(store, snapshot) is second


def test_mocked_list_is_a_copy(store, application):
    mocked = [IntegrationTestScenario(metadata=meta("mocked-scenario"))]
    loader = MockLoader([MockData(MockKey.REQUIRED_INTEGRATION_TEST_SCENARIOS, resource=mocked)])

    result = loader.get_required_integration_test_scenarios_for_application(store, application)
    result.clear()

    assert loader.get_required_integration_test_scenarios_for_application(store, application) == mocked


def test_wrapped_loader_receives_original_arguments(snapshot):
    inner = MagicMock(spec=ObjectLoader)
    client = object()
    loader = MockLoader(loader=inner)

    loader.get_releases_with_snapshot(client, snapshot)

    inner.get_releases_with_snapshot.assert_called_once_with(client, snapshot)


def test_every_operation_has_a_distinct_key():
    operations = [key.operation for key in MockKey]
    assert len(operations) == len(set(operations))
    for operation in operations:
        assert operation in ObjectLoader.__abstractmethods__
    assert set(operations) == set(ObjectLoader.__abstractmethods__)


@pytest.mark.parametrize("key", list(MockKey))
def test_every_operation_honours_its_error_stub(key):
    error = RuntimeError(f"{key.name} failed")
    loader = MockLoader([MockData(key, err=error)], loader=MagicMock(spec=ObjectLoader))
    method = getattr(loader, key.operation)
    args = [object()] * (method.__code__.co_argcount - 1)

    with pytest.raises(RuntimeError) as exc_info:
        method(*args)

    assert exc_info.value is error
    assert not loader.loader.method_calls
