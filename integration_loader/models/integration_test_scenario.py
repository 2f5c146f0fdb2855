from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class IntegrationTestScenarioSpec:
    application: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class IntegrationTestScenario(Resource):
    API_VERSION = "appstudio.redhat.com/v1beta1"
    KIND = "IntegrationTestScenario"
    PLURAL = "integrationtestscenarios"

    spec: IntegrationTestScenarioSpec = Field(default_factory=IntegrationTestScenarioSpec)
