from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetClaimConfig:
    claim_name: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class EnvironmentTarget:
    deployment_target_claim: DeploymentTargetClaimConfig = Field(default_factory=DeploymentTargetClaimConfig)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class EnvironmentConfiguration:
    target: EnvironmentTarget = Field(default_factory=EnvironmentTarget)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class EnvironmentSpec:
    type: str = ""
    display_name: str = ""
    configuration: EnvironmentConfiguration = Field(default_factory=EnvironmentConfiguration)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Environment(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "Environment"
    PLURAL = "environments"

    spec: EnvironmentSpec = Field(default_factory=EnvironmentSpec)

    @property
    def claim_name(self) -> str:
        return self.spec.configuration.target.deployment_target_claim.claim_name
