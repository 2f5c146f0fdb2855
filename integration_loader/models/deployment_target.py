from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource

DEVSANDBOX_PROVISIONER = "appstudio.redhat.com/devsandbox"


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetClassSpec:
    provisioner: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetClass(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "DeploymentTargetClass"
    PLURAL = "deploymenttargetclasses"
    NAMESPACED = False

    spec: DeploymentTargetClassSpec = Field(default_factory=DeploymentTargetClassSpec)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetSpec:
    deployment_target_class_name: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTarget(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "DeploymentTarget"
    PLURAL = "deploymenttargets"

    spec: DeploymentTargetSpec = Field(default_factory=DeploymentTargetSpec)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetClaimSpec:
    deployment_target_class_name: str = ""
    target_name: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class DeploymentTargetClaim(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "DeploymentTargetClaim"
    PLURAL = "deploymenttargetclaims"

    spec: DeploymentTargetClaimSpec = Field(default_factory=DeploymentTargetClaimSpec)
