from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class SnapshotEnvironmentBindingSpec:
    application: str = ""
    snapshot: str = ""
    environment: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class SnapshotEnvironmentBinding(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "SnapshotEnvironmentBinding"
    PLURAL = "snapshotenvironmentbindings"

    spec: SnapshotEnvironmentBindingSpec = Field(default_factory=SnapshotEnvironmentBindingSpec)
