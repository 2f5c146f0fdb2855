from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class SnapshotComponent:
    name: str
    container_image: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class SnapshotSpec:
    application: str = ""
    components: list[SnapshotComponent] = Field(default_factory=list)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Snapshot(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "Snapshot"
    PLURAL = "snapshots"

    spec: SnapshotSpec = Field(default_factory=SnapshotSpec)

    @property
    def component_names(self) -> set[str]:
        return {c.name for c in self.spec.components}
