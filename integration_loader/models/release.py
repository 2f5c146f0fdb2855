from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ReleasePlanSpec:
    application: str = ""
    target: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ReleasePlan(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "ReleasePlan"
    PLURAL = "releaseplans"

    spec: ReleasePlanSpec = Field(default_factory=ReleasePlanSpec)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ReleaseSpec:
    snapshot: str = ""
    release_plan: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Release(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "Release"
    PLURAL = "releases"

    spec: ReleaseSpec = Field(default_factory=ReleaseSpec)
