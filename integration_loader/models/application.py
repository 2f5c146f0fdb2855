from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ApplicationSpec:
    display_name: str = ""
    description: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Application(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "Application"
    PLURAL = "applications"

    spec: ApplicationSpec = Field(default_factory=ApplicationSpec)
