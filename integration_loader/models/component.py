from pydantic import Field
from pydantic.dataclasses import dataclass

from .resource import RESOURCE_CONFIG, Resource


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ComponentSpec:
    component_name: str = ""
    application: str = ""
    container_image: str = ""


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Component(Resource):
    API_VERSION = "appstudio.redhat.com/v1alpha1"
    KIND = "Component"
    PLURAL = "components"

    spec: ComponentSpec = Field(default_factory=ComponentSpec)
