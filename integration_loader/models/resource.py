from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic.dataclasses import dataclass

# objects arrive in wire form: camelCase keys plus fields we do not model
RESOURCE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True, config=RESOURCE_CONFIG)
class Resource:
    """Common shape of every stored object.

    Subclasses set the class constants used by stores to address the object:
    ``API_VERSION`` (``group/version``), ``KIND``, ``PLURAL`` (URL segment)
    and ``NAMESPACED``.
    """

    API_VERSION: ClassVar[str] = ""
    KIND: ClassVar[str] = ""
    PLURAL: ClassVar[str] = ""
    NAMESPACED: ClassVar[bool] = True

    metadata: ObjectMeta

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return TypeAdapter(cls).validate_python(data)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, str]:
        return self.metadata.labels

    @property
    def annotations(self) -> dict[str, str]:
        return self.metadata.annotations
