import logging
from collections.abc import Iterable, Mapping
from typing import Any

from integration_loader.clients.object_store import ObjectStore, R
from integration_loader.loader.errors import AmbiguousResultError, NotFoundError
from integration_loader.models import RESOURCE_TYPES, Resource
from integration_loader.repositories import ManifestRepository
from integration_loader.utils.label_selector import LabelSelector

logger = logging.getLogger(__name__)


class InMemoryStore(ObjectStore):
    """ObjectStore holding typed objects in memory, in insertion order."""

    def __init__(self, resources: Iterable[Resource] = ()):
        self.objects: dict[tuple[str, str, str], Resource] = {}
        for resource in resources:
            self.add(resource)

    @classmethod
    def from_manifests(cls, manifests: Iterable[Mapping[str, Any]]) -> "InMemoryStore":
        resources = []
        for manifest in manifests:
            kind = manifest.get("kind")
            resource_type = RESOURCE_TYPES.get(kind)
            if resource_type is None:
                raise ValueError(f"Unsupported kind in manifest: {kind}")
            resources.append(resource_type.from_dict(manifest))
        return cls(resources)

    @classmethod
    def from_file(cls, file_path: str) -> "InMemoryStore":
        return cls.from_manifests(ManifestRepository(file_path).find_all())

    def add(self, resource: Resource) -> None:
        key = self._key(type(resource), resource.name, resource.namespace)
        if key in self.objects:
            raise AmbiguousResultError(resource.KIND, resource.name, resource.namespace)
        self.objects[key] = resource

    def get(self, resource_type: type[R], name: str, namespace: str = "") -> R:
        resource = self.objects.get(self._key(resource_type, name, namespace))
        if resource is None:
            raise NotFoundError(resource_type.KIND, name, namespace)
        return resource

    def list(
        self, resource_type: type[R], namespace: str = "", selector: LabelSelector | None = None
    ) -> list[R]:
        matches = [
            r
            for (kind, ns, _), r in self.objects.items()
            if kind == resource_type.KIND
            and (not namespace or not resource_type.NAMESPACED or ns == namespace)
            and (selector is None or selector.matches(r.labels))
        ]
        logger.debug(f"Listed {len(matches)} {resource_type.PLURAL} in namespace {namespace!r}")
        return matches

    @staticmethod
    def _key(resource_type: type[Resource], name: str, namespace: str) -> tuple[str, str, str]:
        return (resource_type.KIND, namespace if resource_type.NAMESPACED else "", name)
