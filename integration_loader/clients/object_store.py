from abc import ABC, abstractmethod
from typing import TypeVar

from integration_loader.models import Resource
from integration_loader.utils.label_selector import LabelSelector

R = TypeVar("R", bound=Resource)


class ObjectStore(ABC):
    """Read side of the cluster object store.

    ``get`` raises ``NotFoundError`` when the object does not exist. ``list``
    returns an empty list when nothing matches and keeps the store's order.
    Any other failure is the store's own error and is raised untouched.
    """

    @abstractmethod
    def get(self, resource_type: type[R], name: str, namespace: str = "") -> R:
        ...

    @abstractmethod
    def list(
        self, resource_type: type[R], namespace: str = "", selector: LabelSelector | None = None
    ) -> list[R]:
        ...
