from typing import Any

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ResourceList:
    items: list[dict[str, Any]]
