import os
from typing import Any

from ruamel.yaml import YAML

from integration_loader.models import ResourceList
from integration_loader.utils.yaml_loader import get_yaml_instance


class ManifestRepository:
    """Reads a manifest file shaped like a Kubernetes ``List``."""

    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[dict[str, Any]]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = ResourceList(**data)
                return parsed.items
            except Exception as e:
                raise ValueError(f"Invalid manifest file {self.file_path}: {e}") from e
