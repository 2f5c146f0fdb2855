import logging
import os

import requests

from integration_loader.clients.object_store import ObjectStore, R
from integration_loader.loader.errors import NotFoundError
from integration_loader.utils.label_selector import LabelSelector

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 30.0


class KubeApiClient(ObjectStore):
    """ObjectStore backed by a Kubernetes API server.

    The request timeout bounds every call; cancellation of an in-flight
    resolution is left to it.
    """

    def __init__(self):
        api_url = os.getenv("KUBE_API_URL")
        token = os.getenv("KUBE_TOKEN")
        if not (api_url and token):
            logger.error("Kubernetes API env vars are mandatory")
            raise EnvironmentError("Missing Kubernetes API credentials")
        self.api_url: str = api_url.rstrip("/")
        self.timeout: float = float(os.getenv("KUBE_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
        self.verify: str | bool = os.getenv("KUBE_CA_BUNDLE") or True
        self.headers: dict[str, str] = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    def get(self, resource_type: type[R], name: str, namespace: str = "") -> R:
        url = self.resource_url(resource_type, namespace, name)
        response = requests.get(url=url, headers=self.headers, timeout=self.timeout, verify=self.verify)
        if response.status_code == 404:
            raise NotFoundError(resource_type.KIND, name, namespace)
        response.raise_for_status()
        return resource_type.from_dict(response.json())

    def list(
        self, resource_type: type[R], namespace: str = "", selector: LabelSelector | None = None
    ) -> list[R]:
        url = self.resource_url(resource_type, namespace)
        params = {"labelSelector": str(selector)} if selector else {}
        response = requests.get(
            url=url, headers=self.headers, params=params, timeout=self.timeout, verify=self.verify
        )
        response.raise_for_status()
        items = response.json().get("items") or []
        logger.debug(f"Listed {len(items)} {resource_type.PLURAL} from {url}")
        return [resource_type.from_dict(item) for item in items]

    def resource_url(self, resource_type: type[R], namespace: str = "", name: str = "") -> str:
        path = f"{self.api_url}/apis/{resource_type.API_VERSION}"
        if resource_type.NAMESPACED and namespace:
            path += f"/namespaces/{namespace}"
        path += f"/{resource_type.PLURAL}"
        if name:
            path += f"/{name}"
        return path
