"""Provider backed by the gcloud CLI, kubectl and the kubernetes client."""
import json
import logging
import subprocess
from typing import Any, List

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from ..config import Config
from ..exceptions import ProviderUnavailable
from ..models import ClusterInfo
from .base import ConnectionProvider

logger = logging.getLogger("nsctl.providers.gcloud")


class GcloudProvider(ConnectionProvider):
    """Treats gcloud configurations as projects and GKE clusters as clusters."""

    def __init__(self, gcloud_bin: str = None, kubectl_bin: str = None,
                 namespace_timeout: int = None):
        self.gcloud_bin = gcloud_bin or Config.GCLOUD_BIN
        self.kubectl_bin = kubectl_bin or Config.KUBECTL_BIN
        self.namespace_timeout = namespace_timeout or Config.NAMESPACE_TIMEOUT

    def _run(self, cmd: List[str]) -> str:
        """Run a command and return its stdout, raising ProviderUnavailable on failure."""
        operation = " ".join(cmd)
        logger.debug(f"Running: {operation}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise ProviderUnavailable(operation, f"{cmd[0]} not found") from e
        except subprocess.CalledProcessError as e:
            message = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ProviderUnavailable(operation, message) from e
        return result.stdout

    def _run_json(self, cmd: List[str]) -> Any:
        out = self._run(cmd)
        try:
            return json.loads(out or "[]")
        except json.JSONDecodeError as e:
            raise ProviderUnavailable(" ".join(cmd), f"invalid JSON output: {e}") from e

    def list_projects(self) -> List[str]:
        data = self._run_json([self.gcloud_bin, "config", "configurations", "list", "--format", "json"])
        return [item["name"] for item in data if item.get("name")]

    def activate_project(self, name: str) -> None:
        self._run([self.gcloud_bin, "config", "configurations", "activate", name])

    def list_clusters(self) -> List[ClusterInfo]:
        data = self._run_json([self.gcloud_bin, "container", "clusters", "list", "--format", "json"])
        return [
            ClusterInfo(name=item["name"], location=item.get("location", ""))
            for item in data if item.get("name")
        ]

    def activate_cluster(self, name: str, location: str) -> None:
        self._run([
            self.gcloud_bin, "container", "clusters", "get-credentials", name,
            "--region", location
        ])

    def list_namespaces(self) -> List[str]:
        operation = "list namespaces"
        try:
            config.load_kube_config()
            v1 = client.CoreV1Api()
            namespaces = v1.list_namespace(_request_timeout=self.namespace_timeout).items
        except (ApiException, ConfigException, HTTPError, OSError) as e:
            raise ProviderUnavailable(operation, str(e)) from e
        return [ns.metadata.name for ns in namespaces]

    def set_active_namespace(self, name: str) -> None:
        self._run([self.kubectl_bin, "config", "set-context", "--current", "--namespace", name])

    def current_context(self) -> str:
        try:
            _, active_context = config.list_kube_config_contexts()
        except (ConfigException, OSError) as e:
            logger.debug(f"Failed to load kubeconfig: {e}")
            return ""
        return active_context["name"]
