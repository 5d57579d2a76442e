"""Provider interface consumed by scan, resolve and connect."""
from abc import ABC, abstractmethod
from typing import List

from ..models import ClusterInfo


class ConnectionProvider(ABC):
    """Discovery and activation calls against the cloud and the cluster.

    Every method raises :class:`nsctl.exceptions.ProviderUnavailable` on failure.
    """

    @abstractmethod
    def list_projects(self) -> List[str]:
        """Names of all known projects."""

    @abstractmethod
    def activate_project(self, name: str) -> None:
        """Make ``name`` the current project."""

    @abstractmethod
    def list_clusters(self) -> List[ClusterInfo]:
        """Clusters of the current project."""

    @abstractmethod
    def activate_cluster(self, name: str, location: str) -> None:
        """Point the local kubeconfig at a cluster."""

    @abstractmethod
    def list_namespaces(self) -> List[str]:
        """Namespaces of the current cluster."""

    @abstractmethod
    def set_active_namespace(self, name: str) -> None:
        """Set the namespace of the current kubeconfig context."""

    def current_context(self) -> str:
        """Name of the active kubeconfig context, if the provider knows it."""
        return ""
