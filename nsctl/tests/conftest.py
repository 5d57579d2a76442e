from typing import Dict, List, Optional, Set

import pytest

from nsctl.config import Config
from nsctl.exceptions import ProviderUnavailable
from nsctl.models import ClusterInfo
from nsctl.providers.base import ConnectionProvider


class FakeProvider(ConnectionProvider):
    """In-memory provider.

    ``layout`` maps project -> cluster name -> (location, namespaces).
    ``fail`` holds (operation, subject) pairs that should raise.
    """

    def __init__(self, layout: Dict[str, Dict[str, tuple]], fail: Optional[Set[tuple]] = None):
        self.layout = layout
        self.fail = fail or set()
        self.calls: List[tuple] = []
        self.project: Optional[str] = None
        self.cluster: Optional[str] = None
        self.namespace: Optional[str] = None

    def _check(self, operation: str, subject: str = "*"):
        self.calls.append((operation, subject))
        if (operation, subject) in self.fail or (operation, "*") in self.fail:
            raise ProviderUnavailable(operation, f"simulated failure for {subject}")

    def list_projects(self):
        self._check("list_projects")
        return list(self.layout)

    def activate_project(self, name):
        self._check("activate_project", name)
        if name not in self.layout:
            raise ProviderUnavailable("activate_project", f"unknown project {name}")
        self.project = name

    def list_clusters(self):
        self._check("list_clusters", self.project)
        return [ClusterInfo(name, location) for name, (location, _) in self.layout[self.project].items()]

    def activate_cluster(self, name, location):
        self._check("activate_cluster", name)
        self.cluster = name

    def list_namespaces(self):
        self._check("list_namespaces", self.cluster)
        return list(self.layout[self.project][self.cluster][1])

    def set_active_namespace(self, name):
        self._check("set_active_namespace", name)
        self.namespace = name

    def current_context(self):
        return f"gke_{self.project}_{self.cluster}" if self.cluster else ""


LAYOUT = {
    "p1": {
        "eastCluster": ("us-east1", ["default", "payments"]),
        "westCluster": ("us-west1", ["default", "payments", "billing"]),
    },
    "p2": {
        "euCluster": ("europe-west1", ["default", "search"]),
    },
}


@pytest.fixture
def provider():
    return FakeProvider(LAYOUT)


@pytest.fixture
def make_provider():
    def _make(layout=None, fail=None):
        return FakeProvider(layout or LAYOUT, fail=fail)
    return _make


@pytest.fixture
def registry_file(tmp_path, monkeypatch):
    path = tmp_path / "lmi" / "namespaces.yaml"
    monkeypatch.setattr(Config, "REGISTRY_FILE", str(path))
    return path
