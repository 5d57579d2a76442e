"""
Data models for the namespace registry.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ConnectionTarget:
    """One reachable cluster within one project."""
    project: str
    cluster: str
    region: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'ProjectName': self.project,
            'ClusterName': self.cluster,
            'Region': self.region,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConnectionTarget':
        return cls(
            project=data['ProjectName'],
            cluster=data['ClusterName'],
            region=data['Region'],
        )


@dataclass
class NamespaceEntry:
    """A namespace name and every target it has been seen in."""
    name: str
    targets: List[ConnectionTarget] = field(default_factory=list)

    def __post_init__(self):
        self.name = normalize_name(self.name)

    @classmethod
    def discovered(cls, name: str, project: str, cluster: str, region: str) -> 'NamespaceEntry':
        """Build an entry carrying exactly one target."""
        return cls(name=name, targets=[ConnectionTarget(project, cluster, region)])

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Name': self.name,
            'ConnectionData': [t.to_dict() for t in self.targets],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NamespaceEntry':
        return cls(
            name=data['Name'],
            targets=[ConnectionTarget.from_dict(t) for t in data.get('ConnectionData') or []],
        )


@dataclass(frozen=True)
class ClusterInfo:
    """A cluster as listed by a provider."""
    name: str
    location: str


def normalize_name(name: str) -> str:
    """Strip the trailing newline/whitespace a namespace name may carry."""
    return name.rstrip()
