"""Switch the local tooling to a resolved target."""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..exceptions import ProviderUnavailable
from ..models import ConnectionTarget
from ..providers.base import ConnectionProvider

logger = logging.getLogger("nsctl.connect")


@dataclass
class ConnectResult:
    target: ConnectionTarget
    namespace: str
    completed: List[str] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def connect(provider: ConnectionProvider, target: ConnectionTarget, namespace: str) -> ConnectResult:
    """Activate project, cluster and namespace in turn.

    Every step runs even if an earlier one failed, and nothing is rolled back,
    so a failure can leave the kubeconfig partially switched.
    """
    result = ConnectResult(target=target, namespace=namespace)
    steps = [
        ("project", lambda: provider.activate_project(target.project)),
        ("cluster", lambda: provider.activate_cluster(target.cluster, target.region)),
        ("namespace", lambda: provider.set_active_namespace(namespace)),
    ]
    for step, action in steps:
        try:
            action()
        except ProviderUnavailable as e:
            logger.error(f"Failed to activate {step}: {e}")
            result.errors.append((step, str(e)))
            continue
        result.completed.append(step)
    return result
