"""Scan orchestrator: walk projects and clusters and record their namespaces."""
import logging
from dataclasses import dataclass, field
from typing import List

from ..config import ScanOptions
from ..exceptions import ProviderUnavailable
from ..models import NamespaceEntry
from ..providers.base import ConnectionProvider
from ..registry import Registry

logger = logging.getLogger("nsctl.scan")


@dataclass
class ScanFailure:
    """A provider call that failed during a scan."""
    stage: str
    subject: str
    message: str


@dataclass
class ScanReport:
    """Tracks what a scan pass visited and what went wrong."""
    projects: int = 0
    clusters: int = 0
    namespaces: int = 0
    failures: List[ScanFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def record_failure(self, stage: str, subject: str, error: Exception):
        logger.warning(f"{stage} failed for {subject}: {error}")
        self.failures.append(ScanFailure(stage=stage, subject=subject, message=str(error)))


def scan(registry: Registry, provider: ConnectionProvider, options: ScanOptions = None) -> ScanReport:
    """Discover namespaces across projects and merge them into ``registry``.

    Provider failures are recorded on the report and skip only the project or
    cluster they belong to. Each call is attempted once.
    """
    options = options or ScanOptions()
    report = ScanReport()

    if options.project:
        projects = [options.project]
    else:
        try:
            projects = provider.list_projects()
        except ProviderUnavailable as e:
            report.record_failure("list projects", "*", e)
            return report

    for project in projects:
        logger.info(f"--> Processing project: {project}")
        try:
            provider.activate_project(project)
            clusters = provider.list_clusters()
        except ProviderUnavailable as e:
            report.record_failure("project", project, e)
            continue
        report.projects += 1

        for cluster in clusters:
            logger.info(f"    --> Processing cluster {cluster.name} ({cluster.location})")
            try:
                provider.activate_cluster(cluster.name, cluster.location)
                namespaces = provider.list_namespaces()
            except ProviderUnavailable as e:
                report.record_failure("cluster", f"{project}/{cluster.name}", e)
                continue
            report.clusters += 1

            for name in namespaces:
                registry.upsert(NamespaceEntry.discovered(name, project, cluster.name, cluster.location))
                report.namespaces += 1
                logger.debug(f"        - {name}")

    logger.info(
        f"Scan finished: {report.projects} projects, {report.clusters} clusters, "
        f"{report.namespaces} namespaces, {len(report.failures)} failures"
    )
    return report
