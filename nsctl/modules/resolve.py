"""Resolve a namespace name to a single connection target."""
import logging
from typing import Callable, List, Optional, Sequence

from ..config import ResolveOptions
from ..exceptions import AmbiguousNamespace, HintMismatch, InvalidSelection, NamespaceNotFound
from ..models import ConnectionTarget
from ..registry import Registry

logger = logging.getLogger("nsctl.resolve")

# Receives the candidate targets in order and returns the raw user selection.
Chooser = Callable[[Sequence[ConnectionTarget]], str]


def match_cluster(targets: List[ConnectionTarget], hint: str) -> Optional[ConnectionTarget]:
    """First target whose cluster name contains ``hint``."""
    for target in targets:
        if hint in target.cluster:
            return target
    return None


def match_project(targets: List[ConnectionTarget], hint: str) -> Optional[ConnectionTarget]:
    """First target whose project name contains ``hint``."""
    for target in targets:
        if hint in target.project:
            return target
    return None


def parse_selection(selection: str, count: int) -> int:
    """Turn chooser input into an index in ``range(count)``.

    Raises:
        InvalidSelection: if the input is not a number or out of range
    """
    text = (selection or "").strip()
    try:
        index = int(text)
    except ValueError:
        raise InvalidSelection(selection)
    if index < 0 or index >= count:
        raise InvalidSelection(selection)
    return index


def resolve(
    registry: Registry,
    name: str,
    options: ResolveOptions = None,
    chooser: Optional[Chooser] = None,
) -> ConnectionTarget:
    """Pick the connection target for namespace ``name``.

    A single target is returned as-is, regardless of hints. With several
    targets the cluster hint wins over the project hint; both are substring
    matches and the first match in target order is returned. Without hints
    the ``chooser`` is asked for an index.

    Raises:
        NamespaceNotFound: if the registry has no such namespace
        HintMismatch: if a hint matches no target
        AmbiguousNamespace: if there are several targets, no hints and no chooser
        InvalidSelection: if the chooser returns a bad index
    """
    options = options or ResolveOptions()
    found, entry = registry.find(name)
    if not found:
        raise NamespaceNotFound(name)

    targets = entry.targets
    if len(targets) == 1:
        return targets[0]

    if options.cluster:
        target = match_cluster(targets, options.cluster)
        if target is None:
            raise HintMismatch(entry.name, "cluster", options.cluster)
        logger.debug(f"Cluster hint {options.cluster!r} selected {target}")
        return target

    if options.project:
        target = match_project(targets, options.project)
        if target is None:
            raise HintMismatch(entry.name, "project", options.project)
        logger.debug(f"Project hint {options.project!r} selected {target}")
        return target

    if chooser is None:
        raise AmbiguousNamespace(entry.name, len(targets))

    return targets[parse_selection(chooser(targets), len(targets))]
