"""Namespace registry: the mapping of namespace names to connection targets."""
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

import yaml
from jsonschema import ValidationError, validate

from .config import Config
from .exceptions import StoreCorrupt
from .models import NamespaceEntry, normalize_name

logger = logging.getLogger("nsctl.registry")

REGISTRY_SCHEMA = {
    "type": "object",
    "properties": {
        "Namespaces": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "Name": {"type": "string", "pattern": "\\S"},
                    "ConnectionData": {
                        "type": "array",
                        "minItems": 1,
                        "items": {
                            "type": "object",
                            "properties": {
                                "ProjectName": {"type": "string"},
                                "ClusterName": {"type": "string"},
                                "Region": {"type": "string"}
                            },
                            "required": ["ProjectName", "ClusterName", "Region"]
                        }
                    }
                },
                "required": ["Name", "ConnectionData"]
            }
        }
    }
}


class Registry:
    """In-memory collection of namespace entries, keyed by name.

    Insertion order of names is kept for display. Mutation is append-only.
    """

    def __init__(self):
        self._entries: Dict[str, NamespaceEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NamespaceEntry]:
        return iter(self._entries.values())

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._entries

    def upsert(self, entry: NamespaceEntry) -> None:
        """Merge a freshly discovered entry into the registry.

        An existing entry gets the incoming entry's first target appended, even
        when an identical target is already present. A new name is inserted as-is.
        Entries without targets are rejected with ValueError.
        """
        if not entry.targets:
            raise ValueError(f"Namespace entry {entry.name!r} has no connection targets")
        existing = self._entries.get(entry.name)
        if existing is None:
            self._entries[entry.name] = entry
            return
        existing.targets.append(entry.targets[0])

    def find(self, name: str) -> Tuple[bool, NamespaceEntry]:
        """Look up a namespace by exact name.

        Returns ``(False, NamespaceEntry(""))`` when the name is unknown.
        """
        entry = self._entries.get(normalize_name(name))
        if entry is None:
            return False, NamespaceEntry(name="")
        return True, entry

    def to_dict(self) -> Dict:
        return {"Namespaces": [entry.to_dict() for entry in self]}

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "Registry":
        registry = cls()
        for item in (data or {}).get("Namespaces") or []:
            entry = NamespaceEntry.from_dict(item)
            if entry.name in registry._entries:
                registry._entries[entry.name].targets.extend(entry.targets)
            else:
                registry._entries[entry.name] = entry
        return registry


def load_registry(path: Union[str, Path, None] = None) -> Registry:
    """Load the registry from disk.

    A missing or unreadable file yields an empty registry. A file that exists
    but does not parse raises :class:`StoreCorrupt`.
    """
    path = Path(path) if path else Config.registry_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise StoreCorrupt(path, str(e)) from e
    except FileNotFoundError:
        logger.info(f"No registry at {path}, starting empty")
        return Registry()
    except OSError as e:
        logger.warning(f"Could not read registry {path}: {e}")
        return Registry()

    try:
        data = yaml.safe_load(content)
        validate(instance=data or {}, schema=REGISTRY_SCHEMA)
    except yaml.YAMLError as e:
        raise StoreCorrupt(path, str(e)) from e
    except ValidationError as e:
        raise StoreCorrupt(path, e.message) from e

    registry = Registry.from_dict(data)
    logger.debug(f"Loaded {len(registry)} namespaces from {path}")
    return registry


def save_registry(registry: Registry, path: Union[str, Path, None] = None) -> Path:
    """Write the whole registry to disk, replacing the previous file."""
    path = Path(path) if path else Config.registry_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=".namespaces-", suffix=".yaml")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(registry.to_dict(), f, default_flow_style=False, sort_keys=False)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except (IOError, OSError) as e:
        logger.error(f"Failed to write registry {path}: {e}")
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.debug(f"Saved {len(registry)} namespaces to {path}")
    return path
