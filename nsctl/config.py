"""Configuration management for the nsctl application."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """Application configuration with sensible defaults."""

    # Registry store
    HOME_DIR: str = os.getenv("NSCTL_HOME", "~/.lmi")
    REGISTRY_FILE: str = os.getenv("NSCTL_REGISTRY_FILE", "")

    # Timeouts (in seconds)
    NAMESPACE_TIMEOUT: int = int(os.getenv("NSCTL_NAMESPACE_TIMEOUT", "10"))

    # External tools
    GCLOUD_BIN: str = os.getenv("NSCTL_GCLOUD_BIN", "gcloud")
    KUBECTL_BIN: str = os.getenv("NSCTL_KUBECTL_BIN", "kubectl")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def registry_path(cls) -> Path:
        """Return the path of the namespace registry file."""
        if cls.REGISTRY_FILE:
            return Path(os.path.expanduser(cls.REGISTRY_FILE))
        return Path(os.path.expanduser(cls.HOME_DIR)) / "namespaces.yaml"


@dataclass(frozen=True)
class ScanOptions:
    """Options for a single scan run."""
    project: Optional[str] = None


@dataclass(frozen=True)
class ResolveOptions:
    """Disambiguation hints for resolving a namespace."""
    cluster: Optional[str] = None
    project: Optional[str] = None
