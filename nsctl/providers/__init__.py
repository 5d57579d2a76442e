"""Connection providers: the external tools nsctl drives."""
from .base import ConnectionProvider
from .gcloud import GcloudProvider


def get_provider() -> ConnectionProvider:
    """Return the provider used by the CLI."""
    return GcloudProvider()


__all__ = ['ConnectionProvider', 'GcloudProvider', 'get_provider']
