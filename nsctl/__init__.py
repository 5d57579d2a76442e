"""nsctl - jump between Kubernetes namespaces across cloud projects and clusters."""

__version__ = "0.1.0"
