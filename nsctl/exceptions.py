"""Error types raised by nsctl."""


class NsctlError(Exception):
    """Base error; ``exit_code`` is what the CLI exits with."""
    exit_code = 1


class ProviderUnavailable(NsctlError):
    """An external provider call failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")


class StoreCorrupt(NsctlError):
    """The registry file exists but cannot be parsed."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"Registry file {path} is corrupt: {message}")


class NamespaceNotFound(NsctlError):
    exit_code = 2

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"{name} doesn't exist in configuration file!\n"
            "Please double check namespace name or perform scan to update configuration file."
        )


class HintMismatch(NsctlError):
    """A --cluster/--project hint matched none of the namespace's targets."""
    exit_code = 2

    def __init__(self, namespace: str, kind: str, hint: str):
        self.namespace = namespace
        self.kind = kind
        self.hint = hint
        super().__init__(
            f"Config file doesn't have configuration for {namespace} namespace in {kind} {hint}.\n"
            "Please double check your input or perform scan to update configuration file."
        )


class AmbiguousNamespace(NsctlError):
    exit_code = 2

    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count
        super().__init__(
            f"{name} exists in {count} clusters; use --cluster or --project to pick one."
        )


class InvalidSelection(NsctlError):
    exit_code = 2

    def __init__(self, selection):
        self.selection = selection
        super().__init__(f"Please input valid number (got {selection!r}).")
