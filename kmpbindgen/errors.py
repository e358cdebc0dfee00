"""Exceptions raised while resolving configuration and writing bindings."""

from __future__ import annotations

from pathlib import Path


class BindgenError(Exception):
    """Base class for every error raised by kmpbindgen."""


class ConfigError(BindgenError):
    """Raised when component configuration cannot be used as given."""


class ConfigParseError(ConfigError):
    """Raised when a configuration document is malformed."""


class DuplicateCrateError(ConfigError):
    """Raised when two components in one build share a crate name."""

    def __init__(self, crate_name: str, namespaces: list[str]) -> None:
        self.crate_name = crate_name
        self.namespaces = namespaces
        super().__init__(
            f"Crate name {crate_name!r} is used by more than one component: "
            + ", ".join(namespaces)
        )


class GenerationError(BindgenError):
    """Raised when the renderer cannot produce source text for a component."""

    def __init__(self, namespace: str, message: str) -> None:
        self.namespace = namespace
        super().__init__(f"Failed to generate bindings for {namespace!r}: {message}")


class FileSystemError(BindgenError):
    """Raised when a directory cannot be created or a file cannot be written."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")
