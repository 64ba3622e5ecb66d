"""Error types raised by the config entity."""

from __future__ import annotations


class ConfigError(Exception):
    """Base error. ``name`` identifies the kind of failure."""

    name = "ConfigError"

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        if name is not None:
            self.name = name


class InvalidTypeError(ConfigError, TypeError):
    name = "InvalidType"


class InvalidParameterError(ConfigError, ValueError):
    name = "InvalidParameter"


class TargetFileNotFoundError(ConfigError):
    name = "TargetFileNotFound"

    def __init__(self, path: str) -> None:
        super().__init__(f"Target file doesn't exist. path: {path}")
        self.path = path


class ProjectNotFoundError(ConfigError, FileNotFoundError):
    name = "ProjectNotFound"
