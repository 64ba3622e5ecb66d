"""Config: a JSON file holding settings or state for the command-line tool.

Global configs live in the hidden state folder under the home directory.
Local configs live under the project root, either in the state folder
(``is_state``) or wherever ``file_path`` points.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from statefile.core import fs
from statefile.core.errors import InvalidParameterError, InvalidTypeError, TargetFileNotFoundError
from statefile.utils.paths import home_dir, resolve_project_root, state_folder as default_state_folder

logger = logging.getLogger(__name__)

ProjectRootLocator = Callable[[], Awaitable[Any]]
C = TypeVar("C", bound="Config")


def _relative(part: str) -> str:
    """Strip leading separators so a part always nests below the root."""
    return part.lstrip("/" + os.sep)


class ConfigOptions(BaseModel):
    """Creation parameters for a Config. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    root_folder: str | None = None
    filename: str | None = None
    is_global: Any = False
    is_state: Any = False
    file_path: str | None = None

    @field_validator("root_folder", "filename", "file_path", mode="before")
    @classmethod
    def _fspath(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value


async def resolve_root_folder(is_global: Any, project_root: ProjectRootLocator | None = None) -> str:
    """Return the home directory for global configs, the project root otherwise."""
    if not isinstance(is_global, bool):
        raise InvalidTypeError("is_global must be a boolean", "InvalidTypeForIsGlobal")
    if is_global:
        return str(home_dir())
    locator = project_root or resolve_project_root
    return os.fspath(await locator())


class Config:
    """Represents a JSON config file. Build instances with ``await Config.create(...)``."""

    def __init__(self) -> None:
        self._options: ConfigOptions | None = None
        self._path: str | None = None
        self._contents: dict[str, Any] | None = None

    @classmethod
    async def create(
        cls: type[C],
        options: ConfigOptions | Mapping[str, Any],
        *,
        state_folder: str | None = None,
        project_root: ProjectRootLocator | None = None,
    ) -> C:
        """Allocate a config, then resolve its options into a path.

        Raises InvalidParameterError when ``filename`` is missing, before any
        filesystem access. Errors from project root discovery propagate.
        """
        if not isinstance(options, ConfigOptions):
            options = ConfigOptions.model_validate(options)

        config = cls()
        config._options = options

        if not options.filename or not _relative(options.filename):
            raise InvalidParameterError("The ConfigOptions filename parameter is invalid.")

        is_global = isinstance(options.is_global, bool) and options.is_global
        is_state = isinstance(options.is_state, bool) and options.is_state

        if options.root_folder:
            root = options.root_folder
        else:
            root = await resolve_root_folder(options.is_global, project_root=project_root)

        # Never store config files directly in the home directory.
        if is_global or is_state:
            root = os.path.join(root, state_folder or default_state_folder())

        parts = (_relative(options.file_path or ""), _relative(options.filename))
        config._path = os.path.normpath(os.path.join(root, *parts))
        logger.debug("Resolved config path %s", config._path)
        return config

    # -- Accessors --

    @property
    def options(self) -> ConfigOptions | None:
        return self._options

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def contents(self) -> dict[str, Any] | None:
        return self._contents

    def get_path(self) -> str | None:
        return self._path

    def get_contents(self) -> dict[str, Any]:
        """Return the contents, or an empty dict if none were loaded."""
        if self._contents is None:
            return {}
        return self._contents

    def set_contents(self, value: Any) -> None:
        self._contents = value

    def get_is_global(self) -> Any:
        return self._options.is_global if self._options else None

    # -- File operations --

    async def access(self, mode: int) -> bool:
        """True if the file grants ``mode`` (os.R_OK, os.W_OK...). Never raises."""
        result = await fs.check_access(self.get_path(), mode)
        if not result.ok:
            logger.debug("Access check failed for %s: %s", self.get_path(), result.error)
        return result.ok

    async def read(self, throw_on_not_found: bool = False) -> dict[str, Any]:
        """Read and parse the file into contents.

        A missing file yields ``{}`` unless ``throw_on_not_found`` is set.
        Any other I/O or JSON error propagates.
        """
        try:
            self.set_contents(await fs.read_json(self.get_path()))
        except FileNotFoundError:
            if throw_on_not_found:
                raise
            logger.debug("Config %s not found, using empty contents", self.get_path())
            self.set_contents({})
        return self._contents

    async def read_json(self, throw_on_not_found: bool = True) -> dict[str, Any]:
        return await self.read(throw_on_not_found)

    async def write(self, new_contents: Any = None) -> dict[str, Any]:
        """Write contents to disk, replacing them first if new_contents is given."""
        if new_contents is not None:
            self.set_contents(new_contents)

        path = self.get_path()
        await fs.mkdirp(os.path.dirname(path))
        await fs.write_file(path, json.dumps(self.get_contents(), indent=4))
        logger.debug("Wrote config %s", path)
        return self.get_contents()

    async def exists(self) -> bool:
        return await self.access(os.R_OK)

    async def stat(self) -> os.stat_result:
        return await fs.stat(self.get_path())

    async def unlink(self) -> None:
        """Delete the file. Raises TargetFileNotFoundError if it does not exist."""
        if await self.exists():
            await fs.unlink(self.get_path())
            logger.debug("Deleted config %s", self.get_path())
            return
        raise TargetFileNotFoundError(self.get_path())

    # -- Key helpers (in-memory only) --

    def _mapping(self) -> dict[str, Any]:
        contents = self.get_contents()
        if not isinstance(contents, dict):
            raise InvalidTypeError(f"Config contents are not a mapping: {self.get_path()}")
        return contents

    def get(self, key: str, default: Any = None) -> Any:
        return self._mapping().get(key, default)

    def set(self, key: str, value: Any) -> None:
        if self._contents is None:
            self._contents = {}
        self._mapping()[key] = value

    def unset(self, key: str) -> bool:
        """Remove key from contents. Returns False if it was not present."""
        contents = self._mapping()
        if key not in contents:
            return False
        del contents[key]
        return True

    def has(self, key: str) -> bool:
        return key in self._mapping()

    def keys(self) -> list[str]:
        return list(self._mapping())
