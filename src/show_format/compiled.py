"""Functions for processing Skybrush compiled show files (``.skyc``).

A compiled show file is a ZIP archive that contains the show specification in
``show.json``. The specification may refer to other entries of the archive
with JSON references of the form ``{"$ref": "zip:path/to/entry"}``. References
to JSON entries are parsed and substituted recursively; references to any
other entry are treated as binary assets.
"""

import json
import zlib

from dataclasses import dataclass, field
from functools import partial
from io import BytesIO
from os import PathLike
from posixpath import splitext
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import unquote
from zipfile import BadZipFile, ZIP_DEFLATED, ZipFile

from trio import Path, to_thread

from .asset import Asset
from .constants import SHOW_SPECIFICATION_ENTRY
from .errors import (
    MalformedContainerError,
    MissingEntryError,
    Result,
    ShowFormatError,
)
from .logger import log as base_log
from .types import ShowSpecification
from .utils import is_object
from .validation import validate_show_specification

__all__ = (
    "create_compiled_show",
    "load_compiled_show",
    "load_compiled_show_async",
    "load_compiled_show_from_file",
    "LoadedShow",
    "try_load_compiled_show",
)

log = base_log.getChild("compiled")

_REF_KEY = "$ref"
_ZIP_SCHEME = "zip:"

#: Extensions of entries that contain data and not binary assets
_DATA_EXTENSIONS = frozenset((".json", ".yaml", ".yml"))

AssetData = Union[bytes, Asset]


@dataclass(frozen=True)
class LoadedShow:
    """A show loaded from a compiled show file."""

    specification: ShowSpecification
    """The validated show specification, with all references resolved."""

    assets: Dict[str, AssetData] = field(default_factory=dict)
    """Mapping from the names of the binary assets referenced by the show to
    their contents, or to Asset_ placeholders for assets that were not
    loaded.
    """


def _is_binary_asset(name: str) -> bool:
    return splitext(name)[1].lower() not in _DATA_EXTENSIONS


class _ReferenceResolver:
    """Resolves ``zip:`` JSON references in a show specification from the
    entries of a ZIP archive.
    """

    def __init__(self, archive: ZipFile, *, assets: bool):
        self._archive = archive
        self._load_assets = assets
        self._names = set(archive.namelist())
        self._stack: List[str] = []
        self.assets: Dict[str, AssetData] = {}

    def load_json(self, name: str) -> Any:
        """Loads and resolves the JSON entry with the given name."""
        if name in self._stack:
            chain = " -> ".join([*self._stack, name])
            raise MalformedContainerError(
                f"Circular reference in compiled show file: {chain}", path=name
            )

        data = self.read(name)
        try:
            obj = json.loads(data.decode("utf-8"))
        except ValueError as ex:
            raise MalformedContainerError(
                f"Invalid JSON data in entry {name!r} of compiled show file",
                path=name,
            ) from ex

        self._stack.append(name)
        try:
            return self.resolve(obj)
        finally:
            self._stack.pop()

    def read(self, name: str) -> bytes:
        """Reads the raw contents of the entry with the given name."""
        if name not in self._names:
            raise MissingEntryError(
                f"No entry named {name!r} in compiled show file", path=name
            )

        try:
            return self._archive.read(name)
        except (BadZipFile, EOFError, NotImplementedError, zlib.error) as ex:
            raise MalformedContainerError(
                f"Cannot extract entry {name!r} from compiled show file", path=name
            ) from ex
        except RuntimeError as ex:
            # zipfile raises RuntimeError for encrypted entries
            raise MalformedContainerError(
                f"Entry {name!r} of compiled show file is encrypted", path=name
            ) from ex

    def resolve(self, obj: Any) -> Any:
        """Returns a copy of the given JSON object with all ``zip:``
        references substituted.
        """
        if is_object(obj):
            ref = obj.get(_REF_KEY)
            if isinstance(ref, str) and ref.startswith(_ZIP_SCHEME):
                return self._resolve_reference(ref)
            return {key: self.resolve(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self.resolve(item) for item in obj]
        else:
            return obj

    def _resolve_reference(self, ref: str) -> Any:
        name = unquote(ref[len(_ZIP_SCHEME) :]).lstrip("/")

        if not _is_binary_asset(name):
            if splitext(name)[1].lower() != ".json":
                raise MalformedContainerError(
                    f"Unsupported data entry in compiled show file: {name!r}",
                    path=name,
                )
            return self.load_json(name)

        if name in self.assets:
            return self.assets[name]

        result: AssetData
        if not self._load_assets:
            result = Asset(name)
        elif name not in self._names:
            log.warning(f"Asset {name!r} is missing from compiled show file")
            result = Asset(name)
        else:
            result = self.read(name)

        self.assets[name] = result
        return result


def load_compiled_show(
    data: bytes, *, assets: bool = False, max_drone_count: Optional[int] = None
) -> LoadedShow:
    """Loads a drone show from the raw contents of a compiled show file.

    Parameters:
        data: the raw contents of the compiled show file
        assets: whether to load the binary assets from the compiled show
            file. When false, assets are replaced with Asset_ placeholders.
        max_drone_count: maximum number of drones allowed in the show;
            ``None`` means to use the default limit

    Returns:
        the validated show specification and its assets

    Raises:
        MalformedContainerError: if the data is not a valid compiled show file
        MissingEntryError: if the compiled show file has no show
            specification or an entry referenced from the specification is
            missing
        ShowValidationError: if the show specification is not valid
    """
    try:
        archive = ZipFile(BytesIO(data))
    except (BadZipFile, EOFError) as ex:
        raise MalformedContainerError("Not a valid compiled show file") from ex

    with archive:
        if SHOW_SPECIFICATION_ENTRY not in archive.namelist():
            raise MissingEntryError(
                "No show specification found in compiled show file",
                path=SHOW_SPECIFICATION_ENTRY,
            )
        resolver = _ReferenceResolver(archive, assets=assets)
        spec = resolver.load_json(SHOW_SPECIFICATION_ENTRY)

    validate_show_specification(spec, max_drone_count=max_drone_count)

    log.debug(
        f"Loaded show with {len(spec['swarm']['drones'])} drone(s) "
        f"and {len(resolver.assets)} asset(s)"
    )

    return LoadedShow(specification=spec, assets=resolver.assets)


def try_load_compiled_show(data: bytes, **kwds) -> Result[LoadedShow]:
    """Non-raising variant of `load_compiled_show()`.

    Returns:
        a successful result holding the loaded show, or a failed result
        holding the error that prevented the show from being loaded
    """
    try:
        return Result.success(load_compiled_show(data, **kwds))
    except ShowFormatError as ex:
        return Result.failure(ex)


async def load_compiled_show_async(data: bytes, **kwds) -> LoadedShow:
    """Async variant of `load_compiled_show()` that decodes the compiled show
    file in a worker thread. Cancelling the task abandons the decoding.
    """
    return await to_thread.run_sync(
        partial(load_compiled_show, data, **kwds), abandon_on_cancel=True
    )


async def load_compiled_show_from_file(
    filename: Union[str, "PathLike[str]"], **kwds
) -> LoadedShow:
    """Loads a drone show from a compiled show file on the disk.

    Keyword arguments are forwarded to `load_compiled_show()`.
    """
    data = await Path(filename).read_bytes()
    return await load_compiled_show_async(data, **kwds)


def create_compiled_show(
    spec: ShowSpecification, assets: Optional[Mapping[str, bytes]] = None
) -> bytes:
    """Creates a compiled show file from a show specification and the
    contents of the binary assets that it refers to.

    Parameters:
        spec: the show specification; binary assets should be referred to
            with ``{"$ref": "zip:<name>"}`` objects
        assets: mapping from asset names to their contents

    Returns:
        the raw contents of the compiled show file
    """
    buffer = BytesIO()
    with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
        archive.writestr(SHOW_SPECIFICATION_ENTRY, json.dumps(spec))
        for name, contents in (assets or {}).items():
            archive.writestr(name, contents)
    return buffer.getvalue()
