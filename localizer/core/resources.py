"""Resolution of bundled translation resources by name.

A resolver turns a resource name such as ``fr.json`` into an open binary
stream, or ``None`` when no such resource exists. The store never cares
where the bytes come from.
"""

from __future__ import annotations

import os
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union


class ResourceResolver(Protocol):
    def open(self, name: str) -> Optional[BinaryIO]:
        ...


class PackageResources:
    """Resources shipped inside an importable package (``importlib.resources``)."""

    def __init__(self, package: str) -> None:
        self.package = package

    def open(self, name: str) -> Optional[BinaryIO]:
        try:
            res = resources.files(self.package).joinpath(name)
        except ModuleNotFoundError:
            return None
        if not res.is_file():
            return None
        return res.open("rb")

    def __repr__(self) -> str:
        return f"PackageResources({self.package!r})"


class DirectoryResources:
    """Resources stored as plain files in a directory."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def open(self, name: str) -> Optional[BinaryIO]:
        target = self.path / name
        if not target.is_file():
            return None
        return target.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryResources({str(self.path)!r})"
