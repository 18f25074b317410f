"""Downloading and caching of data files."""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TypeVar

import httpx

from .version import Version

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="CachedFile")


class UrlNotFoundError(LookupError):
    """Raised when no download URL is known for a file."""


class CachedFile(ABC):
    """A file that is downloaded once and then read from a local cache."""

    @classmethod
    @abstractmethod
    def get_url(cls, version: Version, data: Any) -> str | None:
        """Return the URL of the file, or ``None`` if it is unknown."""

    @classmethod
    @abstractmethod
    def get_path(cls, version: Version, cache: Path) -> Path:
        """Return the path of the file inside the cache directory."""

    @classmethod
    def from_json(cls: type[T], data: Any) -> T:
        """Build the file from decoded JSON."""
        raise TypeError(f"{cls.__name__} cannot be read from JSON")

    @classmethod
    def fetch(
        cls: type[T],
        version: Version,
        cache: Path | str,
        data: Any = None,
        redownload: bool = False,
        client: httpx.Client | None = None,
    ) -> T:
        """Fetch the file, downloading it if it is not cached."""
        return fetch_json(cls, version, cache, data, redownload, client)


def fetch_file(
    file_type: type[CachedFile],
    version: Version,
    cache: Path | str,
    data: Any = None,
    redownload: bool = False,
    client: httpx.Client | None = None,
) -> Path:
    """Return the cached path of a file, downloading it when missing or asked to."""
    path = Path(file_type.get_path(version, Path(cache)))
    if path.exists() and not redownload:
        return path

    path.parent.mkdir(parents=True, exist_ok=True)

    url = file_type.get_url(version, data)
    if url is None:
        raise UrlNotFoundError(f"URL not found for: {file_type.__name__} v{version}")
    logger.warning('Downloading: "%s"', url)

    if client is None:
        with httpx.Client(follow_redirects=True) as own_client:
            content = own_client.get(url).content
    else:
        content = client.get(url).content
    path.write_bytes(content)
    return path


def fetch_json(
    file_type: type[T],
    version: Version,
    cache: Path | str,
    data: Any = None,
    redownload: bool = False,
    client: httpx.Client | None = None,
) -> T:
    """Fetch a JSON file and build ``file_type`` from it."""
    path = fetch_file(file_type, version, cache, data, redownload, client)
    return file_type.from_json(json.loads(path.read_bytes()))


def fetch_xml(
    file_type: type[T],
    version: Version,
    cache: Path | str,
    data: Any = None,
    redownload: bool = False,
    client: httpx.Client | None = None,
) -> T:
    """Fetch an XML file and build ``file_type`` from its root element."""
    path = fetch_file(file_type, version, cache, data, redownload, client)
    root = ElementTree.fromstring(path.read_text(encoding="utf-8"))
    return file_type.from_xml(root)  # type: ignore[attr-defined]