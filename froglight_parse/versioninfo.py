"""Per-version information: downloads, assets and release details."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx

from .cache import CachedFile, fetch_json
from .manifest import ReleaseType, VersionManifest, _format_time, _parse_time
from .version import Version


def _field(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected a {what} object, got {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r} in {what}") from None


def _int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class VersionAssetIndex:
    """The asset index file of a version."""

    id: str
    sha1: str
    size: int
    total_size: int
    url: str

    @classmethod
    def from_json(cls, data: Any) -> VersionAssetIndex:
        what = "asset index"
        return cls(
            id=_str(_field(data, "id", what), "id"),
            sha1=_str(_field(data, "sha1", what), "sha1"),
            size=_int(_field(data, "size", what), "size"),
            total_size=_int(_field(data, "totalSize", what), "totalSize"),
            url=_str(_field(data, "url", what), "url"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sha1": self.sha1,
            "size": self.size,
            "totalSize": self.total_size,
            "url": self.url,
        }


@dataclass(frozen=True)
class VersionDownload:
    """One downloadable file."""

    sha1: str
    size: int
    url: str

    @classmethod
    def from_json(cls, data: Any) -> VersionDownload:
        what = "download"
        return cls(
            sha1=_str(_field(data, "sha1", what), "sha1"),
            size=_int(_field(data, "size", what), "size"),
            url=_str(_field(data, "url", what), "url"),
        )

    def to_json(self) -> dict[str, Any]:
        return {"sha1": self.sha1, "size": self.size, "url": self.url}


@dataclass(frozen=True)
class VersionDownloads:
    """The jars and mappings of a version."""

    client: VersionDownload
    client_mappings: VersionDownload
    server: VersionDownload
    server_mappings: VersionDownload

    _KEYS = ("client", "client_mappings", "server", "server_mappings")

    @classmethod
    def from_json(cls, data: Any) -> VersionDownloads:
        return cls(
            **{
                key: VersionDownload.from_json(_field(data, key, "downloads"))
                for key in cls._KEYS
            }
        )

    def to_json(self) -> dict[str, Any]:
        return {key: getattr(self, key).to_json() for key in self._KEYS}


@dataclass(frozen=True)
class VersionInfo(CachedFile):
    """Information about one version."""

    asset_index: VersionAssetIndex
    downloads: VersionDownloads
    id: Version
    main_class: str
    minimum_launcher_version: int
    release_time: datetime
    time: datetime
    kind: ReleaseType

    @classmethod
    def from_json(cls, data: Any) -> VersionInfo:
        what = "version info"
        return cls(
            asset_index=VersionAssetIndex.from_json(_field(data, "assetIndex", what)),
            downloads=VersionDownloads.from_json(_field(data, "downloads", what)),
            id=Version.parse(_str(_field(data, "id", what), "id")),
            main_class=_str(_field(data, "mainClass", what), "mainClass"),
            minimum_launcher_version=_int(
                _field(data, "minimumLauncherVersion", what), "minimumLauncherVersion"
            ),
            release_time=_parse_time(_str(_field(data, "releaseTime", what), "releaseTime")),
            time=_parse_time(_str(_field(data, "time", what), "time")),
            kind=ReleaseType(_field(data, "type", what)),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "assetIndex": self.asset_index.to_json(),
            "downloads": self.downloads.to_json(),
            "id": str(self.id),
            "mainClass": self.main_class,
            "minimumLauncherVersion": self.minimum_launcher_version,
            "releaseTime": _format_time(self.release_time),
            "time": _format_time(self.time),
            "type": self.kind.value,
        }

    @classmethod
    def get_url(cls, version: Version, data: VersionManifest) -> str | None:
        entry = data.versions.get(version) if data is not None else None
        return entry.url if entry is not None else None

    @classmethod
    def get_path(cls, version: Version, cache: Path) -> Path:
        return Path(cache) / f"v{version}" / f"{version}.json"

    @classmethod
    def fetch(
        cls,
        version: Version,
        cache: Path | str,
        data: VersionManifest | None = None,
        redownload: bool = False,
        client: httpx.Client | None = None,
    ) -> VersionInfo:
        """Fetch the information file of a version listed in the manifest."""
        return fetch_json(cls, version, cache, data, redownload, client)