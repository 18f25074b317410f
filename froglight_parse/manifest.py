"""The game's version manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

import httpx

from .cache import CachedFile, fetch_json
from .version import Version


def _parse_time(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        raise ValueError(f"timestamp has no time zone: {text!r}")
    return moment.astimezone(timezone.utc)


def _format_time(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class ReleaseType(Enum):
    """The type of a release."""

    RELEASE = "release"
    SNAPSHOT = "snapshot"
    OLD_BETA = "old_beta"
    OLD_ALPHA = "old_alpha"


@dataclass(frozen=True)
class VersionManifestLatest:
    """The latest versions in the manifest."""

    release: Version
    snapshot: Version

    @classmethod
    def from_json(cls, data: Any) -> VersionManifestLatest:
        return cls(Version.parse(data["release"]), Version.parse(data["snapshot"]))

    def to_json(self) -> dict[str, str]:
        return {"release": str(self.release), "snapshot": str(self.snapshot)}


@dataclass(frozen=True)
class VersionManifestData:
    """A version's entry in the manifest."""

    id: Version
    kind: ReleaseType
    url: str
    time: datetime
    release_time: datetime
    sha1: str
    compliance_level: int

    @classmethod
    def from_json(cls, data: Any) -> VersionManifestData:
        if not isinstance(data, dict):
            raise ValueError(f"expected a manifest entry, got {data!r}")
        return cls(
            id=Version.parse(data["id"]),
            kind=ReleaseType(data["type"]),
            url=str(data["url"]),
            time=_parse_time(data["time"]),
            release_time=_parse_time(data["releaseTime"]),
            sha1=str(data["sha1"]),
            compliance_level=int(data["complianceLevel"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "type": self.kind.value,
            "url": self.url,
            "time": _format_time(self.time),
            "releaseTime": _format_time(self.release_time),
            "sha1": self.sha1,
            "complianceLevel": self.compliance_level,
        }


@dataclass
class VersionManifest(CachedFile):
    """A manifest of every published version."""

    latest: VersionManifestLatest
    versions: dict[Version, VersionManifestData] = field(default_factory=dict)

    FILE_NAME: ClassVar[str] = "version_manifest_v2.json"
    FILE_URL: ClassVar[str] = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"

    def compare(self, a: Version, b: Version) -> int | None:
        """Compare release times: -1, 0 or 1, or ``None`` if either is missing."""
        first = self.versions.get(a)
        second = self.versions.get(b)
        if first is None or second is None:
            return None
        left, right = first.release_time, second.release_time
        return (left > right) - (left < right)

    @classmethod
    def from_json(cls, data: Any) -> VersionManifest:
        if not isinstance(data, dict):
            raise ValueError(f"expected a manifest object, got {data!r}")
        entries = data["versions"]
        if not isinstance(entries, list):
            raise ValueError(f"manifest versions must be a list, got {entries!r}")
        versions: dict[Version, VersionManifestData] = {}
        for entry in entries:
            parsed = VersionManifestData.from_json(entry)
            versions[parsed.id] = parsed
        return cls(VersionManifestLatest.from_json(data["latest"]), versions)

    def to_json(self) -> dict[str, Any]:
        return {
            "latest": self.latest.to_json(),
            "versions": [entry.to_json() for entry in self.versions.values()],
        }

    @classmethod
    def get_url(cls, version: Version, data: Any) -> str | None:
        return cls.FILE_URL

    @classmethod
    def get_path(cls, version: Version, cache: Path) -> Path:
        return Path(cache) / cls.FILE_NAME

    @classmethod
    def fetch(
        cls,
        version: Version,
        cache: Path | str,
        data: Any = None,
        redownload: bool = False,
        client: httpx.Client | None = None,
    ) -> VersionManifest:
        """Fetch the manifest; it is the same for every version."""
        return fetch_json(cls, version, cache, data, redownload, client)