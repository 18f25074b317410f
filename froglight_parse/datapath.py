"""Paths to per-version data files in the community data repository."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

import httpx

from .cache import CachedFile, fetch_json
from .version import Version


def _path(json_name: str | None = None) -> Any:
    metadata = {"json": json_name} if json_name else {}
    return field(default=None, metadata=metadata)


@dataclass
class VersionDataPath:
    """Where each kind of data file lives for one version."""

    attributes: str | None = _path()
    blocks: str | None = _path()
    block_collision_shapes: str | None = _path("blockCollisionShapes")
    biomes: str | None = _path()
    effects: str | None = _path()
    items: str | None = _path()
    enchantments: str | None = _path()
    recipes: str | None = _path()
    instruments: str | None = _path()
    materials: str | None = _path()
    language: str | None = _path()
    entities: str | None = _path()
    protocol: str | None = _path()
    windows: str | None = _path()
    version: str | None = _path()
    foods: str | None = _path()
    particles: str | None = _path()
    block_loot: str | None = _path("blockLoot")
    entity_loot: str | None = _path("entityLoot")
    login_packet: str | None = _path("loginPacket")
    tints: str | None = _path()
    map_icons: str | None = _path("mapIcons")
    commands: str | None = _path()
    sounds: str | None = _path()
    proto: str | None = _path()
    other: dict[str, str] = field(default_factory=dict)

    @classmethod
    def _json_names(cls) -> dict[str, str]:
        return {
            f.metadata.get("json", f.name): f.name for f in fields(cls) if f.name != "other"
        }

    @classmethod
    def from_json(cls, data: Any) -> VersionDataPath:
        """Build from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object of data paths, got {data!r}")
        names = cls._json_names()
        known: dict[str, str | None] = {}
        other: dict[str, str] = {}
        for key, value in data.items():
            if key in names:
                if value is not None and not isinstance(value, str):
                    raise ValueError(f"data path {key!r} must be a string, got {value!r}")
                known[names[key]] = value
            else:
                if not isinstance(value, str):
                    raise ValueError(f"data path {key!r} must be a string, got {value!r}")
                other[key] = value
        return cls(**known, other=other)

    def to_json(self) -> dict[str, Any]:
        """Convert to a JSON-ready object."""
        result: dict[str, Any] = {
            key: getattr(self, attr) for key, attr in self._json_names().items()
        }
        result.update(self.other)
        return result


def _edition_from_json(data: Any) -> dict[Version, VersionDataPath]:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object of versions, got {data!r}")
    return {Version.parse(key): VersionDataPath.from_json(value) for key, value in data.items()}


def _edition_to_json(edition: dict[Version, VersionDataPath]) -> dict[str, Any]:
    return {str(version): paths.to_json() for version, paths in edition.items()}


@dataclass
class DataPath(CachedFile):
    """Data paths for the Java (``pc``) and Bedrock editions."""

    pc: dict[Version, VersionDataPath] = field(default_factory=dict)
    bedrock: dict[Version, VersionDataPath] = field(default_factory=dict)

    FILE_NAME: ClassVar[str] = "dataPaths.json"
    FILE_URL: ClassVar[str] = (
        "https://raw.githubusercontent.com/PrismarineJS/minecraft-data"
        "/refs/heads/master/data/dataPaths.json"
    )

    def _java_url(self, version: Version, attribute: str, file_name: str) -> str | None:
        paths = self.pc.get(version)
        location = getattr(paths, attribute) if paths is not None else None
        if location is None:
            return None
        return self.FILE_URL.replace("dataPaths.json", location) + "/" + file_name

    def get_java_proto(self, version: Version) -> str | None:
        """URL of the Java edition ``proto.yml`` for a version."""
        return self._java_url(version, "proto", "proto.yml")

    def get_java_protocol(self, version: Version) -> str | None:
        """URL of the Java edition ``protocol.json`` for a version."""
        return self._java_url(version, "protocol", "protocol.json")

    def get_java_blocks(self, version: Version) -> str | None:
        """URL of the Java edition ``blocks.json`` for a version."""
        return self._java_url(version, "blocks", "blocks.json")

    def get_java_entities(self, version: Version) -> str | None:
        """URL of the Java edition ``entities.json`` for a version."""
        return self._java_url(version, "entities", "entities.json")

    @classmethod
    def from_json(cls, data: Any) -> DataPath:
        if not isinstance(data, dict):
            raise ValueError(f"expected a data paths object, got {data!r}")
        return cls(pc=_edition_from_json(data["pc"]), bedrock=_edition_from_json(data["bedrock"]))

    def to_json(self) -> dict[str, Any]:
        return {"pc": _edition_to_json(self.pc), "bedrock": _edition_to_json(self.bedrock)}

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
    ) -> DataPath:
        """Fetch the data paths file; it is the same for every version."""
        return fetch_json(cls, version, cache, data, redownload, client)