"""Entity specifications for a version."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import httpx

from .cache import CachedFile, fetch_json
from .datapath import DataPath
from .version import Version


@dataclass
class EntitySpecification:
    """An entity and its properties."""

    id: int
    internal_id: int
    name: str
    display_name: str
    width: float
    height: float
    kind: str
    category: str
    metadata: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> EntitySpecification:
        if not isinstance(data, dict):
            raise ValueError(f"expected an entity object, got {data!r}")
        metadata = data["metadataKeys"]
        if not isinstance(metadata, list) or not all(isinstance(key, str) for key in metadata):
            raise ValueError(f"metadataKeys must be a list of strings, got {metadata!r}")
        return cls(
            id=int(data["id"]),
            internal_id=int(data["internalId"]),
            name=str(data["name"]),
            display_name=str(data["displayName"]),
            width=float(data["width"]),
            height=float(data["height"]),
            kind=str(data["type"]),
            category=str(data["category"]),
            metadata=list(metadata),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "internalId": self.internal_id,
            "name": self.name,
            "displayName": self.display_name,
            "width": self.width,
            "height": self.height,
            "type": self.kind,
            "category": self.category,
            "metadataKeys": list(self.metadata),
        }


@dataclass
class VersionEntities(CachedFile, Sequence):
    """The entities of one version, in file order."""

    entities: list[EntitySpecification] = field(default_factory=list)

    FILE_NAME: ClassVar[str] = "entities.json"

    def __getitem__(self, index):  # type: ignore[override]
        return self.entities[index]

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[EntitySpecification]:
        return iter(self.entities)

    @classmethod
    def from_json(cls, data: Any) -> VersionEntities:
        if not isinstance(data, list):
            raise ValueError(f"expected a list of entities, got {data!r}")
        return cls([EntitySpecification.from_json(entity) for entity in data])

    def to_json(self) -> list[dict[str, Any]]:
        return [entity.to_json() for entity in self.entities]

    @classmethod
    def get_url(cls, version: Version, data: DataPath) -> str | None:
        return data.get_java_entities(version)

    @classmethod
    def get_path(cls, version: Version, cache: Path) -> Path:
        return Path(cache) / f"v{version}" / cls.FILE_NAME

    @classmethod
    def fetch(
        cls,
        version: Version,
        cache: Path | str,
        data: DataPath | None = None,
        redownload: bool = False,
        client: httpx.Client | None = None,
    ) -> VersionEntities:
        """Fetch the entities file for a version."""
        return fetch_json(cls, version, cache, data, redownload, client)