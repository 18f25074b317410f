"""Maven metadata of the Yarn mappings."""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import httpx

from .cache import CachedFile, fetch_xml
from .version import Version


def _child(element: ElementTree.Element, tag: str) -> ElementTree.Element:
    child = element.find(tag)
    if child is None:
        raise ValueError(f"missing element <{tag}> in <{element.tag}>")
    return child


def _text(element: ElementTree.Element, tag: str) -> str:
    return (_child(element, tag).text or "").strip()


@dataclass(frozen=True)
class YarnVersioning:
    """Versioning details of the Yarn artifact."""

    latest: str
    release: str
    versions: list[str] = field(default_factory=list)
    last_updated: int = 0

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> YarnVersioning:
        versions = [
            (entry.text or "").strip() for entry in _child(element, "versions").findall("version")
        ]
        updated = _text(element, "lastUpdated")
        if not updated.isdigit():
            raise ValueError(f"lastUpdated must be a number, got {updated!r}")
        return cls(
            latest=_text(element, "latest"),
            release=_text(element, "release"),
            versions=versions,
            last_updated=int(updated),
        )


@dataclass(frozen=True)
class YarnMavenMetadata(CachedFile):
    """The Yarn Maven metadata file."""

    group_id: str
    artifact_id: str
    versioning: YarnVersioning

    FILE_NAME: ClassVar[str] = "maven-metadata.json"
    FILE_URL: ClassVar[str] = "https://maven.fabricmc.net/net/fabricmc/yarn/maven-metadata.xml"

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> YarnMavenMetadata:
        return cls(
            group_id=_text(element, "groupId"),
            artifact_id=_text(element, "artifactId"),
            versioning=YarnVersioning.from_xml(_child(element, "versioning")),
        )

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
    ) -> YarnMavenMetadata:
        """Fetch the metadata; it is the same for every version."""
        return fetch_xml(cls, version, cache, data, redownload, client)