"""Block specifications for a version."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

import httpx

from .cache import CachedFile, fetch_json
from .datapath import DataPath
from .version import Version


class StateKind(Enum):
    """The kind of a block state property."""

    BOOL = "bool"
    ENUM = "enum"
    INT = "int"


_BOOL_VALUES = ("true", "false")


def _check_keys(data: Any, allowed: set[str], what: str) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"expected a {what} object, got {data!r}")
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"unknown {what} fields: {sorted(unknown)}")


def _strings(value: Any, what: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{what} must be a list of strings, got {value!r}")
    return list(value)


@dataclass(frozen=True)
class BlockSpecificationState:
    """A block state property."""

    kind: StateKind
    name: str
    num_values: int
    declared_values: tuple[str, ...] = ()

    def values(self) -> tuple[str, ...]:
        """The possible values of the state."""
        if self.kind is StateKind.BOOL:
            return _BOOL_VALUES
        return self.declared_values

    @classmethod
    def from_json(cls, data: Any) -> BlockSpecificationState:
        if not isinstance(data, dict):
            raise ValueError(f"expected a block state object, got {data!r}")
        tag = data.get("type")
        try:
            kind = StateKind(tag)
        except ValueError:
            raise ValueError(f"unknown block state type {tag!r}") from None
        allowed = {"type", "name", "num_values"}
        if kind is not StateKind.BOOL:
            allowed.add("values")
        _check_keys(data, allowed, "block state")
        values: tuple[str, ...] = ()
        if kind is not StateKind.BOOL:
            values = tuple(_strings(data["values"], "state values"))
        return cls(kind, str(data["name"]), int(data["num_values"]), values)

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.kind.value,
            "name": self.name,
            "num_values": self.num_values,
        }
        if self.kind is not StateKind.BOOL:
            result["values"] = list(self.declared_values)
        return result


_BLOCK_KEYS = {
    "id": "id",
    "name": "name",
    "display_name": "displayName",
    "hardness": "hardness",
    "resistance": "resistance",
    "stack_size": "stackSize",
    "diggable": "diggable",
    "material": "material",
    "transparent": "transparent",
    "emit_light": "emitLight",
    "filter_light": "filterLight",
    "default_state": "defaultState",
    "min_state_id": "minStateId",
    "max_state_id": "maxStateId",
    "states": "states",
    "harvest_tools": "harvestTools",
    "drops": "drops",
    "bounding_box": "boundingBox",
}


@dataclass
class BlockSpecification:
    """A block and its properties."""

    id: int
    name: str
    display_name: str
    hardness: float
    resistance: float
    stack_size: int
    diggable: bool
    material: str
    transparent: bool
    emit_light: int
    filter_light: int
    default_state: int
    min_state_id: int
    max_state_id: int
    states: list[BlockSpecificationState] = field(default_factory=list)
    harvest_tools: dict[str, bool] = field(default_factory=dict)
    drops: list[int] = field(default_factory=list)
    bounding_box: str = ""

    def num_states(self) -> int:
        """The number of states the block has."""
        return self.max_state_id - self.min_state_id + 1

    @classmethod
    def from_json(cls, data: Any) -> BlockSpecification:
        _check_keys(data, set(_BLOCK_KEYS.values()), "block")
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            display_name=str(data["displayName"]),
            hardness=float(data["hardness"]),
            resistance=float(data["resistance"]),
            stack_size=int(data["stackSize"]),
            diggable=bool(data["diggable"]),
            material=str(data["material"]),
            transparent=bool(data["transparent"]),
            emit_light=int(data["emitLight"]),
            filter_light=int(data["filterLight"]),
            default_state=int(data["defaultState"]),
            min_state_id=int(data["minStateId"]),
            max_state_id=int(data["maxStateId"]),
            states=[BlockSpecificationState.from_json(state) for state in data["states"]],
            harvest_tools={str(k): bool(v) for k, v in data.get("harvestTools", {}).items()},
            drops=[int(drop) for drop in data["drops"]],
            bounding_box=str(data["boundingBox"]),
        )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attr, key in _BLOCK_KEYS.items():
            value = getattr(self, attr)
            if attr == "states":
                value = [state.to_json() for state in value]
            elif attr == "harvest_tools":
                if not value:
                    continue
                value = dict(value)
            elif attr == "drops":
                value = list(value)
            result[key] = value
        return result


@dataclass
class VersionBlocks(CachedFile, Sequence):
    """The blocks of one version, in file order."""

    blocks: list[BlockSpecification] = field(default_factory=list)

    FILE_NAME: ClassVar[str] = "blocks.json"

    def __getitem__(self, index):  # type: ignore[override]
        return self.blocks[index]

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[BlockSpecification]:
        return iter(self.blocks)

    @classmethod
    def from_json(cls, data: Any) -> VersionBlocks:
        if not isinstance(data, list):
            raise ValueError(f"expected a list of blocks, got {data!r}")
        return cls([BlockSpecification.from_json(block) for block in data])

    def to_json(self) -> list[dict[str, Any]]:
        return [block.to_json() for block in self.blocks]

    @classmethod
    def get_url(cls, version: Version, data: DataPath) -> str | None:
        return data.get_java_blocks(version)

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
    ) -> VersionBlocks:
        """Fetch the blocks file for a version."""
        return fetch_json(cls, version, cache, data, redownload, client)