"""Reports written by the game's built-in data generator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_PACKET_STATES = ("configuration", "handshake", "login", "play", "status")


def _obj(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"expected {what} object, got {data!r}")
    return data


def _field(data: Any, key: str, what: str) -> Any:
    try:
        return _obj(data, what)[key]
    except KeyError:
        raise ValueError(f"missing field {key!r} in {what}") from None


def _str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {value!r}")
    return value


def _load_json(path: Path | str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _protocol_ids(data: Any, what: str) -> dict[str, int]:
    return {
        _str(name, "entry name"): _int(_field(entry, "protocol_id", what), "protocol_id")
        for name, entry in _obj(data, what).items()
    }


def _protocol_ids_json(ids: dict[str, int]) -> dict[str, Any]:
    return {name: {"protocol_id": protocol_id} for name, protocol_id in ids.items()}


@dataclass
class BlockDefinition:
    """How a block is defined: its type, properties and any other fields."""

    kind: str
    properties: dict[str, Any] = field(default_factory=dict)
    other: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> BlockDefinition:
        what = "block definition"
        kind = _str(_field(data, "type", what), "type")
        properties = _obj(_field(data, "properties", what), "block definition properties")
        other = {key: value for key, value in data.items() if key not in ("type", "properties")}
        return cls(kind, dict(properties), other)

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.kind, "properties": dict(self.properties)}
        result.update(self.other)
        return result


@dataclass
class ReportBlockState:
    """One state of a generated block."""

    id: int
    default: bool = False
    properties: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> ReportBlockState:
        what = "block state"
        default = _obj(data, what).get("default", False)
        if not isinstance(default, bool):
            raise ValueError(f"default must be a boolean, got {default!r}")
        properties = _obj(data.get("properties", {}), "block state properties")
        return cls(
            id=_int(_field(data, "id", what), "id"),
            default=default,
            properties={key: _str(value, "property value") for key, value in properties.items()},
        )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.default:
            result["default"] = True
        result["id"] = self.id
        if self.properties:
            result["properties"] = dict(self.properties)
        return result


@dataclass
class GeneratedBlock:
    """A block from the blocks report."""

    definition: BlockDefinition
    states: list[ReportBlockState] = field(default_factory=list)
    properties: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> GeneratedBlock:
        what = "generated block"
        states = _field(data, "states", what)
        if not isinstance(states, list):
            raise ValueError(f"states must be a list, got {states!r}")
        properties = _obj(data.get("properties", {}), "block properties")
        parsed: dict[str, list[str]] = {}
        for name, values in properties.items():
            if not isinstance(values, list):
                raise ValueError(f"property {name!r} must list its values, got {values!r}")
            parsed[name] = [_str(value, "property value") for value in values]
        return cls(
            definition=BlockDefinition.from_json(_field(data, "definition", what)),
            states=[ReportBlockState.from_json(state) for state in states],
            properties=parsed,
        )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"definition": self.definition.to_json()}
        if self.properties:
            result["properties"] = {key: list(values) for key, values in self.properties.items()}
        result["states"] = [state.to_json() for state in self.states]
        return result


class BlockReport(dict[str, GeneratedBlock]):
    """Every generated block, by name."""

    @classmethod
    def from_json(cls, data: Any) -> BlockReport:
        return cls(
            {name: GeneratedBlock.from_json(block) for name, block in _obj(data, "blocks report").items()}
        )

    def to_json(self) -> dict[str, Any]:
        return {name: block.to_json() for name, block in self.items()}

    @classmethod
    def load(cls, path: Path | str) -> BlockReport:
        """Read a blocks report file."""
        return cls.from_json(_load_json(path))


@dataclass
class ItemReportEntry:
    """The components of one item."""

    components: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> ItemReportEntry:
        components = _obj(_field(data, "components", "item"), "item components")
        return cls(dict(components))

    def to_json(self) -> dict[str, Any]:
        return {"components": dict(self.components)}


class ItemReport(dict[str, ItemReportEntry]):
    """Every generated item, by name."""

    @classmethod
    def from_json(cls, data: Any) -> ItemReport:
        return cls(
            {name: ItemReportEntry.from_json(item) for name, item in _obj(data, "items report").items()}
        )

    def to_json(self) -> dict[str, Any]:
        return {name: item.to_json() for name, item in self.items()}

    @classmethod
    def load(cls, path: Path | str) -> ItemReport:
        """Read an items report file."""
        return cls.from_json(_load_json(path))


@dataclass
class PacketReportState:
    """Packet ids of one connection state, by direction and packet name."""

    clientbound: dict[str, int] | None = None
    serverbound: dict[str, int] | None = None

    @classmethod
    def from_json(cls, data: Any) -> PacketReportState:
        data = _obj(data, "packet state")
        clientbound = data.get("clientbound")
        serverbound = data.get("serverbound")
        return cls(
            None if clientbound is None else _protocol_ids(clientbound, "clientbound packets"),
            None if serverbound is None else _protocol_ids(serverbound, "serverbound packets"),
        )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.clientbound is not None:
            result["clientbound"] = _protocol_ids_json(self.clientbound)
        if self.serverbound is not None:
            result["serverbound"] = _protocol_ids_json(self.serverbound)
        return result


@dataclass
class PacketReport:
    """The packets report: one entry per connection state."""

    configuration: PacketReportState
    handshake: PacketReportState
    login: PacketReportState
    play: PacketReportState
    status: PacketReportState
    other: dict[str, PacketReportState] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> PacketReport:
        known = {
            name: PacketReportState.from_json(_field(data, name, "packets report"))
            for name in _PACKET_STATES
        }
        other = {
            name: PacketReportState.from_json(state)
            for name, state in data.items()
            if name not in _PACKET_STATES
        }
        return cls(**known, other=other)

    def to_json(self) -> dict[str, Any]:
        result = {name: getattr(self, name).to_json() for name in _PACKET_STATES}
        result.update((name, state.to_json()) for name, state in self.other.items())
        return result

    @classmethod
    def load(cls, path: Path | str) -> PacketReport:
        """Read a packets report file."""
        return cls.from_json(_load_json(path))


@dataclass
class RegistryReportEntries:
    """The entries of one registry and their protocol ids."""

    entries: dict[str, int] = field(default_factory=dict)
    default: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> RegistryReportEntries:
        default = _obj(data, "registry").get("default")
        return cls(
            entries=_protocol_ids(_field(data, "entries", "registry"), "registry entry"),
            default=None if default is None else _str(default, "default"),
        )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.default is not None:
            result["default"] = self.default
        result["entries"] = _protocol_ids_json(self.entries)
        return result


class RegistryReport(dict[str, RegistryReportEntries]):
    """Every generated registry, by name."""

    @classmethod
    def from_json(cls, data: Any) -> RegistryReport:
        return cls(
            {
                name: RegistryReportEntries.from_json(entries)
                for name, entries in _obj(data, "registries report").items()
            }
        )

    def to_json(self) -> dict[str, Any]:
        return {name: entries.to_json() for name, entries in self.items()}

    @classmethod
    def load(cls, path: Path | str) -> RegistryReport:
        """Read a registries report file."""
        return cls.from_json(_load_json(path))


@dataclass
class GeneratedReports:
    """All reports produced for one version."""

    blocks: BlockReport
    items: ItemReport
    packets: PacketReport
    registries: RegistryReport

    @classmethod
    def load(cls, path: Path | str) -> GeneratedReports:
        """Read the reports from a generator ``reports`` directory."""
        path = Path(path)
        return cls(
            blocks=BlockReport.load(path / "blocks.json"),
            items=ItemReport.load(path / "items.json"),
            packets=PacketReport.load(path / "packets.json"),
            registries=RegistryReport.load(path / "registries.json"),
        )