"""The network protocol description of a version."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, ClassVar

import httpx

from .cache import CachedFile, fetch_json
from .datapath import DataPath
from .version import Version


def _field(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected {what} object, got {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r} in {what}") from None


def _str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list, got {value!r}")
    return value


def _dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object, got {value!r}")
    return value


@dataclass
class ProtocolType:
    """A protocol data type: a bare name, or a name with inline arguments."""

    name: str
    args: Any = None

    def is_native(self) -> bool:
        """Whether this is the ``native`` marker type."""
        return self.args is None and self.name == "native"

    @classmethod
    def from_json(cls, data: Any) -> ProtocolType:
        if isinstance(data, str):
            return cls(data)
        if not isinstance(data, list):
            raise ValueError(f"expected a string or array, got {data!r}")
        if not data:
            raise ValueError("missing name")
        kind = _str(data[0], "type name")
        parser = _ARG_PARSERS.get(kind)
        if parser is None:
            raise ValueError(f'unknown data type, "{kind}"')
        if len(data) < 2:
            raise ValueError(f"missing {kind} args")
        if len(data) > 2:
            raise ValueError(f"too many elements for {kind}")
        return cls(kind, parser(data[1]))

    def to_json(self) -> Any:
        if self.args is None:
            return self.name
        if isinstance(self.args, list):
            return [self.name, [arg.to_json() for arg in self.args]]
        return [self.name, self.args.to_json()]


@dataclass
class ArrayArgs:
    """Arguments of an array: counted by a field or by a length prefix."""

    kind: ProtocolType
    count_field: str | None = None
    count_type: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> ArrayArgs:
        kind = ProtocolType.from_json(_field(data, "type", "array args"))
        count = data.get("count")
        if isinstance(count, str):
            return cls(kind, count_field=count)
        count_type = data.get("countType")
        if isinstance(count_type, str):
            return cls(kind, count_type=count_type)
        raise ValueError(f"array args need a string count or countType, got {data!r}")

    def to_json(self) -> dict[str, Any]:
        if self.count_field is not None:
            return {"count": self.count_field, "type": self.kind.to_json()}
        return {"countType": self.count_type, "type": self.kind.to_json()}


@dataclass
class ArrayWithLengthOffsetArgs:
    array: ArrayArgs
    length_offset: int

    @classmethod
    def from_json(cls, data: Any) -> ArrayWithLengthOffsetArgs:
        offset = _field(data, "lengthOffset", "arrayWithLengthOffset args")
        return cls(ArrayArgs.from_json(data), _int(offset, "lengthOffset"))

    def to_json(self) -> dict[str, Any]:
        return {**self.array.to_json(), "lengthOffset": self.length_offset}


@dataclass
class BitfieldArg:
    name: str
    size: int
    signed: bool

    @classmethod
    def from_json(cls, data: Any) -> BitfieldArg:
        signed = _field(data, "signed", "bitfield arg")
        if not isinstance(signed, bool):
            raise ValueError(f"signed must be a boolean, got {signed!r}")
        return cls(
            _str(_field(data, "name", "bitfield arg"), "name"),
            _int(_field(data, "size", "bitfield arg"), "size"),
            signed,
        )

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "size": self.size, "signed": self.signed}


@dataclass
class BitflagArgs:
    kind: ProtocolType
    flags: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> BitflagArgs:
        flags = _list(_field(data, "flags", "bitflags args"), "flags")
        return cls(
            ProtocolType.from_json(_field(data, "type", "bitflags args")),
            [_str(flag, "flag") for flag in flags],
        )

    def to_json(self) -> dict[str, Any]:
        return {"type": self.kind.to_json(), "flags": list(self.flags)}


@dataclass
class BufferArgs:
    """A fixed byte count or the type of a length prefix."""

    count: int | None = None
    count_type: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> BufferArgs:
        data = _dict(data, "buffer args")
        if len(data) != 1:
            raise ValueError(f"buffer args need exactly one of count or countType, got {data!r}")
        if "count" in data:
            return cls(count=_int(data["count"], "count"))
        if "countType" in data:
            return cls(count_type=_str(data["countType"], "countType"))
        raise ValueError(f"unknown buffer args {data!r}")

    def to_json(self) -> dict[str, Any]:
        if self.count is not None:
            return {"count": self.count}
        return {"countType": self.count_type}


@dataclass
class ContainerArg:
    kind: ProtocolType
    name: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> ContainerArg:
        kind = ProtocolType.from_json(_field(data, "type", "container arg"))
        name = data.get("name")
        return cls(kind, None if name is None else _str(name, "name"))

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.name is not None:
            result["name"] = self.name
        result["type"] = self.kind.to_json()
        return result


@dataclass
class EntityMetadataArgs:
    end_val: int
    kind: ProtocolType

    @classmethod
    def from_json(cls, data: Any) -> EntityMetadataArgs:
        return cls(
            _int(_field(data, "endVal", "entityMetadataLoop args"), "endVal"),
            ProtocolType.from_json(_field(data, "type", "entityMetadataLoop args")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"endVal": self.end_val, "type": self.kind.to_json()}


@dataclass
class MapperArgs:
    kind: ProtocolType
    mappings: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> MapperArgs:
        mappings = _dict(_field(data, "mappings", "mapper args"), "mappings")
        return cls(
            ProtocolType.from_json(_field(data, "type", "mapper args")),
            {key: _str(value, "mapping") for key, value in mappings.items()},
        )

    def to_json(self) -> dict[str, Any]:
        return {"type": self.kind.to_json(), "mappings": dict(self.mappings)}


@dataclass
class SwitchArgs:
    compare_to: str
    fields: dict[str, ProtocolType] = field(default_factory=dict)
    default: ProtocolType | None = None

    @classmethod
    def from_json(cls, data: Any) -> SwitchArgs:
        compare_to = _str(_field(data, "compareTo", "switch args"), "compareTo")
        fields_json = _dict(_field(data, "fields", "switch args"), "fields")
        default = data.get("default")
        return cls(
            compare_to,
            {key: ProtocolType.from_json(value) for key, value in fields_json.items()},
            None if default is None else ProtocolType.from_json(default),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "compareTo": self.compare_to,
            "fields": {key: value.to_json() for key, value in self.fields.items()},
            "default": None if self.default is None else self.default.to_json(),
        }


@dataclass
class TopBitSetTerminatedArrayArgs:
    kind: ProtocolType

    @classmethod
    def from_json(cls, data: Any) -> TopBitSetTerminatedArrayArgs:
        return cls(ProtocolType.from_json(_field(data, "type", "topBitSetTerminatedArray args")))

    def to_json(self) -> dict[str, Any]:
        return {"type": self.kind.to_json()}


@dataclass
class RegistryEntryArg:
    name: str
    kind: ProtocolType

    @classmethod
    def from_json(cls, data: Any) -> RegistryEntryArg:
        return cls(
            _str(_field(data, "name", "registry entry arg"), "name"),
            ProtocolType.from_json(_field(data, "type", "registry entry arg")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.kind.to_json()}


@dataclass
class RegistryEntryHolderArgs:
    base_name: ProtocolType
    otherwise: RegistryEntryArg

    @classmethod
    def from_json(cls, data: Any) -> RegistryEntryHolderArgs:
        return cls(
            ProtocolType.from_json(_field(data, "baseName", "registryEntryHolder args")),
            RegistryEntryArg.from_json(_field(data, "otherwise", "registryEntryHolder args")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"baseName": self.base_name.to_json(), "otherwise": self.otherwise.to_json()}


@dataclass
class RegistryEntryHolderSetArgs:
    base: RegistryEntryArg
    otherwise: RegistryEntryArg

    @classmethod
    def from_json(cls, data: Any) -> RegistryEntryHolderSetArgs:
        what = "registryEntryHolderSet args"
        return cls(
            RegistryEntryArg.from_json(_field(data, "base", what)),
            RegistryEntryArg.from_json(_field(data, "otherwise", what)),
        )

    def to_json(self) -> dict[str, Any]:
        return {"base": self.base.to_json(), "otherwise": self.otherwise.to_json()}


def _list_of(parser: Callable[[Any], Any], what: str) -> Callable[[Any], list[Any]]:
    return lambda data: [parser(item) for item in _list(data, what)]


_ARG_PARSERS: dict[str, Callable[[Any], Any]] = {
    "array": ArrayArgs.from_json,
    "arrayWithLengthOffset": ArrayWithLengthOffsetArgs.from_json,
    "bitfield": _list_of(BitfieldArg.from_json, "bitfield args"),
    "bitflags": BitflagArgs.from_json,
    "buffer": BufferArgs.from_json,
    "container": _list_of(ContainerArg.from_json, "container args"),
    "entityMetadataLoop": EntityMetadataArgs.from_json,
    "mapper": MapperArgs.from_json,
    "option": ProtocolType.from_json,
    "pstring": BufferArgs.from_json,
    "registryEntryHolder": RegistryEntryHolderArgs.from_json,
    "registryEntryHolderSet": RegistryEntryHolderSetArgs.from_json,
    "switch": SwitchArgs.from_json,
    "topBitSetTerminatedArray": TopBitSetTerminatedArrayArgs.from_json,
}


def _types_from_json(data: Any) -> dict[str, ProtocolType]:
    return {key: ProtocolType.from_json(value) for key, value in _dict(data, "types").items()}


def _types_to_json(types: dict[str, ProtocolType]) -> dict[str, Any]:
    return {key: value.to_json() for key, value in types.items()}


@dataclass
class ProtocolState:
    """The packets of one connection state, by direction."""

    clientbound: dict[str, ProtocolType] = field(default_factory=dict)
    serverbound: dict[str, ProtocolType] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> ProtocolState:
        to_client = _field(data, "toClient", "protocol state")
        to_server = _field(data, "toServer", "protocol state")
        return cls(
            _types_from_json(_field(to_client, "types", "toClient")),
            _types_from_json(_field(to_server, "types", "toServer")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "toClient": {"types": _types_to_json(self.clientbound)},
            "toServer": {"types": _types_to_json(self.serverbound)},
        }


@dataclass
class VersionProtocol(CachedFile):
    """The protocol file of one version."""

    types: dict[str, ProtocolType] = field(default_factory=dict)
    packets: dict[str, ProtocolState] = field(default_factory=dict)

    FILE_NAME: ClassVar[str] = "protocol.json"

    @classmethod
    def from_json(cls, data: Any) -> VersionProtocol:
        types = _types_from_json(_field(data, "types", "protocol"))
        packets = {
            key: ProtocolState.from_json(value) for key, value in data.items() if key != "types"
        }
        return cls(types, packets)

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"types": _types_to_json(self.types)}
        result.update((key, state.to_json()) for key, state in self.packets.items())
        return result

    @classmethod
    def get_url(cls, version: Version, data: DataPath) -> str | None:
        return data.get_java_protocol(version)

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
    ) -> VersionProtocol:
        """Fetch the protocol file of a version."""
        return fetch_json(cls, version, cache, data, redownload, client)