"""Assets and data files written by the game's built-in data generator."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _json_files(directory: Path) -> Iterator[Path]:
    """The JSON files directly inside a directory."""
    for entry in directory.iterdir():
        if entry.is_dir() or not entry.name.endswith(".json"):
            continue
        yield entry


def _json_map(directory: Path) -> dict[str, Any]:
    return {entry.name: _read_json(entry) for entry in _json_files(directory)}


class GeneratedBlockstates(dict[str, Any]):
    """Blockstate files, keyed by file name."""

    @classmethod
    def load(cls, path: Path | str) -> GeneratedBlockstates:
        """Read every blockstate file in a directory."""
        return cls(_json_map(Path(path)))


@dataclass
class GeneratedModels:
    """Block and item model files, keyed by file name."""

    block: dict[str, Any] = field(default_factory=dict)
    item: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | str) -> GeneratedModels:
        """Read the ``block`` and ``item`` model directories."""
        path = Path(path)
        return cls(block=_json_map(path / "block"), item=_json_map(path / "item"))


@dataclass
class GeneratedAssets:
    """Generated blockstates and models."""

    blockstates: GeneratedBlockstates
    models: GeneratedModels

    @classmethod
    def load(cls, path: Path | str) -> GeneratedAssets:
        """Read the assets from a generator ``assets`` directory."""
        minecraft = Path(path) / "minecraft"
        return cls(
            blockstates=GeneratedBlockstates.load(minecraft / "blockstates"),
            models=GeneratedModels.load(minecraft / "models"),
        )


class GeneratedData(dict[Path, Any]):
    """Generated data files, keyed by their path relative to the data directory."""

    @classmethod
    def load(cls, path: Path | str) -> GeneratedData:
        """Read every JSON file below a directory, recursively."""
        root = Path(path)
        data = cls()
        data._append_directory(root, root)
        return data

    def _append_directory(self, directory: Path, root: Path) -> None:
        for entry in directory.iterdir():
            if entry.is_dir():
                self._append_directory(entry, root)
            elif entry.name.endswith(".json"):
                self[entry.relative_to(root)] = _read_json(entry)