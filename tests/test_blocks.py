import json

import httpx
import pytest

from froglight_parse.blocks import (
    BlockSpecification,
    BlockSpecificationState,
    StateKind,
    VersionBlocks,
)
from froglight_parse.cache import UrlNotFoundError
from froglight_parse.datapath import DataPath
from froglight_parse.version import Version

CHERRY_JSON = {
    "id": 238,
    "name": "cherry_pressure_plate",
    "displayName": "Cherry Pressure Plate",
    "hardness": 0.5,
    "resistance": 0.5,
    "stackSize": 64,
    "diggable": True,
    "material": "mineable/axe",
    "transparent": True,
    "emitLight": 0,
    "filterLight": 0,
    "defaultState": 5727,
    "minStateId": 5726,
    "maxStateId": 5727,
    "states": [{"name": "powered", "type": "bool", "num_values": 2}],
    "drops": [704],
    "boundingBox": "empty",
}

BRAIN_CORAL_JSON = {
    "id": 699,
    "name": "brain_coral",
    "displayName": "Brain Coral",
    "hardness": 0,
    "resistance": 0,
    "stackSize": 64,
    "diggable": True,
    "material": "default",
    "transparent": True,
    "emitLight": 0,
    "filterLight": 1,
    "defaultState": 12825,
    "minStateId": 12825,
    "maxStateId": 12826,
    "states": [{"name": "waterlogged", "type": "bool", "num_values": 2}],
    "drops": [],
    "boundingBox": "empty",
}

SAMPLE_BLOCK_JSON = {
    "id": 1,
    "name": "sample_block",
    "displayName": "Sample Block",
    "hardness": 1.5,
    "resistance": 6.0,
    "stackSize": 64,
    "diggable": True,
    "material": "mineable/pickaxe",
    "transparent": False,
    "emitLight": 0,
    "filterLight": 15,
    "defaultState": 10,
    "minStateId": 10,
    "maxStateId": 15,
    "states": [
        {"name": "facing", "type": "enum", "num_values": 2, "values": ["north", "south"]},
        {"name": "age", "type": "int", "num_values": 3, "values": ["0", "1", "2"]},
    ],
    "harvestTools": {"819": True},
    "drops": [1],
    "boundingBox": "block",
}

CHERRY_PRESSURE_PLATE = BlockSpecification(
    id=238,
    name="cherry_pressure_plate",
    display_name="Cherry Pressure Plate",
    hardness=0.5,
    resistance=0.5,
    stack_size=64,
    diggable=True,
    material="mineable/axe",
    transparent=True,
    emit_light=0,
    filter_light=0,
    default_state=5727,
    min_state_id=5726,
    max_state_id=5727,
    states=[BlockSpecificationState(StateKind.BOOL, "powered", 2)],
    harvest_tools={},
    drops=[704],
    bounding_box="empty",
)

BRAIN_CORAL = BlockSpecification(
    id=699,
    name="brain_coral",
    display_name="Brain Coral",
    hardness=0.0,
    resistance=0.0,
    stack_size=64,
    diggable=True,
    material="default",
    transparent=True,
    emit_light=0,
    filter_light=1,
    default_state=12825,
    min_state_id=12825,
    max_state_id=12826,
    states=[BlockSpecificationState(StateKind.BOOL, "waterlogged", 2)],
    harvest_tools={},
    drops=[],
    bounding_box="empty",
)

BLOCKS_JSON = [SAMPLE_BLOCK_JSON, CHERRY_JSON, BRAIN_CORAL_JSON]

DATAPATHS = DataPath.from_json(
    {
        "pc": {
            "1.21": {"blocks": "pc/1.21"},
            "1.21.1": {"blocks": "pc/1.21"},
        },
        "bedrock": {},
    }
)


def test_parses_known_blocks():
    assert BlockSpecification.from_json(CHERRY_JSON) == CHERRY_PRESSURE_PLATE
    assert BlockSpecification.from_json(BRAIN_CORAL_JSON) == BRAIN_CORAL


def test_fetch_downloads_and_blocks_are_valid(tmp_path):
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return httpx.Response(200, content=json.dumps(BLOCKS_JSON).encode())

    v1_21_0 = Version.new_release(1, 21, 0)
    v1_21_1 = Version.new_release(1, 21, 1)
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        b1_21_0 = VersionBlocks.fetch(v1_21_0, tmp_path, DATAPATHS, False, client)
        b1_21_1 = VersionBlocks.fetch(v1_21_1, tmp_path, DATAPATHS, False, client)

    assert all(url.endswith("/pc/1.21/blocks.json") for url in requested)
    assert len(requested) == 2
    assert (tmp_path / "v1.21.0" / "blocks.json").exists()
    assert b1_21_0 == b1_21_1
    assert len(b1_21_0) == 3

    for block in b1_21_0:
        assert block.name and block.display_name and block.material and block.bounding_box
        for state in block.states:
            if state.kind is StateKind.BOOL:
                assert state.num_values == 2
            else:
                assert state.values()
                assert state.num_values == len(state.values())
                assert all(state.values())

    assert b1_21_0[1] == CHERRY_PRESSURE_PLATE
    assert b1_21_0[2] == BRAIN_CORAL


def test_fetch_reads_cache(tmp_path):
    target = VersionBlocks.get_path(Version.new_release(1, 21, 0), tmp_path)
    target.parent.mkdir(parents=True)
    target.write_text(json.dumps([CHERRY_JSON]))
    blocks = VersionBlocks.fetch(Version.new_release(1, 21, 0), tmp_path, DATAPATHS)
    assert list(blocks) == [CHERRY_PRESSURE_PLATE]


def test_missing_url_raises(tmp_path):
    with pytest.raises(UrlNotFoundError):
        VersionBlocks.fetch(Version.new_release(1, 8, 0), tmp_path, DATAPATHS)


def test_num_states():
    assert CHERRY_PRESSURE_PLATE.num_states() == 2
    assert BlockSpecification.from_json(SAMPLE_BLOCK_JSON).num_states() == 6


def test_state_values():
    sample = BlockSpecification.from_json(SAMPLE_BLOCK_JSON)
    assert CHERRY_PRESSURE_PLATE.states[0].values() == ("true", "false")
    assert sample.states[0].values() == ("north", "south")
    assert sample.states[1].kind is StateKind.INT
    assert sample.harvest_tools == {"819": True}


def test_round_trip_and_empty_harvest_tools_omitted():
    blocks = VersionBlocks.from_json(BLOCKS_JSON)
    dumped = blocks.to_json()
    assert "harvestTools" not in dumped[1]
    assert dumped[0]["harvestTools"] == {"819": True}
    assert VersionBlocks.from_json(dumped) == blocks


def test_unknown_block_field_rejected():
    with pytest.raises(ValueError):
        BlockSpecification.from_json({**CHERRY_JSON, "extra": 1})


def test_unknown_state_type_rejected():
    with pytest.raises(ValueError):
        BlockSpecificationState.from_json({"name": "x", "type": "float", "num_values": 1})


def test_bool_state_with_values_rejected():
    with pytest.raises(ValueError):
        BlockSpecificationState.from_json(
            {"name": "x", "type": "bool", "num_values": 2, "values": ["true", "false"]}
        )