import json

import httpx
import pytest

from froglight_parse.datapath import DataPath, VersionDataPath
from froglight_parse.version import Version

SAMPLE = {
    "pc": {
        "1.20": {"proto": "pc/1.20", "blocks": "pc/1.20", "protocol": "pc/1.20"},
        "1.20.1": {"blocks": "pc/1.20", "protocol": "pc/1.20"},
        "1.20.2": {"proto": "pc/1.20.2", "entities": "pc/1.20.2"},
        "1.20.3": {"proto": "pc/1.20.3"},
        "1.20.4": {"proto": "pc/1.20.3"},
        "1.20.5": {"proto": "pc/1.20.5"},
        "1.20.6": {"proto": "pc/1.20.5", "futureField": "pc/1.20.6"},
    },
    "bedrock": {"1.16.201": {"blocks": "bedrock/1.16.201"}},
}

BASE = DataPath.FILE_URL.rsplit("/", 1)[0]


@pytest.fixture
def cached(tmp_path):
    (tmp_path / "dataPaths.json").write_text(json.dumps(SAMPLE))
    return tmp_path


def test_fetch_from_cache_proto_urls(cached):
    datapaths = DataPath.fetch(Version.new_release(1, 21, 1), cached)
    assert datapaths.get_java_proto(Version.new_release(1, 20, 0)) == f"{BASE}/pc/1.20/proto.yml"
    assert datapaths.get_java_proto(Version.new_release(1, 20, 1)) is None
    assert datapaths.get_java_proto(Version.new_release(1, 20, 2)) == f"{BASE}/pc/1.20.2/proto.yml"
    assert datapaths.get_java_proto(Version.new_release(1, 20, 3)) == f"{BASE}/pc/1.20.3/proto.yml"
    assert datapaths.get_java_proto(Version.new_release(1, 20, 4)) == f"{BASE}/pc/1.20.3/proto.yml"
    assert datapaths.get_java_proto(Version.new_release(1, 20, 5)) == f"{BASE}/pc/1.20.5/proto.yml"
    assert datapaths.get_java_proto(Version.new_release(1, 20, 6)) == f"{BASE}/pc/1.20.5/proto.yml"


def test_other_file_urls(cached):
    datapaths = DataPath.fetch(Version.new_release(1, 21, 0), cached)
    v1_20 = Version.new_release(1, 20, 0)
    assert datapaths.get_java_blocks(v1_20) == f"{BASE}/pc/1.20/blocks.json"
    assert datapaths.get_java_protocol(v1_20) == f"{BASE}/pc/1.20/protocol.json"
    assert datapaths.get_java_entities(v1_20) is None
    assert (
        datapaths.get_java_entities(Version.new_release(1, 20, 2))
        == f"{BASE}/pc/1.20.2/entities.json"
    )


def test_unknown_version_has_no_urls(cached):
    datapaths = DataPath.fetch(Version.new_release(1, 21, 0), cached)
    assert datapaths.get_java_blocks(Version.new_release(9, 9, 9)) is None


def test_unknown_fields_are_kept(cached):
    datapaths = DataPath.fetch(Version.new_release(1, 21, 0), cached)
    paths = datapaths.pc[Version.new_release(1, 20, 6)]
    assert paths.other == {"futureField": "pc/1.20.6"}
    assert datapaths.bedrock[Version.new_release(1, 16, 201)].blocks == "bedrock/1.16.201"


def test_round_trip():
    datapaths = DataPath.from_json(SAMPLE)
    assert DataPath.from_json(datapaths.to_json()) == datapaths


def test_version_data_path_json_names():
    paths = VersionDataPath.from_json({"blockCollisionShapes": "pc/1.20", "mapIcons": None})
    assert paths.block_collision_shapes == "pc/1.20"
    assert paths.map_icons is None
    assert paths.to_json()["blockCollisionShapes"] == "pc/1.20"


def test_rejects_non_string_path():
    with pytest.raises(ValueError):
        VersionDataPath.from_json({"blocks": 12})


def test_get_path(tmp_path):
    assert DataPath.get_path(Version.new_release(1, 21, 0), tmp_path) == tmp_path / "dataPaths.json"


def test_download_when_missing(tmp_path):
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return httpx.Response(200, content=json.dumps(SAMPLE).encode())

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        datapaths = DataPath.fetch(Version.new_release(1, 21, 0), tmp_path, client=client)
        again = DataPath.fetch(Version.new_release(1, 21, 0), tmp_path, client=client)

    assert requested == [DataPath.FILE_URL]
    assert (tmp_path / "dataPaths.json").exists()
    assert datapaths == again == DataPath.from_json(SAMPLE)