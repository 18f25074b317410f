import json
from datetime import datetime, timezone

import httpx
import pytest

from froglight_parse.manifest import (
    ReleaseType,
    VersionManifest,
    VersionManifestData,
)
from froglight_parse.version import Version, VersionKind

SHA = "0" * 40


def _entry(version_id, kind, release_time):
    return {
        "id": version_id,
        "type": kind,
        "url": f"https://example.com/versions/{version_id}.json",
        "time": "2024-06-13T08:32:38+00:00",
        "releaseTime": release_time,
        "sha1": SHA,
        "complianceLevel": 1,
    }


MANIFEST_JSON = {
    "latest": {"release": "1.21", "snapshot": "24w21b"},
    "versions": [
        _entry("1.21", "release", "2024-06-13T08:24:03+00:00"),
        _entry("1.21-rc1", "snapshot", "2024-06-10T12:00:00+00:00"),
        _entry("1.21-pre1", "snapshot", "2024-05-29T12:00:00+00:00"),
        _entry("24w21b", "snapshot", "2024-05-22T12:00:00Z"),
        _entry("1.7.1", "snapshot", "2013-10-23T12:00:00+00:00"),
        _entry("1.4.1", "snapshot", "2012-10-23T12:00:00+00:00"),
        _entry("b1.8.1", "old_beta", "2011-09-19T00:00:00+00:00"),
        _entry("rd-132211", "old_alpha", "2009-05-13T20:11:00+00:00"),
    ],
}

KNOWN_MISMATCHES = {"1.3.0", "1.4.0", "1.4.1", "1.4.3", "1.5.0", "1.6.0", "1.6.3", "1.7.0", "1.7.1"}


def test_release_types_match_versions():
    manifest = VersionManifest.from_json(MANIFEST_JSON)
    assert len(manifest.versions) == 8
    for info in manifest.versions.values():
        if info.id.to_long_string() in KNOWN_MISMATCHES:
            assert info.kind is ReleaseType.SNAPSHOT
        elif info.id.kind is VersionKind.RELEASE:
            assert info.kind is ReleaseType.RELEASE
        elif info.id.kind is VersionKind.OTHER:
            assert info.kind in (ReleaseType.OLD_BETA, ReleaseType.OLD_ALPHA)
        else:
            assert info.kind is ReleaseType.SNAPSHOT


def test_latest_versions():
    manifest = VersionManifest.from_json(MANIFEST_JSON)
    assert manifest.latest.release == Version.new_release(1, 21, 0)
    assert manifest.latest.snapshot == Version.new_snapshot(24, 21, "b")


def test_compare():
    manifest = VersionManifest.from_json(MANIFEST_JSON)
    v1_21 = Version.new_release(1, 21, 0)
    snapshot = Version.new_snapshot(24, 21, "b")
    assert manifest.compare(v1_21, snapshot) == 1
    assert manifest.compare(snapshot, v1_21) == -1
    assert manifest.compare(v1_21, v1_21) == 0
    assert manifest.compare(v1_21, Version.new_release(9, 0, 0)) is None


def test_times_are_utc():
    manifest = VersionManifest.from_json(MANIFEST_JSON)
    info = manifest.versions[Version.new_release(1, 21, 0)]
    assert info.release_time == datetime(2024, 6, 13, 8, 24, 3, tzinfo=timezone.utc)
    assert info.to_json()["releaseTime"] == "2024-06-13T08:24:03Z"
    assert info.url == "https://example.com/versions/1.21.json"


def test_round_trip():
    manifest = VersionManifest.from_json(MANIFEST_JSON)
    assert VersionManifest.from_json(manifest.to_json()) == manifest


def test_unknown_release_type_rejected():
    with pytest.raises(ValueError):
        VersionManifestData.from_json(_entry("1.0", "ancient", "2011-11-18T00:00:00+00:00"))


def test_fetch_from_cache(tmp_path):
    path = VersionManifest.get_path(Version.new_release(1, 21, 0), tmp_path)
    assert path == tmp_path / "version_manifest_v2.json"
    path.write_text(json.dumps(MANIFEST_JSON))
    manifest = VersionManifest.fetch(Version.new_release(1, 21, 0), tmp_path)
    assert manifest == VersionManifest.from_json(MANIFEST_JSON)


def test_fetch_downloads(tmp_path):
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return httpx.Response(200, content=json.dumps(MANIFEST_JSON).encode())

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        manifest = VersionManifest.fetch(Version.new_release(1, 21, 0), tmp_path, None, True, client)

    assert requested == [VersionManifest.FILE_URL]
    assert manifest.latest.release == Version.new_release(1, 21, 0)