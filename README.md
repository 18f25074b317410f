# froglight-parse

Download, cache and parse Minecraft version data.

The package knows where each data file lives, downloads it once into a
cache directory and turns it into plain Python objects.

| Module | What it holds |
| --- | --- |
| `froglight_parse.version` | `Version`, `VersionKind` and the `parse_release`, `parse_release_candidate`, `parse_pre_release`, `parse_snapshot` helpers |
| `froglight_parse.cache` | `CachedFile`, `UrlNotFoundError`, `fetch_file`, `fetch_json`, `fetch_xml` |
| `froglight_parse.manifest` | `VersionManifest`, `VersionManifestData`, `VersionManifestLatest`, `ReleaseType` |
| `froglight_parse.versioninfo` | `VersionInfo`, `VersionDownloads`, `VersionDownload`, `VersionAssetIndex` |
| `froglight_parse.datapath` | `DataPath`, `VersionDataPath` |
| `froglight_parse.blocks` | `VersionBlocks`, `BlockSpecification`, `BlockSpecificationState`, `StateKind` |
| `froglight_parse.entity` | `VersionEntities`, `EntitySpecification` |
| `froglight_parse.protocol` | `VersionProtocol`, `ProtocolState`, `ProtocolType` and its argument classes |
| `froglight_parse.yarnmaven` | `YarnMavenMetadata`, `YarnVersioning` |
| `froglight_parse.reports` | `GeneratedReports` and the block, item, packet and registry reports |
| `froglight_parse.assets` | `GeneratedAssets`, `GeneratedBlockstates`, `GeneratedModels`, `GeneratedData` |
| `froglight_parse.generator` | `GeneratorData` |

## Installation

```
pip install froglight-parse
```

`GeneratorData.fetch` runs the server jar with `java`, so it needs a `java`
executable on `PATH`.

## Versions

```python
from froglight_parse.version import Version

v = Version.parse("1.20.1-pre2")
assert v.is_pre()
assert v.to_long_string() == "1.20.1-pre2"

release = Version.new_release(1, 20, 0)
assert release.to_long_string() == "1.20.0"
assert release.to_short_string() == "1.20"
assert str(release) == "1.20.0"

assert Version.parse("24w40a").is_snapshot()
assert Version.parse("b1.7.3").is_release() is False
```

Strings that match none of the release, release-candidate, pre-release or
snapshot forms become versions of kind `VersionKind.OTHER` that keep their
text. `Version.new_snapshot` raises `ValueError` unless the release letter is
a single lowercase ASCII letter.

`compare_relative` orders two versions of the same kind and returns -1, 0 or
1, or `None` when the kinds differ or either version is `OTHER`.
`VersionManifest.compare` orders two versions by their release time in the
manifest, and returns `None` if either is missing from it.

## Fetching data files

Every file type has a class method
`fetch(version, cache, data=None, redownload=False, client=None)`.
`data` is what the type needs to find its URL:

- `None` for `VersionManifest`, `DataPath` and `YarnMavenMetadata`, which are
  the same for every version;
- a `DataPath` for `VersionBlocks`, `VersionEntities` and `VersionProtocol`;
- a `VersionManifest` for `VersionInfo`;
- a `VersionInfo` for `GeneratorData`.

```python
from pathlib import Path

import httpx

from froglight_parse.blocks import VersionBlocks
from froglight_parse.datapath import DataPath
from froglight_parse.manifest import VersionManifest
from froglight_parse.version import Version
from froglight_parse.versioninfo import VersionInfo

cache = Path("cache")
version = Version.new_release(1, 21, 1)

with httpx.Client(follow_redirects=True) as client:
    paths = DataPath.fetch(version, cache, None, False, client)
    blocks = VersionBlocks.fetch(version, cache, paths, False, client)

    manifest = VersionManifest.fetch(version, cache, None, False, client)
    info = VersionInfo.fetch(version, cache, manifest, False, client)

print(len(blocks), info.downloads.server.url)
```

Files already in the cache are read from disk; pass `redownload=True` to
download them again. When no client is given, a temporary `httpx.Client` is
used. A file type that has no URL for the requested version raises
`UrlNotFoundError`. Per-version files are stored under `v<version>/` in the
cache directory.

Most classes have `from_json` and `to_json` to build them from, and turn them
back into, decoded JSON; `YarnMavenMetadata` is read from XML with `from_xml`.

## Data generator output

`GeneratorData.fetch` downloads the server jar for a version, runs its data
generator once (into `v<version>/generator`) and reads the result. It logs a
warning for versions before 1.21.0 or that are not releases, and raises
`RuntimeError` if the generator exits with an error. Output that already
exists can be read without running anything:

```python
from froglight_parse.generator import GeneratorData

generated = GeneratorData.load("cache/v1.21.1/generator")
print(len(generated.reports.blocks), generated.reports.packets.play.clientbound)
```

`GeneratedReports.load`, `GeneratedAssets.load` and `GeneratedData.load` read
the `reports`, `assets` and `data` directories on their own.

## What this package does not do

It is a library only: there is no command-line program, and nothing is
stored beyond the downloaded files in the cache directory you pass in.