"""Running the game's data generator and reading what it produces."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from .assets import GeneratedAssets, GeneratedData
from .cache import CachedFile, fetch_file
from .reports import GeneratedReports
from .version import Version
from .versioninfo import VersionInfo

logger = logging.getLogger(__name__)

_GENERATOR_COMMAND = (
    "java",
    "-DbundlerMainClass=net.minecraft.data.Main",
    "-jar",
    "../server.jar",
    "--all",
    "--output",
    "../generator",
)


@dataclass
class GeneratorData(CachedFile):
    """Everything the data generator produced for one version."""

    assets: GeneratedAssets
    data: GeneratedData
    reports: GeneratedReports

    @classmethod
    def load(cls, generator_dir: Path | str) -> GeneratorData:
        """Read the output of a finished generator run."""
        generator_dir = Path(generator_dir)
        logger.debug("Parsing assets in %s", generator_dir)
        assets = GeneratedAssets.load(generator_dir / "assets")
        logger.debug("Parsing data in %s", generator_dir)
        data = GeneratedData.load(generator_dir / "data")
        logger.debug("Parsing reports in %s", generator_dir)
        reports = GeneratedReports.load(generator_dir / "reports")
        return cls(assets=assets, data=data, reports=reports)

    @classmethod
    def get_url(cls, version: Version, data: VersionInfo | None) -> str | None:
        if data is None:
            return None
        return data.downloads.server.url

    @classmethod
    def get_path(cls, version: Version, cache: Path) -> Path:
        return Path(cache) / f"v{version}" / "server.jar"

    @classmethod
    def fetch(
        cls,
        version: Version,
        cache: Path | str,
        data: Any = None,
        redownload: bool = False,
        client: httpx.Client | None = None,
    ) -> GeneratorData:
        """Download the server jar, run its data generator once and read the output."""
        ordering = version.compare_relative(Version.new_release(1, 21, 0))
        if ordering is None:
            logger.warning('Version "%s" is not a release version, this may not work!', version)
        elif ordering < 0:
            logger.warning("Version v%s is before v1.21.0, this may not work!", version)

        jar = fetch_file(cls, version, cache, data, redownload, client)
        generator_cache = jar.parent / "generator-cache"
        generator = jar.parent / "generator"

        if redownload:
            shutil.rmtree(generator_cache)
            shutil.rmtree(generator)

        if not generator.exists():
            generator_cache.mkdir(parents=True, exist_ok=True)
            generator.mkdir(parents=True, exist_ok=True)
            result = subprocess.run(
                list(_GENERATOR_COMMAND),
                cwd=generator_cache,
                stdout=sys.stderr,
                check=False,
            )
            if result.returncode != 0:
                raise RuntimeError("Failed to generate data")

        data_result = cls.load(generator)
        logger.debug("Finished parsing: %s", version)
        return data_result