"""Minecraft version identifiers: parsing, formatting and comparison."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U64_MAX = 2**64 - 1

_RELEASE_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?", re.ASCII)
_RELEASE_CANDIDATE_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?-rc(\d+)", re.ASCII)
_PRE_RELEASE_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?-pre(\d+)", re.ASCII)
_SNAPSHOT_RE = re.compile(r"(\d\d)w(\d\d)([a-z])", re.ASCII)


class VersionKind(Enum):
    """The family a version belongs to."""

    RELEASE = "release"
    RELEASE_CANDIDATE = "release_candidate"
    PRE_RELEASE = "pre_release"
    SNAPSHOT = "snapshot"
    OTHER = "other"


_DEBUG_NAMES = {
    VersionKind.RELEASE: "Release",
    VersionKind.RELEASE_CANDIDATE: "ReleaseCandidate",
    VersionKind.PRE_RELEASE: "PreRelease",
    VersionKind.SNAPSHOT: "Snapshot",
    VersionKind.OTHER: "Other",
}


def _check_u64(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Version:
    """A version of Minecraft.

    Snapshots store the year as ``major``, the week as ``minor`` and the
    code point of the release letter as ``patch``. Unknown versions keep
    their original text in ``text``.
    """

    kind: VersionKind
    major: int = 0
    minor: int = 0
    patch: int = 0
    pre: str = ""
    text: str = ""

    @classmethod
    def new_release(cls, major: int, minor: int, patch: int) -> Version:
        """Create a release version."""
        return cls(
            VersionKind.RELEASE,
            _check_u64(major, "major"),
            _check_u64(minor, "minor"),
            _check_u64(patch, "patch"),
        )

    @classmethod
    def new_rc(cls, major: int, minor: int, patch: int, candidate: int) -> Version:
        """Create a release candidate version."""
        _check_u64(candidate, "candidate")
        return cls(
            VersionKind.RELEASE_CANDIDATE,
            _check_u64(major, "major"),
            _check_u64(minor, "minor"),
            _check_u64(patch, "patch"),
            pre=f"rc{candidate}",
        )

    @classmethod
    def new_pre(cls, major: int, minor: int, patch: int, prerelease: int) -> Version:
        """Create a pre-release version."""
        _check_u64(prerelease, "prerelease")
        return cls(
            VersionKind.PRE_RELEASE,
            _check_u64(major, "major"),
            _check_u64(minor, "minor"),
            _check_u64(patch, "patch"),
            pre=f"pre{prerelease}",
        )

    @classmethod
    def new_snapshot(cls, year: int, week: int, release: str) -> Version:
        """Create a snapshot version; ``release`` must be one lowercase ASCII letter."""
        if len(release) != 1 or not ("a" <= release <= "z"):
            raise ValueError(f"snapshot release must be a lowercase ASCII letter, got {release!r}")
        return cls(
            VersionKind.SNAPSHOT,
            _check_u64(year, "year"),
            _check_u64(week, "week"),
            ord(release),
        )

    @classmethod
    def other(cls, text: str) -> Version:
        """Create a version of unknown form."""
        return cls(VersionKind.OTHER, text=text)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string; anything unrecognised becomes an ``OTHER`` version."""
        for parser in (parse_release, parse_release_candidate, parse_pre_release, parse_snapshot):
            version = parser(text)
            if version is not None:
                return version
        return cls.other(text)

    def is_release(self) -> bool:
        return self.kind is VersionKind.RELEASE

    def is_rc(self) -> bool:
        return self.kind is VersionKind.RELEASE_CANDIDATE

    def is_pre(self) -> bool:
        return self.kind is VersionKind.PRE_RELEASE

    def is_snapshot(self) -> bool:
        return self.kind is VersionKind.SNAPSHOT

    def compare_relative(self, other: Version) -> int | None:
        """Compare two versions of the same kind.

        Returns -1, 0 or 1, or ``None`` when the kinds differ or either
        version is of unknown form.
        """
        if self.kind is not other.kind or self.kind is VersionKind.OTHER:
            return None
        left = (self.major, self.minor, self.patch)
        right = (other.major, other.minor, other.patch)
        if left == right:
            left, right = self.pre, other.pre
        return (left > right) - (left < right)

    def _semver(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.pre}" if self.pre else base

    def _snapshot_string(self) -> str:
        return f"{self.major}w{self.minor}{chr(self.patch)}"

    def to_long_string(self) -> str:
        """Format the version, keeping any trailing zero patch."""
        if self.kind is VersionKind.RELEASE:
            return f"{self.major}.{self.minor}.{self.patch}"
        if self.kind in (VersionKind.RELEASE_CANDIDATE, VersionKind.PRE_RELEASE):
            return f"{self.major}.{self.minor}.{self.patch}-{self.pre}"
        if self.kind is VersionKind.SNAPSHOT:
            return self._snapshot_string()
        return self.text

    def to_short_string(self) -> str:
        """Format the version, dropping a zero patch."""
        if self.kind is VersionKind.RELEASE:
            if self.patch == 0:
                return f"{self.major}.{self.minor}"
            return f"{self.major}.{self.minor}.{self.patch}"
        if self.kind in (VersionKind.RELEASE_CANDIDATE, VersionKind.PRE_RELEASE):
            if self.patch == 0:
                return f"{self.major}.{self.minor}-{self.pre}"
            return f"{self.major}.{self.minor}.{self.patch}-{self.pre}"
        if self.kind is VersionKind.SNAPSHOT:
            return self._snapshot_string()
        return self.text

    def __str__(self) -> str:
        return self.to_long_string()

    def __repr__(self) -> str:
        name = _DEBUG_NAMES[self.kind]
        if self.kind is VersionKind.OTHER:
            return f"{name}({self.text})"
        return f"{name}({self._semver()})"


def _numbers(*groups: str | None) -> tuple[int, ...] | None:
    """Convert captured digit groups, treating a missing group as zero."""
    values = []
    for group in groups:
        value = 0 if group is None else int(group)
        if value > _U64_MAX:
            return None
        values.append(value)
    return tuple(values)


def parse_release(text: str) -> Version | None:
    """Parse ``major.minor[.patch]``."""
    match = _RELEASE_RE.fullmatch(text)
    if match is None:
        return None
    numbers = _numbers(match.group(1), match.group(2), match.group(3))
    if numbers is None:
        return None
    return Version.new_release(*numbers)


def parse_release_candidate(text: str) -> Version | None:
    """Parse ``major.minor[.patch]-rcN``."""
    match = _RELEASE_CANDIDATE_RE.fullmatch(text)
    if match is None:
        return None
    numbers = _numbers(match.group(1), match.group(2), match.group(3), match.group(4))
    if numbers is None:
        return None
    return Version.new_rc(*numbers)


def parse_pre_release(text: str) -> Version | None:
    """Parse ``major.minor[.patch]-preN``."""
    match = _PRE_RELEASE_RE.fullmatch(text)
    if match is None:
        return None
    numbers = _numbers(match.group(1), match.group(2), match.group(3), match.group(4))
    if numbers is None:
        return None
    return Version.new_pre(*numbers)


def parse_snapshot(text: str) -> Version | None:
    """Parse ``YYwWWx`` snapshot versions."""
    match = _SNAPSHOT_RE.fullmatch(text)
    if match is None:
        return None
    year, week = int(match.group(1)), int(match.group(2))
    return Version.new_snapshot(year, week, match.group(3))