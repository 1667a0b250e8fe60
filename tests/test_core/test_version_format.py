from __future__ import annotations

from typing import Optional

import pytest
from packaging.version import Version as Pep440Version

from relnames.core.version_format import (
    VERSION_FORMATS,
    PythonVersionFormat,
    RubyVersionFormat,
    SemverVersionFormat,
    VersionFormat,
    get_grammar_fragment,
    get_version_format,
)
from relnames.exceptions import UnknownVersionFormatError
from relnames.models.version import Version


@pytest.fixture
def semver() -> SemverVersionFormat:
    return SemverVersionFormat()


@pytest.fixture
def ruby() -> RubyVersionFormat:
    return RubyVersionFormat()


@pytest.fixture
def python_format() -> PythonVersionFormat:
    return PythonVersionFormat()


@pytest.mark.unit
class TestSemverVersionFormat:
    """Tests for the SemVer dialect."""

    def test_parse_basic(self, semver: SemverVersionFormat) -> None:
        """Test a plain triple parses with no prerelease or build."""
        version = semver.parse("1.2.3")

        assert version is not None
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.pre_release is None
        assert version.build is None

    def test_parse_prerelease(self, semver: SemverVersionFormat) -> None:
        """Test a hyphen-separated prerelease is captured."""
        version = semver.parse("1.2.3-alpha.1")

        assert version is not None
        assert version.pre_release == "alpha.1"

    def test_parse_build(self, semver: SemverVersionFormat) -> None:
        """Test build metadata after '+' is captured."""
        version = semver.parse("1.2.3+build.123")

        assert version is not None
        assert version.pre_release is None
        assert version.build == "build.123"

    def test_parse_prerelease_and_build(self, semver: SemverVersionFormat) -> None:
        """Test prerelease stops at '+' and build takes the rest."""
        version = semver.parse("1.2.3-beta.2+build.456")

        assert version is not None
        assert version.pre_release == "beta.2"
        assert version.build == "build.456"

    @pytest.mark.parametrize(
        "text",
        ["not-a-version", "1.2", "v1.2.3", "1.2.3foo", "1.2.3-", ""],
    )
    def test_parse_rejects(self, semver: SemverVersionFormat, text: str) -> None:
        """Test malformed input returns None instead of a partial match."""
        assert semver.parse(text) is None

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 2, 3), "1.2.3"),
            (Version(1, 2, 3, "alpha.1"), "1.2.3-alpha.1"),
            (Version(1, 2, 3, None, "build.123"), "1.2.3+build.123"),
            (Version(1, 2, 3, "beta.2", "build.456"), "1.2.3-beta.2+build.456"),
        ],
    )
    def test_format(
        self, semver: SemverVersionFormat, version: Version, expected: str
    ) -> None:
        """Test formatting joins parts with '-' and '+'."""
        assert semver.format(version) == expected

    @pytest.mark.parametrize(
        "text",
        ["0.0.0", "1.2.3", "10.20.30-rc.1", "1.0.0-x.7.z.92+exp.sha.5114f85"],
    )
    def test_canonical_round_trip(self, semver: SemverVersionFormat, text: str) -> None:
        """Test canonical SemVer strings survive parse then format."""
        version = semver.parse(text)

        assert version is not None
        assert semver.format(version) == text

    def test_no_grammar_fragment(self, semver: SemverVersionFormat) -> None:
        """Test SemVer does not expose a grammar fragment."""
        assert get_grammar_fragment(semver) is None


@pytest.mark.unit
class TestRubyVersionFormat:
    """Tests for the Ruby gem dialect."""

    def test_parse_basic(self, ruby: RubyVersionFormat) -> None:
        """Test a plain triple parses."""
        assert ruby.parse("1.2.3") == Version(1, 2, 3)

    def test_parse_dot_prerelease(self, ruby: RubyVersionFormat) -> None:
        """Test the Ruby dot-separated prerelease is captured."""
        version = ruby.parse("1.2.3.alpha.1")

        assert version is not None
        assert version.pre_release == "alpha.1"

    def test_parse_hyphen_prerelease(self, ruby: RubyVersionFormat) -> None:
        """Test a hyphen-separated prerelease is accepted too."""
        version = ruby.parse("1.2.3-beta.2")

        assert version is not None
        assert version.pre_release == "beta.2"

    def test_parse_absorbs_build_suffix(self, ruby: RubyVersionFormat) -> None:
        """Test '+...' stays in the prerelease since gems have no build metadata."""
        version = ruby.parse("1.2.3.rc.1+build.123")

        assert version is not None
        assert version.pre_release == "rc.1+build.123"
        assert version.build is None

    @pytest.mark.parametrize("text", ["not-a-version", "1.2", "1.2.3.", "1.2.3x"])
    def test_parse_rejects(self, ruby: RubyVersionFormat, text: str) -> None:
        """Test malformed input returns None."""
        assert ruby.parse(text) is None

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 2, 3), "1.2.3"),
            (Version(1, 2, 3, "alpha.1"), "1.2.3.alpha.1"),
            (Version(1, 2, 3, None, "build.123"), "1.2.3"),
            (Version(1, 2, 3, "rc.1", "build.456"), "1.2.3.rc.1"),
        ],
        ids=["basic", "prerelease", "build-dropped", "prerelease-build-dropped"],
    )
    def test_format(self, ruby: RubyVersionFormat, version: Version, expected: str) -> None:
        """Test formatting uses '.' for the prerelease and drops build metadata."""
        assert ruby.format(version) == expected

    @pytest.mark.parametrize(
        "version",
        [Version(1, 2, 3), Version(0, 1, 0, "alpha.1"), Version(7, 0, 1, "rc2")],
    )
    def test_format_is_idempotent(self, ruby: RubyVersionFormat, version: Version) -> None:
        """Test format(parse(format(v))) == format(v) without build metadata."""
        rendered = ruby.format(version)
        reparsed = ruby.parse(rendered)

        assert reparsed is not None
        assert ruby.format(reparsed) == rendered

    def test_grammar_fragment(self, ruby: RubyVersionFormat) -> None:
        """Test Ruby exposes its capture-group fragment."""
        assert get_grammar_fragment(ruby) == r"((\d+)\.(\d+)\.(\d+)([.-]\w+.*)?)"
        assert RubyVersionFormat.SOURCE == ruby.grammar_fragment()


@pytest.mark.unit
class TestPythonVersionFormat:
    """Tests for the PEP 440 dialect."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2.3", Version(1, 2, 3)),
            ("1.2", Version(1, 2, 0)),
            ("1.2.3rc1", Version(1, 2, 3, "rc.1")),
            ("1.2.3-alpha.1", Version(1, 2, 3, "a.1")),
            ("1.2.3b2", Version(1, 2, 3, "b.2")),
        ],
    )
    def test_parse(
        self, python_format: PythonVersionFormat, text: str, expected: Version
    ) -> None:
        """Test PEP 440 spellings map onto Version."""
        assert python_format.parse(text) == expected

    def test_parse_local_label_as_build(self, python_format: PythonVersionFormat) -> None:
        """Test the local version label becomes build metadata."""
        version = python_format.parse("1.2.3+ubuntu.1")

        assert version is not None
        assert version.build == "ubuntu.1"

    @pytest.mark.parametrize(
        "text",
        ["not-a-version", "1.2.3.post1", "1.2.3.dev0", "1!1.2.3", "1.2.3.4"],
        ids=["invalid", "post", "dev", "epoch", "four-components"],
    )
    def test_parse_rejects(self, python_format: PythonVersionFormat, text: str) -> None:
        """Test versions that cannot be ordered as SemVer are rejected."""
        assert python_format.parse(text) is None

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 2, 3), "1.2.3"),
            (Version(1, 2, 3, "rc.1"), "1.2.3rc1"),
            (Version(1, 2, 3, "a.1", "local.7"), "1.2.3a1+local.7"),
        ],
    )
    def test_format(
        self, python_format: PythonVersionFormat, version: Version, expected: str
    ) -> None:
        """Test formatting renders PEP 440 normal form."""
        assert python_format.format(version) == expected

    @pytest.mark.parametrize(
        "text",
        ["v1.2.3", "V1.2.3", " 1.2.3", "1.2.3\n", " 1.2.3\n"],
    )
    def test_parse_rejects_tolerated_spellings(
        self, python_format: PythonVersionFormat, text: str
    ) -> None:
        """Test the 'v' prefix and surrounding whitespace are not accepted."""
        assert python_format.parse(text) is None

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 2, 3, "alpha.1"), "1.2.3a1"),
            (Version(1, 2, 3, "RC.2"), "1.2.3rc2"),
            (Version(1, 2, 3, "SNAPSHOT"), "1.2.3+snapshot"),
            (Version(1, 2, 3, "post.1"), "1.2.3+post.1"),
            (Version(1, 2, 3, "dev"), "1.2.3+dev"),
            (
                Version(1, 2, 3, "x.7.z.92", "exp.sha.5114f85"),
                "1.2.3+x.7.z.92.exp.sha.5114f85",
            ),
            (Version(1, 2, 3, "rc.1+build.123"), "1.2.3rc1+build.123"),
            (Version(1, 2, 3, "beta~x", "b_7"), "1.2.3+beta.x.b.7"),
        ],
        ids=[
            "spelled-out-letter",
            "upper-case",
            "snapshot",
            "post-like",
            "dev-like",
            "semver-identifiers",
            "ruby-absorbed-build",
            "illegal-characters",
        ],
    )
    def test_format_is_pep440(
        self, python_format: PythonVersionFormat, version: Version, expected: str
    ) -> None:
        """Test every Version formats to normalized PEP 440 the dialect parses back."""
        rendered = python_format.format(version)

        assert rendered == expected
        assert str(Pep440Version(rendered)) == rendered
        assert python_format.parse(rendered) is not None

    def test_prerelease_ordering(self, python_format: PythonVersionFormat) -> None:
        """Test parsed pre-releases order as PEP 440 orders them."""
        texts = ["1.0.0a9", "1.0.0a10", "1.0.0b1", "1.0.0rc1", "1.0.0"]
        parsed = [python_format.parse(text) for text in texts]

        assert all(v is not None for v in parsed)
        assert sorted(parsed) == parsed  # type: ignore[type-var]


@pytest.mark.unit
class TestRegistry:
    """Tests for the dialect registry."""

    @pytest.mark.parametrize(
        "name, expected_type",
        [
            ("semver", SemverVersionFormat),
            ("ruby", RubyVersionFormat),
            ("python", PythonVersionFormat),
            ("RUBY", RubyVersionFormat),
        ],
    )
    def test_lookup(self, name: str, expected_type: type) -> None:
        """Test registered names resolve case-insensitively."""
        assert isinstance(get_version_format(name), expected_type)

    def test_unknown_name_raises(self) -> None:
        """Test an unknown name raises with the available names attached."""
        with pytest.raises(UnknownVersionFormatError) as exc_info:
            get_version_format("cargo")

        assert exc_info.value.name == "cargo"
        assert exc_info.value.available == sorted(VERSION_FORMATS)
        assert "cargo" in str(exc_info.value)

    def test_all_dialects_satisfy_protocol(self) -> None:
        """Test every registered dialect is a VersionFormat."""
        for fmt in VERSION_FORMATS.values():
            assert isinstance(fmt, VersionFormat)


class _DotlessFormat:
    """Minimal third-party dialect: ``1_2_3``."""

    def parse(self, version_string: str) -> Optional[Version]:
        parts = version_string.split("_")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            return None
        return Version(*(int(p) for p in parts))

    def format(self, version: Version) -> str:
        return f"{version.major}_{version.minor}_{version.patch}"


@pytest.mark.unit
class TestCustomDialect:
    """Tests that additional dialects plug in without registration."""

    def test_custom_dialect_is_version_format(self) -> None:
        """Test a plain class with parse/format satisfies the protocol."""
        assert isinstance(_DotlessFormat(), VersionFormat)
        assert get_grammar_fragment(_DotlessFormat()) is None
