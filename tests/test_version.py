"""
tests.test_version
Unit tests for version parsing and the pydantic field integration.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import pytest
from pydantic import BaseModel, ValidationError
from semver import Version as SemVersion

from preoccupied.versioner import (
    InvalidVersionError, Version, VersionError, VersionLiteralError,
    must_parse, parse_version)


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("1", (1, 0, 0, None, None), id="major-only"),
        pytest.param("1.0", (1, 0, 0, None, None), id="major-minor"),
        pytest.param("1.9", (1, 9, 0, None, None), id="upper-bound"),
        pytest.param("1.0.1", (1, 0, 1, None, None), id="full"),
        pytest.param("2.0.0-beta", (2, 0, 0, "beta", None), id="prerelease"),
        pytest.param("1.2.3+build.5", (1, 2, 3, None, "build.5"), id="build"),
        pytest.param("v1.2", (1, 2, 0, None, None), id="v-prefix"),
        pytest.param(" 3.1.4 ", (3, 1, 4, None, None), id="whitespace"),
    ])
def test_parse_version(text, expected):
    """
    parse_version accepts short, full, and suffixed version strings.
    """

    version = parse_version(text)
    assert isinstance(version, Version)
    assert version.to_tuple() == expected


@pytest.mark.parametrize(
    "text",
    ["foobar", "", "1.x", "1.2.3.4", "v", "-1.0"])
def test_parse_version_rejects_malformed(text):
    """
    Malformed input raises a recoverable InvalidVersionError.
    """

    with pytest.raises(InvalidVersionError) as error:
        parse_version(text)

    assert error.value.version == text
    assert isinstance(error.value, VersionError)
    assert isinstance(error.value, ValueError)
    assert isinstance(error.value.__cause__, ValueError)


def test_parse_version_rejects_non_string():
    """
    Non-string values are a type error rather than a parse error.
    """

    with pytest.raises(TypeError):
        parse_version(1.0)


@pytest.mark.parametrize(
    "text",
    ["1.0", "2.0", "1.0.1", "1.9", "2.0.0-beta", "0.1", "6.0.0"])
def test_must_parse_round_trips(text):
    """
    Literals parse, and their string form parses back to an equal version.
    """

    version = must_parse(text)
    assert parse_version(str(version)) == version
    assert must_parse(str(version)) == version


def test_must_parse_raises_for_bad_literal():
    """
    A malformed literal raises VersionLiteralError and never returns.
    """

    with pytest.raises(VersionLiteralError) as error:
        must_parse("foobar")

    assert error.value.version == "foobar"
    assert isinstance(error.value.__cause__, ValueError)


def test_must_parse_error_is_not_recoverable():
    """
    Handlers for bad input must not swallow a bad literal.
    """

    assert issubclass(VersionLiteralError, RuntimeError)
    assert not issubclass(VersionLiteralError, ValueError)

    with pytest.raises(VersionLiteralError):
        try:
            must_parse("not.a.version")
        except ValueError:  # pragma: no cover
            pytest.fail("VersionLiteralError was caught as a ValueError")


def test_must_parse_rejects_non_string():
    """
    Non-string literals are also programming errors.
    """

    with pytest.raises(VersionLiteralError):
        must_parse(None)


@pytest.mark.parametrize(
    "lower, higher",
    [
        ("0.1", "1.0"),
        ("1.0", "1.0.1"),
        ("1.0.1", "1.1"),
        ("1.9", "2.0"),
        ("2.0.0-alpha", "2.0.0-beta"),
        ("2.0.0-beta", "2.0.0"),
    ])
def test_ordering(lower, higher):
    """
    Versions order by semantic versioning precedence.
    """

    assert must_parse(lower) < must_parse(higher)
    assert must_parse(higher) > must_parse(lower)
    assert must_parse(lower) != must_parse(higher)


def test_ordering_is_transitive():
    """
    Sorting a shuffled list yields a chain where every earlier element is
    less than every later one.
    """

    texts = ["2.0", "0.1", "1.0.1", "1.9", "1.0", "2.0.0-beta", "1.1", "6.0.0"]
    versions = sorted(must_parse(text) for text in texts)

    for index, a in enumerate(versions):
        for b in versions[index + 1:]:
            assert a < b


def test_build_metadata_ignored_for_equality():
    """
    Build metadata does not take part in comparison.
    """

    assert must_parse("1.2.3+build.5") == must_parse("1.2.3")


class Release(BaseModel):
    """
    Model with a Version field for validation tests.
    """

    version: Version


def test_pydantic_validates_from_string():
    """
    Strings validate into Version instances.
    """

    release = Release(version="1.2")
    assert isinstance(release.version, Version)
    assert release.version == Version(1, 2, 0)


def test_pydantic_accepts_version_instances():
    """
    Version and plain semver.Version instances are both accepted.
    """

    version = must_parse("2.0.0")
    assert Release(version=version).version is version

    release = Release(version=SemVersion.parse("1.5.0"))
    assert isinstance(release.version, Version)
    assert release.version == must_parse("1.5")


def test_pydantic_rejects_malformed():
    """
    Malformed strings surface as pydantic validation errors.
    """

    with pytest.raises(ValidationError):
        Release(version="foobar")


def test_pydantic_serializes_to_string():
    """
    Versions dump back to their string form in JSON mode.
    """

    release = Release(version="1.0")
    assert release.model_dump(mode="json") == {"version": "1.0.0"}
    assert Release.model_validate_json(release.model_dump_json()) == release


def test_pydantic_json_schema():
    """
    The JSON schema reports a plain string.
    """

    schema = Release.model_json_schema()
    assert schema["properties"]["version"]["type"] == "string"


# The end.
