# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this library; if not, see <http://www.gnu.org/licenses/>.

"""
preoccupied.versioner.version
Semantic version values and the two ways of parsing them.

Version strings that arrive from a server or a user go through
:func:`parse_version`, which raises a recoverable :class:`InvalidVersionError`.
Version strings written into code as literals go through :func:`must_parse`,
which raises :class:`VersionLiteralError` instead. The latter is a
``RuntimeError`` rather than a ``ValueError`` so that it cannot be mistaken
for bad input and quietly handled.

Example:

```python
api_version = parse_version(response.headers["X-Api-Version"])
if api_version >= must_parse("1.4"):
    ...
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Any, Callable

from semver import Version as SemVersion

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


__all__ = (
    "InvalidVersionError",
    "UnsupportedVersionError",
    "Version",
    "VersionError",
    "VersionLiteralError",
    "must_parse",
    "parse_version",
)


class VersionError(ValueError):
    """
    Base class for recoverable version errors.
    """


class InvalidVersionError(VersionError):
    """
    Raised when a version string cannot be parsed.
    """

    def __init__(self, version: str, message: str) -> None:
        super().__init__(message)
        self.version = version


class UnsupportedVersionError(VersionError):
    """
    Raised when a well-formed version lies outside of a supported range.
    """

    def __init__(
            self,
            requested: "Version",
            minimum: "Version",
            maximum: "Version") -> None:

        super().__init__(
            f"Requested version ({requested}) does not meet the requirements"
            f" for this type (min: {minimum}, max: {maximum})")

        self.requested = requested
        self.minimum = minimum
        self.maximum = maximum


class VersionLiteralError(RuntimeError):
    """
    Raised by :func:`must_parse` when a version literal is malformed. This
    is a programming error, not an input error.
    """

    def __init__(self, version: Any) -> None:
        super().__init__(f"cannot parse version {version!r}")
        self.version = version


def _parse(text: str) -> "Version":
    if not isinstance(text, str):
        raise TypeError(f"Unsupported version value: {text!r}")

    text = text.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]

    return Version.parse(text, optional_minor_and_patch=True)


def parse_version(text: str) -> "Version":
    """
    Parse an untrusted version string.

    Minor and patch components are optional (``"1"`` and ``"1.0"`` are
    read as ``1.0.0``) and a leading ``v`` is ignored. Pre-release and build
    suffixes follow semantic versioning rules.

    :param text: The version string to parse.
    :raises InvalidVersionError: If the text is not a valid version.
    :raises TypeError: If the value is not a string.
    :return: The parsed version.
    """

    try:
        return _parse(text)
    except ValueError as err:
        raise InvalidVersionError(text, str(err)) from err


def must_parse(text: str) -> "Version":
    """
    Parse a version literal that is known to be well formed.

    Intended for constants embedded in code, never for input.

    :param text: The version literal to parse.
    :raises VersionLiteralError: If the literal is not a valid version.
    :return: The parsed version.
    """

    try:
        return _parse(text)
    except (TypeError, ValueError) as err:
        raise VersionLiteralError(text) from err


def _ensure_version(value: Any) -> "Version":
    """
    Convert supported inputs into a :class:`Version` instance.
    """

    if isinstance(value, Version):
        return value
    if isinstance(value, SemVersion):
        return Version(*value.to_tuple())
    return parse_version(value)


class Version(SemVersion):
    """
    Immutable, totally ordered semantic version.

    Comparison is delegated to ``semver``. Instances may be used directly
    as Pydantic field types, validating from strings and serializing back
    to them.

    https://python-semver.readthedocs.io/en/3.0.4/advanced/combine-pydantic-and-semver.html
    """

    @classmethod
    def __get_pydantic_core_schema__(
            cls,
            _source_type: Any,
            _handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(_ensure_version),
            ],
        )

        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(Version),
                    core_schema.chain_schema(
                        [
                            core_schema.is_instance_schema(SemVersion),
                            core_schema.no_info_plain_validator_function(_ensure_version),
                        ]
                    ),
                    from_str_schema,
                ]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )


    @classmethod
    def __get_pydantic_json_schema__(
            cls,
            _core_schema: core_schema.CoreSchema,
            handler: GetJsonSchemaHandler) -> JsonSchemaValue:

        return handler(core_schema.str_schema())


# The end.
