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
preoccupied.versioner.versioner
Supported version ranges and deprecation flags for arbitrary types.

Anything that implements the :class:`Versioner` protocol can be used to gate
an operation by API version. Types with fixed bounds can inherit from
:class:`StaticVersioner`; one-off ranges can use :class:`GenericVersioner`.

Example:

```python
class Widget(StaticVersioner, BaseModel):
    __min_version__ = "1.2"
    __max_version__ = "2.0"

    name: str

def fetch_widget(client, name):
    check_supported_version(Widget, client.api_version)
    ...
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import logging

from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable

from .version import UnsupportedVersionError, Version, must_parse, parse_version


__all__ = (
    "DEFAULT_MAX_VERSION",
    "DEFAULT_MIN_VERSION",
    "GenericVersioner",
    "StaticVersioner",
    "Versioner",
    "check_supported_version",
    "get_max_version_for",
    "get_min_version_for",
    "is_deprecated",
    "new_generic_versioner",
)


DEFAULT_MIN_VERSION = "1.0"
DEFAULT_MAX_VERSION = "2.0"


logger = logging.getLogger(__name__)


@runtime_checkable
class Versioner(Protocol):
    """
    Protocol describing a type that carries supported version information.
    """

    def min_version(self) -> Version:
        """
        The lowest supported version, inclusive.
        """

        ...


    def max_version(self) -> Version:
        """
        The highest supported version, inclusive.
        """

        ...


    def deprecated(self) -> bool:
        """
        Whether the type is deprecated.
        """

        ...


def get_min_version_for(versioner: Versioner) -> Version:
    """
    Return the minimum version required by `versioner`.
    """

    return versioner.min_version()


def get_max_version_for(versioner: Versioner) -> Version:
    """
    Return the maximum version supported by `versioner`.
    """

    return versioner.max_version()


def is_deprecated(versioner: Versioner) -> bool:
    """
    Return whether `versioner` is deprecated.
    """

    return versioner.deprecated()


class StaticVersioner:
    """
    Mixin implementing :class:`Versioner` from class-level literals.

    Subclasses override ``__min_version__``, ``__max_version__`` and
    ``__deprecated__``. The literals are parsed with :func:`must_parse`, so a
    malformed one raises :class:`VersionLiteralError` when first read. The
    methods work on the class itself as well as on its instances.
    """

    __min_version__: ClassVar[str] = DEFAULT_MIN_VERSION
    __max_version__: ClassVar[str] = DEFAULT_MAX_VERSION
    __deprecated__: ClassVar[bool] = False


    @classmethod
    def min_version(cls) -> Version:
        return must_parse(cls.__min_version__)


    @classmethod
    def max_version(cls) -> Version:
        return must_parse(cls.__max_version__)


    @classmethod
    def deprecated(cls) -> bool:
        return cls.__deprecated__


@dataclass(frozen=True)
class GenericVersioner:
    """
    Versioner for operations that have no dedicated type to carry bounds,
    such as calls that return no response body.

    An empty `minimum` or `maximum` is replaced by :data:`DEFAULT_MIN_VERSION`
    or :data:`DEFAULT_MAX_VERSION` at construction. The bounds are not
    validated until they are read, and ``minimum > maximum`` is accepted.
    """

    minimum: str = ""
    maximum: str = ""
    is_deprecated: bool = False


    def __post_init__(self) -> None:
        if not self.minimum:
            object.__setattr__(self, "minimum", DEFAULT_MIN_VERSION)
        if not self.maximum:
            object.__setattr__(self, "maximum", DEFAULT_MAX_VERSION)


    def min_version(self) -> Version:
        return must_parse(self.minimum)


    def max_version(self) -> Version:
        return must_parse(self.maximum)


    def deprecated(self) -> bool:
        return self.is_deprecated


def new_generic_versioner(
        minimum: str,
        maximum: str,
        is_deprecated: bool) -> GenericVersioner:
    """
    Create a :class:`GenericVersioner` with the given constraints.
    """

    return GenericVersioner(minimum, maximum, is_deprecated)


def check_supported_version(versioner: Versioner, requested: str) -> None:
    """
    Check that the `requested` version string falls within the range
    supported by `versioner`. Both ends of the range are inclusive. A range
    whose minimum exceeds its maximum supports nothing.

    :param versioner: The versioned type or instance to check against.
    :param requested: The candidate version, typically from a server.
    :raises InvalidVersionError: If `requested` cannot be parsed.
    :raises UnsupportedVersionError: If `requested` is out of range.
    :raises VersionLiteralError: If the versioner has a malformed bound.
    """

    minimum = get_min_version_for(versioner)
    maximum = get_max_version_for(versioner)

    version = parse_version(requested)

    if minimum <= maximum:
        if version == maximum or version == minimum:
            return
        if version > minimum and version < maximum:
            return

    logger.debug("rejected version %s, supported range is [%s, %s]",
                 version, minimum, maximum)

    raise UnsupportedVersionError(version, minimum, maximum)


# The end.
