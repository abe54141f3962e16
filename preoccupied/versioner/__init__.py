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
preoccupied.versioner
Namespace package segment providing API version gating helpers.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from .version import (
    InvalidVersionError, UnsupportedVersionError, Version, VersionError,
    VersionLiteralError, must_parse, parse_version)
from .versioner import (
    DEFAULT_MAX_VERSION, DEFAULT_MIN_VERSION, GenericVersioner,
    StaticVersioner, Versioner, check_supported_version,
    get_max_version_for, get_min_version_for, is_deprecated,
    new_generic_versioner)


__all__ = (
    "Version",
    "parse_version",
    "must_parse",

    "VersionError",
    "InvalidVersionError",
    "UnsupportedVersionError",
    "VersionLiteralError",

    "DEFAULT_MIN_VERSION",
    "DEFAULT_MAX_VERSION",

    "Versioner",
    "StaticVersioner",
    "GenericVersioner",
    "new_generic_versioner",

    "get_min_version_for",
    "get_max_version_for",
    "is_deprecated",
    "check_supported_version",
)


# The end.
