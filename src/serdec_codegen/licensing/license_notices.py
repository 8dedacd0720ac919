"""License notices embedded in generated file headers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_LICENSE_NAME = "MIT"

_MIT_NOTICE = """Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to
deal in the Software without restriction, including without limitation the
rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
sell copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
IN THE SOFTWARE.
"""

_GPL_3_OR_LATER_NOTICE = """This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""


class UnknownLicenseError(Exception):
    """Raised when a license name has no registered notice."""


@dataclass(frozen=True)
class LicenseNotice:
    """Named license notice text."""

    name: str
    text: str

    def lines(self) -> tuple[str, ...]:
        return tuple(self.text.splitlines())


LICENSE_NOTICES: Mapping[str, LicenseNotice] = MappingProxyType(
    {
        "MIT": LicenseNotice(name="MIT", text=_MIT_NOTICE),
        "GPL-3.0-or-later": LicenseNotice(name="GPL-3.0-or-later", text=_GPL_3_OR_LATER_NOTICE),
    }
)


def get_license_notice(name: str = DEFAULT_LICENSE_NAME) -> LicenseNotice:
    """Return the registered notice for `name`."""
    try:
        return LICENSE_NOTICES[name]
    except KeyError as exc:
        known = ", ".join(sorted(LICENSE_NOTICES))
        raise UnknownLicenseError(f"Unknown license '{name}'. Known licenses: {known}") from exc
