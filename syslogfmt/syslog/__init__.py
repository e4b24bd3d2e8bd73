# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import enum

from typing import Optional, Tuple

import arrow
import attr
import attr.validators


@enum.unique
class Facility(enum.IntEnum):
    kernel = 0
    user = 1
    mail = 2
    daemon = 3
    auth = 4
    syslog = 5
    lpr = 6
    news = 7
    uucp = 8
    clock = 9
    authpriv = 10
    ftp = 11
    ntp = 12
    logaudit = 13
    logalert = 14
    cron = 15
    local0 = 16
    local1 = 17
    local2 = 18
    local3 = 19
    local4 = 20
    local5 = 21
    local6 = 22
    local7 = 23


@enum.unique
class Severity(enum.IntEnum):
    emergency = 0
    alert = 1
    critical = 2
    error = 3
    warning = 4
    notice = 5
    informational = 6
    debug = 7


MAX_PRIORITY = (max(Facility) * 8) + max(Severity)  # 191


def _resolve(enum_cls, name):
    try:
        return enum_cls[name.lower()]
    except KeyError:
        return None


def resolve_facility(name: str) -> Optional[Facility]:
    """
    Look up a facility by name, ignoring case. Returns None if the name is not
    one of the known facilities.
    """
    return _resolve(Facility, name)


def resolve_severity(name: str) -> Optional[Severity]:
    """
    Look up a severity by name, ignoring case. Returns None if the name is not
    one of the known severities.
    """
    return _resolve(Severity, name)


def compute_priority(facility: Facility, severity: Severity) -> int:
    return (facility * 8) + severity


def decode_priority(priority: int) -> Tuple[Facility, Severity]:
    if not 0 <= priority <= MAX_PRIORITY:
        raise ValueError(
            f"Priority must be between 0 and {MAX_PRIORITY}, not {priority!r}."
        )

    return Facility(priority // 8), Severity(priority % 8)


@attr.s(slots=True, frozen=True)
class SyslogMessage:

    facility = attr.ib(
        type=Facility, converter=Facility, validator=attr.validators.in_(Facility)
    )
    severity = attr.ib(
        type=Severity, converter=Severity, validator=attr.validators.in_(Severity)
    )
    timestamp = attr.ib(
        type=arrow.Arrow,
        converter=arrow.get,
        validator=attr.validators.instance_of(arrow.Arrow),
    )
    hostname = attr.ib(type=str, validator=attr.validators.instance_of(str))
    appname = attr.ib(type=str, validator=attr.validators.instance_of(str))
    procid = attr.ib(type=int, validator=attr.validators.instance_of(int))
    message = attr.ib(type=str, validator=attr.validators.instance_of(str))

    @property
    def priority(self):
        return compute_priority(self.facility, self.severity)
