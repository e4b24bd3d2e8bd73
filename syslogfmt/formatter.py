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

import logging

from typing import Optional

import click

from syslogfmt.context import get_hostname, get_procid, get_timestamp
from syslogfmt.logging import SPEW as log_SPEW
from syslogfmt.syslog import SyslogMessage, resolve_facility, resolve_severity


logger = logging.getLogger(__name__)


DEMO_MESSAGES = [
    ("user", "warning", "MyApp", "This is a warning message."),
    ("daemon", "error", "MyApp", "This is an error message."),
    ("local0", "informational", "MyApp", "Informational log."),
]


def format_message(msg: SyslogMessage) -> str:
    return (
        f"<{msg.priority}> {msg.timestamp.isoformat()} {msg.hostname} "
        f"{msg.appname}[{msg.procid}]: {msg.message}"
    )


def log_message(
    facility_str: str, severity_str: str, appname: str, message: str
) -> Optional[str]:
    """
    Format a single syslog line and write it to stdout.

    The facility and severity are given by name, and are matched without regard to
    case. If either of them isn't a name we know about, a diagnostic is written to
    stderr instead and None is returned; this is not treated as an error.
    """
    facility = resolve_facility(facility_str)
    severity = resolve_severity(severity_str)

    if facility is None or severity is None:
        logger.debug(
            "Could not resolve facility=%r severity=%r", facility_str, severity_str
        )
        # color=True stops click from stripping escape sequences out of the input.
        click.echo(
            f"Invalid facility ({facility_str}) or severity ({severity_str}).",
            err=True,
            color=True,
        )
        return None

    line = format_message(
        SyslogMessage(
            facility=facility,
            severity=severity,
            timestamp=get_timestamp(),
            hostname=get_hostname(),
            appname=appname,
            procid=get_procid(),
            message=message,
        )
    )

    logger.log(log_SPEW, "Emitting %r", line)
    click.echo(line, color=True)

    return line


def run_demo():
    for facility_str, severity_str, appname, message in DEMO_MESSAGES:
        log_message(facility_str, severity_str, appname, message)
