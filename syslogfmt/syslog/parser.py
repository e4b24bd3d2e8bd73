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

import arrow

from pyparsing import Combine, Literal as L, Optional, Regex, Word
from pyparsing import nums, restOfLine, printables
from pyparsing import ParseException

from . import SyslogMessage, decode_priority


class UnparseableSyslogMessage(Exception):
    pass


SP = L(" ").suppress()
LANGLE = L("<").suppress()
RANGLE = L(">").suppress()
LBRACKET = L("[").suppress()
RBRACKET = L("]").suppress()
COLON = L(":").suppress()

# No leading zeros, 191 Max
PRIORITY = LANGLE + Regex(r"0|[1-9][0-9]{0,2}") + RANGLE
PRIORITY = PRIORITY.setResultsName("priority")
PRIORITY.setName("Priority")
PRIORITY.setParseAction(lambda s, l, t: int(t[0]))

TIMESTAMP = Word(printables)
TIMESTAMP = TIMESTAMP.setResultsName("timestamp")
TIMESTAMP.setName("Timestamp")

HOSTNAME = Word(printables)
HOSTNAME = HOSTNAME.setResultsName("hostname")
HOSTNAME.setName("Hostname")

APPNAME = Word("".join(set(printables) - {"["}))
APPNAME = APPNAME.setResultsName("appname")
APPNAME.setName("AppName")

PROCID = Combine(LBRACKET + Word(nums) + RBRACKET)
PROCID = PROCID.setResultsName("procid")
PROCID.setName("ProcID")
PROCID.setParseAction(lambda s, l, t: int(t[0]))

# Lines we write have a space between the priority and the timestamp, but a lot of
# senders omit it so we accept either form.
HEADER = PRIORITY + Optional(SP) + TIMESTAMP + SP + HOSTNAME + SP + APPNAME + PROCID

MESSAGE = restOfLine.setResultsName("message")
MESSAGE.setName("Message")

SYSLOG_MESSAGE = HEADER + COLON + SP + MESSAGE
SYSLOG_MESSAGE.leaveWhitespace()
SYSLOG_MESSAGE.parseWithTabs()


def parse(message):
    try:
        parsed = SYSLOG_MESSAGE.parseString(message, parseAll=True)
    except ParseException as exc:
        raise UnparseableSyslogMessage(str(exc)) from None

    try:
        facility, severity = decode_priority(parsed.priority)
    except ValueError as exc:
        raise UnparseableSyslogMessage(str(exc)) from None

    try:
        timestamp = arrow.get(parsed.timestamp)
    except ValueError:
        raise UnparseableSyslogMessage(
            f"Invalid timestamp: {parsed.timestamp!r}"
        ) from None

    return SyslogMessage(
        facility=facility,
        severity=severity,
        timestamp=timestamp,
        hostname=parsed.hostname,
        appname=parsed.appname,
        procid=parsed.procid,
        message=parsed.message,
    )
