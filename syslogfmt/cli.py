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

import json
import logging
import logging.config

import click

from syslogfmt import logging as _logging  # noqa: F401 Registers the SPEW level.
from syslogfmt.formatter import log_message, run_demo
from syslogfmt.syslog.parser import UnparseableSyslogMessage, parse as parse_


logger = logging.getLogger(__name__)


@click.group(
    invoke_without_command=True,
    context_settings={
        "auto_envvar_prefix": "SYSLOGFMT",
        "help_option_names": ["-h", "--help"],
        "max_content_width": 88,
    },
)
@click.option(
    "--log-level",
    type=click.Choice(["spew", "debug", "info", "warning", "error", "critical"]),
    default="info",
    show_default=True,
    help="The verbosity of the console logger.",
)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False, writable=True, readable=True),
    help="A file to additionally send logging to.",
)
@click.pass_context
def cli(ctx, log_level, log_file):
    """
    Formats messages as RFC 5424 style syslog lines.

    Each line is written to stdout in the form
    "<PRI> TIMESTAMP HOSTNAME APPNAME[PID]: MESSAGE". When run without a command,
    a few example messages are written.
    """
    handlers = ["console"]
    if log_file:
        handlers.append("file")

    # The formatted syslog lines go to stdout, so our own logging has to go to
    # stderr to keep the two apart.
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "class": "logging.Formatter",
                    "style": "{",
                    "format": "[{asctime}] [{levelname:^10}] {message}",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": log_level.upper(),
                    "formatter": "console",
                },
                "file": {
                    "class": "logging.handlers.WatchedFileHandler",
                    "filename": log_file or "/dev/null",
                    "level": log_level.upper(),
                    "formatter": "console",
                },
            },
            "root": {"level": "SPEW", "handlers": handlers},
        }
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


@cli.command(short_help="Writes a few example syslog lines.")
def demo():
    """
    Writes a warning, an error, and an informational example line, all from MyApp.
    """
    run_demo()


@cli.command(short_help="Writes a single syslog line.")
@click.argument("facility")
@click.argument("severity")
@click.argument("appname")
@click.argument("message")
def log(facility, severity, appname, message):
    """
    Writes MESSAGE from APPNAME as a syslog line with the given FACILITY and
    SEVERITY.

    FACILITY and SEVERITY are names such as "daemon" and "error", in any case. If
    either is not recognized a diagnostic is written to stderr instead.
    """
    log_message(facility, severity, appname, message)


@cli.command(short_help="Decodes syslog lines into JSON.")
@click.argument(
    "file_", metavar="INPUT", type=click.File("r", encoding="utf8"), default="-"
)
def parse(file_):
    """
    Reads syslog lines from INPUT (stdin by default) and writes each one out as a
    JSON object. Lines that cannot be parsed are logged and skipped.
    """
    for lineno, line in enumerate(file_, start=1):
        line = line.rstrip("\r\n")

        # If we've been given a blank line, then we'll just skip it.
        if not line:
            continue

        try:
            msg = parse_(line)
        except UnparseableSyslogMessage as exc:
            logger.error("Unparseable syslog message on line %d: %s", lineno, exc)
            continue

        click.echo(
            json.dumps(
                {
                    "priority": msg.priority,
                    "facility": msg.facility.name,
                    "severity": msg.severity.name,
                    "timestamp": msg.timestamp.isoformat(),
                    "hostname": msg.hostname,
                    "appname": msg.appname,
                    "procid": msg.procid,
                    "message": msg.message,
                },
                sort_keys=True,
            )
        )
