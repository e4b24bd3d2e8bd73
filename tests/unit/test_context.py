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

import datetime
import os
import re

import arrow
import pytest

from syslogfmt import context


RFC3339 = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"


class TestTimestamp:
    def test_is_current_utc(self):
        timestamp = context.get_timestamp()

        assert pytest.approx(arrow.get(timestamp).timestamp(), abs=60) == (
            arrow.utcnow().timestamp()
        )
        assert arrow.get(timestamp).utcoffset() == datetime.timedelta(0)

    def test_is_rfc3339(self):
        assert re.match(RFC3339, context.get_timestamp())

    def test_not_cached(self, monkeypatch):
        instants = iter(
            [arrow.get(2020, 1, 1, 0, 0, 0), arrow.get(2020, 1, 1, 0, 0, 1)]
        )
        monkeypatch.setattr(arrow, "utcnow", lambda: next(instants))

        assert context.get_timestamp() == "2020-01-01T00:00:00+00:00"
        assert context.get_timestamp() == "2020-01-01T00:00:01+00:00"


class TestHostname:
    def test_defaults_to_localhost(self, monkeypatch):
        monkeypatch.delenv("HOSTNAME", raising=False)
        assert context.get_hostname() == "localhost"

    @pytest.mark.parametrize("hostname", ["host1", "web-01.example.com", ""])
    def test_uses_environment(self, monkeypatch, hostname):
        monkeypatch.setenv("HOSTNAME", hostname)
        assert context.get_hostname() == hostname


def test_procid():
    assert context.get_procid() == os.getpid()
