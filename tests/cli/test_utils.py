"""
Tests for CLI helper functions.
"""

import io
import logging

from playdatekit.cli.utils import log_status, read_config_argument
from playdatekit.core.interfaces import InstallationStatus


class TestReadConfigArgument:
    def test_inline_json(self):
        assert read_config_argument('{"request": "launch"}') == '{"request": "launch"}'

    def test_file(self, temp_dir):
        path = temp_dir / "debug.json"
        path.write_text('{"request": "attach"}')

        assert read_config_argument(str(path)) == '{"request": "attach"}'

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"request": "launch"}'))

        assert read_config_argument("-") == '{"request": "launch"}'


class TestLogStatus:
    def test_logs_progress(self, caplog):
        with caplog.at_level(logging.INFO, logger="playdatekit.cli.utils"):
            log_status("lls", InstallationStatus.CHECKING_FOR_UPDATE)
            log_status("lls", InstallationStatus.DOWNLOADING)
            log_status("lls", InstallationStatus.NONE)

        assert [r.getMessage() for r in caplog.records] == [
            "lls: checking for updates...",
            "lls: downloading...",
        ]
