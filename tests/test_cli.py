"""
Tests for the applogs command line.
"""

import json
from unittest.mock import Mock, patch

from click.testing import CliRunner

from applogs.cli import main
from applogs.errors import NotFoundError, UnexpectedBackendFault
from applogs.log import LogRecord, Process, Selector, Source

from helpers import T1, T3


def fake_client(records=None, error=None):
    client = Mock()
    if error is not None:
        client.describe_logs.side_effect = error
    else:
        client.describe_logs.return_value = records or []
    return client


RECORDS = [
    LogRecord("b1", T1, Source.APP, Process.BUILDER, "[Container] Entering phase BUILD"),
    LogRecord("d1", T3, Source.APP, Process.DEPLOYER, "(service myapp) has reached a steady state."),
]


class TestLogsCommand:
    """Test the logs command."""

    def test_text_output(self):
        client = fake_client(RECORDS)
        result = CliRunner().invoke(main, ["logs", "myapp"], obj={"client": client})

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2018-03-01T10:00:00+00:00 app[builder]: [Container] Entering phase BUILD",
            "2018-03-01T10:00:05+00:00 app[deployer]: (service myapp) has reached a steady state.",
        ]
        client.describe_logs.assert_called_once_with("myapp", Selector(source="", process=""))

    def test_filters_are_passed_through(self):
        client = fake_client(RECORDS[:1])
        result = CliRunner().invoke(
            main, ["logs", "myapp", "--source", "app", "--process", "builder"], obj={"client": client}
        )

        assert result.exit_code == 0
        client.describe_logs.assert_called_once_with("myapp", Selector(source="app", process="builder"))

    def test_json_output(self):
        client = fake_client(RECORDS)
        result = CliRunner().invoke(main, ["logs", "myapp", "--json"], obj={"client": client})

        assert result.exit_code == 0
        lines = [json.loads(line) for line in result.output.splitlines()]
        assert [line["id"] for line in lines] == ["b1", "d1"]
        assert lines[1]["process"] == "deployer"

    def test_not_found_exit_code(self):
        client = fake_client(error=NotFoundError("build project", "myapp"))
        result = CliRunner().invoke(main, ["logs", "myapp"], obj={"client": client})

        assert result.exit_code == 2
        assert "not found" in result.output

    def test_backend_fault_exit_code(self):
        client = fake_client(error=UnexpectedBackendFault("DescribeServices", "AccessDeniedException"))
        result = CliRunner().invoke(main, ["logs", "myapp", "--json"], obj={"client": client})

        assert result.exit_code == 1
        assert "DescribeServices failed" in json.loads(result.output)["error"]

    def test_invalid_timeout_setting(self, monkeypatch):
        monkeypatch.setenv("APPLOGS_READ_TIMEOUT", "never")
        result = CliRunner().invoke(main, ["logs", "myapp"], obj={"client": fake_client()})

        assert result.exit_code == 1
        assert "APPLOGS_READ_TIMEOUT" in result.output


class TestServeCommand:
    """Test the serve command."""

    @patch("applogs.api.run")
    def test_serve_starts_api(self, mock_run):
        result = CliRunner().invoke(main, ["serve", "--host", "127.0.0.1", "--port", "9000"])

        assert result.exit_code == 0
        assert "127.0.0.1:9000" in result.output
        mock_run.assert_called_once_with(host="127.0.0.1", port=9000)

    @patch("applogs.api.run")
    def test_serve_defaults(self, mock_run):
        result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(host="0.0.0.0", port=8000)
