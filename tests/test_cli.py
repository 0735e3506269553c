"""
Tests for the pyquake3-status command line driver
"""

import json

import pytest

from pyquake3.cli import build_parser, format_status, main, resolve_host
from pyquake3.errors import Quake3Error
from pyquake3.models import Player, StatusResponse
from pyquake3.testing import ServerScenario


class TestMain:
    """Test running the driver against the mock server"""

    def test_summary(self, mock_server, capsys):
        assert main(["127.0.0.1", str(mock_server.port), "--timeout", "2"]) == 0

        out = capsys.readouterr().out
        assert "Host Name: ^1Mock ^7Arena" in out
        assert "Map: q3dm17" in out
        assert "Players: 3/16 (1 bots)" in out
        assert '"^2Visor"' in out

    def test_strip_colors(self, mock_server, capsys):
        assert main(["127.0.0.1", str(mock_server.port), "--strip-colors"]) == 0

        out = capsys.readouterr().out
        assert "Host Name: Mock Arena" in out
        assert '"Visor"' in out

    def test_json(self, mock_server, capsys):
        assert main(["127.0.0.1", str(mock_server.port), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["variables"]["mapname"] == "q3dm17"
        assert data["players"][0] == {"score": 12, "ping": 48, "name": '"^2Visor"'}

    def test_timeout_exit_code(self, mock_server, capsys):
        mock_server.set_scenario(ServerScenario("silent").set_silent())

        assert main(["127.0.0.1", str(mock_server.port), "--timeout", "0.2"]) == 1
        assert "Error: receive failed" in capsys.readouterr().err

    def test_malformed_exit_code(self, mock_server, capsys):
        mock_server.set_scenario(ServerScenario("broken").set_raw_reply(b"garbage"))

        assert main(["127.0.0.1", str(mock_server.port), "--debug"]) == 1
        assert "missing header separator" in capsys.readouterr().err

    def test_bad_port_exit_code(self, capsys):
        """Out-of-range ports are argument errors"""
        with pytest.raises(SystemExit) as exc_info:
            main(["127.0.0.1", "70000"])
        assert exc_info.value.code == 2
        assert "Port must be between" in capsys.readouterr().err

    def test_unresolvable_label_exit_code(self, capsys):
        """Hostnames the IDNA codec rejects fail cleanly"""
        assert main(["a..b", "27960"]) == 1
        assert "Error: Cannot resolve a..b" in capsys.readouterr().err

    def test_bad_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["127.0.0.1", "not-a-port"])
        assert exc_info.value.code == 2


class TestHelpers:
    """Test parser and formatting helpers"""

    def test_parser_defaults(self):
        args = build_parser().parse_args(["192.0.2.1"])
        assert args.port == 27960
        assert args.timeout == 3.0
        assert not args.json

    def test_resolve_ip_literal(self):
        assert resolve_host("127.0.0.1") == "127.0.0.1"

    def test_resolve_failure(self):
        with pytest.raises(Quake3Error):
            resolve_host("no-such-host.invalid")

    def test_resolve_empty_label(self):
        with pytest.raises(Quake3Error):
            resolve_host("a..b")

    def test_port_argument_range(self):
        assert build_parser().parse_args(["192.0.2.1", "0"]).port == 0
        assert build_parser().parse_args(["192.0.2.1", "65535"]).port == 65535

    def test_format_status(self):
        status = StatusResponse(
            header="statusResponse",
            variables={"sv_hostname": "^1X", "mapname": "q3dm6", "gamename": "baseq3"},
            players=[Player(5, 60, "^3Doom")]
        )
        text = format_status(status, clean=True)

        assert "Host Name: X" in text
        assert "Players: 1/? (0 bots)" in text
        assert "Password: no" in text
        assert text.splitlines()[-1] == "       5    60  Doom"
