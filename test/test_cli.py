"""
Tests for the command line interface (cli.py)
"""

import argparse
from unittest.mock import patch

import pytest
from flask import Flask

import cli
from errors import ConfigError, ConfigErrorKind


class TestParseBind:
    """Test bind address parsing."""

    def test_host_and_port(self):
        assert cli.parse_bind("0.0.0.0:8080") == ("0.0.0.0", 8080)

    def test_ipv6_host(self):
        assert cli.parse_bind("[::1]:8000") == ("[::1]", 8000)

    @pytest.mark.parametrize("value", ["localhost", ":8000", "localhost:", "localhost:http"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_bind(value)


class TestParser:
    """Test argument defaults."""

    def test_runserver_defaults(self):
        args = cli.build_parser().parse_args(['runserver'])

        assert args.command == 'runserver'
        assert args.conf == 'setting.hcl'
        assert args.verbose == 'info'
        assert args.bind == ('127.0.0.1', 8000)

    def test_short_options(self):
        args = cli.build_parser().parse_args(['-b', '0.0.0.0:9000', 'runserver', '-c', 'x.hcl', '-vv', 'DEBUG'])

        assert args.bind == ('0.0.0.0', 9000)
        assert args.conf == 'x.hcl'
        assert args.verbose == 'debug'

    def test_invalid_verbose_level(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(['runserver', '--verbose', 'loud'])


class TestRunserver:
    """Test the runserver command."""

    def test_starts_server_with_loaded_config(self, write_hcl):
        with patch.object(Flask, 'run') as run:
            exit_code = cli.main(['--bind', '127.0.0.1:9000', 'runserver', '--conf', write_hcl()])

        assert exit_code == 0
        run.assert_called_once()
        assert run.call_args.kwargs['host'] == '127.0.0.1'
        assert run.call_args.kwargs['port'] == 9000
        assert run.call_args.kwargs['threaded'] is True

    def test_config_error_is_fatal(self, tmp_path):
        with patch.object(Flask, 'run') as run:
            exit_code = cli.main(['runserver', '--conf', str(tmp_path / 'missing.hcl')])

        assert exit_code == 1
        run.assert_not_called()

    def test_schema_error_stops_before_app_creation(self, write_hcl):
        path = write_hcl('scope {\n  start = "2024-01-01 00:00:00 +0000"\n}\n')
        with patch('cli.create_app') as create_app:
            exit_code = cli.main(['runserver', '--conf', path])

        assert exit_code == 1
        create_app.assert_not_called()

    def test_config_error_logged_critical(self, caplog):
        error = ConfigError(ConfigErrorKind.INVALID_TIMESTAMP, "scope.start bad", "setting.hcl")
        with patch('cli.load_incident_config', side_effect=error), patch.object(Flask, 'run'):
            cli.main(['runserver'])

        assert any(r.levelname == 'CRITICAL' and 'invalid_timestamp' in r.getMessage() for r in caplog.records)

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 2
        assert 'runserver' in capsys.readouterr().out
