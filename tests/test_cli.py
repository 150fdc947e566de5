"""
Tests for the command line interface.
"""

import io

import pytest

from hillcipher.cli import build_parser, run
from hillcipher.cli.console import NAMESPACE_ENV_VAR


def _run(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    code = run(argv, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


class TestCommands:
    """cipher and decipher commands."""

    def test_cipher_command(self):
        code, out, err = _run(["cipher", "-k", "FJCRXLUDN", "-s", "CODIGO", "-f", "H"])
        assert code == 0
        assert "WLPGSE" in out
        assert "Default namespace" in out
        assert "false" in out
        assert err == ""

    def test_decipher_command(self):
        code, out, _ = _run(["decipher", "--key", "FJCRXLUDN", "--source", "WLPGSE"])
        assert code == 0
        assert "CODIGO" in out

    def test_custom_namespace_option(self):
        ns = "ABCDEFGHIJKLMNOPQRSTUVWXYZ @$^&*/?.-"
        code, out, _ = _run(["cipher", "-k", "AFJCRXLUDNLZ@$^?", "-s", "TEST CODIGO",
                             "-f", "H", "-n", ns])
        assert code == 0
        assert "XR$HNK^BJQ@?" in out
        assert "true" in out
        assert ns in out

    def test_namespace_from_environment(self, monkeypatch):
        monkeypatch.setenv(NAMESPACE_ENV_VAR, "ABCDEFGHIJKLMNOPQRSTUVWXYZ @$^&*/?.-")
        code, out, _ = _run(["decipher", "-k", "AFJCRXLUDNLZ@$^?", "-s", "XR$HNK^BJQ@?"])
        assert code == 0
        assert "TEST CODIGOH" in out

    def test_processing_error_is_reported(self):
        code, out, err = _run(["cipher", "-k", "ABCDE", "-s", "CODIGO", "-f", "H"])
        assert code == 1
        assert out == ""
        assert "error" in err
        assert "square in length" in err


class TestParser:
    """Argument parsing."""

    def test_cipher_requires_fill_letter(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["cipher", "-k", "FJCRXLUDN", "-s", "CODIGO"])

    def test_fill_letter_must_be_single_character(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["cipher", "-k", "K", "-s", "S", "-f", "HH"])

    def test_decipher_fill_letter_is_optional(self):
        args = build_parser().parse_args(["decipher", "-k", "FJCRXLUDN", "-s", "WLPGSE"])
        assert args.fill_letter is None
        assert args.namespace is None
        assert args.verbose is False

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
