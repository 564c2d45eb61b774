"""
Tests for CLI Commands
======================
Tests for the randomkey command-line interface in randomkey/cli.py.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def run_cli(*args, env=None):
    return subprocess.run(
        [sys.executable, "-m", "randomkey", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=60,
        env=env,
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert "randomkey" in result.stdout.lower()

    def test_help_flag(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "get" in result.stdout
        assert "demo" in result.stdout
        assert "sources" in result.stdout

    def test_no_command_prints_help(self):
        result = run_cli()
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()


class TestCLIGet:
    """Tests for the get command."""

    def test_sized_key(self):
        result = run_cli("get", "randomKey.key[12]", "--values-only")
        assert result.returncode == 0
        assert len(result.stdout.strip()) == 12

    def test_default_key(self):
        result = run_cli("get", "randomKey.key")
        assert result.returncode == 0
        name, value = result.stdout.strip().split(" = ")
        assert name == "randomKey.key"
        assert len(value) == 64

    def test_seed_is_reproducible(self):
        first = run_cli("--seed", "42", "get", "randomKey.key[20]", "--values-only")
        second = run_cli("--seed", "42", "get", "randomKey.key[20]", "--values-only")
        assert first.returncode == 0
        assert first.stdout == second.stdout

    def test_json_output(self):
        result = run_cli("get", "randomKey.key[5]", "randomKey.nope", "--json")
        assert result.returncode == 1
        data = json.loads(result.stdout)
        assert len(data["randomKey.key[5]"]) == 5
        assert data["randomKey.nope"] is None

    def test_not_found(self):
        result = run_cli("get", "randomkey.cli.test.unset")
        assert result.returncode == 1
        assert "not found" in result.stderr

    def test_bad_name(self):
        result = run_cli("get", "randomKey.key[abc]")
        assert result.returncode == 2
        assert "abc" in result.stderr

    def test_length_too_large(self):
        result = run_cli("get", "randomKey.key[3000000000]")
        assert result.returncode == 2
        assert "3000000000" in result.stderr

    def test_length_with_thousands_of_digits(self):
        result = run_cli("get", "randomKey.key[" + "9" * 5000 + "]")
        assert result.returncode == 2

    def test_balanced_alphabet(self):
        result = run_cli("--alphabet", "ab", "get", "randomKey.key[40]", "--values-only")
        assert result.returncode == 0
        assert set(result.stdout.strip()) <= {"a", "b"}

    def test_strict(self):
        result = run_cli("--strict", "get", "randomKey.key(4)")
        assert result.returncode == 1

    def test_properties_file(self, tmp_path):
        props = tmp_path / "props.yaml"
        props.write_text("app:\n  name: demo\nrandomKey:\n  key: shadowed\n")
        result = run_cli("get", "app.name", "randomKey.key[3]", "--properties", str(props), "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["app.name"] == "demo"
        assert len(data["randomKey.key[3]"]) == 3

    def test_system_environment(self):
        env = dict(os.environ, RANDOMKEY_CLI_TEST_VALUE="from-env")
        result = run_cli("get", "randomkey.cli.test.value", "--values-only", env=env)
        assert result.returncode == 0
        assert result.stdout.strip() == "from-env"


class TestCLIDemo:
    """Tests for the demo command."""

    def test_demo_json(self):
        result = run_cli("--seed", "1", "demo", "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert len(data["value1"]) == 64
        assert len(data["value2"]) == 16

    def test_demo_table(self):
        result = run_cli("demo")
        assert result.returncode == 0
        assert "value1" in result.stdout
        assert "value2" in result.stdout

    def test_demo_custom_config(self, tmp_path):
        config = tmp_path / "app.yaml"
        config.write_text(
            "random_key:\n"
            "  name: randomKey\n"
            "  prefix: 'randomKey.'\n"
            "  default_length: 64\n"
            "  alphabet: reference\n"
            "demo:\n"
            "  value1: randomKey.key[4]\n"
            "  value2: randomKey.key[0]\n"
        )
        result = run_cli("--config", str(config), "demo", "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert len(data["value1"]) == 4
        assert data["value2"] == ""

    def test_missing_config(self, tmp_path):
        result = run_cli("--config", str(tmp_path / "nope.yaml"), "demo")
        assert result.returncode == 1
        assert "Missing app config" in result.stderr


class TestCLISources:
    """Tests for the sources command."""

    def test_order(self):
        result = run_cli("sources", "--json")
        assert result.returncode == 0
        names = [s["name"] for s in json.loads(result.stdout)]
        assert names == ["randomKey", "systemEnvironment"]

    def test_order_with_properties(self, tmp_path):
        props = tmp_path / "props.yaml"
        props.write_text("a: 1\n")
        result = run_cli("sources", "--properties", str(props), "--json")
        names = [s["name"] for s in json.loads(result.stdout)]
        assert names == ["randomKey", "properties", "systemEnvironment"]


@pytest.mark.parametrize("argv", [["get", "randomKey.key[3]"], ["sources"]])
def test_main_in_process(argv, capsys):
    from randomkey.cli import main
    assert main(argv) == 0
