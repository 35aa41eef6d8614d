"""Tests for the command line interface."""

import json

import pytest
import yaml
from click.testing import CliRunner

from halns.cli import main

REL_OPTION = "rel=http://example.com/rels/{rel}"


@pytest.fixture
def runner():
    return CliRunner()


class TestCompact:
    def test_compact_with_option(self, runner):
        result = runner.invoke(main, ["-n", REL_OPTION, "compact", "http://example.com/rels/next"])
        assert result.exit_code == 0
        assert result.output.strip() == "rel:next"

    def test_compact_no_match(self, runner):
        result = runner.invoke(main, ["-n", REL_OPTION, "compact", "http://other.com/next"])
        assert result.exit_code == 1

    def test_compact_with_config(self, runner, namespaces_file):
        result = runner.invoke(
            main, ["--config", str(namespaces_file), "compact", "http://x.io/42/item"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "x:42"


class TestExpand:
    def test_expand(self, runner):
        result = runner.invoke(main, ["-n", REL_OPTION, "expand", "rel:next"])
        assert result.exit_code == 0
        assert result.output.strip() == "http://example.com/rels/next"

    def test_expand_malformed(self, runner):
        result = runner.invoke(main, ["-n", REL_OPTION, "expand", "no-colon-here"])
        assert result.exit_code == 1

    def test_option_overrides_config(self, runner, namespaces_file):
        result = runner.invoke(
            main,
            [
                "--config",
                str(namespaces_file),
                "-n",
                "rel=http://override.io/{rel}",
                "expand",
                "rel:next",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "http://override.io/next"


class TestList:
    def test_text(self, runner, namespaces_file):
        result = runner.invoke(main, ["--config", str(namespaces_file), "list"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["rel", "http://example.com/rels/{rel}"]
        assert lines[1].split() == ["x", "http://x.io/{rel}/item"]

    def test_json(self, runner, namespaces_list_file):
        result = runner.invoke(
            main, ["--config", str(namespaces_list_file), "list", "--format", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"name": "rel", "href": "http://example.com/rels/{rel}", "templated": True},
            {"name": "plain", "href": "http://example.com/plain", "templated": False},
        ]

    def test_yaml(self, runner):
        result = runner.invoke(main, ["-n", REL_OPTION, "list", "--format", "yaml"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.output) == {
            "namespaces": {"rel": "http://example.com/rels/{rel}"}
        }


class TestErrors:
    def test_bad_namespace_option(self, runner):
        result = runner.invoke(main, ["-n", "missing-equals", "list"])
        assert result.exit_code == 2

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(main, ["--config", str(tmp_path / "nope.yaml"), "list"])
        assert result.exit_code == 1

    def test_config_file_not_utf8(self, runner, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b'namespaces:\n  r: "http://e/\xff{rel}"\n')
        result = runner.invoke(main, ["--config", str(path), "list"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Cannot read" in result.output


class TestLogLevel:
    def test_lowercase_env_level(self, runner):
        result = runner.invoke(
            main,
            ["-n", REL_OPTION, "compact", "http://example.com/rels/next"],
            env={"HALNS_LOG_LEVEL": "debug"},
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "rel:next"

    def test_unknown_env_level(self, runner):
        result = runner.invoke(
            main,
            ["-n", REL_OPTION, "compact", "http://example.com/rels/next"],
            env={"HALNS_LOG_LEVEL": "chatty"},
        )
        assert result.exit_code == 2
        assert "unknown log level" in result.output

    def test_option_level(self, runner):
        result = runner.invoke(
            main, ["--log-level", "error", "-n", REL_OPTION, "expand", "rel:next"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "http://example.com/rels/next"
