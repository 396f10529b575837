import json

import pytest
import yaml
from click.testing import CliRunner

from docspec.__main__ import cli
from docspec.cli.utils import get_env_flag


@pytest.fixture
def runner():
    return CliRunner()


def read_json(output):
    """Decode the JSON payload printed on stdout, ignoring any trailing abort message."""
    payload, _ = json.JSONDecoder().raw_decode(output)
    return payload


class TestValidateCommand:
    """Test the validate command."""

    def test_valid_schema(self, runner, schema_file):
        result = runner.invoke(cli, ["validate", str(schema_file)])

        assert result.exit_code == 0
        assert "Schema is valid" in result.output

    def test_invalid_schema_fails(self, runner, write_json):
        path = write_json("bad.json", {"type": "flag", "option": 42, "foo": "bar"})

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code != 0
        assert "'foo' property is unexpected" in result.output
        assert "value must be a bool" not in result.output

    def test_lazy_reports_every_error(self, runner, write_json):
        path = write_json("bad.json", {"type": "flag", "option": 42, "foo": "bar"})

        result = runner.invoke(cli, ["validate", str(path), "--lazy"])

        assert result.exit_code != 0
        assert "'foo' property is unexpected" in result.output
        assert "option: value must be a bool" in result.output

    def test_lazy_from_environment(self, runner, write_json, monkeypatch):
        monkeypatch.setenv("DOCSPEC_LAZY", "1")
        path = write_json("bad.json", {"type": "flag", "option": 42, "foo": "bar"})

        result = runner.invoke(cli, ["validate", str(path)])

        assert "value must be a bool" in result.output

    def test_json_output(self, runner, write_json):
        path = write_json("bad.json", {"type": "map", "fields": {"@a": {"type": "flag"}}})

        result = runner.invoke(cli, ["validate", str(path), "--json-output"])

        assert result.exit_code != 0
        payload = read_json(result.stdout)
        assert payload["status"] == "failed"
        assert payload["errors"] == [
            {"path": ["fields"], "location": "fields", "message": "'@a' is an incorrect key name"}
        ]

    def test_json_output_with_warnings(self, runner, write_json):
        path = write_json("warn.json", {"type": "string", "length": 2.5})

        result = runner.invoke(cli, ["validate", str(path), "--json-output"])

        assert result.exit_code == 0
        payload = read_json(result.stdout)
        assert payload["status"] == "ok"
        assert payload["result"]["valid"] is True
        assert payload["result"]["warnings"][0]["message"] == "should be an integer (got decimal)"

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "missing.yml")])

        assert result.exit_code != 0
        assert "Schema file not found" in result.output


class TestDecodeCommand:
    """Test the decode command."""

    def test_decode_file(self, runner, schema_file, write_json):
        document = write_json("point.json", {"x": 1, "y": 2, "tags": {"1": "a"}})

        result = runner.invoke(cli, ["decode", str(schema_file), str(document)])

        assert result.exit_code == 0
        assert read_json(result.stdout) == {"x": 1, "y": 2, "tags": {"1": "a"}}

    def test_decode_stdin(self, runner, schema_file):
        result = runner.invoke(cli, ["decode", str(schema_file)], input='{"x": 1, "y": 2}')

        assert result.exit_code == 0
        assert read_json(result.stdout) == {"x": 1, "y": 2, "tags": None}

    def test_decode_json_output(self, runner, schema_file):
        result = runner.invoke(
            cli, ["decode", str(schema_file), "--json-output"], input='{"x": 1, "y": 2}'
        )

        payload = read_json(result.stdout)
        assert payload == {"status": "ok", "result": {"value": {"x": 1, "y": 2, "tags": None}}}

    def test_decode_errors(self, runner, schema_file):
        result = runner.invoke(
            cli, ["decode", str(schema_file), "--lazy"], input='{"x": -1, "y": true}'
        )

        assert result.exit_code != 0
        assert "$x: value must be equal or greater than 0" in result.output
        assert "$y: was expecting a JSON number" in result.output

    def test_decode_malformed_document(self, runner, schema_file):
        result = runner.invoke(cli, ["decode", str(schema_file)], input="{")

        assert result.exit_code != 0
        assert "Failed to parse document" in result.output

    def test_decode_with_invalid_schema(self, runner, write_json):
        schema = write_json("bad.json", {"type": "foo"})

        result = runner.invoke(cli, ["decode", str(schema), "--json-output"], input="1")

        assert result.exit_code != 0
        payload = read_json(result.stdout)
        assert payload == {"status": "error", "error": "value of 'type' is incorrect"}


class TestEncodeCommand:
    """Test the encode command."""

    def test_encode_yaml_file(self, runner, schema_file, tmp_path):
        value = tmp_path / "value.yml"
        value.write_text(yaml.safe_dump({"x": 1, "y": 2.5, "tags": {3: "c"}}))

        result = runner.invoke(cli, ["encode", str(schema_file), str(value)])

        assert result.exit_code == 0
        assert read_json(result.stdout) == {"x": 1, "y": 2.5, "tags": {"3": "c"}}

    def test_encode_stdin(self, runner, schema_file):
        result = runner.invoke(cli, ["encode", str(schema_file)], input="{x: 1, y: 2}")

        assert result.exit_code == 0
        assert result.output.strip() == '{"x":1,"y":2,"tags":null}'

    def test_encode_json_output(self, runner, schema_file):
        result = runner.invoke(
            cli, ["encode", str(schema_file), "--json-output"], input="{x: 0, y: 0}"
        )

        payload = read_json(result.stdout)
        assert payload["result"]["document"] == '{"x":0,"y":0,"tags":null}'

    def test_encode_errors(self, runner, schema_file):
        result = runner.invoke(
            cli, ["encode", str(schema_file), "--json-output"], input="{x: 1, z: 2}"
        )

        assert result.exit_code != 0
        payload = read_json(result.stdout)
        assert [error["message"] for error in payload["errors"]] == ["'z' field was unexpected"]


def test_no_command_shows_help(runner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "validate" in result.output
    assert "decode" in result.output
    assert "encode" in result.output


class TestEnvFlags:
    """Test environment flag parsing."""

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes"])
    def test_enabled(self, monkeypatch, value):
        monkeypatch.setenv("DOCSPEC_DEBUG", value)

        assert get_env_flag("DOCSPEC_DEBUG") is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "on"])
    def test_disabled(self, monkeypatch, value):
        monkeypatch.setenv("DOCSPEC_DEBUG", value)

        assert get_env_flag("DOCSPEC_DEBUG") is False

    def test_default_when_unset(self):
        assert get_env_flag("DOCSPEC_DEBUG") is False
        assert get_env_flag("DOCSPEC_DEBUG", default=True) is True
