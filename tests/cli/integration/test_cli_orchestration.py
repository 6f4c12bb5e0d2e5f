"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from response_schema_validator.cli import cli, main

_OPENAPI_YAML = """
openapi: 3.0.3
info:
  title: Users
  version: 1.0.0
paths:
  /users/{id}:
    get:
      responses:
        200:
          description: A user
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/User'
components:
  schemas:
    User:
      type: object
      properties:
        name:
          type: string
        email:
          type: string
          format: email
      required: [name, email]
"""


def _write(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_validate_command_prints_outcome_for_plain_schema(tmp_path: Path, capsys) -> None:
    schema_path = _write(
        tmp_path / "schema.json",
        json.dumps({"type": "object", "properties": {"age": {"type": "integer"}}}),
    )
    data_path = _write(tmp_path / "data.json", json.dumps({"age": "old"}))

    exit_code = main(["validate", "--schema", str(schema_path), "--data", str(data_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    outcome = json.loads(captured.out)
    assert outcome["errors"][0]["instancePath"] == "/age"
    assert outcome["dataMismatches"]["age"].endswith("'old' is not of type 'integer'")
    assert outcome["issueStyles"]["iconPropertyError"] == "😱"


def test_validate_command_resolves_openapi_yaml_document(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "openapi.yaml", _OPENAPI_YAML)
    data_path = _write(tmp_path / "data.json", json.dumps({"name": "Ada"}))
    styles_path = _write(tmp_path / "styles.yaml", 'icon_property_missing: "MISSING"\n')
    output_path = tmp_path / "outcome.json"

    exit_code = main(
        [
            "validate",
            "--schema",
            str(schema_path),
            "--data",
            str(data_path),
            "--endpoint",
            "/users/{id}",
            "--styles",
            str(styles_path),
            "--output",
            str(output_path),
        ]
    )

    assert exit_code == 1
    outcome = json.loads(output_path.read_text(encoding="utf-8"))
    assert outcome["dataMismatches"] == {"name": "Ada", "email": "MISSING Missing property 'email'"}
    assert outcome["errors"][0]["params"] == {"missingProperty": "email"}


def test_validate_command_returns_zero_for_valid_data(tmp_path: Path, capsys) -> None:
    schema_path = _write(tmp_path / "openapi.yaml", _OPENAPI_YAML)
    data_path = _write(
        tmp_path / "data.yaml", "name: Ada\nemail: ada@example.com\n"
    )

    exit_code = main(
        [
            "validate",
            "--schema",
            str(schema_path),
            "--data",
            str(data_path),
            "--endpoint",
            "/users/{id}",
            "--method",
            "get",
            "--status",
            "200",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out)["errors"] is None


def test_resolve_command_prints_self_contained_schema(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "openapi.yaml", _OPENAPI_YAML)

    result = CliRunner().invoke(
        cli, ["resolve", "--schema", str(schema_path), "--endpoint", "/users/{id}"]
    )

    assert result.exit_code == 0
    resolved = json.loads(result.output)
    assert resolved["$ref"] == "#/components/schemas/User"
    assert resolved["$id"].endswith(":/users/%7Bid%7D:get:200")
    assert "User" in resolved["components"]["schemas"]


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "issue-styles.yaml"

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert "icon_property_error" in output_path.read_text(encoding="utf-8")


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = _write(tmp_path / "issue-styles.yaml", "existing")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"
