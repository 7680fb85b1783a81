import json
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from swagger_doc.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliBuild:
    def test_build_to_stdout(self):
        runner = CliRunner()
        result = runner.invoke(main, ["build", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["swagger"] == "2.0"
        assert "/pets/{petId}" in doc["paths"]

    def test_build_to_file(self, tmp_path):
        output_file = tmp_path / "out" / "swagger.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "build", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        assert output_file.exists()
        doc = json.loads(output_file.read_text(encoding="utf-8"))
        assert sorted(doc["definitions"]) == ["Pet", "PetOwner", "PetOwnerAddress"]

    def test_build_yaml(self, tmp_path):
        output_file = tmp_path / "swagger.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "build", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
            "--format", "yaml",
        ])

        assert result.exit_code == 0
        doc = yaml.safe_load(output_file.read_text(encoding="utf-8"))
        assert doc["info"]["title"] == "Petstore"

    def test_spec_version_option(self, tmp_path):
        output_file = tmp_path / "swagger.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "build", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
            "--spec-version", "1.2",
        ])

        assert result.exit_code == 0
        doc = json.loads(output_file.read_text(encoding="utf-8"))
        assert doc["paths"]["/pets"]["post"]["parameters"][0]["schema"] == {"$ref": "Pet"}

    def test_strict_names_passed_through(self, tmp_path):
        with patch("swagger_doc.cli.build_document") as mock_build:
            mock_build.return_value = {"definitions": {}}
            runner = CliRunner()
            result = runner.invoke(main, ["build", str(FIXTURES / "petstore.yaml"), "--strict-names"])

        assert result.exit_code == 0
        options = mock_build.call_args[0][1]
        assert options.on_name_collision == "error"

    def test_bad_route_file_exits_with_error(self, tmp_path):
        bad = tmp_path / "routes.yaml"
        bad.write_text("paths:\n  /pets:\n    - summary: no method\n")
        runner = CliRunner()
        result = runner.invoke(main, ["build", str(bad)])

        assert result.exit_code == 1
        assert "invalid route description" in result.output

    def test_non_utf8_route_file_reported(self, tmp_path):
        bad = tmp_path / "routes.yaml"
        bad.write_bytes(b"info:\n  title: caf\xe9\n")
        runner = CliRunner()
        result = runner.invoke(main, ["build", str(bad)])

        assert result.exit_code == 1
        assert "cannot read" in result.output

    def test_missing_file(self):
        runner = CliRunner()
        result = runner.invoke(main, ["build", "does-not-exist.yaml"])
        assert result.exit_code == 2


class TestCliDefinitions:
    def test_lists_definition_names(self):
        runner = CliRunner()
        result = runner.invoke(main, ["definitions", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Pet", "PetOwner", "PetOwnerAddress"]
