from __future__ import annotations

import json

from click.testing import CliRunner

from json_to_model.json_to_model import json_to_model

DOCUMENT = {"id": 1, "user_name": "ada", "profile": {"bio": "hi"}}


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_stdin_to_stdout():
    runner = CliRunner()
    result = runner.invoke(json_to_model, ["--no-null-safety"], input=json.dumps(DOCUMENT))

    assert result.exit_code == 0, result.output
    assert "export class Bio {" in result.output
    assert "export class Model {" in result.output
    assert "  id: number;" in result.output


def test_file_to_directory(tmp_path):
    source = write_json(tmp_path / "user.json", DOCUMENT)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    runner = CliRunner()
    result = runner.invoke(json_to_model, ["-l", "dart", "-n", "user_profile", source, str(out_dir)])

    assert result.exit_code == 0, result.output
    code = (out_dir / "user_profile.dart").read_text()
    assert "class UserProfile {" in code
    assert "  final int? id;" in code


def test_file_to_file_with_kotlin_options(tmp_path):
    source = write_json(tmp_path / "user.json", DOCUMENT)
    target = tmp_path / "Model.kt"

    runner = CliRunner()
    result = runner.invoke(
        json_to_model,
        ["-l", "kt", "-s", "@Serializable", "--package", "org.acme", "--no-null-safety", source, str(target)],
    )

    assert result.exit_code == 0, result.output
    code = target.read_text()
    assert code.startswith("package org.acme\n")
    assert '@SerialName("user_name")' in code
    assert "    val id: Int," in code


def test_config_file_and_flag_override(tmp_path):
    config = write_json(tmp_path / "config.json", {"includeConstructor": False, "nullSafety": False, "serializationOptions": "class-transformer"})
    source = write_json(tmp_path / "user.json", DOCUMENT)

    runner = CliRunner()
    result = runner.invoke(json_to_model, ["-c", config, source])
    assert result.exit_code == 0, result.output
    assert '@Expose({ name: "user_name" })' in result.output
    assert "constructor" not in result.output
    assert "  id: number = 0;" in result.output

    result = runner.invoke(json_to_model, ["-c", config, "--constructor", "-s", "none", source])
    assert result.exit_code == 0, result.output
    assert "constructor(" in result.output
    assert "@Expose" not in result.output


def test_list_styles():
    runner = CliRunner()
    result = runner.invoke(json_to_model, ["--list-styles"])

    assert result.exit_code == 0
    assert "typescript: none, class-transformer, type-only" in result.output
    assert "dart: none, json-serializable, from-json-to-json" in result.output
    assert "kotlin: none, kotlinx-serialization, jackson, gson" in result.output

    result = runner.invoke(json_to_model, ["--list-styles", "-l", "dart"])
    assert result.output.strip() == "dart: none, json-serializable, from-json-to-json"


def test_invalid_json_input():
    runner = CliRunner()
    result = runner.invoke(json_to_model, [], input="{not json")

    assert result.exit_code == 1
    assert "Invalid JSON input" in result.output


def test_invalid_structure():
    runner = CliRunner()
    result = runner.invoke(json_to_model, [], input="[]")

    assert result.exit_code == 1
    assert "empty array" in result.output


def test_unsupported_style():
    runner = CliRunner()
    result = runner.invoke(json_to_model, ["-l", "typescript", "-s", "gson"], input=json.dumps(DOCUMENT))

    assert result.exit_code == 1
    assert "not supported for typescript" in result.output


def test_null_style_in_config(tmp_path):
    config = write_json(tmp_path / "config.json", {"serialization_style": None})
    source = write_json(tmp_path / "user.json", DOCUMENT)

    runner = CliRunner()
    result = runner.invoke(json_to_model, ["-l", "dart", "-c", config, source])

    assert result.exit_code == 1
    assert "Serialization style must be a string" in result.output
