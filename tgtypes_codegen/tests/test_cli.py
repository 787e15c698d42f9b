import json

import pytest
from click.testing import CliRunner
from conftest import SAMPLE_PATH

from tgtypes_codegen.cli_utils import reconstruct_command_line
from tgtypes_codegen.pipeline.formatters import FORMATTERS, RuffFormatter
from tgtypes_codegen.tgtypes_codegen import tgtypes_codegen


@pytest.fixture
def runner():
    return CliRunner()


def test_generate(runner, tmp_path):
    output = tmp_path / "types.py"
    result = runner.invoke(tgtypes_codegen, [str(SAMPLE_PATH), str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert "class InputMediaPhoto(DataClassJsonMixin):" in code
    assert "# Regenerate with: tgtypes_codegen api_sample.json " in code


def test_existing_output_needs_force(runner, tmp_path):
    output = tmp_path / "types.py"
    output.write_text("# hand written\n")

    result = runner.invoke(tgtypes_codegen, [str(SAMPLE_PATH), str(output)])
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert output.read_text() == "# hand written\n"

    result = runner.invoke(tgtypes_codegen, ["--force", str(SAMPLE_PATH), str(output)])
    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert code.startswith("# THIS FILE IS AUTOGENERATED")
    assert "--force" in code.split("\n")[2]


def test_config_file(runner, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "add_generation_comment": False,
                "ignore_types": ["PassportElementError", "PassportElementErrorDataField"],
            }
        )
    )
    output = tmp_path / "types.py"

    result = runner.invoke(tgtypes_codegen, ["--config", str(config_path), str(SAMPLE_PATH), str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert code.startswith("from __future__ import annotations")
    assert "PassportElementError" not in code


def test_schema_error_is_reported(runner, tmp_path):
    schema_path = tmp_path / "api.json"
    schema_path.write_text(
        json.dumps(
            {
                "version": "Bot API 7.0",
                "types": {
                    "MessageOrigin": {"name": "MessageOrigin", "subtypes": ["MessageOriginUser"]},
                    "MessageOriginUser": {
                        "name": "MessageOriginUser",
                        "fields": [{"name": "date", "types": ["Integer"], "required": True}],
                        "subtype_of": ["MessageOrigin"],
                    },
                },
            }
        )
    )
    output = tmp_path / "types.py"

    result = runner.invoke(tgtypes_codegen, [str(schema_path), str(output)])

    assert result.exit_code == 1
    assert "unknown type MessageOrigin has no fields" in result.output
    assert not output.exists()


def test_format_requires_installed_formatter(runner, tmp_path, monkeypatch):
    class UnavailableRuff(RuffFormatter):
        def is_available(self):
            return False

    monkeypatch.setitem(FORMATTERS, "ruff", UnavailableRuff)
    output = tmp_path / "types.py"

    result = runner.invoke(tgtypes_codegen, ["--format", str(SAMPLE_PATH), str(output)])

    assert result.exit_code == 1
    assert "ruff is not installed" in result.output
    assert not output.exists()


def test_reconstruct_command_line_without_context():
    # No active Click context outside of a command invocation
    assert reconstruct_command_line(tgtypes_codegen) == "tgtypes_codegen"


if __name__ == "__main__":
    pytest.main([__file__])
