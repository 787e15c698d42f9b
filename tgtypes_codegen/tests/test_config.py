import logging

import pytest

from tgtypes_codegen.pipeline import CodeGeneratorConfig, FormatterConfig, OutputMode, PipelineGenerator
from tgtypes_codegen.pipeline.config import DEFAULT_TYPE_PRIORITY
from tgtypes_codegen.pipeline.formatters import FORMATTERS, BlackFormatter, Formatter, RuffFormatter, get_formatter


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.type_priority == ["InputFile", "Integer", "Float", "String", "Boolean"]
    assert config.output.mode == OutputMode.ERROR_IF_EXISTS
    assert config.runtime_module == "tgtypes_codegen.runtime"
    assert not config.formatter.enabled

    # Each config gets its own list
    config.type_priority.append("Array of String")
    assert DEFAULT_TYPE_PRIORITY == ["InputFile", "Integer", "Float", "String", "Boolean"]


def test_from_dict():
    config = CodeGeneratorConfig.from_dict(
        {
            "type_priority": ["String", "Integer"],
            "additional_empty_types": ["GiveawayCreated"],
            "formatter": {"enabled": True, "backend": "black", "line_length": 120},
            "output": {"mode": "force", "atomic_write": False},
            "unknown_option": 1,
        }
    )

    assert config.type_priority == ["String", "Integer"]
    assert config.additional_empty_types == ["GiveawayCreated"]
    assert config.formatter == FormatterConfig(enabled=True, backend="black", line_length=120)
    assert config.output.mode == OutputMode.FORCE
    assert not config.output.atomic_write
    assert config.output.validate_before_write
    assert not hasattr(config, "unknown_option")


def test_to_dict_is_loadable():
    config = CodeGeneratorConfig(ignore_types=["PassportElementError"])
    config.output.mode = OutputMode.FORCE

    data = config.to_dict()
    assert data["output"]["mode"] == "force"
    assert CodeGeneratorConfig.from_dict(data) == config


def test_get_formatter():
    assert isinstance(get_formatter("ruff"), RuffFormatter)
    assert isinstance(get_formatter("black"), BlackFormatter)

    with pytest.raises(ValueError, match="Unknown formatter"):
        get_formatter("yapf")


def test_black_formatter(generated_code):
    formatter = get_formatter("black")
    if not formatter.is_available():
        pytest.skip("black not installed")

    formatted = formatter.format(generated_code, FormatterConfig(line_length=100))
    assert "class InputMediaPhoto(DataClassJsonMixin):" in formatted
    assert 'field_name="from"' in formatted


def test_ruff_formatter(generated_code):
    formatter = get_formatter("ruff")
    if not formatter.is_available():
        pytest.skip("ruff not installed")

    formatted = formatter.format(generated_code, FormatterConfig(line_length=100))
    assert "class InputMediaPhoto(DataClassJsonMixin):" in formatted
    assert 'field_name="from"' in formatted


class MissingFormatter(Formatter):
    name = "missing"

    def is_available(self):
        return False

    def format(self, code, config):
        raise AssertionError("format() called on an unavailable formatter")


def test_unavailable_formatter_is_skipped(sample_description, monkeypatch, caplog):
    monkeypatch.setitem(FORMATTERS, "missing", MissingFormatter)
    config = CodeGeneratorConfig(formatter=FormatterConfig(enabled=True, backend="missing"))

    with caplog.at_level(logging.WARNING, logger="tgtypes_codegen.pipeline.generator"):
        code = PipelineGenerator(sample_description, config).generate()

    assert code == PipelineGenerator(sample_description).generate()
    assert "missing is not installed" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__])
