import re
import sys
import types
from pathlib import Path

import pytest

from tgtypes_codegen.pipeline import CodeGeneratorConfig, PipelineGenerator, SchemaParser, load_api_description
from tgtypes_codegen.pipeline.analyzer import SchemaAnalyzer

TEST_DATA_DIR = Path(__file__).parent / "test_data"
SAMPLE_PATH = TEST_DATA_DIR / "api_sample.json"


def make_description(types_schema, version="Bot API 5.3"):
    """Build an APIDescription from an inline {name: type} mapping"""
    raw = {"version": version, "types": {}}
    for name, type_schema in types_schema.items():
        raw["types"][name] = {"name": name, **type_schema}
    return SchemaParser().parse(raw)


def analyze(description, config=None):
    return SchemaAnalyzer(config or CodeGeneratorConfig()).analyze(description)


@pytest.fixture
def sample_description():
    return load_api_description(SAMPLE_PATH)


@pytest.fixture
def sample_ir(sample_description):
    return analyze(sample_description)


@pytest.fixture
def generated_code(sample_description):
    return PipelineGenerator(sample_description, command_line="tgtypes_codegen api_sample.json types.py").generate()


@pytest.fixture
def generated_module(generated_code, monkeypatch):
    """Execute the generated code as an importable module"""
    module = types.ModuleType("tgtypes_generated")
    monkeypatch.setitem(sys.modules, module.__name__, module)
    exec(compile(generated_code, "tgtypes_generated.py", "exec"), module.__dict__)
    return module


def expected_tag(type_name, family):
    """Wire tag by naming rule: family prefix and "Cached" removed, then snake_case"""
    name = type_name.removeprefix(family)
    if family == "InlineQueryResult":
        name = name.removeprefix("Cached")
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
