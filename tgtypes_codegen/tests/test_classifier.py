import pytest
from conftest import make_description

from tgtypes_codegen.errors import SchemaError
from tgtypes_codegen.pipeline import CodeGeneratorConfig
from tgtypes_codegen.pipeline.analyzer import FamilyKind, MethodKind, TypeClassifier, TypeShape


@pytest.fixture
def classifier(sample_description):
    return TypeClassifier(sample_description, CodeGeneratorConfig())


@pytest.mark.parametrize(
    "name, shape",
    [
        ("User", TypeShape.STRUCT),
        ("VoiceChatStarted", TypeShape.STRUCT),
        ("CallbackGame", TypeShape.MARKER_FAMILY),
        ("InputFile", TypeShape.MARKER_FAMILY),
        ("InputMedia", TypeShape.DISCRIMINATED_FAMILY),
        ("InlineQueryResult", TypeShape.DISCRIMINATED_FAMILY),
        ("InputMessageContent", TypeShape.DISCRIMINATED_FAMILY),
        ("PassportElementError", TypeShape.DISCRIMINATED_FAMILY),
    ],
)
def test_classify_sample_types(classifier, sample_description, name, shape):
    assert classifier.classify(sample_description.get_type(name)) == shape


def test_family_methods(classifier):
    input_media = classifier.family("InputMedia")
    assert input_media.method.kind == MethodKind.MEDIA_ACCESSOR
    assert input_media.method.name == "input_media_params"
    assert input_media.members == ["InputMediaPhoto", "InputMediaVideo"]

    inline_query_result = classifier.family("InlineQueryResult")
    assert inline_query_result.method.kind == MethodKind.ACCESSOR
    assert inline_query_result.method.name == "inline_query_result"

    input_file = classifier.family("InputFile")
    assert input_file.kind == FamilyKind.MARKER
    assert input_file.method is None


def test_structs_are_not_families(classifier):
    assert classifier.family("User") is None
    assert classifier.family("VoiceChatStarted") is None
    assert classifier.family("String") is None


def test_reply_markup_family(classifier):
    reply_markup = classifier.family("ReplyMarkup")
    assert reply_markup.kind == FamilyKind.DISCRIMINATED
    assert reply_markup.method.name == "reply_markup"
    assert reply_markup.members == ["InlineKeyboardMarkup", "ReplyKeyboardMarkup", "ReplyKeyboardRemove", "ForceReply"]


def test_families_of(classifier):
    assert classifier.families_of("InlineKeyboardMarkup") == {"ReplyMarkup"}
    assert classifier.families_of("InputMediaPhoto") == {"InputMedia"}
    assert classifier.families_of("User") == set()
    assert classifier.families_of("String") == set()


class TestUnknownEmptyType:
    """Zero-field types outside the fixed lists"""

    schema = {"ChatPlaceholder": {"description": ["Holds nothing yet."]}}

    def test_unknown_empty_type_fails(self):
        description = make_description(self.schema)
        classifier = TypeClassifier(description, CodeGeneratorConfig())

        with pytest.raises(SchemaError, match="has no fields") as exc_info:
            classifier.classify(description.get_type("ChatPlaceholder"))
        assert exc_info.value.type_name == "ChatPlaceholder"

    def test_additional_empty_types(self):
        description = make_description(self.schema)
        config = CodeGeneratorConfig(additional_empty_types=["ChatPlaceholder"])
        classifier = TypeClassifier(description, config)

        assert classifier.classify(description.get_type("ChatPlaceholder")) == TypeShape.STRUCT


if __name__ == "__main__":
    pytest.main([__file__])
