import pytest
from conftest import make_description

from tgtypes_codegen.errors import SchemaError
from tgtypes_codegen.pipeline import SchemaParser


def test_load_sample(sample_description):
    assert sample_description.version == "Bot API 5.3"
    assert sample_description.release_date == "June 25, 2021"

    # Declaration order is kept
    names = list(sample_description.types)
    assert names[:4] == ["User", "PhotoSize", "MessageEntity", "Message"]
    assert names[-1] == "PassportElementErrorDataField"


def test_fields_and_edges(sample_description):
    message = sample_description.get_type("Message")
    sender = message.fields[1]
    assert sender.name == "from"
    assert sender.types == ["User"]
    assert sender.required is False

    video = sample_description.get_type("InputMediaVideo")
    assert video.is_subtype_of("InputMedia")
    assert sample_description.get_type("InputMedia").subtypes == ["InputMediaPhoto", "InputMediaVideo"]


def test_missing_keys_default_to_empty():
    description = SchemaParser().parse({"types": {"CallbackGame": {}}})
    callback_game = description.get_type("CallbackGame")
    assert callback_game.name == "CallbackGame"
    assert callback_game.fields == []
    assert callback_game.subtype_of == []
    assert description.version == ""


def test_duplicate_field_is_rejected():
    with pytest.raises(SchemaError) as exc_info:
        make_description(
            {
                "User": {
                    "fields": [
                        {"name": "id", "types": ["Integer"], "required": True},
                        {"name": "id", "types": ["String"], "required": True},
                    ]
                }
            }
        )
    assert exc_info.value.type_name == "User"


def test_undescribed_subtype_is_rejected():
    with pytest.raises(SchemaError, match="undescribed type InputMediaAudio"):
        make_description({"InputMedia": {"subtypes": ["InputMediaAudio"]}})


if __name__ == "__main__":
    pytest.main([__file__])
