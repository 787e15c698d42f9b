import pytest

from tgtypes_codegen.utils import python_attribute_name, strip_prefix, title_to_snake


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Photo", "photo"),
        ("Mpeg4Gif", "mpeg4_gif"),
        ("InputMessageContent", "input_message_content"),
        ("PassportElementError", "passport_element_error"),
        ("", ""),
    ],
)
def test_title_to_snake(text, expected):
    assert title_to_snake(text) == expected


def test_strip_prefix():
    assert strip_prefix("InlineQueryResultCachedPhoto", "InlineQueryResult") == "CachedPhoto"
    assert strip_prefix("CachedPhoto", "Cached") == "Photo"
    # Only a leading occurrence is removed
    assert strip_prefix("PhotoCached", "Cached") == "PhotoCached"


class TestPythonAttributeName:
    """Wire names that cannot be used as dataclass attributes"""

    def test_plain_name_is_kept(self):
        assert python_attribute_name("file_id") == "file_id"

    def test_keyword_gets_trailing_underscore(self):
        assert python_attribute_name("from") == "from_"

    def test_soft_keyword_is_kept(self):
        # "type" is only a soft keyword and is a valid attribute name
        assert python_attribute_name("type") == "type"

    def test_dataclass_helper_names_are_escaped(self):
        assert python_attribute_name("field") == "field_"
        assert python_attribute_name("to_dict") == "to_dict_"


if __name__ == "__main__":
    pytest.main([__file__])
