import pytest

from json_to_model.utils import to_camel_case, to_pascal_case, to_snake_case


@pytest.mark.parametrize(
    "text,expected",
    [
        ("first_name", "FirstName"),
        ("content-type", "ContentType"),
        ("userId", "UserId"),
        ("user", "User"),
        ("a__b", "A_b"),
        ("_id", "_id"),
        ("name_", "Name_"),
        ("", ""),
    ],
)
def test_to_pascal_case(text, expected):
    assert to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("first_name", "firstName"),
        ("content-type", "contentType"),
        ("UserId", "userId"),
        ("id", "id"),
        ("a__b", "a_b"),
        ("_id", "_id"),
        ("a_", "a_"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


def test_camel_of_pascal_only_changes_first_letter():
    for text in ["Hello", "helloWorld", "X", "abc_def"]:
        pascal = to_pascal_case(text)
        assert to_camel_case(pascal) == pascal[0].lower() + pascal[1:]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("UserProfile", "user_profile"),
        ("Model", "model"),
        ("api-response", "api_response"),
        ("Order2", "order_2"),
        ("", ""),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Café", "café"),
        ("ÉtéIndien", "été_indien"),
        ("ユーザー", "ユーザー"),
        ("$$", "$$"),
    ],
)
def test_to_snake_case_keeps_non_ascii_letters(text, expected):
    assert to_snake_case(text) == expected


def test_to_camel_case_can_collide():
    assert to_camel_case("first_name") == to_camel_case("firstName") == "firstName"
