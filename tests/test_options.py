import pytest

from webspider.options import Options


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a:b", {"a": "b"}),
        ("", {}),
        ("a:", {"a": ""}),
        ("a:b,c:d", {"a": "b", "c": "d"}),
    ],
    ids=["single value", "empty string", "empty value", "double input"],
)
def test_parse_custom_headers(text, expected):
    options = Options(custom_headers=text.split(","))
    assert options.parse_custom_headers() == expected


def test_parse_custom_headers_trims_spaces_and_keeps_colons():
    options = Options(custom_headers=[" Host : example.com:8080 "])
    assert options.parse_custom_headers() == {"Host": "example.com:8080"}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a=b", {"a": "b"}),
        ("", {}),
        ("=b", {}),
        ("a=", {}),
        ("a=b,c=d", {"a": "b", "c": "d"}),
        ("a=b,a=b", {"a": "b"}),
    ],
    ids=[
        "single value",
        "empty string",
        "empty key",
        "empty value",
        "double input",
        "duplicated input",
    ],
)
def test_parse_headless_optional_arguments(text, expected):
    options = Options(headless_optional_arguments=text.split(","))
    assert options.parse_headless_optional_arguments() == expected


def test_defaults_are_zero_values():
    options = Options()
    assert options.parse_custom_headers() == {}
    assert options.parse_headless_optional_arguments() == {}
    assert options.max_depth == 0 and options.strategy == "" and options.urls == []