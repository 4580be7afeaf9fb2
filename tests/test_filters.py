from webspider.filters import (
    MAX_CHROME_URL_LENGTH,
    RepeatingSequence,
    SimpleFilter,
    longest_repeating_sequence,
)


def test_unique_url():
    simple = SimpleFilter()
    try:
        assert simple.unique_url("https://example.com") is True
        assert simple.unique_url("https://example.com") is False
        assert simple.unique_url("https://example.com/other") is True
    finally:
        simple.close()


def test_unique_content():
    simple = SimpleFilter()
    assert simple.unique_content(b"hello") is True
    assert simple.unique_content(b"hello") is False
    assert simple.unique_content("hello") is False
    assert simple.unique_content(b"world") is True


def test_close_forgets_entries():
    simple = SimpleFilter()
    simple.unique_url("https://example.com")
    simple.close()
    assert simple.unique_url("https://example.com") is True


def test_longest_repeating_sequence_simple():
    assert longest_repeating_sequence("abcabc") == RepeatingSequence("abc", 2)


def test_longest_repeating_sequence_no_overlap():
    assert longest_repeating_sequence("aaaa") == RepeatingSequence("aa", 2)


def test_longest_repeating_sequence_none():
    assert longest_repeating_sequence("abc").sequence == ""


def test_is_cycle_too_long():
    simple = SimpleFilter()
    assert simple.is_cycle("a" * (MAX_CHROME_URL_LENGTH + 1)) is True


def test_is_cycle_normal_url():
    simple = SimpleFilter()
    assert simple.is_cycle("https://example.com/index.php?id=1") is False


def test_is_cycle_repeated_segment():
    segment = "/segment-xy"
    url = "https://example.com" + "".join(sep + segment for sep in "ABCDEFGHIJ")
    found = longest_repeating_sequence(url)
    assert found.sequence == segment
    assert found.count == 10
    assert SimpleFilter().is_cycle(url) is True