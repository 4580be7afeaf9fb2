import textwrap

import pytest

from webspider.custom_fields import (
    CustomFieldError,
    Part,
    init_custom_field_config_file,
    load_custom_fields,
    validate_custom_field_names,
)


def _write(tmp_path, text):
    path = tmp_path / "fields.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_loaded_parts_map_to_part_values(tmp_path):
    path = _write(
        tmp_path,
        """
        - name: head
          part: header
          regex: ['a']
        - name: content
          part: body
          regex: ['b']
        - name: plain
          regex: ['c']
        """,
    )
    loaded = load_custom_fields(path, "head,content,plain")
    assert Part(loaded["head"].part) is Part.HEADER
    assert Part(loaded["content"].part) is Part.BODY
    assert Part(loaded["plain"].part) is Part.RESPONSE
    assert loaded["plain"].part == "response"


def test_validate_accepts_good_names(tmp_path):
    path = _write(
        tmp_path,
        """
        - name: email
          regex: ['x']
        - name: version-tag
          regex: ['y']
        """,
    )
    assert validate_custom_field_names(path) is None


def test_validate_rejects_bad_name(tmp_path):
    path = _write(tmp_path, "- name: bad name\n")
    with pytest.raises(CustomFieldError, match="wrong custom field name"):
        validate_custom_field_names(path)


def test_validate_rejects_predefined_name(tmp_path):
    path = _write(tmp_path, "- name: url\n")
    with pytest.raises(CustomFieldError, match="already pre-defined field"):
        validate_custom_field_names(path)


def test_validate_rejects_duplicate(tmp_path):
    path = _write(tmp_path, "- name: email\n- name: email\n")
    with pytest.raises(CustomFieldError, match="custom field already exists"):
        validate_custom_field_names(path)


def test_load_selects_requested_fields(tmp_path):
    path = _write(
        tmp_path,
        r"""
        - name: email
          type: regex
          regex: ['[a-z]+@example\.com']
        - name: version
          part: header
          regex: ['v\d+']
        """,
    )
    loaded = load_custom_fields(path, ",version")
    assert list(loaded) == ["version"]
    assert loaded["version"].part == "header"
    assert loaded["version"].compiled_regex[0].search("release v12").group() == "v12"

    both = load_custom_fields(path, "email,version,unknown")
    assert sorted(both) == ["email", "version"]
    assert both["email"].part == Part.RESPONSE.value


def test_load_rejects_invalid_regex(tmp_path):
    path = _write(tmp_path, "- name: broken\n  regex: ['(']\n")
    with pytest.raises(CustomFieldError, match="could not parse regex"):
        load_custom_fields(path, "broken")


def test_missing_file_raises(tmp_path):
    with pytest.raises(CustomFieldError, match="could not read field config"):
        load_custom_fields(tmp_path / "missing.yaml", "email")


def test_empty_file_raises(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(CustomFieldError, match="could not decode field config"):
        validate_custom_field_names(path)


def test_init_writes_default_config(tmp_path):
    path = init_custom_field_config_file(tmp_path)
    assert path == tmp_path / ".config" / "webspider" / "field-config.yaml"
    assert path.is_file()
    loaded = load_custom_fields(path, "email")
    match = loaded["email"].compiled_regex[0].search("contact: someone@example.com today")
    assert match.group(1) == "someone@example.com"
    assert loaded["email"].part == Part.RESPONSE.value


def test_init_keeps_existing_config(tmp_path):
    path = init_custom_field_config_file(tmp_path)
    path.write_text("- name: custom\n", encoding="utf-8")
    again = init_custom_field_config_file(tmp_path)
    assert again == path
    assert path.read_text(encoding="utf-8") == "- name: custom\n"