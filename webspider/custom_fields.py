"""User-defined output fields extracted with regexes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from webspider.fields import FIELD_NAMES

CONFIG_FILE_NAME = "field-config.yaml"
APP_DIRECTORY = "webspider"

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class Part(Enum):
    """The part of an exchange a custom field is extracted from."""

    HEADER = "header"
    BODY = "body"
    RESPONSE = "response"

    def __str__(self) -> str:
        return self.value


class CustomFieldError(Exception):
    """A custom field configuration could not be read or is invalid."""


@dataclass
class CustomFieldConfig:
    """Definition of one custom field."""

    name: str = ""
    type: str = ""
    part: str = ""
    group: int = 0
    regex: list[str] = field(default_factory=list)
    compiled_regex: list[re.Pattern[str]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def _from_mapping(cls, data: dict[str, Any]) -> "CustomFieldConfig":
        regex = data.get("regex") or []
        if not isinstance(regex, list):
            raise CustomFieldError("could not decode field config: regex must be a list")
        group = data.get("group") or 0
        if not isinstance(group, int):
            raise CustomFieldError("could not decode field config: group must be an integer")
        return cls(
            name=_text(data.get("name")),
            type=_text(data.get("type")),
            part=_text(data.get("part")),
            group=group,
            regex=[_text(item) for item in regex],
        )

    def _to_mapping(self) -> dict[str, Any]:
        items = [
            ("name", self.name),
            ("type", self.type),
            ("part", self.part),
            ("group", self.group),
            ("regex", list(self.regex)),
        ]
        return {key: value for key, value in items if value}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


DEFAULT_FIELD_CONFIG = (
    CustomFieldConfig(
        name="email",
        type="regex",
        part=Part.RESPONSE.value,
        regex=[r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+)"],
    ),
)


def _read_configs(file_path: str | Path) -> list[CustomFieldConfig]:
    try:
        with open(file_path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise CustomFieldError(f"could not read field config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CustomFieldError(f"could not decode field config: {exc}") from exc
    if data is None:
        raise CustomFieldError("could not decode field config: empty document")
    if not isinstance(data, list):
        raise CustomFieldError("could not decode field config: expected a list of fields")
    configs = []
    for entry in data:
        if not isinstance(entry, dict):
            raise CustomFieldError("could not decode field config: expected a mapping per field")
        configs.append(CustomFieldConfig._from_mapping(entry))
    return configs


def validate_custom_field_names(file_path: str | Path) -> None:
    """Check that every field in the config has a valid, unique, new name."""
    seen: set[str] = set()
    for item in _read_configs(file_path):
        if not _NAME_PATTERN.fullmatch(item.name):
            raise CustomFieldError(f"wrong custom field name {item.name}")
        if item.name in FIELD_NAMES:
            raise CustomFieldError(
                f'could not register custom field. "{item.name}" already pre-defined field'
            )
        if item.name in seen:
            raise CustomFieldError(
                f'could not register custom field. "{item.name}" custom field already exists'
            )
        seen.add(item.name)


def load_custom_fields(file_path: str | Path, fields: str) -> dict[str, CustomFieldConfig]:
    """Load the config and return the fields named in comma separated ``fields``."""
    all_fields: dict[str, CustomFieldConfig] = {}
    for item in _read_configs(file_path):
        for pattern in item.regex:
            try:
                item.compiled_regex.append(re.compile(pattern))
            except re.error as exc:
                raise CustomFieldError(f"could not parse regex in field config: {exc}") from exc
        if not item.part:
            item.part = Part.RESPONSE.value
        all_fields[item.name] = item
    return {name: all_fields[name] for name in fields.split(",") if name and name in all_fields}


def init_custom_field_config_file(home_dir: str | Path | None = None) -> Path:
    """Return the default config path, writing the default config if missing."""
    if home_dir is None:
        try:
            home_dir = Path.home()
        except RuntimeError as exc:
            raise CustomFieldError(f"could not get home directory: {exc}") from exc
    config_path = Path(home_dir) / ".config" / APP_DIRECTORY / CONFIG_FILE_NAME
    if config_path.is_file():
        return config_path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(config_path, "w", encoding="utf-8") as handle:
            yaml.safe_dump(
                [item._to_mapping() for item in DEFAULT_FIELD_CONFIG],
                handle,
                sort_keys=False,
            )
    except OSError as exc:
        raise CustomFieldError(f"could not write field config: {exc}") from exc
    return config_path