"""Outline display settings and the provider that resolves them.

Settings are looked up fresh for every scan. Keys follow the host editor's
naming (``UseStandardIndent``, ``ShowParameters``...), optionally prefixed with
the ``vbOutline`` section or nested under it.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


SECTION = "vbOutline"


class SettingsError(ValueError):
	"""Raised when a settings source cannot be turned into OutlineSettings."""


class OutlineSettings(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	use_standard_indent: bool = Field(False, alias="UseStandardIndent")
	standard_indent_level: int = Field(2, ge=0, alias="StandardIndentLevel")
	show_parameters: bool = Field(False, alias="ShowParameters")
	show_function_type: bool = Field(False, alias="ShowFunctionType")
	show_var_type: bool = Field(False, alias="ShowVarType")

	@property
	def standard_indent(self) -> str:
		return " " * self.standard_indent_level


# Editor-style key -> field name, so each option has one key whatever the spelling
_FIELD_NAMES: Dict[str, str] = {
	field.alias: name for name, field in OutlineSettings.model_fields.items() if field.alias
}


def _flatten(raw: Mapping[str, Any]) -> Dict[str, Any]:
	values: Dict[str, Any] = {}
	nested = raw.get(SECTION)
	for key, value in raw.items():
		if key == SECTION:
			continue
		if key.startswith(SECTION + "."):
			key = key[len(SECTION) + 1:]
		values[_FIELD_NAMES.get(key, key)] = value
	if isinstance(nested, Mapping):
		for key, value in nested.items():
			values[_FIELD_NAMES.get(key, key)] = value
	return values


def _read_settings_file(path: str) -> Dict[str, Any]:
	if not os.path.exists(path):
		return {}
	try:
		with open(path, "r", encoding="utf-8") as fh:
			data = json.load(fh)
	except (OSError, ValueError) as e:
		raise SettingsError(f"Cannot read settings file {path}: {e}") from e
	if not isinstance(data, dict):
		raise SettingsError(f"Settings file {path} must hold a JSON object")
	return data


def load_settings(
	path: Optional[str] = None,
	overrides: Optional[Mapping[str, Any]] = None,
) -> OutlineSettings:
	"""Resolve settings from an optional JSON file plus explicit overrides.

	Missing keys keep their defaults, unknown keys are ignored and overrides
	win over the file.
	"""
	values: Dict[str, Any] = {}
	if path:
		values.update(_flatten(_read_settings_file(path)))
	if overrides:
		values.update(_flatten(overrides))
	try:
		return OutlineSettings.model_validate(values)
	except ValidationError as e:
		raise SettingsError(str(e)) from e
