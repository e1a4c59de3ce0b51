import json

import pytest

from outliner.config import OutlineSettings, SettingsError, load_settings


def test_defaults_hide_everything():
	settings = load_settings()
	assert settings == OutlineSettings()
	assert settings.use_standard_indent is False
	assert settings.standard_indent_level == 2
	assert not (settings.show_parameters or settings.show_function_type or settings.show_var_type)
	assert settings.standard_indent == "  "


def test_missing_file_means_defaults(tmp_path):
	assert load_settings(str(tmp_path / "settings.json")) == OutlineSettings()


def test_flat_prefixed_and_nested_keys(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(
		json.dumps(
			{
				"editor.tabSize": 4,
				"vbOutline.ShowParameters": True,
				"ShowVarType": True,
				"vbOutline": {"StandardIndentLevel": 4, "UseStandardIndent": True},
			}
		)
	)
	settings = load_settings(str(p))
	assert settings.show_parameters is True
	assert settings.show_var_type is True
	assert settings.show_function_type is False
	assert settings.use_standard_indent is True
	assert settings.standard_indent == "    "


def test_overrides_win_over_file(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"ShowFunctionType": True}))
	settings = load_settings(str(p), {"ShowFunctionType": False, "show_parameters": True})
	assert settings.show_function_type is False
	assert settings.show_parameters is True


def test_settings_are_read_per_call(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"ShowParameters": False}))
	assert load_settings(str(p)).show_parameters is False
	p.write_text(json.dumps({"ShowParameters": True}))
	assert load_settings(str(p)).show_parameters is True


def test_malformed_file_raises(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text("{not json")
	with pytest.raises(SettingsError):
		load_settings(str(p))


def test_non_object_file_raises(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text("[1, 2]")
	with pytest.raises(SettingsError):
		load_settings(str(p))


def test_invalid_values_raise():
	with pytest.raises(SettingsError):
		load_settings(overrides={"StandardIndentLevel": -1})
	with pytest.raises(SettingsError):
		load_settings(overrides={"ShowParameters": "sometimes"})


def test_snake_case_override_beats_editor_key_in_file(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"ShowParameters": True, "vbOutline": {"StandardIndentLevel": 6}}))
	settings = load_settings(str(p), {"show_parameters": False, "standard_indent_level": 3})
	assert settings.show_parameters is False
	assert settings.standard_indent_level == 3


def test_editor_key_override_beats_snake_case_in_file(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"show_var_type": True}))
	assert load_settings(str(p), {"vbOutline.ShowVarType": False}).show_var_type is False
