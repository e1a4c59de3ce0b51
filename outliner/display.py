from __future__ import annotations

import re
from typing import Optional

from .config import OutlineSettings


_LINE_SPLIT = re.compile(r"\r?\n")
_LINE_COMMENT = re.compile(r"[ \t]*'[^\n]*$", re.MULTILINE)
_JOIN = re.compile(r"\r?\n\s*")
# Dim/Const opening a statement (line start or after ":"), after any
# <Attribute> blocks and modifiers (Private, Shared...)
_DECL_HEAD = r"(?:^|:)\s*(?:<[^>]*>\s*)*(?:\w+\s+)*?(?:Dim|Const)\b"
_DECLARATION = re.compile(_DECL_HEAD, re.IGNORECASE | re.MULTILINE)
_INITIALIZER = re.compile(r"(" + _DECL_HEAD + r"[^=]*?)\s*=.*$", re.IGNORECASE | re.MULTILINE)
_VAR_TYPE = re.compile(r"(" + _DECL_HEAD + r".*?)\s+As\b.*$", re.IGNORECASE | re.MULTILINE)
_AS_CLAUSE = re.compile(r"\s+As\b.*$", re.IGNORECASE)
_NEXT_GROUP = re.compile(r"\s*\(")


def _matching_paren(text: str, open_index: int) -> int:
	depth = 0
	for i in range(open_index, len(text)):
		if text[i] == "(":
			depth += 1
		elif text[i] == ")":
			depth -= 1
			if depth == 0:
				return i
	return -1


def collapse_parameters(text: str) -> str:
	"""Replace every top-level ``(...)`` group with ``()``; nested groups go with it."""
	parts = []
	i = 0
	while i < len(text):
		if text[i] == "(":
			close = _matching_paren(text, i)
			if close < 0:
				parts.append(text[i:])
				break
			parts.append("()")
			i = close + 1
			continue
		parts.append(text[i])
		i += 1
	return "".join(parts)


def strip_return_type(text: str) -> str:
	"""Drop ``As <type>`` following the parameter list(s) of a procedure.

	Dim/Const statements are left alone: ``Dim buf(10) As Byte`` keeps its
	type here, hiding it is up to ``show_var_type``.
	"""
	if _DECLARATION.search(text):
		return text
	open_index = text.find("(")
	if open_index < 0:
		return text
	close = _matching_paren(text, open_index)
	# Generic procedures carry a type parameter group before the parameters
	while close >= 0:
		nxt = _NEXT_GROUP.match(text, close + 1)
		if not nxt:
			break
		close = _matching_paren(text, nxt.end() - 1)
	if close < 0:
		return text
	if _AS_CLAUSE.match(text, close + 1):
		return text[: close + 1]
	return text


def strip_var_type(text: str) -> str:
	return _VAR_TYPE.sub(r"\1", text)


def indent_of(text: str) -> int:
	first_line = _LINE_SPLIT.split(text, 1)[0]
	return len(first_line) - len(first_line.lstrip())


def to_display_text(text: str, settings: Optional[OutlineSettings] = None) -> str:
	"""Render one logical declaration as a single outline line.

	Comments, line breaks and initializer values always go. Parameter lists,
	return types and variable types are hidden unless the settings ask to show
	them. The indentation of the first physical line is kept.
	"""
	settings = settings or OutlineSettings()
	indent_level = indent_of(text)

	cleaned = _LINE_COMMENT.sub("", text)
	cleaned = _JOIN.sub(" ", cleaned)
	cleaned = _INITIALIZER.sub(r"\1", cleaned)
	if not settings.show_parameters:
		cleaned = collapse_parameters(cleaned)
	if not settings.show_function_type:
		cleaned = strip_return_type(cleaned)
	if not settings.show_var_type:
		cleaned = strip_var_type(cleaned)
	cleaned = cleaned.lstrip()

	return " " * indent_level + cleaned
