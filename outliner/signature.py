from __future__ import annotations

import re
from typing import Sequence

from .model import LogicalSignature


CONTINUATION = re.compile(r"[ \t]*_[ \t]*$")


def strip_continuation(line: str) -> str:
	return CONTINUATION.sub("", line)


def paren_depth(text: str) -> int:
	depth = 0
	for ch in text:
		if ch == "(":
			depth += 1
		elif ch == ")":
			depth -= 1
	return depth


def grab_signature(lines: Sequence[str], start: int) -> LogicalSignature:
	"""Join a declaration whose parameter list runs over several lines.

	Lines after ``start`` are folded in until the parentheses opened on the
	start line are balanced or the input runs out.
	"""
	buf = strip_continuation(lines[start] if start < len(lines) else "")

	depth = 0
	first_paren = buf.find("(")
	if first_paren >= 0:
		depth = paren_depth(buf[first_paren:])

	i = start
	while depth > 0 and i + 1 < len(lines):
		i += 1
		seg = strip_continuation(lines[i])
		buf += "\n" + seg
		depth += paren_depth(seg)

	return LogicalSignature(text=buf, end=i)
