from __future__ import annotations

import os
import re
from typing import Dict, List

from .model import FileInfo


EXTENSION_LANGUAGE: Dict[str, str] = {
	".vb": "vbnet",
	".bas": "vb6",
	".cls": "vb6",
	".frm": "vb6",
	".ctl": "vb6",
	".vba": "vba",
	".vbs": "vbscript",
}

SKIP_DIRS = {".git", ".vs", "node_modules", "bin", "obj", "dist", "build", "packages"}

_LINE_SPLIT = re.compile(r"\r?\n")


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")


def read_all_lines(path: str) -> List[str]:
	with open(path, "r", encoding="utf-8", newline="") as fh:
		text = fh.read()
	return _LINE_SPLIT.split(text)


def scan_repository(root: str) -> List[FileInfo]:
	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
		for filename in sorted(filenames):
			language = detect_language(filename)
			if language == "unknown":
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				FileInfo(
					path=path,
					rel_path=os.path.relpath(path, root),
					language=language,
				)
			)
	return files
