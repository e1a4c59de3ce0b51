from __future__ import annotations

from typing import Dict, List

from .model import FileOutline, OutlineRecord, RecordKind


def count_kinds(records: List[OutlineRecord]) -> Dict[str, int]:
	counts: Dict[str, int] = {kind.value: 0 for kind in RecordKind}
	for record in records:
		counts[record.kind.value] += 1
	return counts


def summarize_file(f: FileOutline) -> str:
	if f.error:
		return f"File {f.rel_path}: not outlined ({f.error})"
	counts = count_kinds(f.records)
	return (
		f"File {f.rel_path}: {counts['class']} classes, "
		f"{counts['function']} procedures, {counts['field']} fields"
	)


def summarize_report(root: str, files: List[FileOutline]) -> str:
	records = [r for f in files for r in f.records]
	counts = count_kinds(records)
	failed = len([f for f in files if f.error])
	return (
		f"Repository at {root}: {len(files)} source files ({failed} unreadable), "
		f"{counts['class']} classes, {counts['function']} procedures, {counts['field']} fields"
	)
