"""Single-pass outline scanner for BASIC-family source files."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .config import OutlineSettings
from .display import to_display_text
from .fs_scan import read_all_lines, scan_repository
from .model import FileOutline, OutlineRecord, OutlineReport, RecordKind, ScanOutcome, ScanState
from .signature import grab_signature
from .summarize import summarize_file, summarize_report

logger = logging.getLogger(__name__)

END_PROCEDURE = re.compile(r"end (?:function|sub)", re.IGNORECASE)
CLASS_DECL = re.compile(r"class ", re.IGNORECASE)
PROCEDURE_DECL = re.compile(r"(?:function|sub) ", re.IGNORECASE)
FIELD_DECL = re.compile(r"(?:dim|const) ", re.IGNORECASE)
LEADING_SPACES = re.compile(r"^ *")


def _field_indent(display_text: str, state: ScanState, settings: OutlineSettings) -> str:
	current_indent = len(LEADING_SPACES.match(display_text).group(0))
	if settings.use_standard_indent:
		if state.in_procedure and current_indent == 0:
			return settings.standard_indent
		return ""
	return " " * current_indent


def scan_lines(lines: Sequence[str], settings: Optional[OutlineSettings] = None) -> List[OutlineRecord]:
	"""Classify every unconsumed line and collect the outline records in source order."""
	settings = settings or OutlineSettings()
	state = ScanState()
	records: List[OutlineRecord] = []

	for idx, line in enumerate(lines):
		if idx <= state.skip_cursor:
			continue

		line = line or ""
		line_num = idx + 1

		if line.lstrip().startswith("'"):
			continue

		if END_PROCEDURE.search(line):
			state.in_procedure = False
			continue

		if CLASS_DECL.search(line):
			records.append(
				OutlineRecord(
					display_text=to_display_text(line, settings),
					source_line=line_num,
					kind=RecordKind.CLASS,
				)
			)
			continue

		if PROCEDURE_DECL.search(line):
			signature = grab_signature(lines, idx)
			records.append(
				OutlineRecord(
					display_text=to_display_text(signature.text, settings),
					source_line=line_num,
					kind=RecordKind.FUNCTION,
				)
			)
			state.consume_through(signature.end)
			state.in_procedure = True
			continue

		if FIELD_DECL.search(line):
			display_text = to_display_text(line, settings)
			prefix = _field_indent(display_text, state, settings)
			records.append(
				OutlineRecord(
					display_text=prefix + display_text,
					source_line=line_num,
					kind=RecordKind.FIELD,
				)
			)

	return records


def try_generate(path: str, settings: Optional[OutlineSettings] = None) -> ScanOutcome:
	try:
		lines = read_all_lines(path)
		return ScanOutcome(records=scan_lines(lines, settings))
	except Exception as e:
		logger.debug("Outline scan of %s failed: %s", path, e, exc_info=True)
		return ScanOutcome(error=f"{type(e).__name__}: {e}")


def generate_records(path: str, settings: Optional[OutlineSettings] = None) -> List[OutlineRecord]:
	"""Outline one file. Never raises; any failure yields an empty list."""
	return try_generate(path, settings).records


def generate(path: str, settings: Optional[OutlineSettings] = None) -> List[str]:
	"""Outline one file as ``display|line|kind`` entries, empty on any failure."""
	return [record.to_entry() for record in generate_records(path, settings)]


def outline_repository(root: str, settings: Optional[OutlineSettings] = None) -> OutlineReport:
	files: List[FileOutline] = []
	for info in scan_repository(root):
		outcome = try_generate(info.path, settings)
		outlined = FileOutline(
			path=info.path,
			rel_path=info.rel_path,
			language=info.language,
			records=outcome.records,
			error=outcome.error,
		)
		outlined.summary = summarize_file(outlined)
		files.append(outlined)
	return OutlineReport(root=root, files=files, summary=summarize_report(root, files))
