"""Outline extraction for BASIC-family source files.

Modules:
- fs_scan.py: Line reading, language detection and directory walking.
- signature.py: Joining procedure signatures continued over several lines.
- display.py: Normalizing a declaration into one outline line.
- outline.py: The single-pass scanner producing outline records.
- config.py: Display settings and their provider.
- model.py: Data structures for records and reports.
- summarize.py: Deterministic textual summaries of outlines.
"""


__all__ = [
	"fs_scan",
	"signature",
	"display",
	"outline",
	"config",
	"model",
	"summarize",
]
