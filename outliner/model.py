from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class RecordKind(str, Enum):
	CLASS = "class"
	FUNCTION = "function"
	FIELD = "field"


class LogicalSignature(BaseModel):
	text: str
	end: int


class OutlineRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	display_text: str
	source_line: int
	kind: RecordKind

	def to_entry(self) -> str:
		return f"{self.display_text}|{self.source_line}|{self.kind.value}"

	@classmethod
	def from_entry(cls, entry: str) -> "OutlineRecord":
		# Display text may itself contain pipes, the last two fields never do
		display_text, source_line, kind = entry.rsplit("|", 2)
		return cls(display_text=display_text, source_line=int(source_line), kind=RecordKind(kind))


class ScanState(BaseModel):
	skip_cursor: int = -1
	in_procedure: bool = False

	def consume_through(self, index: int) -> None:
		if index > self.skip_cursor:
			self.skip_cursor = index


class ScanOutcome(BaseModel):
	records: List[OutlineRecord] = []
	error: Optional[str] = None

	@property
	def ok(self) -> bool:
		return self.error is None


class FileInfo(BaseModel):
	path: str
	rel_path: str
	language: str


class FileOutline(BaseModel):
	path: str
	rel_path: str
	language: str
	records: List[OutlineRecord] = []
	error: Optional[str] = None
	summary: str = ""


class OutlineReport(BaseModel):
	root: str
	files: List[FileOutline] = []
	summary: str = ""
