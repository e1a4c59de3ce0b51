from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from outliner.config import OutlineSettings
from outliner.model import OutlineRecord, OutlineReport
from outliner.outline import generate_records, outline_repository


app = FastAPI(title="VB Outline")


class OutlineRequest(BaseModel):
	path: str
	settings: OutlineSettings = OutlineSettings()


class OutlineResponse(BaseModel):
	path: str
	entries: List[str]
	records: List[OutlineRecord]


class ScanRequest(BaseModel):
	root_path: str
	settings: OutlineSettings = OutlineSettings()


@app.post("/outline", response_model=OutlineResponse)
def outline(req: OutlineRequest) -> OutlineResponse:
	# Unreadable files give an empty outline, never an error
	records = generate_records(req.path, req.settings)
	return OutlineResponse(
		path=req.path,
		entries=[r.to_entry() for r in records],
		records=records,
	)


@app.post("/scan", response_model=OutlineReport)
def scan(req: ScanRequest) -> OutlineReport:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
	return outline_repository(root, req.settings)


def create_app() -> FastAPI:
	return app
