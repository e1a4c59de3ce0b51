from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

import uvicorn

from outliner.config import OutlineSettings, SettingsError, load_settings
from outliner.outline import generate_records, outline_repository


def settings_from_args(args: argparse.Namespace) -> OutlineSettings:
	overrides: Dict[str, Any] = {}
	if args.show_parameters:
		overrides["ShowParameters"] = True
	if args.show_function_type:
		overrides["ShowFunctionType"] = True
	if args.show_var_type:
		overrides["ShowVarType"] = True
	if args.standard_indent is not None:
		overrides["UseStandardIndent"] = True
		overrides["StandardIndentLevel"] = args.standard_indent
	return load_settings(args.settings, overrides)


def cmd_outline(args: argparse.Namespace) -> None:
	records = generate_records(args.path, settings_from_args(args))
	if args.json:
		print(json.dumps([r.model_dump(mode="json") for r in records], indent=2))
		return
	for record in records:
		print(record.to_entry())


def cmd_scan(args: argparse.Namespace) -> None:
	root = os.path.abspath(args.path)
	report = outline_repository(root, settings_from_args(args))
	print(json.dumps(report.model_dump(mode="json"), indent=2))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def add_settings_args(p: argparse.ArgumentParser) -> None:
	p.add_argument("--settings", help="JSON settings file (editor style)")
	p.add_argument("--show-parameters", action="store_true", help="Keep parameter lists")
	p.add_argument("--show-function-type", action="store_true", help="Keep function return types")
	p.add_argument("--show-var-type", action="store_true", help="Keep variable and constant types")
	p.add_argument(
		"--standard-indent",
		type=int,
		metavar="N",
		help="Indent declarations inside procedures by N spaces",
	)


def main(argv=None) -> None:
	parser = argparse.ArgumentParser(prog="vb-outline")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log scan failures")
	sub = parser.add_subparsers(dest="cmd", required=True)

	po = sub.add_parser("outline", help="Print the outline of one source file")
	po.add_argument("path", help="Path to a BASIC-family source file")
	po.add_argument("--json", action="store_true", help="Print records as JSON")
	add_settings_args(po)
	po.set_defaults(func=cmd_outline)

	pa = sub.add_parser("scan", help="Outline every source file below a directory and print JSON")
	pa.add_argument("path", help="Path to repository root")
	add_settings_args(pa)
	pa.set_defaults(func=cmd_scan)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	try:
		args.func(args)
	except SettingsError as e:
		print(f"vb-outline: {e}", file=sys.stderr)
		sys.exit(2)


if __name__ == "__main__":
	main()
