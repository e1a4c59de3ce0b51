from outliner.fs_scan import detect_language, read_all_lines, scan_repository
from outliner.outline import outline_repository


def test_detect_language():
	assert detect_language("Form1.vb") == "vbnet"
	assert detect_language("MODULE.BAS") == "vb6"
	assert detect_language("script.vbs") == "vbscript"
	assert detect_language("readme.md") == "unknown"


def test_read_all_lines_splits_both_line_endings(tmp_path):
	p = tmp_path / "m.bas"
	p.write_bytes(b"a\r\nb\nc")
	assert read_all_lines(str(p)) == ["a", "b", "c"]


def test_scan_repository_skips_build_dirs(tmp_path):
	(tmp_path / "src").mkdir()
	(tmp_path / "obj").mkdir()
	(tmp_path / "src" / "Main.vb").write_text("Module Main\nEnd Module\n")
	(tmp_path / "obj" / "Gen.vb").write_text("Class Gen\n")
	(tmp_path / "notes.txt").write_text("Sub Nothing()\n")
	files = scan_repository(str(tmp_path))
	assert [f.rel_path for f in files] == [str((tmp_path / "src" / "Main.vb").relative_to(tmp_path))]
	assert files[0].language == "vbnet"


def test_outline_repository(tmp_path):
	(tmp_path / "A.vb").write_text("Public Class A\n    Sub Run()\n    End Sub\nEnd Class\n")
	(tmp_path / "B.bas").write_bytes(b"\xff\xfe\n")
	report = outline_repository(str(tmp_path))
	assert [f.rel_path for f in report.files] == ["A.vb", "B.bas"]
	a, b = report.files
	assert [r.to_entry() for r in a.records] == ["Public Class A|1|class", "    Sub Run()|2|function"]
	assert a.summary == "File A.vb: 1 classes, 1 procedures, 0 fields"
	assert b.records == [] and b.error
	assert "2 source files (1 unreadable)" in report.summary
