"""Tests for inventory/cli.py"""

import json

from inventory.cli import main

PAGE = """<body>
<!-- extract:buttons/primary.html name:Primary category:Buttons theme:dark -->
    <button>Go</button>
<!-- endextract -->
</body>
"""


def test_main_prints_entries_as_json(tmp_path, capsys):
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")

    assert main([str(page)]) == 0

    captured = capsys.readouterr()
    entries = json.loads(captured.out)

    assert len(entries) == 1
    assert entries[0]["name"] == "Primary"
    assert entries[0]["category"] == "Buttons"
    assert entries[0]["origin"] == str(page)
    assert entries[0]["lines"] == ["<button>Go</button>"]
    assert entries[0]["options"]["theme"] == "dark"
    assert entries[0]["options"]["wrap"] == {"before": "", "after": ""}
    assert "1 entries" in captured.err


def test_main_writes_output_file(tmp_path):
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")
    output = tmp_path / "inventory.json"

    assert main([str(page), "--output", str(output)]) == 0

    entries = json.loads(output.read_text(encoding="utf-8"))
    assert entries[0]["name"] == "Primary"


def test_main_applies_wrap_and_template_options(tmp_path, capsys):
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")

    exit_code = main([
        str(page),
        "--wrap", "<div>:</div>",
        "--template-before", "<section {{wrapData}}>",
        "--template-after", "</section>",
    ])

    assert exit_code == 0
    entry = json.loads(capsys.readouterr().out)[0]

    assert entry["options"]["wrap"] == {"before": "<div>", "after": "</div>"}
    assert entry["template"].splitlines()[0].startswith('<section data-extract="buttons/primary.html"')
    assert entry["template"].splitlines()[-1] == "</section>"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.html")]) == 1

    captured = capsys.readouterr()
    assert "File not found" in captured.err
    assert json.loads(captured.out) == []


def test_main_warns_about_documents_without_blocks(tmp_path, capsys):
    page = tmp_path / "plain.html"
    page.write_text("<p>plain</p>", encoding="utf-8")

    assert main([str(page)]) == 0
    assert "no extract blocks found" in capsys.readouterr().err


def test_main_continues_after_undecodable_file(tmp_path, capsys):
    bad = tmp_path / "latin.html"
    bad.write_bytes(b"<!-- extract:a.html -->\n<p>caf\xff</p>\n<!-- endextract -->\n")
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")

    assert main([str(bad), str(page)]) == 1

    captured = capsys.readouterr()
    entries = json.loads(captured.out)
    assert [entry["name"] for entry in entries] == ["Primary"]
    assert f"✗ {bad}" in captured.err


def test_main_continues_after_directory_input(tmp_path, capsys):
    folder = tmp_path / "pages"
    folder.mkdir()
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")

    assert main([str(folder), str(page)]) == 1

    captured = capsys.readouterr()
    assert len(json.loads(captured.out)) == 1
    assert f"✗ {folder}" in captured.err
