import json
from pathlib import Path

import pytest

from apps.cli.run import main


def _inputs(tmp_path: Path):
    d = tmp_path / "words.txt"
    pz = tmp_path / "puzzle.txt"
    d.write_text("crisp\nmango\nstack\nmelon\ntulip\n", encoding="utf-8")
    pz.write_text("melon\n-----\n", encoding="utf-8")
    return str(d), str(pz)


def test_cli_prints_paths(tmp_path: Path, capsys):
    d, pz = _inputs(tmp_path)
    assert main([d, pz]) == 0
    assert capsys.readouterr().out == "melon crisp\nmelon stack\n"


def test_cli_missing_dictionary_fails(tmp_path: Path, capsys):
    _, pz = _inputs(tmp_path)
    assert main([str(tmp_path / "nope.txt"), pz]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nope.txt" in captured.err


def test_cli_print_dictionary(tmp_path: Path, capsys):
    d, pz = _inputs(tmp_path)
    assert main([d, pz, "--print-dictionary"]) == 0
    assert capsys.readouterr().out.splitlines() == ["crisp", "mango", "stack", "melon", "tulip"]


def test_cli_check_and_manifest(tmp_path: Path, capsys):
    d, pz = _inputs(tmp_path)
    manifest = tmp_path / "out" / "run.json"
    assert main([d, pz, "--check", "--manifest", str(manifest)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "melon crisp\nmelon stack\n"
    assert "solution=melon" in captured.err

    data = json.loads(manifest.read_text(encoding="utf-8"))
    assert data["result"]["paths"] == 2
    assert data["result"]["solution"] == "melon"
    assert data["inputs"]["passed"] is True


def test_cli_undecodable_dictionary_names_that_file(tmp_path: Path, capsys):
    d, pz = _inputs(tmp_path)
    Path(d).write_bytes(b"caf\xe9s\ncrisp\n")
    for extra in ([], ["--check"]):
        assert main([d, pz] + extra) == 1
        err = capsys.readouterr().err
        assert d in err
        assert pz not in err


def test_cli_print_dictionary_without_puzzle(tmp_path: Path, capsys):
    d, _ = _inputs(tmp_path)
    assert main([d, "--print-dictionary"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "crisp"


def test_cli_solving_requires_puzzle(tmp_path: Path, capsys):
    d, _ = _inputs(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main([d])
    assert exc.value.code == 2
    assert "puzzle" in capsys.readouterr().err
