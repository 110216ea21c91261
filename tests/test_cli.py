from pathlib import Path

import pytest

from rtfs._config import caps_enabled, output_suffix, styles_path
from rtfs.cli import main
from rtfs.commands.batch import list_rtf_files, output_path_for

GOOD_RTF = r"{\rtf1{\fonttbl{\f0 Arial;}}{\listtext 1.\tab}Hello World\par Plain text\par}"
BROKEN_RTF = r"{\rtf1{\listtext 1.\tab}Hello World\par"


def _exit_code(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


# ---------------------------------------------------------------------------
# simplify
# ---------------------------------------------------------------------------

def test_simplify_writes_output(tmp_path, styles_file):
    src = tmp_path / "word.rtf"
    dst = tmp_path / "out.rtf"
    src.write_text(GOOD_RTF, encoding="utf-8")

    main(["simplify", "--in", str(src), "--out", str(dst), "--styles", str(styles_file)])

    lines = dst.read_text(encoding="utf-8").split("\n")
    assert lines[-3:] == [r"\pard\s1 1.\tab Hello World\par", r"\pard\s0 Plain text\par", "}"]


def test_simplify_caps_from_env(tmp_path, styles_file, monkeypatch):
    monkeypatch.setenv("RTFS_CAPS", "yes")
    src = tmp_path / "word.rtf"
    dst = tmp_path / "out.rtf"
    src.write_text(GOOD_RTF, encoding="utf-8")

    main(["simplify", "--in", str(src), "--out", str(dst), "--styles", str(styles_file), "--show"])

    assert "HELLO WORLD" in dst.read_text(encoding="utf-8")


def test_simplify_missing_styles_exits(tmp_path):
    src = tmp_path / "word.rtf"
    src.write_text(GOOD_RTF, encoding="utf-8")
    code = _exit_code([
        "simplify", "--in", str(src), "--out", str(tmp_path / "out.rtf"),
        "--styles", str(tmp_path / "nope.tsv"),
    ])
    assert code == 1


def test_simplify_incomplete_styles_exits(tmp_path):
    bad = tmp_path / "styles.tsv"
    bad.write_text("header_line\t-\t{\\rtf1\n", encoding="utf-8")
    src = tmp_path / "word.rtf"
    src.write_text(GOOD_RTF, encoding="utf-8")
    code = _exit_code([
        "simplify", "--in", str(src), "--out", str(tmp_path / "out.rtf"), "--styles", str(bad),
    ])
    assert code == 1


def test_simplify_unbalanced_input_writes_nothing(tmp_path, styles_file):
    src = tmp_path / "word.rtf"
    dst = tmp_path / "out.rtf"
    src.write_text(BROKEN_RTF, encoding="utf-8")
    code = _exit_code([
        "simplify", "--in", str(src), "--out", str(dst), "--styles", str(styles_file),
    ])
    assert code == 1
    assert not dst.exists()


def test_version():
    assert _exit_code(["--version"]) == 0


# ---------------------------------------------------------------------------
# batch
# ---------------------------------------------------------------------------

def test_list_rtf_files(tmp_path):
    for name in ("b.RTF", "a.rtf", "a_sanitized.rtf", "notes.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "sub.rtf").mkdir()

    names = [p.name for p in list_rtf_files(tmp_path, "_sanitized")]
    assert names == ["a.rtf", "b.RTF"]


def test_output_path_for():
    assert output_path_for(Path("/d/word.rtf"), "_sanitized") == Path("/d/word_sanitized.rtf")


def test_batch_continues_after_failure(tmp_path, styles_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "good.rtf").write_text(GOOD_RTF, encoding="utf-8")
    (docs / "broken.rtf").write_text(BROKEN_RTF, encoding="utf-8")

    code = _exit_code(["batch", "--dir", str(docs), "--styles", str(styles_file)])

    assert code == 1
    assert (docs / "good_sanitized.rtf").exists()
    assert not (docs / "broken_sanitized.rtf").exists()


def test_batch_is_rerunnable(tmp_path, styles_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "good.rtf").write_text(GOOD_RTF, encoding="utf-8")

    main(["batch", "--dir", str(docs), "--styles", str(styles_file)])
    first = (docs / "good_sanitized.rtf").read_text(encoding="utf-8")
    main(["batch", "--dir", str(docs), "--styles", str(styles_file)])

    assert sorted(p.name for p in docs.iterdir()) == ["good.rtf", "good_sanitized.rtf"]
    assert (docs / "good_sanitized.rtf").read_text(encoding="utf-8") == first


def test_batch_custom_suffix(tmp_path, styles_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "good.rtf").write_text(GOOD_RTF, encoding="utf-8")

    main(["batch", "--dir", str(docs), "--styles", str(styles_file), "--suffix", "_clean"])

    assert (docs / "good_clean.rtf").exists()


def test_batch_missing_dir_exits(tmp_path, styles_file):
    assert _exit_code(["batch", "--dir", str(tmp_path / "nope"), "--styles", str(styles_file)]) == 1


def test_batch_empty_dir(tmp_path, styles_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    main(["batch", "--dir", str(docs), "--styles", str(styles_file)])
    assert list(docs.iterdir()) == []


# ---------------------------------------------------------------------------
# styles / konfiguracja
# ---------------------------------------------------------------------------

def test_styles_command(styles_file):
    main(["styles", "--styles", str(styles_file), "--header"])


def test_config_defaults():
    assert styles_path() == Path("styles.tsv")
    assert output_suffix() == "_sanitized"
    assert caps_enabled() is False


def test_config_env_and_cli_precedence(monkeypatch):
    monkeypatch.setenv("RTFS_STYLES", "/etc/rtfs/styles.tsv")
    monkeypatch.setenv("RTFS_SUFFIX", "_x")
    assert styles_path() == Path("/etc/rtfs/styles.tsv")
    assert styles_path("local.tsv") == Path("local.tsv")
    assert output_suffix() == "_x"
    assert output_suffix("_y") == "_y"
