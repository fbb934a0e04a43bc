import pytest

from chalreport.cli.main import create_parser, main


def test_parser_defaults():
    args = create_parser().parse_args([])
    assert args.challenge_file == "challenge.yml"
    assert args.tested_file == "tested.yml"
    assert args.dir_path == "./"
    assert args.output_path == "./"
    assert args.variant == "minimal"
    assert args.tested_style == "word"
    assert args.preview is False
    assert args.strict is False


def test_parser_normalizes_log_level():
    assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_main_writes_report(chal_tree):
    rc = main(["--dir-path", str(chal_tree), "--output-path", str(chal_tree)])

    assert rc == 0
    lines = (chal_tree / "README.md").read_text(encoding="utf-8").splitlines()
    assert lines[2:] == ["| true | A | X | web | a, b |"]


def test_main_extended_glyph(tmp_path, make_challenge):
    make_challenge(
        "chal",
        challenge={"name": "A", "author": "X", "category": "web", "tags": ["web", "easy"]},
        tested={"tested": False, "tester": "bob", "solver": "alice", "tested_url": "http://x"},
    )

    main([
        "--dir-path", str(tmp_path),
        "--output-path", str(tmp_path),
        "--variant", "extended",
        "--tested-style", "glyph",
    ])

    text = (tmp_path / "TESTED.md").read_text(encoding="utf-8")
    assert "| ❌ | A | X | web | web, easy | bob | http://x |" in text
    assert "alice" not in text


def test_main_reports_errors_and_exits_zero(chal_tree, caplog):
    missing = chal_tree / "missing"

    rc = main(["--dir-path", str(chal_tree), "--output-path", str(missing)])

    assert rc == 0
    assert "Error writing to README.md" in caplog.text
    assert not missing.exists()


def test_main_strict_exits_nonzero(chal_tree, caplog):
    with pytest.raises(SystemExit) as exc:
        main([
            "--dir-path", str(chal_tree),
            "--output-path", str(chal_tree / "missing"),
            "--strict",
        ])
    assert exc.value.code == 1
    assert "Error writing to README.md" in caplog.text


def test_main_preview_prints_table(chal_tree, capsys):
    rc = main(["--dir-path", str(chal_tree), "--preview"])

    assert rc == 0
    out = capsys.readouterr().out
    assert "category" in out
    assert "a, b" in out
    assert not (chal_tree / "README.md").exists()


def test_main_rejects_unknown_variant(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--variant", "full"])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "chalreport" in capsys.readouterr().out


def test_main_invalid_options_use_neutral_prefix(chal_tree, caplog):
    rc = main(["--dir-path", str(chal_tree), "--output-path", str(chal_tree), "--max-depth", "-1"])

    assert rc == 0
    assert "Invalid options: max_depth must be >= 0" in caplog.text
    assert "Error writing" not in caplog.text


def test_main_missing_dir_writes_header_only(tmp_path):
    rc = main(["--dir-path", str(tmp_path / "nope"), "--output-path", str(tmp_path)])

    assert rc == 0
    assert len((tmp_path / "README.md").read_text(encoding="utf-8").splitlines()) == 2


def test_main_preview_json(chal_tree, capsys):
    main(["--dir-path", str(chal_tree), "--preview", "--tablefmt", "json"])

    assert '"name": "A"' in capsys.readouterr().out
