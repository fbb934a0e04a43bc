import pytest

from chalreport.core.loader import load_record, read_yaml, try_load_record
from chalreport.utils.exceptions import RecordNotFoundError, RecordParseError

CHALLENGE = {"name": "A", "author": "X", "category": "web", "tags": ["a", "b"]}


def test_load_record(make_challenge):
    entry = make_challenge("chal_a", challenge=CHALLENGE, tested={"tested": True})

    record = load_record(entry)

    assert record.path == entry
    assert record.challenge.name == "A"
    assert record.challenge.tags == ["a", "b"]
    assert record.tested.tested is True


def test_load_record_custom_file_names(make_challenge):
    entry = make_challenge(
        "chal",
        challenge=CHALLENGE,
        tested={"tested": False},
        challenge_file="task.yml",
        tested_file="qa.yaml",
    )

    with pytest.raises(RecordNotFoundError):
        load_record(entry)

    record = load_record(entry, challenge_file="task.yml", tested_file="qa.yaml")
    assert record.tested.tested is False


def test_missing_challenge_file(make_challenge):
    entry = make_challenge("chal_b", tested={"tested": True})
    with pytest.raises(RecordNotFoundError, match="challenge.yml"):
        load_record(entry)


def test_missing_tested_file(make_challenge):
    entry = make_challenge("chal_c", challenge=CHALLENGE)
    with pytest.raises(RecordNotFoundError, match="tested.yml"):
        load_record(entry)


def test_file_entry_is_not_found(tmp_path):
    entry = tmp_path / "notes.txt"
    entry.write_text("hello")
    with pytest.raises(RecordNotFoundError):
        load_record(entry)


def test_malformed_yaml(make_challenge):
    entry = make_challenge("chal", tested={"tested": True})
    (entry / "challenge.yml").write_text("name: [unterminated\n", encoding="utf-8")
    with pytest.raises(RecordParseError, match="invalid YAML"):
        load_record(entry)


def test_empty_yaml_is_parse_error(make_challenge):
    entry = make_challenge("chal", challenge=CHALLENGE)
    (entry / "tested.yml").write_text("", encoding="utf-8")
    with pytest.raises(RecordParseError):
        load_record(entry)


def test_yaml_one_one_booleans(make_challenge):
    entry = make_challenge("chal", challenge=CHALLENGE)
    (entry / "tested.yml").write_text("tested: yes\n", encoding="utf-8")
    assert load_record(entry).tested.tested is True


def test_extended_requires_extra_fields(make_challenge):
    entry = make_challenge("chal", challenge=CHALLENGE, tested={"tested": True})

    assert load_record(entry).tested.tester is None
    with pytest.raises(RecordParseError, match="tester"):
        load_record(entry, extended=True)


def test_try_load_record_swallows_entry_errors(make_challenge, tmp_path):
    good = make_challenge("good", challenge=CHALLENGE, tested={"tested": True})
    bad = make_challenge("bad", challenge={"name": "only a name"}, tested={"tested": True})
    empty = make_challenge("empty")

    assert try_load_record(good) is not None
    assert try_load_record(bad) is None
    assert try_load_record(empty) is None
    assert try_load_record(tmp_path / "does-not-exist") is None


def test_read_yaml_directory_is_not_found(tmp_path):
    with pytest.raises(RecordNotFoundError):
        read_yaml(tmp_path)
