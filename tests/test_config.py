import json
import os

import pytest

from usha.config import default_config, load_config, load_ignore_list
from usha.core.errors import InvalidArgument, PathError
from usha.utils import atomic_write_json, canonical_directory, parse_int


def test_missing_config_is_created_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "config.json"

    config = load_config(path)

    assert config == default_config()
    assert json.loads(path.read_text()) == default_config()
    assert path.stat().st_mode & 0o777 == 0o600


def test_user_keys_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"limit": 20, "ignore": ["vim"]}))

    config = load_config(path)

    assert config["limit"] == 20
    assert config["ignore"] == ["vim"]
    assert config["retention_days"] == 60


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", ""])
def test_unusable_config_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)

    assert load_config(path) == default_config()


def test_ignore_list_skips_blanks_and_comments(tmp_path):
    path = tmp_path / "ignore"
    path.write_text("# never record these\nvim\n\n  htop  \n#ls\n")

    assert load_ignore_list(path) == ["vim", "htop"]


def test_missing_ignore_list_is_empty(tmp_path):
    assert load_ignore_list(tmp_path / "absent") == []


def test_atomic_write_preserves_existing_mode(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{}")
    os.chmod(path, 0o640)

    atomic_write_json(path, {"a": 1})

    assert json.loads(path.read_text()) == {"a": 1}
    assert path.stat().st_mode & 0o777 == 0o640
    assert not path.with_suffix(".json.tmp").exists()


def test_canonical_directory_resolves(tmp_path):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert canonical_directory(str(nested / "..")) == str((tmp_path / "a").resolve())


def test_canonical_directory_rejects_missing_and_files(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")

    with pytest.raises(PathError):
        canonical_directory(str(tmp_path / "missing"))
    with pytest.raises(PathError):
        canonical_directory(str(target))


def test_parse_int_accepts_whitespace():
    assert parse_int(" 12 ", "-n", minimum=1) == 12


@pytest.mark.parametrize("value", ["abc", "1.5", "", None, True])
def test_parse_int_rejects_non_numbers(value):
    with pytest.raises(InvalidArgument) as excinfo:
        parse_int(value, "-n", minimum=1, not_a_number="bad number")
    assert excinfo.value.argument == "-n"
    assert str(excinfo.value) == "bad number"


@pytest.mark.parametrize("value", ["0", "11"])
def test_parse_int_rejects_out_of_range(value):
    with pytest.raises(InvalidArgument) as excinfo:
        parse_int(value, "DAYS", minimum=1, maximum=10)
    assert str(excinfo.value) == "Value supplied for DAYS out of bounds."


def test_undecodable_ignore_list_is_empty(tmp_path):
    path = tmp_path / "ignore"
    path.write_bytes(b"\xff\xfe vim\n")

    assert load_ignore_list(path) == []


def test_ignore_list_that_is_a_directory_is_empty(tmp_path):
    assert load_ignore_list(tmp_path) == []
