import datetime as dt
import os

import pytest

from chesscore import misc


def test_version_info_with_date_and_sha():
    text = misc.engine_version_info(dt.date(2024, 3, 9), "abcdef12")
    assert text.endswith("dev-20240309-abcdef12")


def test_version_info_without_sha_uses_nogit():
    text = misc.engine_version_info("20200101", None)
    assert text.endswith("-20200101-nogit")


def test_version_info_default_date_is_today():
    today = dt.date.today().strftime("%Y%m%d")
    assert f"-{today}-" in misc.engine_version_info(git_sha="x")


def test_engine_info_variants():
    plain = misc.engine_info()
    uci = misc.engine_info(True)
    assert " by " in plain
    assert "\nid author " in uci
    assert plain.split(" by ", 1)[1] == uci.split("\nid author ", 1)[1]


def test_split_basic():
    assert misc.split("a,b,c", ",") == ["a", "b", "c"]


def test_split_empty_string_gives_nothing():
    assert misc.split("", ",") == []


def test_split_keeps_empty_fields():
    assert misc.split(",a,,b,", ",") == ["", "a", "", "b", ""]


def test_split_multichar_delimiter_roundtrip():
    s = "one::two::three"
    parts = misc.split(s, "::")
    assert parts == ["one", "two", "three"]
    assert "::".join(parts) == s


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        misc.split("abc", "")


def test_remove_whitespace():
    assert misc.remove_whitespace(" a\tb\nc\r d\v\f") == "abcd"


def test_is_whitespace():
    assert misc.is_whitespace(" \t\n") is True
    assert misc.is_whitespace("") is True
    assert misc.is_whitespace(" x ") is False


def test_str_to_size_t_plain_and_prefixed():
    assert misc.str_to_size_t("1024") == 1024
    assert misc.str_to_size_t("  +77abc") == 77


def test_str_to_size_t_max_value():
    text = str((1 << 64) - 1)
    assert misc.str_to_size_t(text) == (1 << 64) - 1


def test_str_to_size_t_overflow():
    with pytest.raises(OverflowError):
        misc.str_to_size_t(str(1 << 64))


def test_str_to_size_t_no_digits():
    with pytest.raises(ValueError):
        misc.str_to_size_t("abc")


def test_str_to_size_t_negative_wraps():
    assert misc.str_to_size_t("-1") == (1 << 64) - 1


def test_read_file_roundtrip(tmp_path):
    data = b"\x00binary\r\ndata"
    path = tmp_path / "f.bin"
    path.write_bytes(data)
    assert misc.read_file_to_string(path) == data


def test_read_missing_file_returns_none(tmp_path):
    assert misc.read_file_to_string(tmp_path / "missing") is None


def test_working_directory_matches_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = misc.get_working_directory()
    assert os.path.realpath(result) == os.path.realpath(str(tmp_path))


def _sep():
    return "\\" if os.name == "nt" else "/"


def test_binary_directory_bare_name(monkeypatch):
    monkeypatch.setattr(os, "getcwd", lambda: "WORKDIR")
    assert misc.get_binary_directory("engine") == "WORKDIR" + _sep()


def test_binary_directory_relative_dot(monkeypatch):
    monkeypatch.setattr(os, "getcwd", lambda: "WORKDIR")
    sep = _sep()
    argv0 = "." + sep + "bin" + sep + "engine"
    assert misc.get_binary_directory(argv0) == "WORKDIR" + sep + "bin" + sep


def test_binary_directory_absolute(monkeypatch):
    monkeypatch.setattr(os, "getcwd", lambda: "WORKDIR")
    assert misc.get_binary_directory("/opt/tools/engine") == "/opt/tools/"


def test_move_to_front_moves_first_match():
    items = [1, 2, 3, 4, 5]
    misc.move_to_front(items, lambda x: x % 2 == 0)
    assert items == [2, 1, 3, 4, 5]


def test_move_to_front_no_match_keeps_order():
    items = ["a", "b", "c"]
    misc.move_to_front(items, lambda x: x == "z")
    assert items == ["a", "b", "c"]


def test_move_to_front_preserves_elements():
    items = list(range(10))
    misc.move_to_front(items, lambda x: x == 7)
    assert items[0] == 7
    assert sorted(items) == list(range(10))
    assert [x for x in items if x != 7] == [x for x in range(10) if x != 7]