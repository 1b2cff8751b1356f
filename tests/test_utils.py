import os
import time

from cryptoleq.utils import cwd, file2str, isfile, make_unumber, print_char, str2ts


def test_make_unumber_default():
    assert make_unumber("", 7) == 7


def test_make_unumber_decimal():
    assert make_unumber("123", 0) == 123


def test_make_unumber_time():
    now = int(time.time())
    assert abs(make_unumber("time", 0) - now) <= 5


def test_print_char_printable():
    assert print_char("a") == "a"
    assert print_char("~") == "~"
    assert print_char(" ") == " "


def test_print_char_escaped():
    assert print_char("\n") == "\\x0a"
    assert print_char("\x7f") == "\\x7f"


def test_str2ts_with_fraction():
    assert tuple(str2ts("5.3", 143).ts()) == (5, 3)


def test_str2ts_plain():
    assert tuple(str2ts("5", 143).ts()) == (5, 0)


def test_file2str_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"hello\nworld\x00\xff")
    assert file2str(path) == "hello\nworld\x00\xff"


def test_file2str_missing(tmp_path):
    assert file2str(tmp_path / "missing") == ""


def test_isfile(tmp_path):
    path = tmp_path / "x"
    assert isfile(path) is False
    path.write_text("1")
    assert isfile(path) is True


def test_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cwd() == os.getcwd()