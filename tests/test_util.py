import pytest

from slimtools.util import die, fmt_human, read_first_line, warn


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_binary_prefix():
    assert fmt_human(1536, 1024) == "1.5 Ki"


def test_fmt_human_below_base_keeps_no_prefix():
    assert fmt_human(999, 1000) == "999.0 "


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 12, 5000, 10**7, 3 * 10**12, 2**60])
def test_fmt_human_scaled_value_below_base(num, base):
    value, _, prefix = fmt_human(num, base).partition(" ")
    assert float(value) < base
    if base == 1024:
        assert prefix in ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")
    else:
        assert prefix in ("", "k", "M", "G", "T", "P", "E", "Z", "Y")


def test_fmt_human_huge_number_uses_last_prefix():
    assert fmt_human(10**40, 1000).endswith(" Y")


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_warn_writes_to_stderr(capsys):
    warn("something odd")
    assert capsys.readouterr().err == "something odd\n"


def test_die_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        die("fatal problem")
    assert info.value.code == 1
    assert "fatal problem" in capsys.readouterr().err


def test_read_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("hello\nworld\n")
    assert read_first_line(str(path)) == "hello"


def test_read_first_line_without_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("single")
    assert read_first_line(str(path)) == "single"


def test_read_first_line_empty(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    assert read_first_line(str(path)) == ""


def test_read_first_line_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_first_line(str(tmp_path / "missing"))