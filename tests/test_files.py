from slimtools.components.files import cat, entropy, num_files, run_command, temp


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("abc\ndef\n")
    assert cat(str(path)) == "abc"


def test_cat_empty_file_is_none(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    assert cat(str(path)) is None


def test_cat_blank_first_line_is_none(tmp_path):
    path = tmp_path / "f"
    path.write_text("\nmore\n")
    assert cat(str(path)) is None


def test_cat_missing_warns(tmp_path, capsys):
    missing = str(tmp_path / "nothing")
    assert cat(missing) is None
    assert missing in capsys.readouterr().err


def test_num_files_counts_entries(tmp_path):
    for name in ("a", "b", ".hidden"):
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert num_files(str(tmp_path)) == "4"


def test_num_files_missing_dir(tmp_path):
    assert num_files(str(tmp_path / "nope")) is None


def test_run_command_first_line():
    assert run_command("printf 'one\\ntwo\\n'") == "one"


def test_run_command_no_output():
    assert run_command("true") is None


def test_temp_divides_millidegrees(tmp_path):
    path = tmp_path / "temp"
    path.write_text("45000\n")
    assert temp(str(path)) == "45"


def test_temp_garbage(tmp_path):
    path = tmp_path / "temp"
    path.write_text("hot\n")
    assert temp(str(path)) is None


def test_temp_missing(tmp_path):
    assert temp(str(tmp_path / "missing")) is None


def test_entropy_reads_value(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert entropy(None, str(path)) == "256"


def test_entropy_missing(tmp_path):
    assert entropy(None, str(tmp_path / "missing")) is None