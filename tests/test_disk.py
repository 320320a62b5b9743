import os
import re
from types import SimpleNamespace

import pytest

from slimtools.components import disk
from slimtools.util import fmt_human


@pytest.fixture
def fake_fs(monkeypatch):
    stats = SimpleNamespace(f_frsize=1024, f_blocks=100, f_bavail=25, f_bfree=40)
    monkeypatch.setattr(os, "statvfs", lambda path: stats)
    return stats


def test_disk_perc(fake_fs):
    assert disk.disk_perc("/") == "75"


def test_disk_free(fake_fs):
    assert disk.disk_free("/") == "25.0 Ki"


def test_disk_used(fake_fs):
    assert disk.disk_used("/") == "60.0 Ki"


def test_disk_total(fake_fs):
    assert disk.disk_total("/") == fmt_human(100 * 1024, 1024)


def test_disk_perc_no_blocks(fake_fs):
    fake_fs.f_blocks = 0
    assert disk.disk_perc("/") is None


def test_real_filesystem(tmp_path):
    assert re.fullmatch(r"\d+\.\d \w*", disk.disk_total(str(tmp_path)))
    assert 0 <= int(disk.disk_perc(str(tmp_path))) <= 100


@pytest.mark.parametrize(
    "func", [disk.disk_free, disk.disk_perc, disk.disk_total, disk.disk_used]
)
def test_missing_path(func, tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert func(missing) is None
    assert missing in capsys.readouterr().err