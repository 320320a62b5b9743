from slimtools.components.cpu import CpuUsage, cpu_freq, cpu_perc


def write_stat(path, values):
    path.write_text("cpu  " + " ".join(str(v) for v in values) + " 0 0 0\ncpu0 1 2 3\n")


def test_first_sample_is_none(tmp_path):
    stat = tmp_path / "stat"
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    assert CpuUsage(str(stat)).sample() is None


def test_usage_between_samples(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    write_stat(stat, [200, 0, 200, 1600, 0, 0, 0])
    assert usage.sample() == "20"


def test_usage_within_bounds(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [10, 5, 7, 100, 3, 1, 2])
    usage.sample()
    write_stat(stat, [50, 9, 20, 180, 9, 4, 3])
    assert 0 <= int(usage.sample()) <= 100


def test_unchanged_counters_give_none(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    assert usage.sample() is None


def test_malformed_stat(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 1 2\n")
    assert CpuUsage(str(stat)).sample() is None


def test_missing_stat(tmp_path):
    assert CpuUsage(str(tmp_path / "missing")).sample() is None


def test_cpu_freq(tmp_path):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("1800000\n")
    assert cpu_freq(None, str(freq)) == "1.8 G"


def test_cpu_freq_missing(tmp_path):
    assert cpu_freq(None, str(tmp_path / "missing")) is None


def test_cpu_perc_range():
    cpu_perc()
    result = cpu_perc()
    assert result is None or 0 <= int(result) <= 100