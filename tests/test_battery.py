import pytest

from slimtools.components.battery import (
    battery_perc,
    battery_remaining,
    battery_state,
)


@pytest.fixture
def bat(tmp_path):
    (tmp_path / "BAT0").mkdir()
    return tmp_path


def write(root, name, content):
    (root / "BAT0" / name).write_text(content)


def test_battery_perc(bat):
    write(bat, "capacity", "87\n")
    assert battery_perc("BAT0", str(bat)) == "87"


def test_battery_perc_missing(bat):
    assert battery_perc("BAT0", str(bat)) is None


@pytest.mark.parametrize(
    "status, symbol",
    [
        ("Charging", "+"),
        ("Discharging", "-"),
        ("Full", "o"),
        ("Not charging", "o"),
        ("Unknown", "?"),
    ],
)
def test_battery_state(bat, status, symbol):
    write(bat, "status", status + "\n")
    assert battery_state("BAT0", str(bat)) == symbol


def test_battery_state_missing(bat):
    assert battery_state("BAT0", str(bat)) is None


def test_remaining_while_charging_is_empty(bat):
    write(bat, "status", "Charging\n")
    write(bat, "charge_now", "1000\n")
    assert battery_remaining("BAT0", str(bat)) == ""


def test_remaining_whole_hours(bat):
    write(bat, "status", "Discharging\n")
    write(bat, "charge_now", "3000000\n")
    write(bat, "current_now", "1000000\n")
    assert battery_remaining("BAT0", str(bat)) == "3h 0m"


def test_remaining_with_minutes(bat):
    write(bat, "status", "Discharging\n")
    write(bat, "charge_now", "1500\n")
    write(bat, "current_now", "1000\n")
    assert battery_remaining("BAT0", str(bat)) == "1h 30m"


def test_remaining_energy_and_power_fallback(bat):
    write(bat, "status", "Discharging\n")
    write(bat, "energy_now", "2000\n")
    write(bat, "power_now", "1000\n")
    assert battery_remaining("BAT0", str(bat)) == "2h 0m"


def test_remaining_zero_current(bat):
    write(bat, "status", "Discharging\n")
    write(bat, "charge_now", "2000\n")
    write(bat, "current_now", "0\n")
    assert battery_remaining("BAT0", str(bat)) is None


def test_remaining_without_charge_file(bat):
    write(bat, "status", "Discharging\n")
    write(bat, "current_now", "1000\n")
    assert battery_remaining("BAT0", str(bat)) is None


def test_remaining_without_status(bat):
    write(bat, "charge_now", "2000\n")
    assert battery_remaining("BAT0", str(bat)) is None