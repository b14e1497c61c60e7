import pytest

from tapesort.delay_settings import DelaySettings


def test_defaults_are_zero():
    settings = DelaySettings()
    assert (settings.read_delay_ms, settings.write_delay_ms, settings.move_delay_ms) == (0, 0, 0)


def test_values_are_kept():
    settings = DelaySettings(7, 11, 13)
    assert settings.read_delay_ms == 7
    assert settings.write_delay_ms == 11
    assert settings.move_delay_ms == 13


@pytest.mark.parametrize(
    "kwargs, name",
    [
        ({"read_delay_ms": -1}, "read_delay_ms"),
        ({"write_delay_ms": -1}, "write_delay_ms"),
        ({"move_delay_ms": -1}, "move_delay_ms"),
    ],
)
def test_negative_delay_is_rejected(kwargs, name):
    with pytest.raises(ValueError, match=f"{name} cannot be negative"):
        DelaySettings(**kwargs)


def test_first_negative_field_is_reported():
    with pytest.raises(ValueError, match="read_delay_ms cannot be negative"):
        DelaySettings(-1, -1, -1)


def test_settings_are_comparable():
    assert DelaySettings(1, 2, 3) == DelaySettings(1, 2, 3)
    assert DelaySettings(1, 2, 3) != DelaySettings(3, 2, 1)