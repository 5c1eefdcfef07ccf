import pytest

from wsikit.platform_set import WsiPlatform, WsiPlatformSet


def test_new_set_is_empty():
    s = WsiPlatformSet()
    assert s.empty() is True
    assert all(p not in s for p in WsiPlatform)


def test_add_and_contains():
    s = WsiPlatformSet()
    s.add(WsiPlatform.XCB)
    s.add(WsiPlatform.HEADLESS)
    assert s.empty() is False
    assert WsiPlatform.XCB in s
    assert WsiPlatform.HEADLESS in s
    assert WsiPlatform.WAYLAND not in s


def test_add_is_idempotent():
    s = WsiPlatformSet()
    s.add(WsiPlatform.DISPLAY)
    s.add(WsiPlatform.DISPLAY)
    members = [p for p in WsiPlatform if p in s]
    assert members == [WsiPlatform.DISPLAY]


def test_highest_bit_supported():
    s = WsiPlatformSet()
    s.add(63)
    assert 63 in s
    assert 62 not in s


@pytest.mark.parametrize("value", [-1, 64])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        WsiPlatformSet().add(value)


def test_non_platform_not_contained():
    s = WsiPlatformSet()
    s.add(WsiPlatform.MIR)
    assert "MIR" not in s