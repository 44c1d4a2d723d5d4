"""Tests for the rescan interval policy."""

from syncfolder.domain.intervals import MAX_RESCAN_INTERVAL_S, clamp_rescan_interval


def test_max_is_one_year():
    assert MAX_RESCAN_INTERVAL_S == 365 * 24 * 60 * 60


def test_clamp():
    assert clamp_rescan_interval(-5) == 0
    assert clamp_rescan_interval(0) == 0
    assert clamp_rescan_interval(60) == 60
    assert clamp_rescan_interval(MAX_RESCAN_INTERVAL_S) == MAX_RESCAN_INTERVAL_S
    assert clamp_rescan_interval(MAX_RESCAN_INTERVAL_S + 1) == MAX_RESCAN_INTERVAL_S


def test_clamp_custom_maximum():
    assert clamp_rescan_interval(120, maximum=100) == 100
