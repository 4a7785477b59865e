import math

import pytest

from barblocks.net import NetStats, compute_speeds, push_to_hist


def test_push_to_hist():
    hist = [0, 0, 0, 0]
    assert hist == [0, 0, 0, 0]
    push_to_hist(hist, 1)
    assert hist == [0, 0, 0, 1]
    push_to_hist(hist, 3)
    assert hist == [0, 0, 1, 3]
    push_to_hist(hist, 0)
    assert hist == [0, 1, 3, 0]
    push_to_hist(hist, 10)
    assert hist == [1, 3, 0, 10]
    push_to_hist(hist, 2)
    assert hist == [3, 0, 10, 2]


def test_push_to_hist_keeps_length():
    hist = [0.0] * 8
    for value in range(20):
        push_to_hist(hist, float(value))
        assert len(hist) == 8
        assert hist[-1] == float(value)


def test_stats_subtraction():
    diff = NetStats(rx_bytes=5000, tx_bytes=700) - NetStats(rx_bytes=1000, tx_bytes=200)
    assert diff == NetStats(rx_bytes=4000, tx_bytes=500)


def test_stats_going_backwards_is_an_error():
    with pytest.raises(ValueError):
        NetStats(rx_bytes=10, tx_bytes=10) - NetStats(rx_bytes=20, tx_bytes=0)


def test_speeds_without_previous_sample():
    assert compute_speeds(None, NetStats(100, 100), 2.0) == (0.0, 0.0)


def test_speeds_without_new_sample():
    assert compute_speeds(NetStats(100, 100), None, 2.0) == (0.0, 0.0)


def test_speeds_with_two_samples():
    down, up = compute_speeds(NetStats(1000, 400), NetStats(3000, 1400), 2.0)
    assert down == pytest.approx(1000.0)
    assert up == pytest.approx(500.0)


def test_speeds_scale_inversely_with_elapsed():
    old, new = NetStats(0, 0), NetStats(4096, 2048)
    fast = compute_speeds(old, new, 1.0)
    slow = compute_speeds(old, new, 4.0)
    assert fast[0] == pytest.approx(slow[0] * 4)
    assert fast[1] == pytest.approx(slow[1] * 4)


def test_speeds_with_zero_elapsed():
    down, up = compute_speeds(NetStats(0, 0), NetStats(10, 0), 0.0)
    assert down == math.inf
    assert str(up) == "nan"