#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Тесты номеров страниц
"""

import pytest

from channel import Channel, ChannelRange, PageDirection, MIN_PAGE, MAX_PAGE, TEXT_TV_RANGE


@pytest.mark.parametrize("raw", [-1000, 0, 99, 100, 101, 377, 800, 801, 802, 10_000])
def test_create_always_in_range(raw):
    channel = Channel.create(raw)
    assert MIN_PAGE <= channel.value <= MAX_PAGE
    if MIN_PAGE <= raw <= MAX_PAGE:
        assert channel.value == raw


def test_clamps_to_nearest_bound():
    assert Channel.create(802) == Channel.create(MAX_PAGE)
    assert Channel(5) == Channel(MIN_PAGE)


def test_equality_and_ordering_by_value():
    assert Channel(200) == Channel.create(200)
    assert Channel(150) < Channel(151)
    assert max(Channel(300), Channel(120)) == Channel(300)
    assert len({Channel(100), Channel(100), Channel(99)}) == 1


def test_step_stays_in_range():
    assert Channel(103).step(PageDirection.NEXT) == Channel(104)
    assert Channel(103).step(PageDirection.PREV) == Channel(102)
    assert Channel(MAX_PAGE).step(PageDirection.NEXT) == Channel(MAX_PAGE)
    assert Channel(MIN_PAGE).step(PageDirection.PREV) == Channel(MIN_PAGE)


def test_string_and_int_conversion():
    channel = Channel(377)
    assert str(channel) == "377"
    assert int(channel) == 377
    assert f"https://www.svt.se/text-tv/{channel}" == "https://www.svt.se/text-tv/377"


def test_first_and_last_flags():
    assert Channel(MIN_PAGE).is_first
    assert Channel(MAX_PAGE).is_last
    assert not Channel(400).is_first and not Channel(400).is_last


def test_channel_range():
    small = ChannelRange(10, 20)
    assert small.clamp(5) == 10
    assert small.clamp(25) == 20
    assert 15 in small
    assert 21 not in small
    assert (TEXT_TV_RANGE.minimum, TEXT_TV_RANGE.maximum) == (100, 801)


def test_channel_is_immutable():
    channel = Channel(100)
    with pytest.raises(AttributeError):
        channel.value = 200
