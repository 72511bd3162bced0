#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Тесты страницы
"""

import dataclasses

import pytest
from PIL import Image

from channel import Channel, PageDirection
from page import Page


def make_page(number, prev=None, next_=None):
    return Page(
        channel=Channel(number),
        image=Image.new("RGB", (2, 2)),
        prev=Channel(prev if prev is not None else number - 1),
        next=Channel(next_ if next_ is not None else number + 1),
    )


def test_channel_round_trip():
    assert make_page(377).channel.value == 377


def test_neighbour():
    page = make_page(200, prev=150, next_=250)
    assert page.neighbour(PageDirection.PREV) == Channel(150)
    assert page.neighbour(PageDirection.NEXT) == Channel(250)


def test_equality_by_channel():
    assert make_page(300) == make_page(300, prev=100, next_=801)
    assert make_page(300) != make_page(301)


def test_page_is_immutable():
    page = make_page(100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        page.next = Channel(500)
