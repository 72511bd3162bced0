#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Номера страниц (каналов) SVT Text TV
"""

from dataclasses import dataclass
from enum import Enum


MIN_PAGE = 100
MAX_PAGE = 801
DEFAULT_PAGE = MIN_PAGE


@dataclass(frozen=True)
class ChannelRange:
    """Допустимый диапазон номеров страниц"""
    minimum: int = MIN_PAGE
    maximum: int = MAX_PAGE

    def clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


TEXT_TV_RANGE = ChannelRange()


class PageDirection(Enum):
    """Направление перехода"""
    NEXT = "next"
    PREV = "prev"

    @property
    def offset(self) -> int:
        return 1 if self is PageDirection.NEXT else -1


@dataclass(frozen=True, order=True)
class Channel:
    """Номер страницы Text TV, всегда в пределах TEXT_TV_RANGE.

    Значение вне диапазона не отклоняется, а прижимается к ближайшей границе:
    Channel(802) == Channel(801), Channel(5) == Channel(100).
    """
    value: int

    def __post_init__(self):
        object.__setattr__(self, 'value', TEXT_TV_RANGE.clamp(int(self.value)))

    @classmethod
    def create(cls, raw_value: int) -> "Channel":
        return cls(raw_value)

    def step(self, direction: PageDirection) -> "Channel":
        """Арифметический сосед (±1) без учета подсказок страницы"""
        return Channel(self.value + direction.offset)

    @property
    def is_first(self) -> bool:
        return self.value == TEXT_TV_RANGE.minimum

    @property
    def is_last(self) -> bool:
        return self.value == TEXT_TV_RANGE.maximum

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
