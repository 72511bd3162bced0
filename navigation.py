#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Определение соседних страниц по навигационным стрелкам SVT Text TV
"""

import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from channel import Channel, PageDirection


NEXT_PAGE_LABEL = "Nästa sida"
PREV_PAGE_LABEL = "Förra sidan"

logger = logging.getLogger(__name__)


class NavigationResolver:
    """Вычисляет следующую/предыдущую страницу.

    Сначала ищется стрелка навигации с атрибутом title (например
    ``<a title="Nästa sida" href="/text-tv/103">``), номер берется из последнего
    сегмента href. Если стрелки нет или номер не читается, используется
    текущая страница ±1. Результат всегда прижимается к допустимому диапазону.
    """

    def __init__(self, next_label: str = NEXT_PAGE_LABEL, prev_label: str = PREV_PAGE_LABEL):
        self.labels: Dict[PageDirection, str] = {
            PageDirection.NEXT: next_label,
            PageDirection.PREV: prev_label,
        }

    def resolve(self, document: BeautifulSoup, direction: PageDirection, current: Channel) -> Channel:
        fallback = current.value + direction.offset

        hint = self._find_hint(document, direction)
        if hint is None:
            logger.debug(f"No {direction.value} marker on page {current}, using {fallback}")
            return Channel.create(fallback)

        return Channel.create(hint)

    def next_channel(self, document: BeautifulSoup, current: Channel) -> Channel:
        return self.resolve(document, PageDirection.NEXT, current)

    def prev_channel(self, document: BeautifulSoup, current: Channel) -> Channel:
        return self.resolve(document, PageDirection.PREV, current)

    def _find_hint(self, document: BeautifulSoup, direction: PageDirection) -> Optional[int]:
        selector = f"[title='{self.labels[direction]}']"
        try:
            element = document.select_one(selector)
        except SelectorSyntaxError as e:
            logger.debug(f"Bad navigation selector {selector!r}: {e}")
            return None

        if element is None:
            return None

        href = element.get('href')
        if not href:
            return None

        # /text-tv/103 -> 103
        segment = href.split('/')[-1]
        # Только ASCII-цифры: int() принял бы и "+103", " 103", "1_03"
        if not (segment.isascii() and segment.isdigit()):
            return None
        return int(segment)
