#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Загруженная страница Text TV
"""

from dataclasses import dataclass, field

from PIL import Image

from channel import Channel, PageDirection


@dataclass(frozen=True)
class Page:
    """Снимок одной страницы: картинка и заранее вычисленные соседи.

    Страницы сравниваются только по номеру канала. HTML-документ не хранится,
    prev/next вычисляются один раз при загрузке.
    """
    channel: Channel
    image: Image.Image = field(compare=False, repr=False)
    prev: Channel = field(compare=False)
    next: Channel = field(compare=False)

    def neighbour(self, direction: PageDirection) -> Channel:
        return self.next if direction is PageDirection.NEXT else self.prev
