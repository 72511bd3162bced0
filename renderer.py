#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Вывод страниц Text TV в терминал
"""

from typing import List, Optional

from PIL import Image
from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.text import Text

from channel import Channel
from page import Page


HALF_BLOCK = "▀"


def image_to_lines(image: Image.Image, width: int) -> List[Text]:
    """Рисует картинку полублоками: верхний пиксель - цвет символа, нижний - фон.

    Одна строка терминала вмещает две строки пикселей, поэтому высота
    уменьшается вдвое с сохранением пропорций.
    """
    image = image.convert("RGB")
    width = max(1, width)
    rows = max(1, int((image.height / image.width) * width * 0.5))
    image = image.resize((width, rows * 2))
    pixels = image.load()

    lines = []
    for y in range(0, image.height, 2):
        line = Text()
        for x in range(image.width):
            top = pixels[x, y]
            bottom = pixels[x, y + 1] if y + 1 < image.height else top
            line.append(HALF_BLOCK, style=Style(
                color=Color.from_rgb(*top),
                bgcolor=Color.from_rgb(*bottom),
            ))
        lines.append(line)
    return lines


class PageRenderer:
    """Рисует страницу, строку статуса и сообщения об ошибках"""

    def __init__(self, console: Console, image_width: int = 100, clear_screen: bool = True):
        self.console = console
        self.image_width = image_width
        self.clear_screen = clear_screen

    def clear(self):
        if self.clear_screen:
            self.console.clear()

    def show_page(self, page: Optional[Page]):
        if page is None:
            return
        for line in image_to_lines(page.image, self.image_width):
            self.console.print(line, no_wrap=True, crop=False)

    def show_status(self, channel: Optional[Channel]):
        nav_parts = []
        if channel is None or not channel.is_first:
            nav_parts.append("← пред.")
        if channel is None or not channel.is_last:
            nav_parts.append("→ след.")
        nav_parts.append("g: перейти")
        nav_parts.append("q: выход")

        now_on = f"(страница {channel})" if channel is not None else "(нет страницы)"
        self.console.print()
        self.console.print(f"{'   '.join(nav_parts)}   [dim]{now_on}[/dim]", highlight=False)

    def show_not_found(self, channel: Channel):
        self.console.print(f"[red]❌ Страница {channel} не найдена[/red]", highlight=False)

    def show_busy(self):
        self.console.print("[yellow]⚠️ Страница еще загружается...[/yellow]")
