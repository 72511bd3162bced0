#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Общие фикстуры тестов: поддельная HTTP-сессия и HTML страниц Text TV
"""

import base64
import struct
import zlib
from io import BytesIO
from typing import Dict, List, Optional

import pytest
import requests
from PIL import Image


def png_data_url(size=(4, 2), color=(255, 255, 0)) -> str:
    image = Image.new("RGB", size, color)
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


def oversized_png_data_url(width: int = 20000, height: int = 20000) -> str:
    """PNG, в заголовке IHDR которого указан огромный размер"""
    data = bytearray(base64.b64decode(png_data_url().split(",", 1)[1]))
    # 8 байт сигнатуры, 4 байта длины, "IHDR", затем ширина и высота
    data[16:20] = struct.pack(">I", width)
    data[20:24] = struct.pack(">I", height)
    data[29:33] = struct.pack(">I", zlib.crc32(bytes(data[12:29])) & 0xffffffff)
    return "data:image/png;base64," + base64.b64encode(bytes(data)).decode("ascii")


def page_html(next_href: Optional[str] = None, prev_href: Optional[str] = None,
              image_src: Optional[str] = "default") -> str:
    """HTML в формате svt.se/text-tv со стрелками навигации"""
    parts = ["<html><body>"]
    if prev_href is not None:
        parts.append(
            '<a class="NavigationArrow_enabled__ueMbi NavigationArrow_navigationArrow__eaKzk" '
            f'title="Förra sidan" href="{prev_href}"></a>'
        )
    if next_href is not None:
        parts.append(
            '<a class="NavigationArrow_enabled__ueMbi NavigationArrow_navigationArrow__eaKzk" '
            f'title="Nästa sida" href="{next_href}"></a>'
        )
    if image_src == "default":
        image_src = png_data_url()
    if image_src is not None:
        parts.append(f'<img class="Content_pageImage__bS0mg" src="{image_src}" alt="">')
    parts.append("</body></html>")
    return "\n".join(parts)


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, url: str = ""):
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeSession:
    """Отвечает заранее заданным HTML по URL и запоминает запросы"""

    def __init__(self, pages: Dict[str, object] = None):
        self.pages = pages or {}
        self.headers = {}
        self.requested: List[str] = []

    def get(self, url, timeout=None, **kwargs):
        self.requested.append(url)
        answer = self.pages.get(url)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return FakeResponse("<html><body>Sidan finns inte</body></html>", url=url)
        if isinstance(answer, FakeResponse):
            return answer
        return FakeResponse(answer, url=url)


@pytest.fixture
def fake_session():
    return FakeSession()
