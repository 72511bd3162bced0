#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Загрузка и разбор страниц SVT Text TV
"""

import base64
import binascii
import logging
from enum import Enum
from io import BytesIO
from typing import Optional

import requests
from bs4 import BeautifulSoup, ParserRejectedMarkup
from soupsieve import SelectorSyntaxError
from PIL import Image, UnidentifiedImageError

from channel import Channel
from config_manager import ServiceConfig
from navigation import NavigationResolver
from page import Page


logger = logging.getLogger(__name__)


class FetchErrorKind(Enum):
    """Виды ошибок загрузки"""
    TRANSPORT = "transport"
    PARSE = "parse"
    IMAGE_NOT_FOUND = "image_not_found"
    IMAGE_DECODE = "image_decode"


class FetchError(Exception):
    """Страницу не удалось получить"""
    kind: FetchErrorKind

    def __init__(self, channel: Channel, message: str):
        super().__init__(f"{channel}: {message}")
        self.channel = channel


class TransportError(FetchError):
    kind = FetchErrorKind.TRANSPORT


class ParseError(FetchError):
    kind = FetchErrorKind.PARSE


class ImageNotFoundError(FetchError):
    """Нет картинки страницы. Так сервис отвечает на несуществующие номера."""
    kind = FetchErrorKind.IMAGE_NOT_FOUND


class ImageDecodeError(FetchError):
    kind = FetchErrorKind.IMAGE_DECODE


def decode_data_url(data_url: str) -> bytes:
    """data:image/png;base64,AAAA... -> bytes

    Raises ValueError для строки без запятой или с невалидным base64.
    """
    _, sep, payload = data_url.partition(',')
    if not sep:
        raise ValueError("Invalid data URL format")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


class PageFetcher:
    """Получает страницу по номеру и собирает из нее Page"""

    def __init__(self, config: ServiceConfig = None, session: requests.Session = None,
                 resolver: NavigationResolver = None):
        self.config = config or ServiceConfig()
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.config.user_agent})
        self.resolver = resolver or NavigationResolver(self.config.next_label, self.config.prev_label)

    def build_url(self, channel: Channel) -> str:
        base_url = self.config.base_url
        if not base_url.endswith('/'):
            base_url += '/'
        return f"{base_url}{channel.value}"

    def fetch(self, channel: Channel) -> Page:
        """Загрузка страницы. Бросает FetchError при любой ошибке."""
        html = self._download(channel)
        document = self._parse(channel, html)
        image = self._extract_image(channel, document)

        prev = self.resolver.prev_channel(document, channel)
        next_ = self.resolver.next_channel(document, channel)

        page = Page(channel=channel, image=image, prev=prev, next=next_)
        logger.info(f"Page {channel} loaded ({image.width}x{image.height}), prev={prev}, next={next_}")
        return page

    def _download(self, channel: Channel) -> str:
        url = self.build_url(channel)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
            return response.text
        except requests.exceptions.Timeout as e:
            raise TransportError(channel, f"timeout while requesting {url}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(channel, f"request to {url} failed: {e}") from e

    def _parse(self, channel: Channel, html: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html, 'html.parser')
        except ParserRejectedMarkup as e:
            raise ParseError(channel, f"markup rejected: {e}") from e

    def _extract_image(self, channel: Channel, document: BeautifulSoup) -> Image.Image:
        try:
            element = document.select_one(self.config.image_selector)
        except SelectorSyntaxError as e:
            raise ParseError(channel, f"invalid image selector {self.config.image_selector!r}") from e

        if element is None:
            raise ImageNotFoundError(channel, "image element not found")

        data_url: Optional[str] = element.get('src')
        if not data_url:
            raise ImageNotFoundError(channel, "missing src attribute on image")

        try:
            image = Image.open(BytesIO(decode_data_url(data_url)))
            image.load()
        except (ValueError, UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(channel, f"cannot decode image: {e}") from e

        return image
