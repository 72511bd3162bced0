#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Навигация между страницами: хранит текущую страницу и обрабатывает переходы
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from channel import Channel, PageDirection
from page import Page
from page_fetcher import FetchError, PageFetcher


logger = logging.getLogger(__name__)


class ControllerState(Enum):
    """Состояния контроллера"""
    UNINITIALIZED = "uninitialized"
    DISPLAYING = "displaying"
    FAILED = "failed"


@dataclass
class NavigationResult:
    """Итог одного перехода"""
    channel: Channel                    # Запрошенная страница
    page: Optional[Page] = None         # Текущая страница после перехода
    error: Optional[FetchError] = None
    busy: bool = False                  # Запрос отклонен: предыдущий еще выполняется

    @property
    def ok(self) -> bool:
        return self.error is None and not self.busy


class NavigationController:
    """Владеет единственной текущей страницей.

    Неудачная загрузка не трогает текущую страницу, контроллер лишь
    запоминает, какой номер не удалось открыть. Одновременно выполняется
    только один запрос; повторный запрос во время загрузки отклоняется.
    """

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher
        self.current: Optional[Page] = None
        self.attempted: Optional[Channel] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ControllerState:
        if self.current is None:
            return ControllerState.UNINITIALIZED
        if self.attempted is not None:
            return ControllerState.FAILED
        return ControllerState.DISPLAYING

    @property
    def current_channel(self) -> Optional[Channel]:
        return self.current.channel if self.current else None

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    def start(self, channel: Channel) -> NavigationResult:
        """Первая загрузка"""
        return self._navigate(channel)

    def go_direction(self, direction: PageDirection) -> NavigationResult:
        if self.current is not None:
            target = self.current.neighbour(direction)
        else:
            # Ни одна страница еще не загрузилась: шагаем от последней попытки
            base = self.attempted or Channel.create(0)
            target = base.step(direction)
        return self._navigate(target)

    def go_to(self, target: Channel) -> NavigationResult:
        return self._navigate(target)

    def _navigate(self, target: Channel) -> NavigationResult:
        if not self._lock.acquire(blocking=False):
            logger.warning(f"Navigation to {target} ignored: another request is in progress")
            return NavigationResult(channel=target, page=self.current, busy=True)

        try:
            if self.current is not None and self.current.channel == target:
                logger.debug(f"Page {target} is already displayed")
                self.attempted = None
                return NavigationResult(channel=target, page=self.current)

            try:
                page = self.fetcher.fetch(target)
            except FetchError as e:
                logger.warning(f"Failed to open page {target} ({e.kind.value}): {e}")
                self.attempted = target
                return NavigationResult(channel=target, page=self.current, error=e)

            self.current = page
            self.attempted = None
            return NavigationResult(channel=target, page=page)
        finally:
            self._lock.release()
