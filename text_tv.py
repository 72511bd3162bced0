#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SVT Text TV в терминале
Просмотр страниц Text TV с навигацией стрелками

Запуск: python text_tv.py [номер страницы]

Клавиши:
  ←  предыдущая страница
  →  следующая страница
  g  перейти к странице
  q  выход
"""

import logging
import sys
from typing import List, Optional

from rich.console import Console

from channel import Channel, PageDirection, DEFAULT_PAGE
from config_manager import ConfigManager
from controller import NavigationController, NavigationResult
from page_fetcher import PageFetcher
from renderer import PageRenderer
from terminal_input import Key, KeyReader, prompt_channel


def parse_start_channel(argv: List[str]) -> Channel:
    """Номер стартовой страницы из первого аргумента, по умолчанию 100"""
    try:
        return Channel.create(int(argv[0]))
    except (IndexError, ValueError):
        return Channel.create(DEFAULT_PAGE)


class TextTVViewer:
    """Интерактивный просмотрщик Text TV"""

    def __init__(self, config_manager: ConfigManager = None, console: Console = None,
                 fetcher: PageFetcher = None, key_reader: KeyReader = None):
        self.console = console or Console()
        self.config_manager = config_manager or ConfigManager(console=self.console)
        self.running = True

        self.setup_logging()

        display = self.config_manager.get_display_config()
        self.renderer = PageRenderer(self.console, display.image_width, display.clear_screen)
        self.fetcher = fetcher or PageFetcher(self.config_manager.get_service_config())
        self.controller = NavigationController(self.fetcher)
        self.key_reader = key_reader or KeyReader()

    def setup_logging(self):
        """Настройка системы логирования"""
        logging_config = self.config_manager.get_logging_config()
        logging.basicConfig(
            level=getattr(logging, logging_config.level.upper(), logging.INFO),
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(logging_config.log_file, encoding='utf-8'),
            ]
        )
        self.logger = logging.getLogger(__name__)

    def _show(self, result: NavigationResult):
        """Перерисовка экрана после попытки перехода"""
        if result.busy:
            self.renderer.show_busy()
            return

        self.renderer.clear()
        self.renderer.show_page(self.controller.current)
        if not result.ok:
            self.renderer.show_not_found(result.channel)
        self.renderer.show_status(self.controller.current_channel or result.channel)

    def _loading(self):
        self.renderer.clear()
        self.console.print("[dim]Загрузка...[/dim]")

    def open(self, channel: Channel) -> NavigationResult:
        self._loading()
        result = self.controller.start(channel)
        self._show(result)
        return result

    def move(self, direction: PageDirection) -> Optional[NavigationResult]:
        current = self.controller.current
        if current is not None and current.neighbour(direction) == current.channel:
            # Край диапазона, двигаться некуда
            return None
        self._loading()
        result = self.controller.go_direction(direction)
        self._show(result)
        return result

    def goto(self) -> Optional[NavigationResult]:
        number = prompt_channel(self.console, self.key_reader.read_key)
        if number is None:
            return None
        target = Channel.create(number)
        if target == self.controller.current_channel:
            return None
        self._loading()
        result = self.controller.go_to(target)
        self._show(result)
        return result

    def handle_key(self, key: str):
        """Обработка одной клавиши"""
        if key == Key.LEFT:
            self.move(PageDirection.PREV)
        elif key == Key.RIGHT:
            self.move(PageDirection.NEXT)
        elif key == 'g':
            self.goto()
        elif key in ('q', Key.CTRL_C):
            self.running = False

    def run(self, start: Channel):
        """Главный цикл"""
        self.logger.info(f"Starting at page {start}")
        self.console.show_cursor(False)
        try:
            self.open(start)
            while self.running:
                self.handle_key(self.key_reader.read_key())
        finally:
            self.console.show_cursor(True)
            self.logger.info("Viewer closed")


def main(argv: List[str] = None):
    """Главная функция"""
    argv = sys.argv[1:] if argv is None else argv
    viewer = TextTVViewer()
    try:
        viewer.run(parse_start_channel(argv))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        viewer.logger.exception("Unexpected error")
        viewer.console.print(f"\n[red]❌ Ошибка: {e}[/red]")
        viewer.console.print("[dim]Подробности в файле логов[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()
