#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Модуль управления конфигурацией
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Type
from dataclasses import dataclass, asdict, field, fields
from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from navigation import NEXT_PAGE_LABEL, PREV_PAGE_LABEL


@dataclass
class ServiceConfig:
    """Конфигурация сервиса SVT Text TV"""
    base_url: str = "https://www.svt.se/text-tv/"
    image_selector: str = "img.Content_pageImage__bS0mg"
    next_label: str = NEXT_PAGE_LABEL
    prev_label: str = PREV_PAGE_LABEL
    timeout: float = 10.0  # Таймаут HTTP-запроса (сек)
    user_agent: str = "texttv/0.1"


@dataclass
class DisplayConfig:
    """Конфигурация отображения"""
    image_width: int = 100  # Ширина картинки в колонках терминала
    clear_screen: bool = True


@dataclass
class LoggingConfig:
    """Конфигурация логирования"""
    level: str = "INFO"
    log_file: str = "texttv.log"


@dataclass
class AppConfig:
    """Общая конфигурация приложения"""
    service: ServiceConfig = field(default_factory=ServiceConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coerce(default: Any, value: Any) -> Any:
    """Приводит значение из файла к типу значения по умолчанию.

    Raises ValueError/TypeError, если значение не подходит. Числовые параметры
    (таймаут, ширина) должны быть конечными и положительными.
    """
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        raise TypeError(f"expected true/false, got {value!r}")
    if isinstance(default, (int, float)):
        if isinstance(value, bool):
            raise TypeError(f"expected a number, got {value!r}")
        number = type(default)(value)
        if not math.isfinite(number) or number <= 0:
            raise ValueError(f"expected a positive number, got {value!r}")
        return number
    if isinstance(default, str):
        if isinstance(value, str):
            return value
        raise TypeError(f"expected a string, got {value!r}")
    return value


class ConfigManager:
    """Менеджер конфигурации"""

    def __init__(self, config_file: str = ".config.json", console: Console = None):
        self.config_file = Path(config_file)
        self.console = console or Console()
        try:
            self.config = self._load_config()
        except Exception as e:
            self.console.print(f"[yellow]⚠️ Ошибка загрузки конфигурации: {e}[/yellow]")
            self.console.print("[yellow]Создается конфигурация по умолчанию[/yellow]")
            self.config = AppConfig()

    def _section(self, name: str, cls: Type, data: Any):
        """Собирает секцию конфигурации: неизвестные ключи игнорируются,
        значения неверного типа заменяются значениями по умолчанию"""
        section = cls()
        if not isinstance(data, dict):
            if data is not None:
                self.console.print(f"[yellow]⚠️ Секция '{name}' должна быть объектом, используются значения по умолчанию[/yellow]")
            return section

        for f in fields(cls):
            if f.name not in data:
                continue
            default = getattr(section, f.name)
            try:
                setattr(section, f.name, _coerce(default, data[f.name]))
            except (TypeError, ValueError, OverflowError) as e:
                self.console.print(
                    f"[yellow]⚠️ Неверное значение {name}.{f.name}: {escape(str(e))}. "
                    f"Используется {escape(repr(default))}[/yellow]"
                )
        return section

    def _load_config(self) -> AppConfig:
        """Загрузка конфигурации из файла"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                return AppConfig(
                    service=self._section('service', ServiceConfig, data.get('service')),
                    display=self._section('display', DisplayConfig, data.get('display')),
                    logging=self._section('logging', LoggingConfig, data.get('logging')),
                )
            except (OSError, ValueError, TypeError, AttributeError) as e:
                self.console.print(f"[yellow]Ошибка загрузки конфигурации: {e}[/yellow]")
                self.console.print("[yellow]Используется конфигурация по умолчанию[/yellow]")

        return AppConfig()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'service': asdict(self.config.service),
            'display': asdict(self.config.display),
            'logging': asdict(self.config.logging),
        }

    def save_config(self) -> bool:
        """Сохранение конфигурации в файл"""
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            self.console.print(f"[red]Ошибка сохранения конфигурации: {e}[/red]")
            return False

    def get_service_config(self) -> ServiceConfig:
        return self.config.service

    def get_display_config(self) -> DisplayConfig:
        return self.config.display

    def get_logging_config(self) -> LoggingConfig:
        return self.config.logging

    def show_current_config(self):
        """Отображение текущей конфигурации"""
        table = Table(title="Текущая конфигурация", box=box.ROUNDED)
        table.add_column("Параметр", style="cyan")
        table.add_column("Значение", style="green")

        service = self.config.service
        table.add_row("Адрес сервиса", service.base_url)
        table.add_row("Селектор картинки", service.image_selector)
        table.add_row("Стрелка вперед", service.next_label)
        table.add_row("Стрелка назад", service.prev_label)
        table.add_row("Таймаут", f"{service.timeout}с")

        display = self.config.display
        table.add_row("Ширина картинки", str(display.image_width))
        table.add_row("Очистка экрана", "Включена" if display.clear_screen else "Отключена")

        table.add_row("Уровень логов", self.config.logging.level)
        table.add_row("Файл логов", self.config.logging.log_file)

        self.console.print(table)

    def setup_service_config(self):
        """Настройка адреса сервиса и таймаута"""
        self.console.print("\n[bold blue]Настройка сервиса[/bold blue]")
        service = self.config.service
        service.base_url = Prompt.ask("Адрес сервиса", default=service.base_url)
        timeout = Prompt.ask("Таймаут запроса (сек)", default=str(service.timeout))
        try:
            service.timeout = float(timeout)
        except ValueError:
            self.console.print("[red]✗ Таймаут должен быть числом, оставлено прежнее значение[/red]")
        self.save_config()
        self.console.print("[green]✓ Настройки сервиса сохранены[/green]")

    def setup_display_config(self):
        """Настройка отображения"""
        self.console.print("\n[bold blue]Настройка отображения[/bold blue]")
        display = self.config.display
        width = IntPrompt.ask("Ширина картинки (колонки)", default=display.image_width)
        display.image_width = max(20, width)
        display.clear_screen = Confirm.ask("Очищать экран перед загрузкой?", default=display.clear_screen)
        self.save_config()
        self.console.print("[green]✓ Настройки отображения сохранены[/green]")

    def reset_config(self):
        """Сброс конфигурации"""
        try:
            if self.config_file.exists():
                self.config_file.unlink()
            self.config = AppConfig()
            self.console.print("[green]✓ Конфигурация сброшена[/green]")
        except OSError as e:
            self.console.print(f"[red]Ошибка сброса конфигурации: {e}[/red]")

    def interactive_setup(self) -> bool:
        """Интерактивная настройка конфигурации"""
        while True:
            self.console.clear()
            self.console.print(Panel.fit(
                "[bold blue]Управление конфигурацией[/bold blue]",
                box=box.DOUBLE
            ))

            self.show_current_config()

            self.console.print("\n[bold cyan]Доступные действия:[/bold cyan]")
            self.console.print("1. Настроить сервис")
            self.console.print("2. Настроить отображение")
            self.console.print("3. Сбросить конфигурацию")
            self.console.print("4. Продолжить с текущими настройками")
            self.console.print("0. Выход")

            choice = Prompt.ask("\nВыберите действие", choices=["0", "1", "2", "3", "4"])

            if choice == "1":
                self.setup_service_config()
            elif choice == "2":
                self.setup_display_config()
            elif choice == "3":
                if Confirm.ask("Вы уверены, что хотите сбросить всю конфигурацию?"):
                    self.reset_config()
            elif choice == "4":
                break
            elif choice == "0":
                return False

        return True
