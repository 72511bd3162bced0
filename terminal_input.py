#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Чтение клавиш в "сыром" режиме терминала и ввод номера страницы
"""

import os
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.control import Control

from channel import MIN_PAGE, MAX_PAGE


class Key:
    """Имена специальных клавиш"""
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"
    ENTER = "ENTER"
    ESCAPE = "ESCAPE"
    BACKSPACE = "BACKSPACE"
    CTRL_C = "CTRL_C"


_ESCAPE_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    # Режим application cursor: ESC O A .. ESC O D
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
}

_WINDOWS_SCANCODES = {
    b'H': Key.UP,
    b'P': Key.DOWN,
    b'M': Key.RIGHT,
    b'K': Key.LEFT,
}


def _normalize(ch: str) -> str:
    if ch in ("\r", "\n"):
        return Key.ENTER
    if ch in ("\x7f", "\x08"):
        return Key.BACKSPACE
    if ch == "\x03":
        return Key.CTRL_C
    return ch


class KeyReader:
    """Блокирующее чтение одной клавиши.

    Возвращает либо символ, либо одно из имен Key.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin

    def read_key(self) -> str:
        if os.name == 'nt':
            return self._read_key_windows()
        return self._read_key_posix()

    def _read_key_posix(self) -> str:
        import select
        import termios
        import tty

        fd = self.stream.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = os.read(fd, 1).decode(errors='ignore')

            if ch == "\x1b":
                # Одиночный Esc не сопровождается продолжением последовательности
                ready, _, _ = select.select([fd], [], [], 0.05)
                if not ready:
                    return Key.ESCAPE
                seq = os.read(fd, 2).decode(errors='ignore')
                return _ESCAPE_SEQUENCES.get(seq, Key.ESCAPE)

            return _normalize(ch)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)

    def _read_key_windows(self) -> str:
        import msvcrt

        key = msvcrt.getch()
        if key in (b'\xe0', b'\x00'):  # Специальные клавиши
            return _WINDOWS_SCANCODES.get(msvcrt.getch(), "")
        if key == b'\x1b':
            return Key.ESCAPE
        return _normalize(key.decode(errors='ignore'))


def prompt_channel(console: Console, read_key: Callable[[], str]) -> Optional[int]:
    """Ввод номера страницы: только цифры, Enter - подтвердить, Esc - отмена.

    Возвращает введенное число (без проверки диапазона) или None.
    """
    digits = ""
    console.print(f"Перейти к странице ({MIN_PAGE}–{MAX_PAGE}): ", end="", highlight=False)

    while True:
        key = read_key()
        if key == Key.ENTER:
            break
        if key in (Key.ESCAPE, Key.CTRL_C):
            console.print()
            return None
        if key == Key.BACKSPACE:
            if digits:
                digits = digits[:-1]
                # Шаг назад, затереть цифру пробелом, снова шаг назад
                console.control(Control.move(-1, 0))
                console.print(" ", end="")
                console.control(Control.move(-1, 0))
            continue
        if len(key) == 1 and '0' <= key <= '9':
            digits += key
            console.print(key, end="", highlight=False)

    console.print()
    if not digits:
        return None
    return int(digits)
