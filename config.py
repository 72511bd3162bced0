#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт управления конфигурацией SVT Text TV
"""

import sys
from config_manager import ConfigManager


def main(argv=None):
    """Главная функция управления конфигурацией

    --show   только показать текущие настройки
    --reset  удалить файл конфигурации
    """
    argv = sys.argv[1:] if argv is None else argv
    config_manager = ConfigManager()

    if '--show' in argv:
        config_manager.show_current_config()
        return
    if '--reset' in argv:
        config_manager.reset_config()
        return

    print("🔧 Управление конфигурацией SVT Text TV")
    print("=" * 60)

    try:
        if config_manager.interactive_setup():
            print("\n✅ Конфигурация успешно настроена!")
            print("📋 Теперь вы можете запустить программу командой: python3 start.py")
        else:
            print("\n❌ Настройка конфигурации отменена")
            
    except KeyboardInterrupt:
        print("\n\n👋 Настройка конфигурации прервана пользователем")
    except Exception as e:
        print(f"\n❌ Ошибка настройки конфигурации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
