#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт запуска SVT Text TV
"""

import sys
import importlib.util

def check_dependencies():
    """Проверка наличия зависимостей"""
    required_packages = [
        'requests',
        'rich',
        'bs4',
        'soupsieve',
        'PIL'
    ]
    
    missing_packages = []
    
    for package in required_packages:
        spec = importlib.util.find_spec(package)
        if spec is None:
            missing_packages.append(package)
    
    if missing_packages:
        print("❌ Отсутствуют следующие зависимости:")
        for package in missing_packages:
            print(f"   - {package}")
        print("\n🔧 Для установки выполните:")
        print("   pip install -e .")
        return False
    
    return True

def main():
    """Главная функция запуска"""
    if not check_dependencies():
        sys.exit(1)
    
    try:
        from text_tv import main as run_viewer
        run_viewer(sys.argv[1:])
    except KeyboardInterrupt:
        print("\n\n👋 Программа завершена пользователем")
    except Exception as e:
        print(f"\n❌ Ошибка запуска: {e}")
        print("📋 Проверьте файл texttv.log для получения подробной информации")
        sys.exit(1)

if __name__ == "__main__":
    main()
