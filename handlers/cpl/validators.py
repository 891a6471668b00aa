"""
Валидация и парсинг чисел для калькулятора CPL
"""

import math
from decimal import Decimal
from typing import List, Optional

import config


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Парсит число из текста

    Запятая считается десятичным разделителем: "35,5" == "35.5".
    Знак не проверяется, отрицательные значения допустимы.

    Returns:
        float или None, если текст не является конечным числом
    """
    if not text or not text.strip():
        return None

    text = text.strip().replace(',', '.')

    try:
        number = float(text)
    except (ValueError, TypeError):
        return None

    # inf и nan не принимаем
    if not math.isfinite(number):
        return None

    return number


def split_arguments(text: Optional[str]) -> List[str]:
    """Разбивает аргументы команды по пробельным символам"""
    if not text:
        return []
    return text.split()


def format_number(number: float, decimals: Optional[int] = None) -> str:
    """Форматирует число без лишних нулей: 5.3846, 7, 35.5"""
    if decimals is None:
        decimals = config.CPL_DECIMALS
    text = f"{number:.{decimals}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        return '0'
    return text


def format_percent(number: float) -> str:
    """Процент как ввел пользователь, без округления: 50, 12.5, 0.00001"""
    text = format(Decimal(repr(number)).normalize(), 'f')
    if text == '-0':
        return '0'
    return text
