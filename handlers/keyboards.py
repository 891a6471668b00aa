"""
Клавиатуры главного меню
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, KeyboardButton, ReplyKeyboardMarkup
from telegram.ext import ContextTypes

from utils.localization import get_text

# Ключи локализации кнопок нижнего меню, по строке на кнопку
MENU_BUTTON_KEYS = ['menu_calculator', 'menu_channel', 'menu_manager', 'menu_ads']


class MenuKeyboard:
    """Конструктор клавиатур меню"""

    @staticmethod
    def main_menu(context: ContextTypes.DEFAULT_TYPE) -> ReplyKeyboardMarkup:
        """
        Постоянное нижнее меню

        Returns:
            ReplyKeyboardMarkup с кнопками разделов на языке пользователя
        """
        keyboard = [[KeyboardButton(get_text(context, key))] for key in MENU_BUTTON_KEYS]
        return ReplyKeyboardMarkup(keyboard, resize_keyboard=True, one_time_keyboard=False)

    @staticmethod
    def link(text: str, url: str) -> InlineKeyboardMarkup:
        """Одна inline-кнопка со ссылкой"""
        return InlineKeyboardMarkup([[InlineKeyboardButton(text, url=url)]])
