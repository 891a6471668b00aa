"""
Обработчик команды /start и кнопок главного меню
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes
from telegram.constants import ParseMode
from utils.localization import get_text, resolve_language
from .keyboards import MenuKeyboard
import config

logger = logging.getLogger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработчик команды /start: приветствие и главное меню"""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.username}) started the bot")

    if 'language' not in context.user_data:
        context.user_data['language'] = resolve_language(user.language_code)

    await update.message.reply_text(
        get_text(context, 'welcome'),
        reply_markup=MenuKeyboard.main_menu(context),
        parse_mode=ParseMode.MARKDOWN
    )


async def show_calculator_help(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопка 'Калькулятор арбитражника': как пользоваться /calc и /lead"""
    await update.message.reply_text(
        get_text(context, 'calculator_help'),
        parse_mode=ParseMode.MARKDOWN
    )


async def show_channel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопка 'Наш тг-канал'"""
    await update.message.reply_text(
        get_text(context, 'channel_text'),
        reply_markup=MenuKeyboard.link(get_text(context, 'channel_button'), config.CHANNEL_LINK)
    )


async def show_manager(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопки 'Связаться с менеджером' и 'Реклама в Telegram Ads'"""
    await update.message.reply_text(
        get_text(context, 'manager_text'),
        reply_markup=MenuKeyboard.link(get_text(context, 'manager_button'), config.MANAGER_LINK)
    )


MENU_ACTIONS = {
    'menu_calculator': show_calculator_help,
    'menu_channel': show_channel,
    'menu_manager': show_manager,
    'menu_ads': show_manager,
}


async def menu_button_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """
    Обрабатывает нажатие кнопки нижнего меню

    Returns:
        True, если текст совпал с одной из кнопок
    """
    text = update.message.text
    for key, action in MENU_ACTIONS.items():
        if text == get_text(context, key):
            await action(update, context)
            return True
    return False
