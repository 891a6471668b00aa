"""
Единый обработчик текстовых сообщений
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes
from .start import menu_button_handler
from .cpl_calculator import wizard_text_handler

logger = logging.getLogger(__name__)


async def unified_text_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопки меню, затем ответ в мастере CPL, иначе игнорируем"""
    if not update.message or not update.message.text:
        return

    if await menu_button_handler(update, context):
        return

    if await wizard_text_handler(update, context):
        return

    # Если никто не ожидает ввода, игнорируем
    logger.debug(f"Ignored text from chat {update.effective_chat.id}")
