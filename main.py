#!/usr/bin/env python3
"""
Главный файл для запуска Telegram-бота калькулятора CPL
"""

import logging
import sys
from pathlib import Path
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters
)

# Добавляем текущую директорию в sys.path для корректного импорта
sys.path.insert(0, str(Path(__file__).parent))

import config
from handlers import start_command, register_cpl_handlers, unified_text_handler
from handlers.cpl.wizard import SessionStore
from utils.error_handler import error_handler as error_processor
from utils.enhanced_logging import setup_logging

logger = logging.getLogger(__name__)


async def error_handler(update: object, context) -> None:
    """Обработчик ошибок"""
    # Ошибки сети при long polling приходят без update
    update = update if isinstance(update, Update) else None

    try:
        error_info = await error_processor.handle_error(update, context, context.error)

        if update and update.effective_message:
            await error_processor.send_error_message(update, context, error_info)

    except Exception as e:
        logger.error(f"Error in error handler: {e}")


async def post_init(application: Application) -> None:
    """Инициализация после запуска бота"""
    bot_info = await application.bot.get_me()
    logger.info(f"Bot started: @{bot_info.username} (ID: {bot_info.id})")


def build_application(token: str) -> Application:
    """Создает приложение и регистрирует обработчики"""
    application = Application.builder().token(token).post_init(post_init).build()

    application.add_handler(CommandHandler("start", start_command, filters=filters.UpdateType.MESSAGE))

    # Сессии мастера живут в памяти процесса и теряются при перезапуске
    register_cpl_handlers(application, SessionStore())

    # Обработчик текста (кнопки меню и ответы мастеру)
    application.add_handler(MessageHandler(
        filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND,
        unified_text_handler
    ))

    application.add_error_handler(error_handler)
    return application


def main() -> None:
    """Основная функция запуска бота"""
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    # Проверяем наличие токена
    if not config.BOT_TOKEN:
        logger.error("BOT_TOKEN not found! Please set it in .env file or environment variables")
        sys.exit(1)

    application = build_application(config.BOT_TOKEN)

    logger.info("Starting bot with polling...")
    application.run_polling(drop_pending_updates=True)


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
