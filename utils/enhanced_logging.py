"""
Улучшенное логирование с контекстом
"""

import logging
import logging.handlers
import sys
from pathlib import Path


class TelegramBotFormatter(logging.Formatter):
    """Форматтер для логов телеграм бота"""

    LEVEL_EMOJIS = {
        'DEBUG': '🐛',
        'INFO': 'ℹ️',
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '🚨'
    }

    def __init__(self, include_context: bool = True):
        self.include_context = include_context
        super().__init__(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record):
        """Форматируем запись лога"""
        original_levelname = record.levelname
        original_msg = record.msg

        if record.levelname in self.LEVEL_EMOJIS:
            record.levelname = f"{self.LEVEL_EMOJIS[record.levelname]} {record.levelname}"

        # Контекст из extra={'user_id': ..., 'chat_id': ...}
        if self.include_context:
            context_info = []
            if getattr(record, 'user_id', None) is not None:
                context_info.append(f"User: {record.user_id}")
            if getattr(record, 'chat_id', None) is not None:
                context_info.append(f"Chat: {record.chat_id}")

            if context_info:
                record.msg = f"[{', '.join(context_info)}] {record.msg}"

        try:
            return super().format(record)
        finally:
            # Восстанавливаем запись для остальных обработчиков
            record.levelname = original_levelname
            record.msg = original_msg


def setup_logging(
    log_level: str = "INFO",
    log_file: str = "bot.log",
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    include_context: bool = True
) -> logging.Logger:
    """Настроить систему логирования"""

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Удаляем существующие обработчики
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(TelegramBotFormatter(include_context=include_context))
    logger.addHandler(console_handler)

    # Файловый обработчик с ротацией
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=max_file_size,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setFormatter(TelegramBotFormatter(include_context=include_context))
    logger.addHandler(file_handler)

    # Внешние библиотеки
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('telegram').setLevel(logging.INFO)

    return logger
