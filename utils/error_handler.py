"""
Централизованная система обработки ошибок
"""

import logging
import traceback
from typing import Optional, Dict, Any
from telegram import Update
from telegram.ext import ContextTypes
from telegram.constants import ParseMode
from utils.localization import get_text

logger = logging.getLogger(__name__)


class BotError(Exception):
    """Базовый класс для ошибок бота"""

    def __init__(self, message: str, user_message: Optional[str] = None, error_code: Optional[str] = None):
        self.message = message
        self.user_message = user_message or message
        self.error_code = error_code or "UNKNOWN_ERROR"
        super().__init__(self.message)


class ValidationError(BotError):
    """Ошибка валидации данных"""
    pass


class InsufficientArgumentsError(ValidationError):
    """Передано меньше обязательных аргументов"""

    def __init__(self, required: int, given: int):
        self.required = required
        self.given = given
        super().__init__(
            f"Expected at least {required} arguments, got {given}",
            error_code="INSUFFICIENT_ARGUMENTS"
        )


class NonNumericArgumentError(ValidationError):
    """Аргумент не является конечным числом"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Argument is not a finite number: {value!r}",
            error_code="NON_NUMERIC_ARGUMENT"
        )


class DegenerateInputError(ValidationError):
    """Входные данные дают бесконечный или неопределённый CPL"""

    def __init__(self, economics=None):
        self.economics = economics
        super().__init__(
            f"Economics produce a non-finite CPL: {economics}",
            error_code="DEGENERATE_INPUT"
        )


class InvalidSessionStateError(BotError):
    """Сессия мастера в неизвестном состоянии"""

    def __init__(self, step=None):
        self.step = step
        super().__init__(
            f"Wizard session is in an unknown step: {step!r}",
            error_code="INVALID_SESSION_STATE"
        )


# Ключи локализации для пользовательских сообщений
ERROR_TEXT_KEYS = {
    InsufficientArgumentsError: 'calc_insufficient_arguments',
    NonNumericArgumentError: 'calc_non_numeric',
    DegenerateInputError: 'calc_degenerate_input',
    InvalidSessionStateError: 'wizard_invalid_state',
}


class ErrorHandler:
    """Централизованный обработчик ошибок"""

    async def handle_error(
        self,
        update: Optional[Update],
        context: ContextTypes.DEFAULT_TYPE,
        error: Exception,
        user_id: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Обработать ошибку и вернуть информацию для ответа пользователю

        Returns:
            dict: {
                'user_message': str,
                'log_level': str,
                'error_code': str
            }
        """
        error_context = {
            'user_id': user_id or (update.effective_user.id if update and update.effective_user else None),
            'chat_id': update.effective_chat.id if update and update.effective_chat else None,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': ''.join(traceback.format_exception(type(error), error, error.__traceback__))
        }

        # Ошибки валидации ожидаемы, остальное - настоящие сбои
        log_level = 'warning' if isinstance(error, ValidationError) else 'error'

        self._log_error(error_context, log_level)

        return {
            'user_message': self.get_user_message(error, context),
            'log_level': log_level,
            'error_code': getattr(error, 'error_code', 'UNKNOWN_ERROR')
        }

    def _log_error(self, error_context: Dict[str, Any], level: str = 'error'):
        """Логировать ошибку с полным контекстом"""

        log_data = {
            'user_id': error_context['user_id'],
            'chat_id': error_context['chat_id'],
            'error_type': error_context['error_type'],
        }

        if level == 'error':
            logger.error(
                f"Error occurred: {error_context['error_type']} - {error_context['error_message']}\n"
                f"Full traceback:\n{error_context['traceback']}",
                extra=log_data
            )
        else:
            logger.warning(
                f"{error_context['error_type']} - {error_context['error_message']}",
                extra=log_data
            )

    def get_user_message(self, error: Exception, context: ContextTypes.DEFAULT_TYPE) -> str:
        """Получить сообщение для пользователя на основе типа ошибки"""

        for error_type, key in ERROR_TEXT_KEYS.items():
            if isinstance(error, error_type):
                if isinstance(error, InsufficientArgumentsError):
                    return get_text(context, key, required=error.required)
                return get_text(context, key)

        return get_text(context, 'generic_error')

    async def send_error_message(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        error_info: Dict[str, Any]
    ):
        """Отправить сообщение об ошибке пользователю"""

        if not update or not update.effective_message:
            logger.warning("Cannot send error message: no update or effective_message")
            return

        try:
            await update.effective_message.reply_text(
                text=error_info['user_message'],
                parse_mode=ParseMode.MARKDOWN
            )
        except Exception as e:
            logger.error(f"Failed to send error message to user: {e}")


# Глобальный экземпляр обработчика ошибок
error_handler = ErrorHandler()
