"""
Пакет утилит для бота калькулятора CPL
"""

from .localization import get_text, resolve_language
from .error_handler import (
    ErrorHandler,
    BotError,
    ValidationError,
    InsufficientArgumentsError,
    NonNumericArgumentError,
    DegenerateInputError,
    InvalidSessionStateError
)
from .enhanced_logging import setup_logging

__all__ = [
    'get_text',
    'resolve_language',
    'ErrorHandler',
    'BotError',
    'ValidationError',
    'InsufficientArgumentsError',
    'NonNumericArgumentError',
    'DegenerateInputError',
    'InvalidSessionStateError',
    'setup_logging'
]
