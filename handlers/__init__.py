"""
Пакет обработчиков команд и событий бота
"""

from .start import (
    start_command,
    menu_button_handler,
    show_calculator_help,
    show_channel,
    show_manager
)
from .cpl_calculator import (
    calc_command,
    lead_command,
    wizard_text_handler,
    register_cpl_handlers
)
from .router import unified_text_handler

__all__ = [
    'start_command',
    'menu_button_handler',
    'show_calculator_help',
    'show_channel',
    'show_manager',
    'calc_command',
    'lead_command',
    'wizard_text_handler',
    'register_cpl_handlers',
    'unified_text_handler'
]
