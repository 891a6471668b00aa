"""
Калькулятор CPL: формула, валидация и пошаговый мастер
"""

from .calculator import (
    ECONOMICS_DEFAULTS,
    LeadEconomics,
    CPLResult,
    calculate_cpl,
    compute_one_shot,
    evaluate,
    parse_one_shot_arguments
)
from .states import WizardStep, NEXT_STEP, STEP_FIELDS
from .validators import parse_number, format_number, format_percent
from .wizard import CPLWizard, SessionStore, WizardSession, WizardReply, ReplyKind

__all__ = [
    'ECONOMICS_DEFAULTS',
    'LeadEconomics',
    'CPLResult',
    'calculate_cpl',
    'compute_one_shot',
    'evaluate',
    'parse_one_shot_arguments',
    'WizardStep',
    'NEXT_STEP',
    'STEP_FIELDS',
    'parse_number',
    'format_number',
    'format_percent',
    'CPLWizard',
    'SessionStore',
    'WizardSession',
    'WizardReply',
    'ReplyKind'
]
