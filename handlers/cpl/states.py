"""
Состояния пошагового мастера CPL (/lead)
"""

from enum import Enum


class WizardStep(Enum):
    """Шаги диалога: выплата → аппрув → трэш → ROI → готово"""
    PAYOUT = "payout"      # Ввод выплаты за подтверждённый лид
    APPROVE = "approve"    # Ввод процента аппрува
    TRASH = "trash"        # Ввод процента трэша
    ROI = "roi"            # Ввод желаемого ROI
    COMPLETE = "complete"  # Терминальное состояние


# Таблица переходов. Только вперёд, COMPLETE никуда не ведёт.
NEXT_STEP = {
    WizardStep.PAYOUT: WizardStep.APPROVE,
    WizardStep.APPROVE: WizardStep.TRASH,
    WizardStep.TRASH: WizardStep.ROI,
    WizardStep.ROI: WizardStep.COMPLETE,
}

# Какое поле LeadEconomics заполняет каждый шаг
STEP_FIELDS = {
    WizardStep.PAYOUT: 'payout',
    WizardStep.APPROVE: 'approve_rate',
    WizardStep.TRASH: 'trash_rate',
    WizardStep.ROI: 'roi',
}

FIRST_STEP = WizardStep.PAYOUT
