"""
Пошаговый мастер расчета CPL (/lead)

Хранилище сессий передается снаружи: его создает слой маршрутизации и
кладет в bot_data. Ключ - id чата.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Optional

from utils.error_handler import DegenerateInputError, InvalidSessionStateError
from .calculator import CPLResult, LeadEconomics, evaluate
from .states import FIRST_STEP, NEXT_STEP, STEP_FIELDS, WizardStep
from .validators import parse_number

logger = logging.getLogger(__name__)


@dataclass
class WizardSession:
    """Сессия мастера: текущий шаг и уже собранные поля"""
    step: WizardStep = FIRST_STEP
    data: Dict[str, float] = field(default_factory=dict)


class SessionStore:
    """Хранилище сессий мастера в памяти процесса"""

    def __init__(self):
        self._sessions: Dict[Hashable, WizardSession] = {}

    def get(self, conversation_id: Hashable) -> Optional[WizardSession]:
        return self._sessions.get(conversation_id)

    def set(self, conversation_id: Hashable, session: WizardSession) -> None:
        self._sessions[conversation_id] = session

    def delete(self, conversation_id: Hashable) -> None:
        self._sessions.pop(conversation_id, None)

    def __contains__(self, conversation_id: Hashable) -> bool:
        return conversation_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


class ReplyKind(Enum):
    """Что ответить пользователю после шага"""
    PROMPT = "prompt"                  # Спросить следующее поле
    VALIDATION_ERROR = "validation"    # Не число, повторить шаг
    RESULT = "result"                  # Расчет готов
    DEGENERATE = "degenerate"          # Расчет дал inf/nan
    INVALID_STATE = "invalid_state"    # Сессия сломана, начать заново


@dataclass(frozen=True)
class WizardReply:
    kind: ReplyKind
    step: Optional[WizardStep] = None
    economics: Optional[LeadEconomics] = None
    result: Optional[CPLResult] = None
    error: Optional[Exception] = None


class CPLWizard:
    """Машина состояний мастера: PAYOUT -> APPROVE -> TRASH -> ROI -> COMPLETE"""

    def __init__(self, store: SessionStore):
        self.store = store

    def get_session(self, conversation_id: Hashable) -> Optional[WizardSession]:
        return self.store.get(conversation_id)

    def start_session(self, conversation_id: Hashable) -> WizardReply:
        """
        Начинает новый диалог

        Незавершенная сессия этого чата молча перезаписывается.
        """
        if conversation_id in self.store:
            logger.info(f"Wizard restarted for chat {conversation_id}, previous input discarded")
        else:
            logger.info(f"Wizard started for chat {conversation_id}")

        self.store.set(conversation_id, WizardSession())
        return WizardReply(kind=ReplyKind.PROMPT, step=FIRST_STEP)

    def submit_value(self, conversation_id: Hashable, raw_text: Optional[str]) -> Optional[WizardReply]:
        """
        Принимает ответ пользователя на текущий шаг

        Returns:
            None, если у чата нет активного диалога, иначе WizardReply
        """
        session = self.store.get(conversation_id)
        if session is None:
            return None

        field_name = STEP_FIELDS.get(session.step)
        if field_name is None:
            self.store.delete(conversation_id)
            logger.warning(f"Wizard session for chat {conversation_id} in unknown step {session.step!r}, dropped")
            return WizardReply(
                kind=ReplyKind.INVALID_STATE,
                error=InvalidSessionStateError(session.step)
            )

        value = parse_number(raw_text)
        if value is None:
            return WizardReply(kind=ReplyKind.VALIDATION_ERROR, step=session.step)

        session.data[field_name] = value
        session.step = NEXT_STEP[session.step]

        if session.step is not WizardStep.COMPLETE:
            return WizardReply(kind=ReplyKind.PROMPT, step=session.step)

        return self._complete(conversation_id, session)

    def _complete(self, conversation_id: Hashable, session: WizardSession) -> WizardReply:
        # Сессия одноразовая: удаляется при любом исходе расчета
        self.store.delete(conversation_id)
        economics = LeadEconomics.from_values(**session.data)

        try:
            result = evaluate(economics)
        except DegenerateInputError as e:
            logger.info(f"Wizard for chat {conversation_id} finished with degenerate input: {economics}")
            return WizardReply(kind=ReplyKind.DEGENERATE, economics=economics, error=e)

        logger.info(f"Wizard completed for chat {conversation_id}: {result}")
        return WizardReply(kind=ReplyKind.RESULT, economics=economics, result=result)

