"""
Тесты пошагового мастера CPL (/lead)
"""

import sys
from pathlib import Path

import pytest

# Добавляем путь к корню проекта
sys.path.insert(0, str(Path(__file__).parent.parent))

from handlers.cpl.calculator import CPLResult, LeadEconomics
from handlers.cpl.states import NEXT_STEP, STEP_FIELDS, WizardStep
from handlers.cpl.wizard import CPLWizard, ReplyKind, SessionStore, WizardSession
from utils.error_handler import DegenerateInputError, InvalidSessionStateError


CHAT_ID = 1001


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def wizard(store):
    return CPLWizard(store)


def run_wizard(wizard, chat_id, values):
    """Проходит мастер целиком и возвращает последний ответ"""
    wizard.start_session(chat_id)
    reply = None
    for value in values:
        reply = wizard.submit_value(chat_id, value)
    return reply


class TestTransitions:
    """Тесты таблицы переходов"""

    def test_linear_order(self):
        step = WizardStep.PAYOUT
        visited = [step]
        while step in NEXT_STEP:
            step = NEXT_STEP[step]
            visited.append(step)
        assert visited == [
            WizardStep.PAYOUT,
            WizardStep.APPROVE,
            WizardStep.TRASH,
            WizardStep.ROI,
            WizardStep.COMPLETE,
        ]

    def test_complete_is_terminal(self):
        assert WizardStep.COMPLETE not in NEXT_STEP
        assert WizardStep.COMPLETE not in STEP_FIELDS

    def test_every_input_step_fills_a_field(self):
        assert set(STEP_FIELDS) == set(NEXT_STEP)
        assert sorted(STEP_FIELDS.values()) == sorted(['payout', 'approve_rate', 'trash_rate', 'roi'])


class TestSessionStore:
    """Тесты хранилища сессий"""

    def test_get_set_delete(self, store):
        assert store.get(CHAT_ID) is None
        session = WizardSession()
        store.set(CHAT_ID, session)
        assert store.get(CHAT_ID) is session
        assert CHAT_ID in store
        assert len(store) == 1
        store.delete(CHAT_ID)
        assert CHAT_ID not in store

    def test_delete_missing_is_noop(self, store):
        store.delete(CHAT_ID)
        assert len(store) == 0


class TestWizard:
    """Тесты мастера"""

    def test_start_session(self, wizard):
        reply = wizard.start_session(CHAT_ID)
        assert reply.kind is ReplyKind.PROMPT
        assert reply.step is WizardStep.PAYOUT

        session = wizard.get_session(CHAT_ID)
        assert session.step is WizardStep.PAYOUT
        assert session.data == {}

    def test_prompts_follow_steps(self, wizard):
        wizard.start_session(CHAT_ID)
        assert wizard.submit_value(CHAT_ID, "20").step is WizardStep.APPROVE
        assert wizard.submit_value(CHAT_ID, "35").step is WizardStep.TRASH
        assert wizard.submit_value(CHAT_ID, "30").step is WizardStep.ROI

        session = wizard.get_session(CHAT_ID)
        assert session.data == {'payout': 20.0, 'approve_rate': 35.0, 'trash_rate': 30.0}

    def test_full_run_matches_one_shot(self, wizard):
        """20 / 35 / 30 / 50 дает тот же результат, что /calc 20 35 30 50"""
        reply = run_wizard(wizard, CHAT_ID, ["20", "35", "30", "50"])

        assert reply.kind is ReplyKind.RESULT
        assert reply.result == CPLResult(breakeven=5.3846, lead_price=3.5897)
        assert reply.economics == LeadEconomics(20.0, 35.0, 30.0, 50.0)

    def test_session_removed_after_completion(self, wizard, store):
        run_wizard(wizard, CHAT_ID, ["20", "35", "30", "50"])

        assert wizard.get_session(CHAT_ID) is None
        assert len(store) == 0
        # Следующий ответ уже не относится к диалогу
        assert wizard.submit_value(CHAT_ID, "10") is None

    def test_decimal_comma(self, wizard):
        reply = run_wizard(wizard, CHAT_ID, ["20,0", "35,0", "30", "50,0"])
        assert reply.result == CPLResult(breakeven=5.3846, lead_price=3.5897)

    def test_comma_and_dot_are_equal(self, wizard):
        with_comma = run_wizard(wizard, 1, ["10", "35,5", "12,5", "20"])
        with_dot = run_wizard(wizard, 2, ["10", "35.5", "12.5", "20"])
        assert with_comma.result == with_dot.result

    @pytest.mark.parametrize("answered", [0, 1, 2, 3])
    def test_non_numeric_keeps_step(self, wizard, answered):
        """Не число на любом шаге: шаг не меняется, сессия жива"""
        wizard.start_session(CHAT_ID)
        for value in ["20", "35", "30"][:answered]:
            wizard.submit_value(CHAT_ID, value)
        step_before = wizard.get_session(CHAT_ID).step
        data_before = dict(wizard.get_session(CHAT_ID).data)

        reply = wizard.submit_value(CHAT_ID, "abc")

        assert reply.kind is ReplyKind.VALIDATION_ERROR
        assert reply.step is step_before
        session = wizard.get_session(CHAT_ID)
        assert session is not None
        assert session.step is step_before
        assert session.data == data_before

    def test_retry_after_validation_error(self, wizard):
        wizard.start_session(CHAT_ID)
        wizard.submit_value(CHAT_ID, "")
        wizard.submit_value(CHAT_ID, "двадцать")
        reply = wizard.submit_value(CHAT_ID, "20")
        assert reply.kind is ReplyKind.PROMPT
        assert reply.step is WizardStep.APPROVE

    def test_no_session_is_noop(self, wizard, store):
        assert wizard.submit_value(CHAT_ID, "20") is None
        assert len(store) == 0

    def test_restart_overwrites_progress(self, wizard):
        wizard.start_session(CHAT_ID)
        wizard.submit_value(CHAT_ID, "20")
        wizard.submit_value(CHAT_ID, "35")

        reply = wizard.start_session(CHAT_ID)

        assert reply.step is WizardStep.PAYOUT
        session = wizard.get_session(CHAT_ID)
        assert session.step is WizardStep.PAYOUT
        assert session.data == {}

    def test_conversations_are_independent(self, wizard):
        wizard.start_session(1)
        wizard.start_session(2)

        wizard.submit_value(1, "20")
        wizard.submit_value(2, "100")
        wizard.submit_value(1, "35")
        wizard.submit_value(2, "abc")

        assert wizard.get_session(1).data == {'payout': 20.0, 'approve_rate': 35.0}
        assert wizard.get_session(1).step is WizardStep.TRASH
        assert wizard.get_session(2).data == {'payout': 100.0}
        assert wizard.get_session(2).step is WizardStep.APPROVE

        wizard.submit_value(1, "30")
        reply = wizard.submit_value(1, "50")
        assert reply.result == CPLResult(5.3846, 3.5897)
        assert wizard.get_session(1) is None
        assert wizard.get_session(2).data == {'payout': 100.0}

    @pytest.mark.parametrize("bad_step", ["bogus", None, WizardStep.COMPLETE])
    def test_invalid_state_drops_session(self, wizard, store, bad_step):
        store.set(CHAT_ID, WizardSession(step=bad_step))

        reply = wizard.submit_value(CHAT_ID, "20")

        assert reply.kind is ReplyKind.INVALID_STATE
        assert isinstance(reply.error, InvalidSessionStateError)
        assert wizard.get_session(CHAT_ID) is None

    def test_degenerate_input(self, wizard):
        reply = run_wizard(wizard, CHAT_ID, ["20", "35", "-100", "0"])

        assert reply.kind is ReplyKind.DEGENERATE
        assert isinstance(reply.error, DegenerateInputError)
        assert reply.result is None
        assert wizard.get_session(CHAT_ID) is None
