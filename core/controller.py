"""
Контроллер анкеты: событие пользователя -> список действий
"""
import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from config.settings import Messages
from core.state_machine import Advanced, Finished, Rejected, advance
from models.enums import SurveyState, choices_for
from models.session import InboundMessage, SurveyRecord, SurveySession
from services.session_store import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendChoicePrompt:
    user_id: int
    text: str
    choices: Tuple[str, ...]


@dataclass(frozen=True)
class SendContactRequest:
    user_id: int
    text: str
    button_text: str


@dataclass(frozen=True)
class SendText:
    user_id: int
    text: str
    remove_keyboard: bool = False


@dataclass(frozen=True)
class AppendRecord:
    user_id: int
    record: SurveyRecord


Effect = Union[SendChoicePrompt, SendContactRequest, SendText, AppendRecord]


class SurveyController:
    """Тонкий диспетчер между хранилищем сессий и машиной состояний"""

    def __init__(self, store: SessionStore, messages: Messages):
        self.store = store
        self.messages = messages

    def handle_inbound(self, inbound: InboundMessage) -> List[Effect]:
        session = self.store.get_or_create(inbound.user_id)
        outcome = advance(session, inbound)

        if isinstance(outcome, Rejected):
            if not outcome.has_prompt:
                return self._pending_append(session)
            hint = self.messages.hint(outcome.state, outcome.reason)
            return [SendText(inbound.user_id, hint), self._prompt(inbound.user_id, outcome.state)]

        if isinstance(outcome, Advanced):
            return [self._prompt(inbound.user_id, outcome.state)]

        if isinstance(outcome, Finished):
            logger.info(f"📋 Анкета пользователя {inbound.user_id} заполнена: {outcome.record.to_dict()}")
            return [
                SendText(inbound.user_id, self.messages.finished, remove_keyboard=True),
                AppendRecord(inbound.user_id, outcome.record),
            ]

        raise TypeError(f"Unexpected outcome: {outcome!r}")

    def greet(self, user_id: int) -> List[Effect]:
        """Приветствие по /start; состояние сессии не меняется"""
        session: SurveySession = self.store.get_or_create(user_id)
        if session.is_complete:
            notice = SendText(user_id, self.messages.already_completed, remove_keyboard=True)
            return [notice] + self._pending_append(session)
        return [self._prompt(user_id, session.state, greeting=True)]

    def record_persisted(self, user_id: int) -> None:
        """Хранилище приняло анкету; повторная запись больше не нужна"""
        self.store.get_or_create(user_id).mark_persisted()

    def _pending_append(self, session: SurveySession) -> List[Effect]:
        # Запись не удалась раньше: повторяем ее, advance не вызывается
        if session.awaits_persistence:
            logger.warning(f"🔁 Повторная запись анкеты пользователя {session.user_id}")
            return [AppendRecord(session.user_id, session.record)]
        return []

    def _prompt(self, user_id: int, state: SurveyState, greeting: bool = False) -> Effect:
        text = self.messages.question(state)
        if greeting:
            text = f"{self.messages.greeting}\n{text}"

        if state is SurveyState.AWAITING_CONTACT:
            return SendContactRequest(user_id, text, self.messages.contact_button)
        return SendChoicePrompt(user_id, text, tuple(choices_for(state)))
