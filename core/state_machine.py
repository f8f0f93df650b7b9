"""
Машина состояний одной сессии анкеты
"""
import logging
from dataclasses import dataclass
from typing import Union

from core.exceptions import ValidationRejected
from core.validator import validate
from models.enums import SurveyState
from models.session import InboundMessage, SurveyRecord, SurveySession

logger = logging.getLogger(__name__)

# Причина отказа для завершенной сессии
COMPLETED = "completed"


@dataclass(frozen=True)
class Rejected:
    """Ввод отклонен; state — вопрос, который нужно задать повторно"""
    state: SurveyState
    reason: str

    @property
    def has_prompt(self) -> bool:
        return not self.state.is_terminal


@dataclass(frozen=True)
class Advanced:
    """Ответ принят; state — следующий вопрос"""
    state: SurveyState


@dataclass(frozen=True)
class Finished:
    record: SurveyRecord


Outcome = Union[Rejected, Advanced, Finished]


def advance(session: SurveySession, inbound: InboundMessage) -> Outcome:
    """
    Применить входящее сообщение к сессии

    Ровно одно поле анкеты заполняется на каждый принятый ответ, в
    фиксированном порядке. Завершенная сессия не меняется.
    """
    if session.is_complete:
        return Rejected(SurveyState.COMPLETE, COMPLETED)

    current: SurveyState = session.state
    try:
        value = validate(current, inbound.text, inbound.contact)
    except ValidationRejected as e:
        logger.debug("User %s: отклонен ввод в %s (%s)", session.user_id, current.value, e.reason)
        return Rejected(current, e.reason)

    next_state = session.accept(value)
    if next_state.is_terminal:
        return Finished(session.record)
    return Advanced(next_state)

