"""
Исключения бота-анкеты
"""
from typing import Optional

from models.enums import SurveyState


class SurveyError(Exception):
    """Базовое исключение проекта"""


class ValidationRejected(SurveyError):
    """Ответ не подходит к текущему вопросу; лечится повторным вопросом"""

    # причины отказа
    INVALID_CHOICE = "invalid_choice"
    NO_TEXT = "no_text"
    NO_CONTACT = "no_contact"
    EMPTY_PHONE = "empty_phone"

    def __init__(self, state: SurveyState, reason: str, raw: Optional[str] = None):
        self.state = state
        self.reason = reason
        self.raw = raw
        super().__init__(f"{state.value}: {reason}")


class RecordSinkError(SurveyError):
    """Не удалось дописать заполненную анкету в хранилище"""


class ConfigError(SurveyError):
    """Ошибка конфигурации при запуске"""
