"""
Проверка ответов пользователя по набору допустимых вариантов
"""
from typing import Optional, Union

from core.exceptions import ValidationRejected
from models.enums import CHOICE_SETS, ChoiceEnum, SurveyState
from models.session import Contact


def validate(
    state: SurveyState,
    text: Optional[str],
    contact: Optional[Contact] = None,
) -> Union[ChoiceEnum, str]:
    """
    Сопоставить ввод с вариантом ответа для текущего вопроса

    Args:
        state: Текущее состояние сессии (какой вопрос ждет ответа)
        text: Текст сообщения, None для сообщений без текста
        contact: Контакт, приложенный к сообщению

    Returns:
        Значение перечисления, для вопроса о контакте — номер телефона

    Raises:
        ValidationRejected: ввод не подходит к вопросу
    """
    if state is SurveyState.AWAITING_CONTACT:
        return _validate_contact(contact)

    choice_enum = CHOICE_SETS.get(state)
    if choice_enum is None:
        raise ValueError(f"No question pending in state {state.value}")

    if text is None:
        raise ValidationRejected(state, ValidationRejected.NO_TEXT)

    # Только точное совпадение, без обрезки пробелов и смены регистра
    value = choice_enum.from_label(text)
    if value is None:
        raise ValidationRejected(state, ValidationRejected.INVALID_CHOICE, raw=text)
    return value


def _validate_contact(contact: Optional[Contact]) -> str:
    state = SurveyState.AWAITING_CONTACT
    if contact is None:
        raise ValidationRejected(state, ValidationRejected.NO_CONTACT)
    if not contact.phone_number:
        raise ValidationRejected(state, ValidationRejected.EMPTY_PHONE)
    return contact.phone_number
