"""
Перечисления для бота-анкеты инвестора
"""
from enum import Enum
from typing import Dict, List, Optional, Type


class ChoiceEnum(Enum):
    """Вариант ответа; значение члена совпадает с текстом кнопки"""

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def labels(cls) -> List[str]:
        """Подписи кнопок в порядке объявления"""
        return [member.value for member in cls]

    @classmethod
    def from_label(cls, text: str) -> Optional["ChoiceEnum"]:
        """Точное (с учетом регистра) совпадение с подписью"""
        for member in cls:
            if member.value == text:
                return member
        return None

    def __str__(self) -> str:
        return self.value


class AgeRange(ChoiceEnum):
    EIGHTEEN_TO_TWENTY_FIVE = "18-25"
    TWENTY_FIVE_TO_FORTY = "25-40"
    FORTY_TO_FIFTY = "40-50"
    FIFTY_PLUS = "50+"


class InvestmentStatus(ChoiceEnum):
    NO_EXPERIENCE = "Не было опыта"
    NEGATIVE = "Минус"
    BREAKEVEN = "В нуле"
    POSITIVE = "Плюс"
    STRONGLY_POSITIVE = "Большой плюс"


class InvestmentInstrument(ChoiceEnum):
    NONE = "Нет"
    STOCKS = "Акции"
    REAL_ESTATE = "Недвижимость"
    CRYPTO = "Криптовалюта"
    BANK_DEPOSITS = "Вклады"


class FundingCapacity(ChoiceEnum):
    UNDER_1M = "<1 миллиона"
    FROM_1M_TO_5M = "1-5 миллионов"
    FROM_5M_TO_10M = "5-10 миллионов"
    OVER_10M = "Более 10 миллионов"


class SurveyState(Enum):
    """Состояния диалога; каждое ждет одно незаполненное поле анкеты"""
    AWAITING_AGE = "awaiting_age"
    AWAITING_INVESTMENT_STATUS = "awaiting_investment_status"
    AWAITING_INSTRUMENT = "awaiting_instrument"
    AWAITING_FUNDING_CAPACITY = "awaiting_funding_capacity"
    AWAITING_CONTACT = "awaiting_contact"
    COMPLETE = "complete"

    @property
    def next_state(self) -> "SurveyState":
        if self is SurveyState.COMPLETE:
            raise ValueError("COMPLETE is terminal")
        return SURVEY_ORDER[SURVEY_ORDER.index(self) + 1]

    @property
    def is_terminal(self) -> bool:
        return self is SurveyState.COMPLETE


SURVEY_ORDER: List[SurveyState] = list(SurveyState)

# Единый источник вариантов: из него читают и валидатор, и клавиатуры
CHOICE_SETS: Dict[SurveyState, Type[ChoiceEnum]] = {
    SurveyState.AWAITING_AGE: AgeRange,
    SurveyState.AWAITING_INVESTMENT_STATUS: InvestmentStatus,
    SurveyState.AWAITING_INSTRUMENT: InvestmentInstrument,
    SurveyState.AWAITING_FUNDING_CAPACITY: FundingCapacity,
}


def choices_for(state: SurveyState) -> List[str]:
    """Подписи кнопок для вопроса; пустой список для контакта и завершения"""
    choice_enum = CHOICE_SETS.get(state)
    return choice_enum.labels() if choice_enum else []
