"""
Модели данных бота-анкеты
"""
from .enums import (
    AgeRange,
    InvestmentStatus,
    InvestmentInstrument,
    FundingCapacity,
    SurveyState,
    CHOICE_SETS,
)
from .session import Contact, InboundMessage, SurveyRecord, SurveySession

__all__ = [
    "AgeRange",
    "InvestmentStatus",
    "InvestmentInstrument",
    "FundingCapacity",
    "SurveyState",
    "CHOICE_SETS",
    "Contact",
    "InboundMessage",
    "SurveyRecord",
    "SurveySession",
]
