from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from models.enums import (
    AgeRange,
    FundingCapacity,
    InvestmentInstrument,
    InvestmentStatus,
    SurveyState,
)


@dataclass(frozen=True)
class Contact:
    phone_number: str


@dataclass(frozen=True)
class InboundMessage:
    """Входящее событие от пользователя, уже без привязки к Telegram"""
    user_id: int
    text: Optional[str] = None
    contact: Optional[Contact] = None


# Порядок полей совпадает с порядком состояний
RECORD_FIELDS: Dict[SurveyState, str] = {
    SurveyState.AWAITING_AGE: "age",
    SurveyState.AWAITING_INVESTMENT_STATUS: "investment_status",
    SurveyState.AWAITING_INSTRUMENT: "instrument",
    SurveyState.AWAITING_FUNDING_CAPACITY: "funding_capacity",
    SurveyState.AWAITING_CONTACT: "contact",
}


@dataclass
class SurveyRecord:
    age: Optional[AgeRange] = None
    investment_status: Optional[InvestmentStatus] = None
    instrument: Optional[InvestmentInstrument] = None
    funding_capacity: Optional[FundingCapacity] = None
    contact: Optional[str] = None

    def filled_fields(self) -> List[str]:
        return [name for name in RECORD_FIELDS.values() if getattr(self, name) is not None]

    @property
    def is_complete(self) -> bool:
        return len(self.filled_fields()) == len(RECORD_FIELDS)

    def set_field(self, state: SurveyState, value: Any) -> None:
        name = RECORD_FIELDS[state]
        if getattr(self, name) is not None:
            raise ValueError(f"field {name!r} is already set")
        setattr(self, name, value)

    def to_dict(self) -> Dict[str, Optional[str]]:
        result: Dict[str, Optional[str]] = {}
        for name in RECORD_FIELDS.values():
            value = getattr(self, name)
            result[name] = str(value) if value is not None else None
        return result


@dataclass
class SurveySession:
    user_id: int

    state: SurveyState = SurveyState.AWAITING_AGE
    record: SurveyRecord = field(default_factory=SurveyRecord)

    # meta
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None
    # анкета дописана в хранилище; до этого запись повторяется
    persisted: bool = False

    # -------------------------
    # lifecycle helpers
    # -------------------------
    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    @property
    def is_complete(self) -> bool:
        return self.state.is_terminal

    def accept(self, value: Any) -> SurveyState:
        """Записать ответ на текущий вопрос и перейти к следующему"""
        self.record.set_field(self.state, value)
        self.state = self.state.next_state
        if self.state.is_terminal:
            self.completed_at = datetime.utcnow()
        self.touch()
        return self.state

    @property
    def awaits_persistence(self) -> bool:
        return self.is_complete and not self.persisted

    def mark_persisted(self) -> None:
        self.persisted = True
        self.touch()
