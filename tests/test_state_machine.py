import copy

import pytest

from conftest import HAPPY_PATH, USER_ID
from core.state_machine import COMPLETED, Advanced, Finished, Rejected, advance
from models.enums import (
    SURVEY_ORDER,
    AgeRange,
    FundingCapacity,
    InvestmentInstrument,
    InvestmentStatus,
    SurveyState,
)
from models.session import Contact, InboundMessage, SurveyRecord, SurveySession


def session_in(state: SurveyState) -> SurveySession:
    """Сессия, доведенная по счастливому пути до нужного вопроса"""
    session = SurveySession(user_id=USER_ID)
    for inbound in HAPPY_PATH:
        if session.state is state:
            break
        advance(session, inbound)
    assert session.state is state
    return session


def test_happy_path_outcomes_and_record():
    session = SurveySession(user_id=USER_ID)
    outcomes = [advance(session, inbound) for inbound in HAPPY_PATH]

    assert [type(o) for o in outcomes] == [Advanced, Advanced, Advanced, Advanced, Finished]
    assert [o.state for o in outcomes[:4]] == SURVEY_ORDER[1:5]

    record = outcomes[-1].record
    assert record == SurveyRecord(
        age=AgeRange.EIGHTEEN_TO_TWENTY_FIVE,
        investment_status=InvestmentStatus.NO_EXPERIENCE,
        instrument=InvestmentInstrument.STOCKS,
        funding_capacity=FundingCapacity.OVER_10M,
        contact="+1234567890",
    )
    assert record.is_complete
    assert session.state is SurveyState.COMPLETE
    assert session.completed_at is not None


def test_invalid_age_keeps_session_untouched():
    session = SurveySession(user_id=USER_ID)
    outcome = advance(session, InboundMessage(USER_ID, text="30-40"))

    assert outcome == Rejected(SurveyState.AWAITING_AGE, "invalid_choice")
    assert outcome.has_prompt
    assert session.state is SurveyState.AWAITING_AGE
    assert session.record == SurveyRecord()


def test_empty_phone_is_rejected_and_contact_stays_unset():
    session = session_in(SurveyState.AWAITING_CONTACT)
    outcome = advance(session, InboundMessage(USER_ID, contact=Contact(phone_number="")))

    assert isinstance(outcome, Rejected)
    assert outcome.state is SurveyState.AWAITING_CONTACT
    assert session.state is SurveyState.AWAITING_CONTACT
    assert session.record.contact is None


@pytest.mark.parametrize("state", SURVEY_ORDER[:-1])
@pytest.mark.parametrize(
    "inbound",
    [
        InboundMessage(USER_ID, text="не то"),
        InboundMessage(USER_ID, text=None),
        InboundMessage(USER_ID, contact=Contact(phone_number="")),
    ],
)
def test_rejection_leaves_state_and_record_unchanged(state, inbound):
    session = session_in(state)
    before = copy.deepcopy(session.record)

    outcome = advance(session, inbound)

    assert isinstance(outcome, Rejected)
    assert outcome.state is state
    assert session.state is state
    assert session.record == before


@pytest.mark.parametrize("step", range(len(HAPPY_PATH)))
def test_valid_input_fills_exactly_one_field_in_order(step):
    state = SURVEY_ORDER[step]
    session = session_in(state)
    before = copy.deepcopy(session.record)

    advance(session, HAPPY_PATH[step])

    assert session.state is SURVEY_ORDER[step + 1]
    assert session.record.filled_fields() == before.filled_fields() + [
        ["age", "investment_status", "instrument", "funding_capacity", "contact"][step]
    ]
    for name in before.filled_fields():
        assert getattr(session.record, name) == getattr(before, name)


def test_completed_session_ignores_further_input():
    session = session_in(SurveyState.COMPLETE)
    before = copy.deepcopy(session.record)
    updated_at = session.updated_at

    for inbound in HAPPY_PATH:
        outcome = advance(session, inbound)
        assert outcome == Rejected(SurveyState.COMPLETE, COMPLETED)
        assert not outcome.has_prompt

    assert session.state is SurveyState.COMPLETE
    assert session.record == before
    assert session.updated_at == updated_at


def test_answer_for_later_question_does_not_skip_ahead():
    session = SurveySession(user_id=USER_ID)
    outcome = advance(session, InboundMessage(USER_ID, text="Более 10 миллионов"))

    assert isinstance(outcome, Rejected)
    assert session.state is SurveyState.AWAITING_AGE
    assert session.record.funding_capacity is None


def test_record_field_cannot_be_overwritten():
    record = SurveyRecord(age=AgeRange.FIFTY_PLUS)
    with pytest.raises(ValueError):
        record.set_field(SurveyState.AWAITING_AGE, AgeRange.EIGHTEEN_TO_TWENTY_FIVE)
    assert record.age is AgeRange.FIFTY_PLUS


def test_next_state_of_complete_is_an_error():
    with pytest.raises(ValueError):
        SurveyState.COMPLETE.next_state
