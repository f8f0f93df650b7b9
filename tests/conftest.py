import pytest

from config.settings import load_messages
from core.controller import SurveyController
from models.session import Contact, InboundMessage
from services.session_store import SessionStore

USER_ID = 42

HAPPY_PATH = [
    InboundMessage(USER_ID, text="18-25"),
    InboundMessage(USER_ID, text="Не было опыта"),
    InboundMessage(USER_ID, text="Акции"),
    InboundMessage(USER_ID, text="Более 10 миллионов"),
    InboundMessage(USER_ID, contact=Contact(phone_number="+1234567890")),
]


@pytest.fixture
def messages():
    return load_messages()


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def controller(store, messages):
    return SurveyController(store, messages)
