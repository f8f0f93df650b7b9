from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from telegram import Bot, Update
from telegram.ext import ContextTypes

from core.controller import (
    AppendRecord,
    Effect,
    SendChoicePrompt,
    SendContactRequest,
    SendText,
    SurveyController,
)
from models.session import Contact, InboundMessage
from services.record_sink import RecordSink
from services.session_store import SessionStore
from utils.formatters import build_choice_keyboard, build_contact_keyboard, build_remove_keyboard
from utils.logger import bot_logger

logger = logging.getLogger(__name__)


class TelegramGateway:
    """Отправка сообщений пользователю через Telegram Bot API"""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_choice_prompt(self, user_id: int, text: str, choices: Sequence[str]) -> None:
        await self.bot.send_message(
            chat_id=user_id,
            text=text,
            reply_markup=build_choice_keyboard(choices),
        )

    async def send_contact_request(self, user_id: int, text: str, button_text: str) -> None:
        await self.bot.send_message(
            chat_id=user_id,
            text=text,
            reply_markup=build_contact_keyboard(button_text),
        )

    async def send_text(self, user_id: int, text: str, remove_keyboard: bool = False) -> None:
        await self.bot.send_message(
            chat_id=user_id,
            text=text,
            reply_markup=build_remove_keyboard() if remove_keyboard else None,
        )


async def perform_effects(
    effects: List[Effect],
    gateway: TelegramGateway,
    sink: RecordSink,
    controller: SurveyController,
) -> None:
    """Выполнить действия контроллера по порядку"""
    for effect in effects:
        if isinstance(effect, SendChoicePrompt):
            await gateway.send_choice_prompt(effect.user_id, effect.text, effect.choices)
        elif isinstance(effect, SendContactRequest):
            await gateway.send_contact_request(effect.user_id, effect.text, effect.button_text)
        elif isinstance(effect, SendText):
            await gateway.send_text(effect.user_id, effect.text, effect.remove_keyboard)
        elif isinstance(effect, AppendRecord):
            # RecordSinkError уходит в общий обработчик ошибок приложения;
            # анкета остается незаписанной и повторится при следующем событии
            await asyncio.to_thread(sink.append, effect.record)
            controller.record_persisted(effect.user_id)
        else:
            raise TypeError(f"Unknown effect: {effect!r}")


def extract_inbound(update: Update) -> Optional[InboundMessage]:
    """Собрать входящее событие из Update; None если нет пользователя или сообщения"""
    user = update.effective_user
    message = update.effective_message
    if user is None or message is None:
        return None

    contact = None
    if message.contact is not None:
        contact = Contact(phone_number=message.contact.phone_number or "")

    return InboundMessage(user_id=user.id, text=message.text, contact=contact)


# -------------------------------------------------
# Handlers
# -------------------------------------------------
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Ответ на вопрос анкеты: текст или контакт"""
    inbound = extract_inbound(update)
    if inbound is None:
        return

    controller: SurveyController = context.bot_data["controller"]
    store: SessionStore = context.bot_data["session_store"]
    sink: RecordSink = context.bot_data["record_sink"]

    async with store.lock_for(inbound.user_id):
        session = store.get_or_create(inbound.user_id)
        question = session.state
        effects = controller.handle_inbound(inbound)

        if session.state is not question:
            answer = inbound.text if inbound.contact is None else inbound.contact.phone_number
            bot_logger.log_question_event(inbound.user_id, question.value, answer or "")

        await perform_effects(effects, TelegramGateway(context.bot), sink, controller)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработчик команды /start"""
    user = update.effective_user
    if user is None:
        return

    controller: SurveyController = context.bot_data["controller"]
    store: SessionStore = context.bot_data["session_store"]
    sink: RecordSink = context.bot_data["record_sink"]

    async with store.lock_for(user.id):
        bot_logger.log_session_event(user.id, "/start", store.get_or_create(user.id).state.value)
        effects = controller.greet(user.id)
        await perform_effects(effects, TelegramGateway(context.bot), sink, controller)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработчик команды /help"""
    controller: SurveyController = context.bot_data["controller"]
    await update.effective_message.reply_text(controller.messages.help)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Логирование ошибок, не пойманных обработчиками"""
    user_id = None
    if isinstance(update, Update) and update.effective_user:
        user_id = update.effective_user.id
    error = context.error
    bot_logger.log_error(type(error).__name__, str(error), user_id)
    logger.error("Необработанное исключение", exc_info=error)
