#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Основной класс бота-анкеты
"""

import logging
from typing import Optional

from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters
)

from config.settings import BotConfig, load_messages
from core.controller import SurveyController
from handlers.survey import error_handler, handle_message, help_command, start_command
from services.record_sink import FileRecordSink, RecordSink
from services.session_store import SessionStore

logger = logging.getLogger(__name__)


class SurveyBot:
    """Бот, собирающий анкеты инвесторов"""

    def __init__(self, config: BotConfig, record_sink: Optional[RecordSink] = None):
        """
        Инициализация бота

        Args:
            config: Объект конфигурации BotConfig
            record_sink: Хранилище анкет; по умолчанию файл из конфигурации
        """
        self.config = config
        self.application: Optional[Application] = None
        self.session_store = SessionStore()
        self.record_sink = record_sink or FileRecordSink(config.data_file)
        self.controller = SurveyController(self.session_store, load_messages(config.messages_file))

        logger.info(f"🤖 Бот инициализирован. Анкеты пишутся в: {config.data_file}")

    def build_application(self) -> Application:
        """Создать Application и зарегистрировать обработчики"""
        application = Application.builder() \
            .token(self.config.telegram_token) \
            .post_init(self._post_init) \
            .post_shutdown(self._post_shutdown) \
            .build()

        application.bot_data["controller"] = self.controller
        application.bot_data["session_store"] = self.session_store
        application.bot_data["record_sink"] = self.record_sink

        self._setup_handlers(application)
        self.application = application
        return application

    def run(self):
        """Запуск бота в режиме polling"""
        self.config.validate()
        application = self.build_application()

        logger.info("🔄 Запуск бота в режиме polling...")
        application.run_polling(
            allowed_updates=["message"],
            drop_pending_updates=True,
        )

    def _setup_handlers(self, application: Application):
        """Настройка обработчиков команд и сообщений"""
        private = filters.ChatType.PRIVATE

        application.add_handler(CommandHandler("start", start_command, filters=private))
        application.add_handler(CommandHandler("help", help_command, filters=private))

        # Ответы на вопросы: любое не-командное сообщение, включая контакт
        application.add_handler(MessageHandler(
            private & ~filters.COMMAND,
            handle_message
        ))

        application.add_error_handler(error_handler)

        logger.info("✅ Обработчики зарегистрированы")

    async def _post_init(self, application: Application):
        """Вызывается после инициализации бота"""
        logger.info("✅ Бот инициализирован и готов к работе")

    async def _post_shutdown(self, application: Application):
        """Вызывается перед выключением бота"""
        logger.info(
            f"🛑 Бот выключается. Сессий: {self.session_store.get_session_count()}, "
            f"завершено анкет: {self.session_store.get_completed_count()}"
        )
