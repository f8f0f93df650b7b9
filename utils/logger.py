#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Настройка логирования
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Библиотеки, которым хватает WARNING
NOISY_LOGGERS = ('telegram', 'httpx', 'asyncio')


class BotLogger:
    """Логи бота: файл за день плюс stdout, события анкеты в отдельных логгерах"""

    def __init__(self, log_dir: str = "logs", log_level: int = logging.INFO):
        self.log_dir = Path(log_dir)
        self.log_level = log_level
        self.log_file: Optional[Path] = None

        self.session_log = logging.getLogger("session")
        self.answer_log = logging.getLogger("questionnaire")
        self.error_log = logging.getLogger("error")

    def setup(self, bot_name: str = "survey_bot"):
        """Повторный вызов ничего не делает"""
        if self.log_file is not None:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"{bot_name}_{datetime.now():%Y%m%d}.log"

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers = [
            logging.FileHandler(self.log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout),
        ]

        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.setLevel(self.log_level)
            root_logger.addHandler(handler)

        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        logging.info(f"🚀 Бот запущен: {bot_name}, логи: {self.log_file}, "
                     f"уровень: {logging.getLevelName(self.log_level)}")

    def log_startup_info(self, config_info: Dict[str, Any]):
        """Конфигурация при запуске; токен маскируется"""
        logger = logging.getLogger(__name__)
        logger.info("📋 КОНФИГУРАЦИЯ БОТА:")
        for key, value in config_info.items():
            if key.endswith('token'):
                value = '***' + str(value)[-4:] if value else 'НЕ УСТАНОВЛЕН'
            logger.info(f"  {key}: {value}")

    def log_session_event(self, user_id: int, event: str, details: str = ""):
        message = f"👤 User {user_id}: {event}"
        if details:
            message += f" - {details}"
        self.session_log.info(message)

    def log_question_event(self, user_id: int, question_id: str, answer: str = ""):
        """Принятый ответ на вопрос анкеты"""
        if len(answer) > 100:
            answer = answer[:100] + "..."
        self.answer_log.info(f"❓ User {user_id}: {question_id} - A: {answer}")

    def log_error(self, error_type: str, error_message: str, user_id: Optional[int] = None):
        prefix = f"User {user_id}: " if user_id else ""
        self.error_log.error(f"💥 {prefix}{error_type} - {error_message}")


# Глобальный экземпляр логгера
bot_logger = BotLogger()


def setup_logging(log_level: int = logging.INFO, log_dir: str = "logs", bot_name: str = "survey_bot") -> BotLogger:
    """Функция для быстрой настройки логирования"""
    bot_logger.log_level = log_level
    bot_logger.log_dir = Path(log_dir)
    bot_logger.setup(bot_name)
    return bot_logger
