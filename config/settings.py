#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Конфигурационные настройки бота
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from core.exceptions import ConfigError
from models.enums import SurveyState

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent
DEFAULT_MESSAGES_FILE = CONFIG_DIR / "messages.yaml"


@dataclass
class Messages:
    """Тексты сообщений бота"""

    greeting: str
    questions: Dict[str, str]
    hints: Dict[str, str]
    contact_button: str
    finished: str
    already_completed: str
    help: str

    def question(self, state: SurveyState) -> str:
        return self.questions[state.value]

    def hint(self, state: SurveyState, reason: str) -> str:
        """
        Подсказка при неверном ответе

        Сначала ищется текст по причине отказа (для контакта), затем по
        вопросу, затем общий.
        """
        if reason in self.hints:
            return self.hints[reason]
        return self.hints.get(state.value, self.hints["default"])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Messages":
        try:
            messages = cls(
                greeting=data["greeting"],
                questions=dict(data["questions"]),
                hints=dict(data["hints"]),
                contact_button=data["contact_button"],
                finished=data["finished"],
                already_completed=data["already_completed"],
                help=data["help"],
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Invalid messages config: {e}") from e

        missing = [s.value for s in SurveyState if not s.is_terminal and s.value not in messages.questions]
        if missing:
            raise ConfigError(f"No question text for: {', '.join(missing)}")
        if "default" not in messages.hints:
            raise ConfigError("No default hint")
        return messages


def load_messages(path: Union[str, Path] = DEFAULT_MESSAGES_FILE) -> Messages:
    """Загрузить тексты из YAML файла"""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load messages from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Messages file {path} must contain a mapping")

    messages = Messages.from_dict(data)
    logger.info(f"✅ Загружены тексты из {path}")
    return messages


@dataclass
class BotConfig:
    """Конфигурация бота"""

    # Токены и ключи
    telegram_token: str = field(default_factory=lambda: os.getenv('TELEGRAM_BOT_TOKEN', ''))

    # Хранилище анкет
    data_file: str = field(default_factory=lambda: os.getenv('SURVEY_DATA_FILE', 'data.txt'))

    # Логирование
    log_level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    log_dir: str = field(default_factory=lambda: os.getenv('LOG_DIR', 'logs'))

    # Тексты
    messages_file: str = field(default_factory=lambda: os.getenv('MESSAGES_FILE', str(DEFAULT_MESSAGES_FILE)))

    def validate(self) -> None:
        if not self.telegram_token:
            raise ConfigError("TELEGRAM_BOT_TOKEN должен быть установлен")

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "telegram_token": self.telegram_token,
            "data_file": self.data_file,
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            "messages_file": self.messages_file,
        }
