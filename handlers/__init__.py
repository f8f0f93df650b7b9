"""Обработчики команд и сообщений"""
from .survey import (
    TelegramGateway,
    error_handler,
    handle_message,
    help_command,
    start_command,
)

__all__ = [
    "TelegramGateway",
    "error_handler",
    "handle_message",
    "help_command",
    "start_command",
]
