"""Утилиты"""
from .logger import setup_logging, bot_logger
from .formatters import format_record, build_choice_keyboard, build_contact_keyboard

__all__ = [
    'setup_logging',
    'bot_logger',
    'format_record',
    'build_choice_keyboard',
    'build_contact_keyboard',
]
