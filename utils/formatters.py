#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Утилиты для форматирования анкет и клавиатур
"""

from typing import List, Sequence

from telegram import KeyboardButton, ReplyKeyboardMarkup, ReplyKeyboardRemove

from models.session import SurveyRecord

# Метки строк в файле анкет, в порядке записи
RECORD_LABELS = (
    ("Возраст", "age"),
    ("Статус", "investment_status"),
    ("Инструмент", "instrument"),
    ("Бюджет", "funding_capacity"),
    ("Контакт", "contact"),
)


def format_record(record: SurveyRecord) -> str:
    """
    Блок анкеты для файла: пять строк `Метка:значение`, каждая с переводом строки
    """
    lines: List[str] = []
    for label, attr in RECORD_LABELS:
        lines.append(f"{label}:{getattr(record, attr)}\n")
    return "".join(lines)


def build_choice_keyboard(choices: Sequence[str]) -> ReplyKeyboardMarkup:
    """Одна строка кнопок, клавиатура скрывается после выбора"""
    return ReplyKeyboardMarkup(
        [[KeyboardButton(choice) for choice in choices]],
        one_time_keyboard=True,
        resize_keyboard=True,
    )


def build_contact_keyboard(button_text: str) -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        [[KeyboardButton(button_text, request_contact=True)]],
        one_time_keyboard=True,
        resize_keyboard=True,
    )


def build_remove_keyboard() -> ReplyKeyboardRemove:
    return ReplyKeyboardRemove()
