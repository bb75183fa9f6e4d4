"""
Reply keyboards for the record flow.
"""

from typing import Union

from aiogram.types import KeyboardButton, ReplyKeyboardMarkup, ReplyKeyboardRemove
from aiogram.utils.keyboard import ReplyKeyboardBuilder

from pilelog.core.records.machine import Reply


def build_reply_keyboard(rows: list[list[str]]) -> ReplyKeyboardMarkup:
    """Keyboard with one button per label, laid out in the given rows."""
    builder = ReplyKeyboardBuilder()
    for row in rows:
        builder.row(*(KeyboardButton(text=label) for label in row))
    return builder.as_markup(resize_keyboard=True)


def get_reply_markup(
    reply: Reply,
) -> Union[ReplyKeyboardMarkup, ReplyKeyboardRemove, None]:
    """Markup for a reply: new keyboard, keyboard removal or nothing."""
    if reply.keyboard:
        return build_reply_keyboard(reply.keyboard)
    if reply.remove_keyboard:
        return ReplyKeyboardRemove()
    return None
