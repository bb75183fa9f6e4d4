"""
FSM states for pile-driving record collection.
"""

from typing import Optional

from aiogram.fsm.state import State, StatesGroup


class RecordStates(StatesGroup):
    """States for record collection flow. No state means no record in progress."""

    selecting_pile = State()         # Выбор сваи (группы или список)
    selecting_date = State()         # Сегодня / Вчера
    entering_elevation = State()     # Отметка верха головы сваи, мм
    entering_operator = State()      # Имя оператора (можно пропустить)
    entering_notes = State()         # Примечание (можно пропустить)


def resolve_state(name: Optional[str]) -> Optional[State]:
    """Map a state name read from FSM storage back to its State; unknown names mean idle."""
    for state in RecordStates.__all_states__:
        if state.state == name:
            return state
    return None
