"""
Validators for pile-driving record data.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

from pilelog.core.records.messages import TODAY_LABEL, YESTERDAY_LABEL


class ElevationValidator:
    """Validate pile head elevation in millimetres."""

    # Optional sign and up to nine digits, fits a 32-bit integer
    ELEVATION_PATTERN = re.compile(r'^[+-]?\d{1,9}$')

    @classmethod
    def validate(cls, text: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Validate and parse elevation.

        Returns:
            Tuple of (is_valid, elevation_mm, error_message)
        """
        # "12 750" is accepted as 12750
        text = text.strip().replace(" ", "")

        if not cls.ELEVATION_PATTERN.match(text):
            return False, None, (
                "Неверный формат числа. Пожалуйста, введите отметку "
                "в миллиметрах (например, 12750):"
            )

        return True, int(text), None


class DrivingDateValidator:
    """Resolve the quick date buttons into a driving date."""

    # Days back from today for each button
    DAY_OFFSETS = {
        TODAY_LABEL: 0,
        YESTERDAY_LABEL: 1,
    }

    @classmethod
    def validate(
        cls,
        text: str,
        now: Callable[[], datetime] = datetime.now,
    ) -> Tuple[bool, Optional[datetime], Optional[str]]:
        """
        Validate date choice.

        The local calendar date is taken from ``now`` and stored as midnight
        UTC, which is what the web service expects.

        Returns:
            Tuple of (is_valid, start_date, error_message)
        """
        offset = cls.DAY_OFFSETS.get(text.strip())

        if offset is None:
            return False, None, "Пожалуйста, выберите одну из предложенных дат"

        day = now().date() - timedelta(days=offset)
        start_date = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

        return True, start_date, None
