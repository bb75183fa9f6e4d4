"""
Record models for the pile-driving log bot.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


# Date format shown to operators
DATE_FORMAT = "%d.%m.%Y"


@dataclass
class PendingRecord:
    """Pile-driving record being filled in by the operator."""
    project_id: int
    pile_field_id: Optional[int] = None
    pile_number: Optional[str] = None
    start_date: Optional[datetime] = None   # Полночь по UTC
    fact_pile_head: Optional[int] = None    # Отметка верха головы сваи, мм
    recorded_by: Optional[str] = None
    notes: Optional[str] = None             # Только в диалоге, на сервер не уходит

    @property
    def start_date_display(self) -> str:
        """Driving date as DD.MM.YYYY."""
        if self.start_date is None:
            return ""
        return self.start_date.strftime(DATE_FORMAT)

    def to_dict(self) -> dict:
        """Convert to dictionary for FSM storage."""
        return {
            "project_id": self.project_id,
            "pile_field_id": self.pile_field_id,
            "pile_number": self.pile_number,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "fact_pile_head": self.fact_pile_head,
            "recorded_by": self.recorded_by,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PendingRecord":
        """Restore record saved with to_dict."""
        return cls(
            project_id=data["project_id"],
            pile_field_id=data.get("pile_field_id"),
            pile_number=data.get("pile_number"),
            start_date=(
                datetime.fromisoformat(data["start_date"]) if data.get("start_date") else None
            ),
            fact_pile_head=data.get("fact_pile_head"),
            recorded_by=data.get("recorded_by"),
            notes=data.get("notes"),
        )

    def to_payload(self) -> dict:
        """Convert to the web service JSON schema."""
        start_date = self.start_date
        if start_date is not None:
            start_date = start_date.astimezone(timezone.utc)
        return {
            "project_id": self.project_id,
            "pile_number": self.pile_number or "",
            "pile_field_id": self.pile_field_id or 0,
            "start_date": (
                start_date.strftime("%Y-%m-%dT%H:%M:%SZ") if start_date else None
            ),
            "fact_pile_head": self.fact_pile_head or 0,
            "recorded_by": self.recorded_by or "",
        }

    def format_summary(self) -> str:
        """Format record as text for the confirmation message."""
        lines = [
            f"Номер сваи: {self.pile_number}",
            f"Дата забивки: {self.start_date_display}",
            f"Отметка верха: {self.fact_pile_head} мм",
        ]
        if self.recorded_by:
            lines.append(f"Оператор: {self.recorded_by}")
        if self.notes:
            lines.append(f"Примечание: {self.notes}")
        return "\n".join(lines)


@dataclass
class SubmissionResult:
    """Outcome of posting a record to the web service."""
    success: bool
    server_message: str = ""
    status_code: Optional[int] = None    # None when the request never got a response
