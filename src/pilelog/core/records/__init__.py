"""
Records module for the pile-driving log bot.
Handles pile selection, record collection and conversation state.
"""

from pilelog.core.records.models import PendingRecord, SubmissionResult
from pilelog.core.records.states import RecordStates
from pilelog.core.records.grouping import Group, compute_groups, find_group_by_label
from pilelog.core.records.sessions import Session, SessionStore
from pilelog.core.records.validators import DrivingDateValidator, ElevationValidator

__all__ = [
    # Models
    "PendingRecord",
    "SubmissionResult",
    # States
    "RecordStates",
    # Grouping
    "Group",
    "compute_groups",
    "find_group_by_label",
    # Sessions
    "Session",
    "SessionStore",
    # Validators
    "DrivingDateValidator",
    "ElevationValidator",
]
