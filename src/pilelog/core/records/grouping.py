"""
Pile grouping for drill-down selection menus.

A long list of pile numbers does not fit on a reply keyboard, so it is cut
into at most ``max_groups`` contiguous ranges labelled ``first..last``. The
operator picks a range, the range is cut again, and so on until few enough
piles remain to show them one button each.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


GROUP_DELIMITER = ".."


@dataclass(frozen=True)
class Group:
    """Contiguous run of pile numbers shown as one menu button."""
    piles: tuple[str, ...]

    @property
    def first(self) -> str:
        return self.piles[0]

    @property
    def last(self) -> str:
        return self.piles[-1]

    @property
    def label(self) -> str:
        """Button label, e.g. ``P-1..P-4``."""
        return f"{self.first}{GROUP_DELIMITER}{self.last}"

    @property
    def is_single(self) -> bool:
        return len(self.piles) == 1

    def __len__(self) -> int:
        return len(self.piles)


def compute_groups(piles: Sequence[str], max_groups: int) -> list[Group]:
    """
    Split piles into contiguous groups for a selection menu.

    Args:
        piles: Pile numbers in display order
        max_groups: Maximum number of groups (menu buttons)

    Returns:
        One single-pile group per pile when ``len(piles) <= max_groups``,
        otherwise exactly ``max_groups`` groups whose sizes differ by at
        most one, larger groups first.
    """
    if max_groups < 1:
        raise ValueError(f"max_groups must be positive, got {max_groups}")

    if len(piles) <= max_groups:
        return [Group((pile,)) for pile in piles]

    group_size, remainder = divmod(len(piles), max_groups)

    groups = []
    start = 0
    for i in range(max_groups):
        end = start + group_size
        if i < remainder:
            end += 1
        groups.append(Group(tuple(piles[start:end])))
        start = end

    return groups


def is_group_label(text: str) -> bool:
    """Check if text looks like a group button label."""
    return GROUP_DELIMITER in text


def find_group_by_label(
    history: Sequence[Sequence[Group]], label: str
) -> Optional[list[str]]:
    """
    Find the piles behind a group label.

    Menu levels are searched from the most recently shown one back to the
    first, so a label repeated on a deeper level resolves to that level.
    """
    for level in reversed(history):
        for group in level:
            if group.label == label:
                return list(group.piles)
    return None
