"""Commit message indicators: templated and generic messages."""

import re
from typing import Sequence

from ..math import percentage
from ..models import Commit

TEMPLATED_PATTERNS = (
    # Conventional commit verbs: "fix: ..."
    re.compile(r"^(add|update|fix|refactor|implement|create|remove|delete):", re.IGNORECASE),
    # Past tense: "Added ..."
    re.compile(
        r"^(added|updated|fixed|refactored|implemented|created|removed|deleted)\s", re.IGNORECASE
    ),
    re.compile(r"^feat:|^feature:", re.IGNORECASE),
    re.compile(r"^chore:", re.IGNORECASE),
    re.compile(r"initial commit$", re.IGNORECASE),
    re.compile(r"^merge\s+(branch|pull\s+request)", re.IGNORECASE),
    # Scoped conventional commit: "feat(auth): ..."
    re.compile(r"^\w+\(\w+\):", re.IGNORECASE),
)

GENERIC_MESSAGES = frozenset({"initial commit", "update", "fix", "changes", "updates"})


def is_templated_message(message: str) -> bool:
    trimmed = message.strip()
    if trimmed.lower() in GENERIC_MESSAGES:
        return True
    return any(pattern.search(trimmed) for pattern in TEMPLATED_PATTERNS)


def message_pattern_percentage(commits: Sequence[Commit]) -> float:
    """Percentage of commits whose message looks templated or generic."""
    if not commits:
        return 0.0
    templated = sum(1 for c in commits if is_templated_message(c.message))
    return percentage(templated, len(commits))
