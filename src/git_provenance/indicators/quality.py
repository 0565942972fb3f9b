"""Test activity indicator: how often commits touch test files."""

import re
from typing import Iterable, Sequence

from ..math import percentage
from ..models import Commit

TEST_PATH_PATTERNS = (
    re.compile(r"\.test\.", re.IGNORECASE),
    re.compile(r"\.spec\.", re.IGNORECASE),
    re.compile(r"__tests__/", re.IGNORECASE),
    re.compile(r"(?:^|/)tests?/", re.IGNORECASE),
    re.compile(r"\.test$", re.IGNORECASE),
    re.compile(r"\.spec$", re.IGNORECASE),
)


def is_test_path(path: str) -> bool:
    normalized = path.replace("\\", "/")
    return any(pattern.search(normalized) for pattern in TEST_PATH_PATTERNS)


def touches_tests(files: Iterable[str]) -> bool:
    return any(is_test_path(f) for f in files)


def test_file_ratio(commits: Sequence[Commit]) -> float:
    """Percentage of commits that change at least one test file."""
    if not commits:
        return 0.0
    with_tests = sum(1 for c in commits if touches_tests(c.files))
    return percentage(with_tests, len(commits))


# Keep pytest from collecting the public helper above as a test.
test_file_ratio.__test__ = False
