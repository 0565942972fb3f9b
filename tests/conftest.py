"""Shared test fixtures for git-provenance tests."""

from datetime import datetime, timedelta, timezone

import pytest

from git_provenance.models import Commit

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def make_commit():
    """Factory for Commit records; ``minutes`` is an offset from a fixed base time."""
    counter = {"n": 0}

    def _make(
        minutes: float = 0,
        insertions: int = 0,
        deletions: int = 0,
        files=(),
        message: str = "work in progress",
        author: str = "Alice",
        email: str = "a@x",
        files_changed=None,
    ) -> Commit:
        counter["n"] += 1
        files = tuple(files)
        return Commit(
            hash=f"{counter['n']:040x}",
            author=author,
            email=email,
            timestamp=BASE_TIME + timedelta(minutes=minutes),
            message=message,
            files_changed=len(files) if files_changed is None else files_changed,
            insertions=insertions,
            deletions=deletions,
            files=files,
        )

    return _make


@pytest.fixture
def three_commits(make_commit):
    """Two authors over two days: 60 + 35 + 22 lines."""
    return [
        make_commit(minutes=0, insertions=50, deletions=10, author="A", email="a@x"),
        make_commit(minutes=24 * 60, insertions=30, deletions=5, author="B", email="b@x"),
        make_commit(minutes=2 * 24 * 60, insertions=20, deletions=2, author="A", email="a@x"),
    ]


@pytest.fixture
def source_tree(tmp_path):
    """A small working tree with source, skipped directories and a lock file."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.ts").write_text(
        "// entry point\n"
        "const x = 1;\n"
        "for (let i = 0; i < 3; i++) {\n"
        "  console.log(i);\n"
        "}\n"
    )
    (tmp_path / "src" / "util.py").write_text("# helper\ndef f():\n    return [x for x in y]\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("while (true) {}\n")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "hidden.js").write_text("switch (x) {}\n")
    (tmp_path / "package-lock.json").write_text("{}\n")
    (tmp_path / "README.md").write_text("# readme\n")
    return tmp_path
