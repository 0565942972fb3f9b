"""Extract commit history via the git CLI."""

import re
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from ..exceptions import GitError
from ..logging_config import get_logger
from ..models import Commit

logger = get_logger(__name__)

# Record and field separators that cannot appear in names or subjects.
_RECORD = "\x1e"
_FIELD = "\x1f"
_LOG_FORMAT = _RECORD + _FIELD.join(["%H", "%at", "%an", "%ae", "%s"])

# "src/{old => new}/file.py" or "old.py => new.py"
_BRACE_RENAME_RE = re.compile(r"\{([^{}]*) => ([^{}]*)\}")


class GitExtractor:
    """Parse ``git log --numstat`` into Commit records."""

    def __init__(self, repo_path: str, max_commits: int = 0, timeout: int = 300):
        self.repo_path = str(Path(repo_path).resolve())
        self.max_commits = max_commits
        self.timeout = timeout

    def extract(self) -> list[Commit]:
        """
        Read the commit history of the checked-out branch, newest first.

        Raises:
            GitError: If the path is not a git repository or git fails
        """
        if not self.is_git_repo():
            raise GitError(["rev-parse"], f"not a git repository: {self.repo_path}")

        args = ["log", f"--format={_LOG_FORMAT}", "--numstat"]
        if self.max_commits:
            args.append(f"-n{self.max_commits}")

        raw = self._run(args)
        commits = self.parse_log(raw)
        logger.info(f"Loaded {len(commits)} commits from {self.repo_path}")
        return commits

    def is_git_repo(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--git-dir"],
                capture_output=True,
                text=True,
                timeout=5,
            )
            return result.returncode == 0
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False

    def current_branch(self) -> str:
        try:
            return self._run(["rev-parse", "--abbrev-ref", "HEAD"]).strip() or "unknown"
        except GitError as e:
            logger.debug(f"Cannot resolve branch: {e}")
            return "unknown"

    def _run(self, args: list[str]) -> str:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, *args],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise GitError(args, "git executable not found")
        except subprocess.TimeoutExpired:
            raise GitError(args, f"timed out after {self.timeout}s")

        if result.returncode != 0:
            raise GitError(args, result.stderr.strip() or f"exit code {result.returncode}")
        return result.stdout

    @staticmethod
    def parse_log(raw: str) -> list[Commit]:
        """
        Parse log output produced with ``_LOG_FORMAT`` and ``--numstat``.

        Each record is a header line followed by zero or more
        ``<added>\\t<deleted>\\t<path>`` rows. Binary files report ``-`` for
        both counts and contribute 0 lines.
        """
        commits = []
        for record in raw.split(_RECORD):
            if not record.strip():
                continue
            header, _, body = record.partition("\n")
            fields = header.split(_FIELD)
            if len(fields) != 5:
                logger.debug(f"Skipping unparseable log header: {header!r}")
                continue
            sha, epoch, author, email, subject = fields
            try:
                timestamp = datetime.fromtimestamp(int(epoch), tz=timezone.utc)
            except ValueError:
                logger.debug(f"Skipping commit {sha} with bad timestamp {epoch!r}")
                continue

            insertions = deletions = 0
            files: list[str] = []
            for line in body.splitlines():
                parts = line.split("\t", 2)
                if len(parts) != 3:
                    continue
                added, deleted, path = parts
                insertions += _count(added)
                deletions += _count(deleted)
                files.append(_resolve_rename(path))

            commits.append(
                Commit(
                    hash=sha,
                    author=author,
                    email=email,
                    timestamp=timestamp,
                    message=subject,
                    files_changed=len(files),
                    insertions=insertions,
                    deletions=deletions,
                    files=tuple(files),
                )
            )
        return commits


def _count(value: str) -> int:
    return int(value) if value.isdigit() else 0


def _resolve_rename(path: str) -> str:
    """Destination path of a numstat rename entry."""
    if "{" in path and " => " in path:
        resolved = _BRACE_RENAME_RE.sub(lambda m: m.group(2), path)
        return resolved.replace("//", "/")
    if " => " in path:
        return path.split(" => ", 1)[1]
    return path


def extract_commits(repo_path: str, max_commits: int = 0) -> tuple[list[Commit], str]:
    """Commits and current branch name of a local repository."""
    extractor = GitExtractor(repo_path, max_commits=max_commits)
    commits = extractor.extract()
    return commits, extractor.current_branch()
