"""Repository sources: remote URLs cloned into a scoped temporary directory."""

import re
import subprocess
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from ..exceptions import GitError
from ..logging_config import get_logger

logger = get_logger(__name__)

UNKNOWN_REPOSITORY = "unknown/repository"

_SCP_LIKE_RE = re.compile(r"^[\w.-]+@[\w.-]+:")
_TAIL_RE = re.compile(r"([^/:]+)/([^/]+?)(?:\.git)?/?$")


def is_remote_url(target: str) -> bool:
    """True for URLs git would clone over the network (https, ssh, scp-like)."""
    if _SCP_LIKE_RE.match(target):
        return True
    return urlparse(target).scheme in ("http", "https", "ssh", "git")


def extract_repo_name(url: str) -> str:
    """
    ``owner/repo`` from a repository URL.

    >>> extract_repo_name("https://github.com/user/repo.git")
    'user/repo'
    >>> extract_repo_name("git@github.com:user/repo.git")
    'user/repo'
    """
    parsed = urlparse(url)
    if parsed.scheme in ("http", "https", "ssh", "git") and parsed.path.strip("/"):
        path = parsed.path.strip("/")
        if path.endswith(".git"):
            path = path[: -len(".git")]
        return path

    match = _TAIL_RE.search(url)
    if match:
        return f"{match.group(1)}/{match.group(2)}"
    return UNKNOWN_REPOSITORY


@contextmanager
def cloned_repository(
    url: str, branch: Optional[str] = None, timeout: int = 600
) -> Generator[Path, None, None]:
    """
    Clone ``url`` into a temporary directory for the duration of the block.

    The directory is removed on exit, including when cloning fails.

    Raises:
        GitError: If the clone fails
    """
    with tempfile.TemporaryDirectory(prefix="git-provenance-") as tmp:
        target = Path(tmp) / extract_repo_name(url).replace("/", "-")
        cmd = ["clone", "--quiet"]
        if branch:
            cmd += ["--branch", branch]
        cmd += [url, str(target)]

        logger.info(f"Cloning {url} into {target}")
        try:
            result = subprocess.run(
                ["git", *cmd], capture_output=True, text=True, timeout=timeout
            )
        except FileNotFoundError:
            raise GitError(cmd, "git executable not found")
        except subprocess.TimeoutExpired:
            raise GitError(cmd, f"timed out after {timeout}s")
        if result.returncode != 0:
            raise GitError(cmd, result.stderr.strip() or f"exit code {result.returncode}")

        yield target
