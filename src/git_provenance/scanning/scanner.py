"""Working-tree scanner that feeds every eligible file to the analyzers.

One tree walk, one read per file, any number of analyzers. Each analyzer
declares the extensions it wants; a file is read only if at least one
analyzer wants it.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .base import FileAnalyzer

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]

# Build output, dependencies and caches. Any other dot-directory is skipped too.
SKIP_DIRECTORIES = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "coverage",
        ".next",
        ".nuxt",
        "vendor",
        "__pycache__",
        ".venv",
        "venv",
        "env",
        "target",
    }
)

SKIP_FILES = frozenset(
    {
        "package-lock.json",
        "yarn.lock",
        "Cargo.lock",
        ".DS_Store",
    }
)

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


def should_skip_directory(name: str) -> bool:
    return name in SKIP_DIRECTORIES or name.startswith(".")


def should_skip_file(name: str) -> bool:
    return name in SKIP_FILES


@dataclass(frozen=True)
class ScanSummary:
    files_found: int
    files_processed: int
    files_failed: int


class FileSystemScanner:
    """Walks a working tree and dispatches file contents to analyzers."""

    def __init__(self, workers: int = 1, max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES):
        """
        Initialize scanner.

        Args:
            workers: Threads used to read and dispatch files (1 = sequential)
            max_file_size_bytes: Larger files are skipped
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.workers = workers
        self.max_file_size_bytes = max_file_size_bytes

    def scan(
        self,
        root: str | Path,
        analyzers: Sequence[FileAnalyzer],
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanSummary:
        """
        Scan ``root`` and feed every eligible file to the analyzers.

        Analyzers are reset first and finalized last, so their results are
        ready once this returns. Unreadable files and directories are logged
        and skipped.

        Args:
            root: Working tree to scan
            analyzers: Analyzers to feed
            on_progress: Called with (files_done, files_total) after each file

        Returns:
            Counts of files found, processed and failed
        """
        for analyzer in analyzers:
            analyzer.reset()

        extension_sets = [(analyzer, analyzer.supported_extensions()) for analyzer in analyzers]
        wanted: set[str] = set()
        for _, extensions in extension_sets:
            wanted.update(extensions)

        files = self.collect_files(Path(root), wanted)
        total = len(files)
        logger.debug(f"Found {total} candidate files under {root}")

        processed = 0
        failed = 0

        def process(filepath: Path) -> None:
            content = self._read(filepath)
            extension = filepath.suffix
            for analyzer, extensions in extension_sets:
                if extension in extensions:
                    analyzer.analyze_file(str(filepath), content, extension)

        if self.workers == 1:
            for done, filepath in enumerate(files, start=1):
                if self._process_safely(process, filepath):
                    processed += 1
                else:
                    failed += 1
                if on_progress:
                    on_progress(done, total)
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [
                    executor.submit(self._process_safely, process, filepath) for filepath in files
                ]
                for done, future in enumerate(as_completed(futures), start=1):
                    if future.result():
                        processed += 1
                    else:
                        failed += 1
                    if on_progress:
                        on_progress(done, total)

        for analyzer in analyzers:
            analyzer.finalize()

        logger.info(f"Scan complete: {processed} analyzed, {failed} errors")
        return ScanSummary(files_found=total, files_processed=processed, files_failed=failed)

    def collect_files(self, root: Path, extensions: set[str]) -> list[Path]:
        """List files under ``root`` whose extension is wanted, honouring skip lists."""
        files: list[Path] = []

        def on_error(error: OSError) -> None:
            logger.debug(f"Cannot list {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames[:] = [d for d in dirnames if not should_skip_directory(d)]
            for name in filenames:
                if should_skip_file(name):
                    continue
                filepath = Path(dirpath) / name
                # Regular files only; open() on a FIFO blocks.
                if filepath.suffix in extensions and filepath.is_file():
                    files.append(filepath)

        return files

    def _read(self, filepath: Path) -> str:
        try:
            size = filepath.stat().st_size
            if size > self.max_file_size_bytes:
                raise FileAccessError(filepath, f"file too large ({size} bytes)")
            with open(filepath, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FileAccessError(filepath, f"Cannot read file: {e}")

    @staticmethod
    def _process_safely(process: Callable[[Path], None], filepath: Path) -> bool:
        try:
            process(filepath)
            return True
        except FileAccessError as e:
            logger.warning(f"Skipping {filepath}: {e.reason}")
            return False
