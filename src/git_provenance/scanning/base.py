"""Base class for per-file analyzers driven by the file system scanner."""

import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from ..exceptions import ScanStateError

R = TypeVar("R")


class ScanState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


class FileAnalyzer(ABC, Generic[R]):
    """Accumulates running totals over every file of one scan.

    Lifecycle: ``reset()`` -> ``analyze_file()`` * n -> ``finalize()`` ->
    ``get_result()``. The scanner drives the first three; callers only read
    the result. Calling ``reset()`` again starts a fresh scan.

    Subclasses keep running totals only, never per-file results, and must not
    depend on the order files arrive in. Totals are updated under
    ``self._lock`` so a threaded scan can dispatch concurrently.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = ScanState.IDLE

    @property
    def state(self) -> ScanState:
        return self._state

    def reset(self) -> None:
        """Zero the accumulators and start accepting files."""
        with self._lock:
            self._clear()
            self._state = ScanState.ACCUMULATING

    def analyze_file(self, filepath: str, content: str, extension: str) -> None:
        """Fold one file into the running totals.

        Args:
            filepath: Path of the file (informational)
            content: Full file content
            extension: File extension including the dot

        Raises:
            ScanStateError: If the analyzer has not been reset for a scan
        """
        # Per-file work runs outside the lock, only the fold is serialized.
        observation = self._observe(filepath, content, extension)
        with self._lock:
            if self._state is not ScanState.ACCUMULATING:
                raise ScanStateError(type(self).__name__, self._state.value, "analyze files")
            self._accumulate(observation)

    def finalize(self) -> None:
        with self._lock:
            if self._state is not ScanState.ACCUMULATING:
                raise ScanStateError(type(self).__name__, self._state.value, "finalize")
            self._state = ScanState.FINALIZED

    def get_result(self) -> R:
        """Result of the last completed scan.

        Raises:
            ScanStateError: If no scan has completed since the last reset
        """
        with self._lock:
            if self._state is not ScanState.FINALIZED:
                raise ScanStateError(type(self).__name__, self._state.value, "report a result")
            return self._result()

    @abstractmethod
    def supported_extensions(self) -> frozenset[str]:
        """Extensions (with leading dot) this analyzer wants to see."""

    @abstractmethod
    def _clear(self) -> None:
        """Zero all running totals."""

    @abstractmethod
    def _observe(self, filepath: str, content: str, extension: str):
        """Compute what one file contributes. Must not touch shared state."""

    @abstractmethod
    def _accumulate(self, observation) -> None:
        """Add one file's contribution to the totals. Called under the lock."""

    @abstractmethod
    def _result(self) -> R:
        """Derive the result from the totals. Called under the lock."""
