"""
Collection settings guarded against concurrent synchronization.

Two pieces of shared state belong to a collection session:

    CollectionState: Whether a synchronization currently owns the collection.
                     Driven by the synchronization subsystem only.
    SettingsState:   The music directory (root location) of the collection.
                     Mutated only through update_root().

update_root() checks the synchronization flag and compares-and-sets the
music directory while holding the collection lock. A synchronization
cannot start in between, because start_synchronizing() needs the same lock.

Usage:
    collection = CollectionState()
    settings = SettingsState()

    outcome = update_root(collection, settings, Path("/music"))
    if outcome is UpdateOutcome.UPDATED:
        schedule_rescan()
"""

import threading
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Generator

from aoide_bridge.core.exceptions import CollectionStateError, SynchronizationConflictError


class UpdateOutcome(Enum):
    """Result of a settings update that did not fail."""
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class CollectionState:
    """
    Synchronization flag of a collection.

    All transitions and all guarded reads hold self._lock. The lock is
    reentrant so that a caller already inside read() may call helpers
    that enter read() again.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._synchronizing = False

    @contextmanager
    def read(self) -> Generator["CollectionState", None, None]:
        """
        Hold the collection lock for a check-then-act sequence.

        While the context is active the synchronization flag cannot change.
        """
        with self._lock:
            yield self

    def is_synchronizing(self) -> bool:
        return self._synchronizing

    def ensure_idle(self) -> None:
        """
        Raises:
            SynchronizationConflictError: If a synchronization is running.
        """
        with self._lock:
            if self._synchronizing:
                raise SynchronizationConflictError(
                    "cannot update music directories while synchronizing collection"
                )

    def start_synchronizing(self) -> None:
        """
        Mark the collection as owned by a synchronization.

        Raises:
            SynchronizationConflictError: If a synchronization is already running.
        """
        with self._lock:
            if self._synchronizing:
                raise SynchronizationConflictError("collection is already synchronizing")
            self._synchronizing = True

    def finish_synchronizing(self) -> None:
        """
        Raises:
            CollectionStateError: If no synchronization is running.
        """
        with self._lock:
            if not self._synchronizing:
                raise CollectionStateError("collection is not synchronizing")
            self._synchronizing = False


class SettingsState:
    """
    Music directory of a collection.

    Starts without a music directory.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._music_dir: Path | None = None

    @property
    def music_dir(self) -> Path | None:
        with self._lock:
            return self._music_dir

    def update_music_dir(self, new_music_dir: Path | None) -> UpdateOutcome:
        """
        Replace the music directory unless it is equal to the current one.

        Returns:
            UpdateOutcome.UNCHANGED if the value was equal (including both
            None), UpdateOutcome.UPDATED otherwise.
        """
        with self._lock:
            if new_music_dir == self._music_dir:
                return UpdateOutcome.UNCHANGED
            self._music_dir = new_music_dir
            return UpdateOutcome.UPDATED


def update_root(
    collection: CollectionState,
    settings: SettingsState,
    new_music_dir: Path | None,
) -> UpdateOutcome:
    """
    Change the music directory unless a synchronization is running.

    Args:
        collection: Synchronization state, only read here.
        settings: Settings holding the current music directory.
        new_music_dir: The new music directory, or None to unset it.

    Returns:
        UpdateOutcome.UPDATED or UpdateOutcome.UNCHANGED.

    Raises:
        SynchronizationConflictError: If a synchronization is running.
                                      Settings are not touched.
    """
    with collection.read():
        collection.ensure_idle()
        return settings.update_music_dir(new_music_dir)
