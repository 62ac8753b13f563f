"""
Commands that change collection settings.

Commands are the entry points the host dispatches user requests to.
They validate their input, run the guarded update and log the outcome.
"""

from pathlib import Path

from aoide_bridge.aoide.locator import content_url_to_file_path
from aoide_bridge.collection.session import CollectionSession
from aoide_bridge.collection.state import UpdateOutcome, update_root
from aoide_bridge.core.logger import get_logger


logger = get_logger(__name__)


def set_music_directory(session: CollectionSession, root_url: str | None) -> UpdateOutcome:
    """
    Set or unset the music directory of the collection.

    The synchronization flag is checked before the URL is looked at, and
    stays locked until the new value has been stored.

    Args:
        session: The open collection session.
        root_url: File URL of the new music directory, or None to unset it.

    Returns:
        UpdateOutcome.UNCHANGED if the directory was already set to this
        value, UpdateOutcome.UPDATED otherwise.

    Raises:
        CollectionStateError: If the session is closed.
        SynchronizationConflictError: If the collection is synchronizing.
        UnsupportedLocatorError: If root_url is not a local file URL.
    """
    session.ensure_open()

    with session.collection.read() as collection:
        collection.ensure_idle()

        root_dir: Path | None = None
        if root_url is not None:
            root_dir = content_url_to_file_path(root_url, error_prefix="invalid URL")

        outcome = update_root(collection, session.settings, root_dir)

    if outcome is UpdateOutcome.UNCHANGED:
        logger.debug(f"Music directory unchanged: {root_dir}")
    else:
        logger.info(f"Music directory updated: {root_dir}")
    return outcome
