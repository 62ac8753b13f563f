"""
Collection session and guarded settings.

Usage:
    from aoide_bridge.collection import CollectionSession, set_music_directory

    with CollectionSession.open(config) as session:
        outcome = set_music_directory(session, "file:///home/me/Music")
"""

from aoide_bridge.collection.commands import set_music_directory
from aoide_bridge.collection.session import CollectionSession
from aoide_bridge.collection.state import (
    CollectionState,
    SettingsState,
    UpdateOutcome,
    update_root,
)

__all__ = [
    "CollectionSession",
    "CollectionState",
    "SettingsState",
    "UpdateOutcome",
    "update_root",
    "set_music_directory",
]
