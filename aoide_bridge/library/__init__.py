"""Flattened library records."""

from aoide_bridge.library.models import NumberOf, Playlist, Track

__all__ = ["NumberOf", "Playlist", "Track"]
