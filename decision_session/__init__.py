"""
Decision session: stateful picking flow, preference stores, and settings.

- selection_session: SelectionSession (pick_one, accept, skip)
- recent_picks: RecentPicksQueue (no-repeat queue)
- animation: SuggestionAnimator (cosmetic pre-pick frames)
- services/: PreferenceStore protocol and InMemoryPreferenceStore
- config: SessionSettings from environment / .env
"""

from .animation import SuggestionAnimator
from .config import SessionSettings, configure_logging, get_settings, reload_settings
from .recent_picks import RecentPicksQueue
from .selection_session import SelectionSession
from .services import InMemoryPreferenceStore, PreferenceStore, ensure_stat

__all__ = [
    "InMemoryPreferenceStore",
    "PreferenceStore",
    "RecentPicksQueue",
    "SelectionSession",
    "SessionSettings",
    "SuggestionAnimator",
    "configure_logging",
    "ensure_stat",
    "get_settings",
    "reload_settings",
]
