"""Backing logic: preference stores and abstractions."""

from .preference_store import InMemoryPreferenceStore, PreferenceStore, ensure_stat

__all__ = [
    "InMemoryPreferenceStore",
    "PreferenceStore",
    "ensure_stat",
]
