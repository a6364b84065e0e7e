"""
Runtime package for verdict reporting hooks.
"""

from .hooks import HookManager, LoggingHook, VerdictHook

__all__ = ["HookManager", "LoggingHook", "VerdictHook"]
