"""Queries against the audiobait system service.

Example:
    >>> from service import SystemdService, get_log_entries
    >>> SystemdService("audiobait").is_running()
    True
    >>> print(get_log_entries("audiobait", count=10))
"""

from .journal import LOG_UNAVAILABLE_TEXT, NO_ENTRIES_TEXT, format_journal_output, get_log_entries
from .status import ServiceStatusProvider, SystemdService


__all__ = [
    "ServiceStatusProvider",
    "SystemdService",
    "get_log_entries",
    "format_journal_output",
    "LOG_UNAVAILABLE_TEXT",
    "NO_ENTRIES_TEXT",
]
