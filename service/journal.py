"""Retrieval of recent log entries for the audiobait service."""

import logging
import subprocess


logger = logging.getLogger(__name__)


LOG_UNAVAILABLE_TEXT = "Could not get audio bait logging info."
NO_ENTRIES_TEXT = "There are no audio bait log entries."


def format_journal_output(text: str) -> str:
    """Turn raw ``journalctl`` output into newest-first log text.
    
    The first line of journalctl output is a header and is dropped. A second
    line containing "No entries" means the journal is empty. journalctl's
    ``--reverse`` does not combine with ``-u``, so entries are reversed here.
    
    Args:
        text: Raw journalctl output.
        
    Returns:
        One entry per line, newest first, each line newline-terminated.
        
    Examples:
        >>> format_journal_output("-- Logs begin --\\nfirst\\nsecond\\n")
        'second\\nfirst\\n'
    """
    lines = text.split("\n")
    if len(lines) <= 1:
        return LOG_UNAVAILABLE_TEXT
    if "NO ENTRIES" in lines[1].upper():
        return NO_ENTRIES_TEXT
    
    entries = [line for line in lines[1:] if line]
    return "".join(f"{line}\n" for line in reversed(entries))


def get_log_entries(
    unit: str = "audiobait",
    count: int = 100,
    journalctl_command: str = "/bin/journalctl",
) -> str:
    """Return recent log entries of a systemd unit, newest first.
    
    Never raises; failures are reported as explanatory text.
    """
    cmd = [journalctl_command, "-u", unit, "--no-pager", "-n", str(count)]
    try:
        result = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as e:
        logger.warning("Could not get audio bait logging info: %s", e)
        return LOG_UNAVAILABLE_TEXT
    
    if result.returncode != 0:
        logger.warning(
            "Could not get audio bait logging info: exit status %d",
            result.returncode,
        )
        return LOG_UNAVAILABLE_TEXT
    
    formatted = format_journal_output(result.stdout.decode("utf-8", errors="replace"))
    if formatted == LOG_UNAVAILABLE_TEXT:
        logger.warning("Could not get audio bait logging info: empty output")
    return formatted
