"""Schedule document loading."""

import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from .errors import ScheduleLoadError
from .models import Schedule, ScheduleDocument
from .utils import UNKNOWN_TIMESTAMP, format_timestamp


logger = logging.getLogger(__name__)


def load_schedule(directory: str | Path, file_name: str) -> Schedule:
    """Load the schedule document from disk.
    
    Args:
        directory: Audio directory holding the schedule file.
        file_name: Name of the schedule file inside ``directory``.
        
    Returns:
        The parsed Schedule.
        
    Raises:
        ScheduleLoadError: If the file is missing, unreadable, not valid
            JSON, or does not have the schedule shape.
            
    Examples:
        >>> schedule = load_schedule("/var/lib/audiobait", "schedule.json")
        >>> schedule.description
        'Possum lure'
    """
    path = Path(directory) / file_name
    
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise ScheduleLoadError(
            message=f"Schedule file not found: {path}",
            code="FILE_NOT_FOUND",
            details={"path": str(path)},
        ) from e
    except OSError as e:
        raise ScheduleLoadError(
            message=f"Failed to read schedule file: {e}",
            code="READ_FAILED",
            details={"path": str(path), "error": str(e)},
        ) from e
    
    try:
        document = ScheduleDocument.model_validate_json(raw)
    except ValidationError as e:
        # JSON syntax problems surface as a json_invalid validation error
        if any(err.get("type") == "json_invalid" for err in e.errors()):
            raise ScheduleLoadError(
                message=f"Schedule file is not valid JSON: {path}",
                code="INVALID_JSON",
                details={"path": str(path), "error": str(e)},
            ) from e
        raise ScheduleLoadError(
            message=f"Schedule file has an invalid format: {path}",
            code="INVALID_SCHEDULE",
            details={"path": str(path), "error_count": e.error_count(), "error": str(e)},
        ) from e
    
    logger.debug(
        "Loaded schedule: path=%s combos=%d",
        path,
        len(document.schedule.combos),
    )
    return document.schedule


def schedule_timestamp(directory: str | Path, file_name: str) -> str:
    """Return when the schedule file was last modified, formatted for display.
    
    Returns "Unknown." if the file cannot be stat'ed.
    """
    path = Path(directory) / file_name
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return UNKNOWN_TIMESTAMP
    return format_timestamp(datetime.fromtimestamp(mtime))
