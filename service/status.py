"""Status and control of the audiobait system service."""

import logging
import subprocess
from typing import Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class ServiceStatusProvider(Protocol):
    """Capability to query and restart the audio playing service."""
    
    def is_running(self) -> bool:
        """Return True if the service is active and enabled."""
        ...
    
    def restart(self) -> bool:
        """Restart the service, returning True on success."""
        ...


class SystemdService:
    """ServiceStatusProvider backed by ``systemctl``.
    
    Attributes:
        unit: Systemd unit name.
        systemctl_command: Path to the systemctl executable.
    """
    
    def __init__(self, unit: str = "audiobait", systemctl_command: str = "/bin/systemctl") -> None:
        self.unit = unit
        self.systemctl_command = systemctl_command
    
    def _query(self, verb: str) -> str | None:
        """Run ``systemctl <verb> <unit>`` and return stdout, or None on failure."""
        try:
            result = subprocess.run(
                [self.systemctl_command, verb, self.unit],
                capture_output=True,
                check=False,
            )
        except OSError as e:
            logger.warning("systemctl %s failed: unit=%s error=%s", verb, self.unit, e)
            return None
        if result.returncode != 0:
            return None
        return result.stdout.decode("utf-8", errors="replace").strip()
    
    def is_running(self) -> bool:
        active = self._query("is-active")
        if active is None or active.upper() != "ACTIVE":
            return False
        enabled = self._query("is-enabled")
        return enabled is not None and enabled.upper() == "ENABLED"
    
    def restart(self) -> bool:
        ok = self._query("restart") is not None
        if ok:
            logger.info("Service restarted: unit=%s", self.unit)
        else:
            logger.warning("Service restart failed: unit=%s", self.unit)
        return ok
