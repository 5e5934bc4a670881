"""Configuration using pydantic-settings."""

from functools import cached_property
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .application import JsonlEventLogWriter, LoggingObserver, StateProjector


class ShipLogConfiguration(BaseSettings):
    """Configuration and factory for the event log and projector.

    All settings can be configured via environment variables with the
    SHIPLOG_ prefix. For example:
    - SHIPLOG_LOG_PATH=/var/lib/shiplog/log.jsonl
    - SHIPLOG_FSYNC=false
    - SHIPLOG_STRICT=true

    Attributes:
        log_path: File the event log is appended to.
        fsync: Whether every append is fsynced before returning.
        log_level: Level used by the logging observer.
        strict: Whether events for unenrolled ships are rejected.

    Example:
        >>> config = ShipLogConfiguration()
        >>> projector = config.projector()
        >>> projector.process_event(EnrolShip(ship="hms_hello"), State())
    """

    log_path: Path = Path("log.jsonl")
    fsync: bool = True
    log_level: str = "INFO"
    strict: bool = False

    model_config = {"env_prefix": "SHIPLOG_"}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return value.upper()

    @cached_property
    def writer(self) -> JsonlEventLogWriter:
        """Get the JSONL writer for the configured log file.

        The writer is lazily created and cached for reuse.
        """
        return JsonlEventLogWriter(self.log_path, fsync=self.fsync)

    def projector(self) -> StateProjector:
        """Create a projector writing to the configured log."""
        return StateProjector(
            self.writer,
            observers=[LoggingObserver(self.log_level)],
            strict=self.strict,
        )
