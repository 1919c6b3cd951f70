"""
Standings System Exception Hierarchy

Ranking itself never raises: missing match data or a finished season are
degraded-information states, not failures. These exceptions cover the
surrounding API, i.e. invalid configuration and lookups that point outside
the ranked standings.

Exception Hierarchy:
    StandingsException (base)
    ├── InvalidRankingConfigException
    └── StandingsIndexException

All exceptions include:
- error_code: Unique identifier for programmatic handling
- severity: CRITICAL, ERROR, WARNING, INFO
- recovery_strategy: ABORT, SKIP, MANUAL
- context_dict: Relevant context (field, value, index, etc.)
"""

from enum import Enum
from typing import Any, Dict, Optional
from datetime import datetime


class ExceptionSeverity(Enum):
    """Severity levels for exceptions"""
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RecoveryStrategy(Enum):
    """Recovery strategies for exception handling"""
    ABORT = "abort"      # Stop the operation
    SKIP = "skip"        # Skip this item and continue
    MANUAL = "manual"    # Requires a configuration change


class StandingsException(Exception):
    """
    Base exception for all standings system errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code (e.g., "STANDINGS_000")
        severity: Exception severity level
        recovery_strategy: Recommended recovery action
        context_dict: Additional context
        timestamp: When the exception was raised
    """

    def __init__(
        self,
        message: str,
        error_code: str = "STANDINGS_000",
        severity: ExceptionSeverity = ExceptionSeverity.ERROR,
        recovery_strategy: RecoveryStrategy = RecoveryStrategy.ABORT,
        context_dict: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.recovery_strategy = recovery_strategy
        self.context_dict = context_dict or {}
        self.timestamp = datetime.now().isoformat()

        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        """Build error message with context"""
        lines = [f"[{self.error_code}] {self.message}"]

        if self.context_dict:
            lines.append("Context:")
            for key, value in self.context_dict.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "recovery_strategy": self.recovery_strategy.value,
            "context": self.context_dict,
            "timestamp": self.timestamp,
        }


class InvalidRankingConfigException(StandingsException):
    """
    Raised when a RankingConfig value cannot produce a valid seeding.

    Examples:
    - playoff_spots below 1
    - bye_seeds larger than playoff_spots
    - win percentage precision below 4 digits
    """

    def __init__(self, field_name: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid ranking config '{field_name}': {reason}",
            error_code="STANDINGS_CONFIG_001",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.MANUAL,
            context_dict={"field": field_name, "value": value}
        )
        self.field_name = field_name
        self.value = value


class StandingsIndexException(StandingsException, IndexError):
    """
    Raised when a standings position does not exist.

    Example: asking for the tiebreaker explanation of position 12 in a
    10-team league.
    """

    def __init__(self, index: int, team_count: int):
        super().__init__(
            message=f"Standings index {index} out of range for {team_count} teams",
            error_code="STANDINGS_INDEX_001",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.SKIP,
            context_dict={"index": index, "team_count": team_count}
        )
        self.index = index
        self.team_count = team_count
