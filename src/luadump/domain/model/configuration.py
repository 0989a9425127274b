"""Runtime configuration for luadump entry points.

Immutable DTO built by the CLI from its flags.
None = feature unbounded/disabled as documented per field.
"""

from __future__ import annotations

from dataclasses import dataclass

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True, slots=True)
class DumpConfig:
    """Configuration DTO with FAIL-FIRST validation.

    Attributes:
        cache_size: Parsed-tree cache entries. None = unbounded, 0 = disabled.
        json_indent: JSON indentation for reports. None = compact.
        log_level: Logging level name.
    """

    cache_size: int | None = 128
    json_indent: int | None = 2
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.cache_size is not None and self.cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {self.cache_size}")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0, got {self.json_indent}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @property
    def cache_enabled(self) -> bool:
        """Check if parsed trees should be cached."""
        return self.cache_size != 0
