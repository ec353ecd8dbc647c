"""Module-level configuration for bizcal defaults."""

import threading
from dataclasses import dataclass

from bizcal.validation import ConfigurationError


@dataclass
class BizcalConfig:
    """Configuration for bizcal defaults."""

    max_step_days: int | None = None  # None = walk as far as needed


# Module-level singleton
_bizcal_config: BizcalConfig | None = None
_config_lock = threading.Lock()


def get_bizcal_config() -> BizcalConfig:
    """Get the global bizcal configuration singleton."""
    global _bizcal_config
    if _bizcal_config is None:
        with _config_lock:
            if _bizcal_config is None:
                _bizcal_config = BizcalConfig()
    return _bizcal_config


def configure_bizcal(max_step_days: int | None = None) -> None:
    """Configure library-wide settings.

    Args:
        max_step_days: Upper bound on the number of calendar days a single
            counting or stepping call may walk. Exceeding it raises
            StepLimitError. Pass None to remove the cap.

    Example:
        from bizcal import configure_bizcal

        # Refuse to walk more than ~100 years in one call
        configure_bizcal(max_step_days=36_500)
    """
    if max_step_days is not None and (
        isinstance(max_step_days, bool)
        or not isinstance(max_step_days, int)
        or max_step_days <= 0
    ):
        raise ConfigurationError(
            f"max_step_days must be a positive integer or None, got {max_step_days!r}"
        )
    config = get_bizcal_config()
    with _config_lock:
        config.max_step_days = max_step_days


def get_max_step_days() -> int | None:
    """Get the configured stepping cap (None when unbounded)."""
    return get_bizcal_config().max_step_days


def reset_bizcal_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _bizcal_config
    with _config_lock:
        _bizcal_config = BizcalConfig()
