"""Module-level configuration for ethiocal defaults."""

import os
import threading
from dataclasses import dataclass, field

from ethiocal.core.clock import Clock, SystemClock
from ethiocal.core.errors import InvalidArgumentError
from ethiocal.engines.constants import LOCALES
from ethiocal.logging import get_logger

logger = get_logger(__name__)

LOCALE_ENV_VAR = "ETHIOCAL_LOCALE"


def check_locale(locale: str) -> str:
    if locale not in LOCALES:
        raise InvalidArgumentError(f"unknown locale {locale!r} (valid: {', '.join(LOCALES)})")
    return locale


def _locale_from_env() -> str:
    value = os.environ.get(LOCALE_ENV_VAR, "en")
    if value not in LOCALES:
        logger.warning("unknown_env_locale", env_var=LOCALE_ENV_VAR, value=value, fallback="en")
        return "en"
    return value


@dataclass
class EthiocalConfig:
    """Defaults used when callers do not pass a locale or a clock."""

    default_locale: str = field(default_factory=_locale_from_env)
    clock: Clock = field(default_factory=SystemClock)


# Module-level singleton
_config: EthiocalConfig | None = None
_config_lock = threading.Lock()


def get_config() -> EthiocalConfig:
    """Get the global configuration singleton."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = EthiocalConfig()
    return _config


def configure(
    default_locale: str | None = None,
    clock: Clock | None = None,
) -> None:
    """Configure ethiocal defaults.

    Args:
        default_locale: Locale used by ``EthiopicDate.format()`` and the CLI
            when none is given ("en" or "am").
        clock: Clock collaborator used by ``EthiopicDate.now()``.

    Example:
        from ethiocal import configure, FixedClock

        configure(default_locale="am", clock=FixedClock(19612))
    """
    if default_locale is not None:
        check_locale(default_locale)
    config = get_config()
    with _config_lock:
        if default_locale is not None:
            config.default_locale = default_locale
        if clock is not None:
            config.clock = clock
    logger.debug("config_updated", default_locale=config.default_locale, clock=repr(config.clock))


def reset_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _config
    with _config_lock:
        _config = EthiocalConfig()
