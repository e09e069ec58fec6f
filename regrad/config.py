# regrad/config.py
"""
Package-wide configuration.

Numerical defaults for the reverse pass and for finite-difference checks,
plus the log level picked up from the environment.
"""

import logging
import os


class RegradConfig:
    """Shared configuration for regrad"""

    # Adjoint seed planted at the root of a reverse pass: d(root)/d(root)
    DEFAULT_SEED = 1.0

    # Central-difference step for bumping
    BUMP_EPSILON = 1e-6

    # Tolerances used when comparing reverse-mode gradients against bumping
    CHECK_RTOL = 1e-5
    CHECK_ATOL = 1e-6

    LOG_LEVEL_ENV = "REGRAD_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"

    @staticmethod
    def log_level() -> int:
        """
        Resolve the logging level from ``REGRAD_LOG_LEVEL``.

        Unknown names fall back to WARNING.

        Example:
            REGRAD_LOG_LEVEL=debug  ->  logging.DEBUG
        """
        name = os.getenv(RegradConfig.LOG_LEVEL_ENV, RegradConfig.DEFAULT_LOG_LEVEL).upper()
        level = getattr(logging, name, None)
        return level if isinstance(level, int) else logging.WARNING
