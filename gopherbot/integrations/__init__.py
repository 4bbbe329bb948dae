"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_catalog,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_catalog",
    "run_all_checks",
]
