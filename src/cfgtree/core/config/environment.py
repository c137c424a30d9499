"""Active environment detection.

The environment name and the CI flag come from process environment variables
and are re-read on every call, so changes made while the process runs (for
example by tests) are visible immediately.
"""
from __future__ import annotations

import os
from typing import Mapping, Optional

DEFAULT_ENVIRONMENT = "development"


class EnvironmentResolver:
    """Resolve the active environment name and CI mode."""

    NAME_VARIABLE = "APP_ENV"
    CI_VARIABLE = "CI"

    def __init__(
        self,
        name_variable: Optional[str] = None,
        ci_variable: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.name_variable = name_variable or self.NAME_VARIABLE
        self.ci_variable = ci_variable or self.CI_VARIABLE
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def active_environment_name(self) -> str:
        return self.environ.get(self.name_variable) or DEFAULT_ENVIRONMENT

    # Short aliases
    env = active_environment_name
    get_env = active_environment_name

    def is_production(self) -> bool:
        return self.active_environment_name() == "production"

    def is_staging(self) -> bool:
        return self.active_environment_name() == "staging"

    def is_production_like(self) -> bool:
        """True for production and staging."""
        return self.active_environment_name() in ("production", "staging")

    def is_test(self) -> bool:
        return self.active_environment_name() == "test"

    def is_dev(self) -> bool:
        """True for anything that is not production-like (including ``test``)."""
        return not self.is_production_like()

    def is_ci(self) -> bool:
        """True when the CI variable holds any non-empty value."""
        return bool(self.environ.get(self.ci_variable))

    is_prod = is_production
    is_prod_like = is_production_like
    is_development = is_dev


__all__ = ["DEFAULT_ENVIRONMENT", "EnvironmentResolver"]
