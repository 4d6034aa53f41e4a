"""Environment predicate for development runs."""

import os

ENVIRONMENT_VAR = "LINKHOOK_ENVIRONMENT"


def is_development_environment() -> bool:
    """Return True when the current run is a development-mode run.

    Reads LINKHOOK_ENVIRONMENT; only the value "development" (any case) counts.
    """
    return os.environ.get(ENVIRONMENT_VAR, "").strip().lower() == "development"
