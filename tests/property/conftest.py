from __future__ import annotations

import os

from hypothesis import HealthCheck, settings
from hypothesis.errors import InvalidArgument

_PROFILE_ENV = "JSONWARN_HYPOTHESIS_PROFILE"
_DEFAULT_PROFILE = "jsonwarn_ci"

# Recursive JSON documents are slow to generate, so generation speed is not a failure.
_PROFILES: dict[str, settings] = {
    "jsonwarn_ci": settings(
        derandomize=True,
        max_examples=100,
        deadline=None,
        print_blob=True,
        suppress_health_check=(HealthCheck.too_slow,),
    ),
    "jsonwarn_deep": settings(
        max_examples=2000,
        deadline=None,
        suppress_health_check=(HealthCheck.too_slow,),
    ),
}


def pytest_configure(config: object) -> None:
    del config
    for name, profile in _PROFILES.items():
        try:
            settings.get_profile(name)
        except InvalidArgument:
            settings.register_profile(name, profile)
    settings.load_profile(os.environ.get(_PROFILE_ENV, _DEFAULT_PROFILE))
