"""Shared pytest setup: Hypothesis settings for the msgbundle tests.

Three settings profiles are registered and one is loaded at import time:

    local    500 examples, random seeds (the default)
    ci       50 examples, derandomized, failure blobs printed
    debug    100 examples, verbose Hypothesis output

Pick one explicitly with HYPOTHESIS_PROFILE=<name>. Without it, CI=true
selects "ci" and anything else selects "local".
"""

import os

from hypothesis import Verbosity, settings

_PROFILES = ("local", "ci", "debug")

settings.register_profile("local", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("debug", max_examples=100, verbosity=Verbosity.verbose)


def _profile_from_environment() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "local"


settings.load_profile(_profile_from_environment())
