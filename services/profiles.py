"""
Profile Catalog Service

Read-only access to the fixed accessibility profile catalog.
"""

import copy

from constants import PROFILES, PROFILE_IDS


def get_profiles():
    """Return a copy of the catalog so callers cannot mutate it."""
    return copy.deepcopy(PROFILES)


def is_valid_profile(profile_id):
    return profile_id in PROFILE_IDS

