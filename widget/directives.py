"""
Presentation Directives

Applying a profile means clearing every marker class from the page body
and adding the profile's own classes. The logic here only needs a
class-list object, so it runs the same against a parsed page or an
in-memory stand-in.

A class list is any object with:
    add(*names)       add classes not already present
    remove(*names)    remove classes, ignoring absent ones
    contains(name)    membership test
"""

from constants import (
    DEFAULT_PROFILE, PROFILE_CLASSES, MARKER_CLASSES, HIGHLIGHT_PROFILES
)


class SetClassList:
    """In-memory class list, for headless use and tests."""

    def __init__(self, names=()):
        self._names = list(dict.fromkeys(names))

    def add(self, *names):
        for name in names:
            if name not in self._names:
                self._names.append(name)

    def remove(self, *names):
        self._names = [n for n in self._names if n not in names]

    def contains(self, name):
        return name in self._names

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return f"SetClassList({self._names!r})"


def resolve_profile(profile_id):
    """Unknown or empty profile ids fall back to the default profile."""
    if isinstance(profile_id, str) and profile_id in PROFILE_CLASSES:
        return profile_id
    return DEFAULT_PROFILE


def apply_profile_directives(class_list, profile_id):
    """
    Switch `class_list` over to `profile_id`.

    Returns True when the profile also wants keyword highlighting,
    which the caller applies to the document text.
    """
    profile_id = resolve_profile(profile_id)
    class_list.remove(*MARKER_CLASSES)
    class_list.add(*PROFILE_CLASSES[profile_id])
    return profile_id in HIGHLIGHT_PROFILES
