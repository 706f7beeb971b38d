"""ShareTarget — who a share grants visibility to."""

from __future__ import annotations

from dataclasses import dataclass

USER_KIND = "user"
GROUP_KIND = "group"

LEGACY_GROUP_SEPARATOR = "."
"""Separator used by the legacy single-column target encoding."""


@dataclass(frozen=True, slots=True)
class UserTarget:
    """A share granted to a single user."""

    name: str

    @property
    def kind(self) -> str:
        return USER_KIND


@dataclass(frozen=True, slots=True)
class GroupTarget:
    """A share granted to every member of a group."""

    name: str

    @property
    def kind(self) -> str:
        return GROUP_KIND


ShareTarget = UserTarget | GroupTarget


def make_target(kind: str, name: str) -> ShareTarget:
    """Build a target from its stored ``(kind, name)`` columns."""
    if not name:
        raise ValueError("Share target name must not be empty")
    if kind == USER_KIND:
        return UserTarget(name)
    if kind == GROUP_KIND:
        return GroupTarget(name)
    raise ValueError(f"Unknown share target kind: {kind!r}")


def parse_target(raw: str) -> ShareTarget:
    """Parse a legacy single-string share target.

    A bare name is a user; ``"<group>.<suffix>"`` is the group ``<group>``.
    The suffix is the last dotted segment, so group names may contain dots.
    Only used when importing old share records; resolution never
    inspects target strings.
    """
    if not raw:
        raise ValueError("Share target must not be empty")
    group, sep, _suffix = raw.rpartition(LEGACY_GROUP_SEPARATOR)
    if not sep:
        return UserTarget(raw)
    if not group:
        raise ValueError(f"Malformed group share target: {raw!r}")
    return GroupTarget(group)


def encode_target(target: ShareTarget, suffix: str = "member") -> str:
    """Render *target* in the legacy single-string encoding."""
    if isinstance(target, GroupTarget):
        return f"{target.name}{LEGACY_GROUP_SEPARATOR}{suffix}"
    return target.name
