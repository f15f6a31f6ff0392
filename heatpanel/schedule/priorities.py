"""Priority ordering of non-default profiles."""

from collections.abc import Iterable
from dataclasses import replace

from heatpanel.models.common import ProfileKey
from heatpanel.models.profile import Profile


def split_default(profiles: Iterable[Profile]) -> tuple[Profile | None, list[Profile]]:
    """Separate the default profile from the reorderable ones.

    Reorderable profiles come back highest priority first, renumbered so the
    top profile has priority len(others) and the bottom one has 1.
    """
    default: Profile | None = None
    others: list[Profile] = []
    for p in profiles:
        if p.is_default and default is None:
            default = p
        elif not p.is_default:
            others.append(p)
    others.sort(key=lambda p: p.priority, reverse=True)
    return default, renumber(others)


def renumber(ordered: list[Profile]) -> list[Profile]:
    n = len(ordered)
    return [replace(p, priority=n - i) for i, p in enumerate(ordered)]


def move_profile(ordered: list[Profile], key: ProfileKey, target_key: ProfileKey) -> list[Profile]:
    """Move profile `key` to the position of `target_key` and renumber."""
    keys = [p.profile_key for p in ordered]
    if key not in keys or target_key not in keys:
        raise KeyError(f"Unknown profile key: {key if key not in keys else target_key}")
    old_index, new_index = keys.index(key), keys.index(target_key)
    if old_index == new_index:
        return list(ordered)
    items = list(ordered)
    items.insert(new_index, items.pop(old_index))
    return renumber(items)


def build_priority_payload(ordered: list[Profile]) -> dict:
    n = len(ordered)
    return {
        "profiles": [
            {
                "profileKey": p.profile_key,
                "profileName": p.name,
                "priorityNum": n - i,
            }
            for i, p in enumerate(ordered)
        ]
    }
