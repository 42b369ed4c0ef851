"""Badge colour classes for challenge difficulty and category.

Purely cosmetic; unknown values fall back to the neutral style.
"""

from __future__ import annotations

NEUTRAL_BADGE = "bg-gray-500/20 text-gray-400"

DIFFICULTY_BADGES = {
    "easy": "bg-green-500/20 text-green-400",
    "medium": "bg-yellow-500/20 text-yellow-400",
    "hard": "bg-red-500/20 text-red-400",
}

CATEGORY_BADGES = {
    "rls": "bg-purple-500/20 text-purple-400",
    "storage": "bg-blue-500/20 text-blue-400",
    "auth": "bg-orange-500/20 text-orange-400",
    "queries": "bg-cyan-500/20 text-cyan-400",
    "migrations": "bg-pink-500/20 text-pink-400",
}


def difficulty_badge(difficulty: str | None) -> str:
    return DIFFICULTY_BADGES.get((difficulty or "").lower(), NEUTRAL_BADGE)


def category_badge(category: str | None) -> str:
    return CATEGORY_BADGES.get((category or "").lower(), NEUTRAL_BADGE)
