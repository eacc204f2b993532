"""Effects a product can carry, with their display names and price multipliers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Effect(IntEnum):
    """A single effect; the numeric value fixes its canonical order."""

    ANTI_GRAVITY = 0
    ATHLETIC = 1
    BALDING = 2
    BRIGHT_EYED = 3
    CALMING = 4
    CALORIE_DENSE = 5
    CYCLOPEAN = 6
    DISORIENTING = 7
    ELECTRIFYING = 8
    ENERGIZING = 9
    EUPHORIC = 10
    EXPLOSIVE = 11
    FOCUSED = 12
    FOGGY = 13
    GINGERITIS = 14
    GLOWING = 15
    JENNERISING = 16
    LAXATIVE = 17
    LETHAL = 18
    LONG_FACED = 19
    MUNCHIES = 20
    PARANOIA = 21
    REFRESHING = 22
    SCHIZOPHRENIA = 23
    SEDATING = 24
    SEIZURE_INDUCING = 25
    SHRINKING = 26
    SLIPPERY = 27
    SMELLY = 28
    SNEAKY = 29
    SPICY = 30
    THOUGHT_PROVOKING = 31
    TOXIC = 32
    TROPIC_THUNDER = 33
    ZOMBIFYING = 34

    def display_name(self) -> str:
        """Human-readable name of the effect."""
        return _NAMES[self]

    def multiplier(self) -> float:
        """Amount this effect adds to the base price multiplier."""
        return _MULTIPLIERS[self]


_NAMES: dict[Effect, str] = {
    Effect.ANTI_GRAVITY: "Anti-Gravity",
    Effect.ATHLETIC: "Athletic",
    Effect.BALDING: "Balding",
    Effect.BRIGHT_EYED: "Bright-Eyed",
    Effect.CALMING: "Calming",
    Effect.CALORIE_DENSE: "Calorie-Dense",
    Effect.CYCLOPEAN: "Cyclopean",
    Effect.DISORIENTING: "Disorienting",
    Effect.ELECTRIFYING: "Electrifying",
    Effect.ENERGIZING: "Energizing",
    Effect.EUPHORIC: "Euphoric",
    Effect.EXPLOSIVE: "Explosive",
    Effect.FOCUSED: "Focused",
    Effect.FOGGY: "Foggy",
    Effect.GINGERITIS: "Gingeritis",
    Effect.GLOWING: "Glowing",
    Effect.JENNERISING: "Jennerising",
    Effect.LAXATIVE: "Laxative",
    Effect.LETHAL: "Lethal",
    Effect.LONG_FACED: "Long Faced",
    Effect.MUNCHIES: "Munchies",
    Effect.PARANOIA: "Paranoia",
    Effect.REFRESHING: "Refreshing",
    Effect.SCHIZOPHRENIA: "Schizophrenia",
    Effect.SEDATING: "Sedating",
    Effect.SEIZURE_INDUCING: "Seizure-Inducing",
    Effect.SHRINKING: "Shrinking",
    Effect.SLIPPERY: "Slippery",
    Effect.SMELLY: "Smelly",
    Effect.SNEAKY: "Sneaky",
    Effect.SPICY: "Spicy",
    Effect.THOUGHT_PROVOKING: "Thought-Provoking",
    Effect.TOXIC: "Toxic",
    Effect.TROPIC_THUNDER: "Tropic Thunder",
    Effect.ZOMBIFYING: "Zombifying",
}

_MULTIPLIERS: dict[Effect, float] = {
    Effect.ANTI_GRAVITY: 0.54,
    Effect.ATHLETIC: 0.32,
    Effect.BALDING: 0.30,
    Effect.BRIGHT_EYED: 0.40,
    Effect.CALMING: 0.10,
    Effect.CALORIE_DENSE: 0.28,
    Effect.CYCLOPEAN: 0.56,
    Effect.DISORIENTING: 0.00,
    Effect.ELECTRIFYING: 0.50,
    Effect.ENERGIZING: 0.22,
    Effect.EUPHORIC: 0.18,
    Effect.EXPLOSIVE: 0.00,
    Effect.FOCUSED: 0.16,
    Effect.FOGGY: 0.36,
    Effect.GINGERITIS: 0.20,
    Effect.GLOWING: 0.48,
    Effect.JENNERISING: 0.42,
    Effect.LAXATIVE: 0.00,
    Effect.LETHAL: 0.00,
    Effect.LONG_FACED: 0.52,
    Effect.MUNCHIES: 0.12,
    Effect.PARANOIA: 0.00,
    Effect.REFRESHING: 0.14,
    Effect.SCHIZOPHRENIA: 0.00,
    Effect.SEDATING: 0.26,
    Effect.SEIZURE_INDUCING: 0.00,
    Effect.SHRINKING: 0.60,
    Effect.SLIPPERY: 0.34,
    Effect.SMELLY: 0.00,
    Effect.SNEAKY: 0.24,
    Effect.SPICY: 0.38,
    Effect.THOUGHT_PROVOKING: 0.44,
    Effect.TOXIC: 0.00,
    Effect.TROPIC_THUNDER: 0.46,
    Effect.ZOMBIFYING: 0.58,
}


def ordered(effects: Iterable[Effect]) -> list[Effect]:
    """Return the distinct effects in canonical order."""
    return sorted(set(effects))