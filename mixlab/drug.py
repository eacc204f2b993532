"""Products built from a base and a sequence of mixed-in ingredients."""

from __future__ import annotations

from collections.abc import Iterable

from mixlab.effect import Effect, ordered
from mixlab.ingredient import Ingredient
from mixlab.reaction import reactions_for


class Drug:
    """A base product whose effects change as ingredients are added."""

    def __init__(
        self, base: str, base_price: int, effects: Iterable[Effect] = ()
    ) -> None:
        self.base = base
        self.base_price = base_price
        self.ingredients: list[Ingredient] = []
        self._effects: frozenset[Effect] = frozenset(effects)

    def __repr__(self) -> str:
        names = [e.display_name() for e in self.effects()]
        return f"Drug(base={self.base!r}, effects={names!r})"

    def add(self, ingredient: Ingredient) -> None:
        """Mix in ``ingredient``: run its reactions, then add its base effect."""
        self.ingredients.append(ingredient)
        effects = self._effects
        for reaction in reactions_for(ingredient):
            effects = reaction.react(effects)
        self._effects = effects | {ingredient.base_effect()}

    def effects(self) -> list[Effect]:
        """Current effects in canonical order."""
        return ordered(self._effects)

    def price(self) -> int:
        """Sale price: base price scaled by one plus every effect's multiplier."""
        multiplier = 1.0
        for effect in self.effects():
            multiplier += effect.multiplier()
        return int(multiplier * self.base_price)

    def mix_price(self) -> int:
        """Total cost of the ingredients added so far."""
        return sum(ingredient.price() for ingredient in self.ingredients)


def og_kush() -> Drug:
    """OG Kush: calming, base price 38."""
    return Drug("OgKush", 38, (Effect.CALMING,))


def sour_diesel() -> Drug:
    """Sour Diesel: refreshing, base price 40."""
    return Drug("SourDiesel", 40, (Effect.REFRESHING,))


def green_crack() -> Drug:
    """Green Crack: energizing, base price 43."""
    return Drug("GreenCrack", 43, (Effect.ENERGIZING,))


def granddaddy_purple() -> Drug:
    """Granddaddy Purple: sedating, base price 44."""
    return Drug("GrandaddyPurple", 44, (Effect.SEDATING,))


def methamphetamine() -> Drug:
    """Methamphetamine: no effects, base price 70."""
    return Drug("Methamphetamine", 70)


def cocaine() -> Drug:
    """Cocaine: no effects, base price 90 (standard quality)."""
    return Drug("Cocaine", 90)