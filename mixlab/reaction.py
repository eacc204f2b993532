"""Reactions triggered on existing effects when an ingredient is added."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from mixlab.effect import Effect
from mixlab.ingredient import Ingredient


@dataclass(frozen=True)
class Reaction:
    """Replace required effects with products unless an excluded effect is present."""

    wanted: tuple[Effect, ...] = ()
    unwanted: tuple[Effect, ...] = ()
    products: tuple[Effect, ...] = ()

    def requires(self, effect: Effect) -> Reaction:
        """Return a copy that also requires ``effect``."""
        return Reaction(self.wanted + (effect,), self.unwanted, self.products)

    def excludes(self, effect: Effect) -> Reaction:
        """Return a copy that is blocked by ``effect``."""
        return Reaction(self.wanted, self.unwanted + (effect,), self.products)

    def produces(self, effect: Effect) -> Reaction:
        """Return a copy that also yields ``effect``."""
        return Reaction(self.wanted, self.unwanted, self.products + (effect,))

    def react(self, effects: Iterable[Effect]) -> frozenset[Effect]:
        """Apply the reaction to a set of effects and return the result."""
        current = frozenset(effects)
        if not all(e in current for e in self.wanted):
            return current
        if any(e in current for e in self.unwanted):
            return current
        return (current - set(self.wanted)) | set(self.products)


def validate_reactions(reactions: Mapping[Ingredient, Sequence[Reaction]]) -> None:
    """Raise ValueError if any ingredient lists the same reaction twice."""
    for ingredient, entries in reactions.items():
        seen: set[Reaction] = set()
        for reaction in entries:
            if reaction in seen:
                raise ValueError(
                    f"duplicate reaction for {ingredient.display_name()}: {reaction}"
                )
            seen.add(reaction)


def _on(wanted: Effect, product: Effect, unless: Effect | None = None) -> Reaction:
    reaction = Reaction().requires(wanted)
    if unless is not None:
        reaction = reaction.excludes(unless)
    return reaction.produces(product)


E = Effect

_REACTIONS: dict[Ingredient, tuple[Reaction, ...]] = {
    Ingredient.ADDY: (
        _on(E.LONG_FACED, E.ELECTRIFYING),
        _on(E.FOGGY, E.ENERGIZING),
        _on(E.EXPLOSIVE, E.EUPHORIC),
        _on(E.SEDATING, E.GINGERITIS),
        _on(E.GLOWING, E.REFRESHING),
    ),
    Ingredient.BANANA: (
        _on(E.SMELLY, E.ANTI_GRAVITY),
        _on(E.DISORIENTING, E.FOCUSED),
        _on(E.PARANOIA, E.JENNERISING),
        _on(E.LONG_FACED, E.REFRESHING),
        _on(E.FOCUSED, E.SEIZURE_INDUCING),
        _on(E.TOXIC, E.SMELLY),
        _on(E.CALMING, E.SNEAKY),
        _on(E.THOUGHT_PROVOKING, E.CYCLOPEAN),
        _on(E.THOUGHT_PROVOKING, E.ENERGIZING, unless=E.ENERGIZING),
    ),
    Ingredient.BATTERY: (
        _on(E.LAXATIVE, E.CALORIE_DENSE),
        _on(E.ELECTRIFYING, E.EUPHORIC, unless=E.ZOMBIFYING),
        _on(E.CYCLOPEAN, E.GLOWING),
        _on(E.SHRINKING, E.MUNCHIES),
        _on(E.MUNCHIES, E.TROPIC_THUNDER),
        _on(E.EUPHORIC, E.ZOMBIFYING, unless=E.ELECTRIFYING),
    ),
    Ingredient.CHILI: (
        _on(E.SNEAKY, E.BRIGHT_EYED),
        _on(E.ATHLETIC, E.EUPHORIC),
        _on(E.LAXATIVE, E.LONG_FACED),
        _on(E.SHRINKING, E.REFRESHING),
        _on(E.MUNCHIES, E.TOXIC),
        _on(E.ANTI_GRAVITY, E.TROPIC_THUNDER),
    ),
    Ingredient.CUKE: (
        _on(E.MUNCHIES, E.ATHLETIC),
        _on(E.SLIPPERY, E.ATHLETIC, unless=E.MUNCHIES),
        _on(E.FOGGY, E.CYCLOPEAN),
        _on(E.TOXIC, E.EUPHORIC),
        _on(E.EUPHORIC, E.LAXATIVE),
        _on(E.SLIPPERY, E.MUNCHIES),
        _on(E.SNEAKY, E.PARANOIA),
        _on(E.GINGERITIS, E.THOUGHT_PROVOKING),
    ),
    Ingredient.DONUT: (
        _on(E.SHRINKING, E.ENERGIZING),
        _on(E.FOCUSED, E.EUPHORIC),
        _on(E.CALORIE_DENSE, E.EXPLOSIVE, unless=E.EXPLOSIVE),
        _on(E.JENNERISING, E.GINGERITIS),
        _on(E.ANTI_GRAVITY, E.SLIPPERY),
        _on(E.BALDING, E.SNEAKY),
    ),
    Ingredient.ENERGY_DRINK: (
        _on(E.SCHIZOPHRENIA, E.BALDING),
        _on(E.GLOWING, E.DISORIENTING),
        _on(E.DISORIENTING, E.ELECTRIFYING),
        _on(E.EUPHORIC, E.ENERGIZING),
        _on(E.SPICY, E.EUPHORIC),
        _on(E.FOGGY, E.LAXATIVE),
        _on(E.SEDATING, E.MUNCHIES),
        _on(E.FOCUSED, E.SHRINKING),
        _on(E.TROPIC_THUNDER, E.SNEAKY),
    ),
    Ingredient.FLU_MEDICINE: (
        _on(E.CALMING, E.BRIGHT_EYED),
        _on(E.FOCUSED, E.CALMING),
        _on(E.LAXATIVE, E.EUPHORIC),
        _on(E.CYCLOPEAN, E.FOGGY),
        _on(E.THOUGHT_PROVOKING, E.GINGERITIS),
        _on(E.ATHLETIC, E.MUNCHIES),
        _on(E.SHRINKING, E.PARANOIA),
        _on(E.ELECTRIFYING, E.REFRESHING),
        _on(E.MUNCHIES, E.SLIPPERY),
        _on(E.EUPHORIC, E.TOXIC),
    ),
    Ingredient.GASOLINE: (
        _on(E.PARANOIA, E.CALMING),
        _on(E.ELECTRIFYING, E.DISORIENTING),
        _on(E.ENERGIZING, E.EUPHORIC),
        _on(E.SHRINKING, E.FOCUSED),
        _on(E.LAXATIVE, E.FOGGY),
        _on(E.DISORIENTING, E.GLOWING),
        _on(E.MUNCHIES, E.SEDATING),
        _on(E.GINGERITIS, E.SMELLY),
        _on(E.JENNERISING, E.SNEAKY),
        _on(E.ENERGIZING, E.SPICY),
        _on(E.EUPHORIC, E.SPICY, unless=E.ENERGIZING),
        _on(E.SNEAKY, E.TROPIC_THUNDER),
    ),
    Ingredient.HORSE_SEMEN: (
        _on(E.ANTI_GRAVITY, E.CALMING),
        _on(E.THOUGHT_PROVOKING, E.ELECTRIFYING),
        _on(E.GINGERITIS, E.REFRESHING),
    ),
    Ingredient.IODINE: (
        _on(E.CALORIE_DENSE, E.GINGERITIS),
        _on(E.FOGGY, E.PARANOIA),
        _on(E.CALMING, E.SEDATING),
        _on(E.EUPHORIC, E.SEIZURE_INDUCING),
        _on(E.TOXIC, E.SNEAKY),
        _on(E.REFRESHING, E.THOUGHT_PROVOKING),
    ),
    Ingredient.MEGA_BEAN: (
        _on(E.SNEAKY, E.CALMING),
        _on(E.THOUGHT_PROVOKING, E.CYCLOPEAN),
        _on(E.ENERGIZING, E.CYCLOPEAN, unless=E.THOUGHT_PROVOKING),
        _on(E.FOCUSED, E.DISORIENTING),
        _on(E.SHRINKING, E.ELECTRIFYING),
        _on(E.THOUGHT_PROVOKING, E.ENERGIZING),
        _on(E.SEIZURE_INDUCING, E.FOCUSED),
        _on(E.CALMING, E.GLOWING),
        _on(E.SNEAKY, E.GLOWING),
        _on(E.ATHLETIC, E.LAXATIVE),
        _on(E.JENNERISING, E.PARANOIA),
        _on(E.SLIPPERY, E.TOXIC),
    ),
    Ingredient.MOTOR_OIL: (
        _on(E.PARANOIA, E.ANTI_GRAVITY),
        _on(E.ENERGIZING, E.MUNCHIES),
        _on(E.ENERGIZING, E.SCHIZOPHRENIA),
        _on(E.MUNCHIES, E.SCHIZOPHRENIA, unless=E.ENERGIZING),
        _on(E.EUPHORIC, E.SEDATING),
        _on(E.FOGGY, E.TOXIC),
    ),
    Ingredient.MOUTH_WASH: (
        _on(E.CALMING, E.ANTI_GRAVITY),
        _on(E.FOCUSED, E.JENNERISING),
        _on(E.EXPLOSIVE, E.SEDATING),
        _on(E.CALORIE_DENSE, E.SNEAKY),
    ),
    Ingredient.PARACETAMOL: (
        _on(E.MUNCHIES, E.ANTI_GRAVITY),
        _on(E.ELECTRIFYING, E.ATHLETIC),
        _on(E.PARANOIA, E.BALDING),
        _on(E.ENERGIZING, E.BALDING, unless=E.PARANOIA),
        _on(E.SPICY, E.BRIGHT_EYED),
        _on(E.FOGGY, E.CALMING),
        _on(E.FOCUSED, E.GINGERITIS),
        _on(E.ENERGIZING, E.PARANOIA, unless=E.MUNCHIES),
        _on(E.CALMING, E.SLIPPERY),
        _on(E.GLOWING, E.TOXIC),
        _on(E.TOXIC, E.TROPIC_THUNDER),
    ),
    Ingredient.VIAGRA: (
        _on(E.EUPHORIC, E.BRIGHT_EYED),
        _on(E.LAXATIVE, E.CALMING),
        _on(E.ATHLETIC, E.SNEAKY),
        _on(E.DISORIENTING, E.TOXIC),
    ),
}

del E

validate_reactions(_REACTIONS)


def reactions_for(ingredient: Ingredient) -> tuple[Reaction, ...]:
    """Reactions triggered by adding ``ingredient``, in application order."""
    return _REACTIONS.get(ingredient, ())