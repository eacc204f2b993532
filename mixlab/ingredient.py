"""Mixing ingredients and enumeration of ingredient sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import IntEnum
from itertools import product

from mixlab.effect import Effect


class Ingredient(IntEnum):
    """An ingredient that can be added to a product."""

    CUKE = 0
    BANANA = 1
    PARACETAMOL = 2
    DONUT = 3
    VIAGRA = 4
    MOUTH_WASH = 5
    FLU_MEDICINE = 6
    GASOLINE = 7
    ENERGY_DRINK = 8
    MOTOR_OIL = 9
    MEGA_BEAN = 10
    CHILI = 11
    BATTERY = 12
    IODINE = 13
    ADDY = 14
    HORSE_SEMEN = 15

    def display_name(self) -> str:
        """Human-readable name of the ingredient."""
        return _NAMES[self]

    def base_effect(self) -> Effect:
        """Effect the ingredient always contributes."""
        return _BASE_EFFECTS[self]

    def price(self) -> int:
        """Purchase price of one unit."""
        return _PRICES[self]


_NAMES: dict[Ingredient, str] = {
    Ingredient.CUKE: "Cuke",
    Ingredient.BANANA: "Banana",
    Ingredient.PARACETAMOL: "Paracetamol",
    Ingredient.DONUT: "Donut",
    Ingredient.VIAGRA: "Viagra",
    Ingredient.MOUTH_WASH: "Mouth Wash",
    Ingredient.FLU_MEDICINE: "Flu Medicine",
    Ingredient.GASOLINE: "Gasoline",
    Ingredient.ENERGY_DRINK: "Energy Drink",
    Ingredient.MOTOR_OIL: "Motor Oil",
    Ingredient.MEGA_BEAN: "Mega Bean",
    Ingredient.CHILI: "Chili",
    Ingredient.BATTERY: "Battery",
    Ingredient.IODINE: "Iodine",
    Ingredient.ADDY: "Addy",
    Ingredient.HORSE_SEMEN: "Horse Semen",
}

_BASE_EFFECTS: dict[Ingredient, Effect] = {
    Ingredient.CUKE: Effect.ENERGIZING,
    Ingredient.BANANA: Effect.GINGERITIS,
    Ingredient.PARACETAMOL: Effect.SNEAKY,
    Ingredient.DONUT: Effect.CALORIE_DENSE,
    Ingredient.VIAGRA: Effect.TROPIC_THUNDER,
    Ingredient.MOUTH_WASH: Effect.BALDING,
    Ingredient.FLU_MEDICINE: Effect.SEDATING,
    Ingredient.GASOLINE: Effect.TOXIC,
    Ingredient.ENERGY_DRINK: Effect.ATHLETIC,
    Ingredient.MOTOR_OIL: Effect.SLIPPERY,
    Ingredient.MEGA_BEAN: Effect.FOGGY,
    Ingredient.CHILI: Effect.SPICY,
    Ingredient.BATTERY: Effect.BRIGHT_EYED,
    Ingredient.IODINE: Effect.JENNERISING,
    Ingredient.ADDY: Effect.THOUGHT_PROVOKING,
    Ingredient.HORSE_SEMEN: Effect.LONG_FACED,
}

_PRICES: dict[Ingredient, int] = {
    Ingredient.CUKE: 2,
    Ingredient.BANANA: 2,
    Ingredient.PARACETAMOL: 3,
    Ingredient.DONUT: 3,
    Ingredient.VIAGRA: 4,
    Ingredient.MOUTH_WASH: 4,
    Ingredient.FLU_MEDICINE: 5,
    Ingredient.GASOLINE: 5,
    Ingredient.ENERGY_DRINK: 6,
    Ingredient.MOTOR_OIL: 6,
    Ingredient.MEGA_BEAN: 7,
    Ingredient.CHILI: 7,
    Ingredient.BATTERY: 8,
    Ingredient.IODINE: 8,
    Ingredient.ADDY: 9,
    Ingredient.HORSE_SEMEN: 9,
}


def mix_combinations(
    ingredients: Sequence[Ingredient], n: int
) -> Iterator[tuple[Ingredient, ...]]:
    """Yield every ordered sequence of ``n`` ingredients, repetitions allowed.

    The first position varies fastest. A negative ``n`` yields nothing;
    ``n == 0`` yields a single empty sequence.
    """
    if n < 0:
        return
    for combo in product(ingredients, repeat=n):
        yield tuple(reversed(combo))