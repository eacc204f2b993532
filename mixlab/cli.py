"""Search every ingredient sequence for the most valuable mix."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from mixlab.drug import methamphetamine
from mixlab.effect import Effect
from mixlab.ingredient import Ingredient, mix_combinations

PIPE_SIZE = 5


@dataclass(frozen=True)
class BestMix:
    """The best mix found: its effects, ingredients, sale price and cost."""

    effects: tuple[Effect, ...] = ()
    ingredients: tuple[Ingredient, ...] = ()
    price: int = -1
    production_price: int = -1


def find_best(ingredients: Sequence[Ingredient], size: int) -> BestMix:
    """Return the highest-priced mix of ``size`` ingredients.

    Ties are broken by the lower production price; the first one found wins.
    """
    best = BestMix()
    for mix in mix_combinations(ingredients, size):
        drug = methamphetamine()
        for ingredient in mix:
            drug.add(ingredient)
        price = drug.price()
        cost = drug.mix_price()
        if price > best.price or (
            price == best.price and cost < best.production_price
        ):
            best = BestMix(tuple(drug.effects()), tuple(mix), price, cost)
    return best


def _format_list(names: Sequence[str]) -> str:
    return "[" + " ".join(names) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the most valuable mix of the given size."""
    parser = argparse.ArgumentParser(
        prog="mixlab", description="Find the most valuable ingredient mix."
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=int,
        default=PIPE_SIZE,
        help=f"number of ingredients in a mix (default {PIPE_SIZE})",
    )
    args = parser.parse_args(argv)

    best = find_best(list(Ingredient), args.size)
    print(f"Best combo effects: {_format_list([e.display_name() for e in best.effects])}")
    print(f"Ingredients: {_format_list([i.display_name() for i in best.ingredients])}")
    print(f"Final price: {best.price}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())