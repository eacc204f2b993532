# mixlab

mixlab models how ingredients change a product's effects in a crafting
game, and searches every possible mix for the one that sells for the most.

Each product starts from a base with a base price and, for some bases, a
starting effect. Adding an ingredient first runs that ingredient's
reactions in order, each of which can turn existing effects into new ones,
and then adds the ingredient's own effect. The selling price is the base
price scaled by one plus the sum of the effect multipliers, truncated to a
whole number; the production cost is the sum of the ingredient prices.

## Installation

```
pip install .
```

## Command line

```
mixlab [size]
```

tries every ordered sequence of `size` ingredients (five by default),
repetitions allowed, on a methamphetamine base and prints the effects, the
ingredients and the selling price of the best mix, for example:

```
Best combo effects: [Anti-Gravity Glowing ...]
Ingredients: [Cuke Banana ...]
Final price: 123
```

When two mixes sell for the same price, the cheaper one to produce wins;
among equal mixes the first one found is kept. The number of sequences is
16 to the power of `size`, so large sizes take a long time.

## Library

```python
from mixlab.drug import og_kush
from mixlab.ingredient import Ingredient

product = og_kush()
product.add(Ingredient.BANANA)
product.add(Ingredient.CUKE)

print([effect.display_name() for effect in product.effects()])
print(product.price(), product.mix_price())
```

Modules:

- `mixlab.effect` – the `Effect` enum with `display_name()` and
  `multiplier()`, and `ordered(effects)`, which returns the distinct
  effects in their canonical order.
- `mixlab.ingredient` – the `Ingredient` enum with `display_name()`,
  `base_effect()` and `price()`, and `mix_combinations(ingredients, n)`,
  a generator of every ordered selection of `n` ingredients with
  repetition. A negative `n` yields nothing and `n == 0` yields one empty
  sequence.
- `mixlab.reaction` – the immutable `Reaction` rule, built with
  `requires()`, `excludes()` and `produces()` and applied with
  `react(effects)`; `reactions_for(ingredient)` returns an ingredient's
  reactions, and `validate_reactions(mapping)` raises `ValueError` when an
  ingredient lists the same reaction twice.
- `mixlab.drug` – `Drug`, with `add()`, `effects()`, `price()` and
  `mix_price()`, and the bases `og_kush()`, `sour_diesel()`,
  `green_crack()`, `granddaddy_purple()`, `methamphetamine()` and
  `cocaine()`.
- `mixlab.cli` – `find_best(ingredients, size)` returning a `BestMix`
  with `effects`, `ingredients`, `price` and `production_price`, and
  `main(argv)` behind the `mixlab` command.

## Limitations

The command always searches on the methamphetamine base. Cocaine is priced
at standard quality only; quality levels are not modelled.

## Tests

```
pip install .[test]
pytest
```