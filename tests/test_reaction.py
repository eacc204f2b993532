import pytest

from mixlab.effect import Effect
from mixlab.ingredient import Ingredient
from mixlab.reaction import Reaction, reactions_for, validate_reactions

BASE = frozenset({Effect.ANTI_GRAVITY, Effect.ATHLETIC})


@pytest.mark.parametrize("base", [frozenset(), BASE])
def test_empty_reaction_keeps_effects(base):
    assert Reaction().react(base) == base


def _build(wanted, unwanted, products):
    reaction = Reaction()
    for e in wanted:
        reaction = reaction.requires(e)
    for e in unwanted:
        reaction = reaction.excludes(e)
    for e in products:
        reaction = reaction.produces(e)
    return reaction


@pytest.mark.parametrize(
    "wanted, unwanted, products, expected",
    [
        ([Effect.ELECTRIFYING], [], [Effect.CALMING], BASE),
        ([Effect.ELECTRIFYING], [Effect.CYCLOPEAN], [Effect.CALMING], BASE),
        (
            [Effect.ANTI_GRAVITY],
            [Effect.CYCLOPEAN],
            [Effect.CALMING],
            {Effect.CALMING, Effect.ATHLETIC},
        ),
        ([Effect.ANTI_GRAVITY], [], [Effect.CALMING], {Effect.CALMING, Effect.ATHLETIC}),
        (
            [Effect.ANTI_GRAVITY],
            [Effect.ZOMBIFYING],
            [Effect.CALMING],
            {Effect.CALMING, Effect.ATHLETIC},
        ),
        ([Effect.ANTI_GRAVITY], [], [Effect.ATHLETIC], {Effect.ATHLETIC}),
        (
            [Effect.ANTI_GRAVITY, Effect.ATHLETIC],
            [],
            [Effect.ELECTRIFYING],
            {Effect.ELECTRIFYING},
        ),
        (
            [Effect.ANTI_GRAVITY],
            [Effect.ZOMBIFYING, Effect.ATHLETIC],
            [Effect.ELECTRIFYING],
            BASE,
        ),
        (
            [Effect.ANTI_GRAVITY],
            [Effect.ZOMBIFYING, Effect.BALDING],
            [Effect.ELECTRIFYING],
            {Effect.ATHLETIC, Effect.ELECTRIFYING},
        ),
        (
            [],
            [],
            [Effect.ELECTRIFYING],
            {Effect.ANTI_GRAVITY, Effect.ATHLETIC, Effect.ELECTRIFYING},
        ),
        ([], [Effect.ANTI_GRAVITY], [Effect.ELECTRIFYING], BASE),
    ],
)
def test_react(wanted, unwanted, products, expected):
    reaction = _build(wanted, unwanted, products)
    assert reaction.react(BASE) == frozenset(expected)


def test_builders_return_new_reactions():
    base = Reaction()
    extended = base.requires(Effect.FOGGY)
    assert base.wanted == ()
    assert extended.wanted == (Effect.FOGGY,)


def test_react_does_not_mutate_input():
    effects = {Effect.FOGGY}
    Reaction().requires(Effect.FOGGY).produces(Effect.TOXIC).react(effects)
    assert effects == {Effect.FOGGY}


def test_donut_explosive_reaction_present():
    expected = (
        Reaction()
        .requires(Effect.CALORIE_DENSE)
        .excludes(Effect.EXPLOSIVE)
        .produces(Effect.EXPLOSIVE)
    )
    assert expected in reactions_for(Ingredient.DONUT)


def test_reaction_counts():
    assert len(reactions_for(Ingredient.HORSE_SEMEN)) == 3
    assert len(reactions_for(Ingredient.GASOLINE)) == 12
    assert len(reactions_for(Ingredient.MEGA_BEAN)) == 12


def test_every_ingredient_has_reactions():
    for ingredient in Ingredient:
        assert len(reactions_for(ingredient)) > 0


def test_validate_rejects_duplicates():
    duplicate = Reaction().requires(Effect.FOGGY).produces(Effect.TOXIC)
    with pytest.raises(ValueError, match="duplicate reaction"):
        validate_reactions({Ingredient.CUKE: [duplicate, duplicate]})


def test_validate_accepts_distinct():
    first = Reaction().requires(Effect.FOGGY).produces(Effect.TOXIC)
    second = first.excludes(Effect.CALMING)
    assert validate_reactions({Ingredient.CUKE: [first, second]}) is None