import pytest

from mixlab.cli import BestMix, find_best, main
from mixlab.drug import methamphetamine
from mixlab.ingredient import Ingredient, mix_combinations


def _priced(mix):
    drug = methamphetamine()
    for ingredient in mix:
        drug.add(ingredient)
    return drug


def test_size_zero_is_plain_base():
    best = find_best(list(Ingredient), 0)
    assert best == BestMix((), (), 70, 0)


def test_negative_size_finds_nothing():
    best = find_best(list(Ingredient), -1)
    assert best.price == -1
    assert best.ingredients == ()


@pytest.mark.parametrize("size", [1, 2])
def test_best_is_not_beaten(size):
    ingredients = list(Ingredient)
    best = find_best(ingredients, size)
    for mix in mix_combinations(ingredients, size):
        drug = _priced(mix)
        assert drug.price() <= best.price
        if drug.price() == best.price:
            assert drug.mix_price() >= best.production_price


@pytest.mark.parametrize("size", [1, 2])
def test_best_fields_match_its_ingredients(size):
    best = find_best(list(Ingredient), size)
    assert len(best.ingredients) == size
    drug = _priced(best.ingredients)
    assert drug.price() == best.price
    assert drug.mix_price() == best.production_price
    assert tuple(drug.effects()) == best.effects


def test_single_ingredient_search_restricted_pool():
    best = find_best([Ingredient.CUKE], 1)
    assert best.ingredients == (Ingredient.CUKE,)
    assert best.production_price == Ingredient.CUKE.price()


def test_main_prints_base_for_size_zero(capsys):
    assert main(["0"]) == 0
    out = capsys.readouterr().out
    assert out == "Best combo effects: []\nIngredients: []\nFinal price: 70\n"


def test_main_output_matches_search(capsys):
    assert main(["1"]) == 0
    best = find_best(list(Ingredient), 1)
    lines = capsys.readouterr().out.splitlines()
    effects = " ".join(e.display_name() for e in best.effects)
    names = " ".join(i.display_name() for i in best.ingredients)
    assert lines == [
        f"Best combo effects: [{effects}]",
        f"Ingredients: [{names}]",
        f"Final price: {best.price}",
    ]


def test_main_rejects_non_numeric_size():
    with pytest.raises(SystemExit) as excinfo:
        main(["many"])
    assert excinfo.value.code == 2