import pytest

from rikucook.ingredients import add_ingredient, remove_ingredient


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_ingredient_is_ignored(text):
    assert add_ingredient(["eggs"], text) == ["eggs"]


def test_ingredient_is_trimmed_and_appended():
    assert add_ingredient(["eggs"], "  tomatoes ") == ["eggs", "tomatoes"]


def test_duplicate_after_trim_is_ignored():
    ingredients = add_ingredient([], "garlic")
    ingredients = add_ingredient(ingredients, " garlic  ")
    assert ingredients == ["garlic"]


def test_duplicates_are_case_sensitive():
    assert add_ingredient(["Garlic"], "garlic") == ["Garlic", "garlic"]


def test_add_does_not_mutate_input():
    original = ["eggs"]
    add_ingredient(original, "milk")
    assert original == ["eggs"]


def test_remove_absent_ingredient_is_noop():
    assert remove_ingredient(["eggs", "milk"], "flour") == ["eggs", "milk"]


def test_remove_keeps_order_of_the_rest():
    assert remove_ingredient(["eggs", "milk", "flour"], "milk") == ["eggs", "flour"]
