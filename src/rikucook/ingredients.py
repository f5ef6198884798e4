from typing import List


def add_ingredient(ingredients: List[str], text: str) -> List[str]:
    """Append the trimmed text unless it is blank or already listed."""
    trimmed = text.strip()
    if not trimmed or trimmed in ingredients:
        return list(ingredients)
    return [*ingredients, trimmed]


def remove_ingredient(ingredients: List[str], text: str) -> List[str]:
    return [item for item in ingredients if item != text]
