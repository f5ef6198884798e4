from pydantic import BaseModel, ConfigDict, field_validator
from typing import List


class Recipe(BaseModel):
    # Models sometimes answer "cookingTime": 20 instead of "20 minutes"
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    description: str = ""
    additionalIngredients: List[str] = []
    cookingTime: str = ""

    @field_validator("name", "description", "cookingTime", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("additionalIngredients", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class RecipeSuggestions(BaseModel):
    recipes: List[Recipe] = []

    @field_validator("recipes", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
