from enum import Enum
from typing import List

from pydantic import BaseModel

from rikucook.ingredients import add_ingredient, remove_ingredient
from rikucook.schema.recipe_schema import Recipe


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FinderState(BaseModel):
    """Everything the recipe finder page shows.

    Transitions return a new state and leave the receiver untouched, so a
    Streamlit session (or a langgraph run) can hold on to an old snapshot.
    """

    ingredients: List[str] = []
    status: RequestStatus = RequestStatus.IDLE
    recipes: List[Recipe] = []
    error: str = ""

    @property
    def submit_disabled(self) -> bool:
        return self.status == RequestStatus.LOADING or not self.ingredients

    def with_ingredient(self, text: str) -> "FinderState":
        return self.model_copy(update={"ingredients": add_ingredient(self.ingredients, text)})

    def without_ingredient(self, text: str) -> "FinderState":
        return self.model_copy(update={"ingredients": remove_ingredient(self.ingredients, text)})

    def start_request(self) -> "FinderState":
        return self.model_copy(
            update={"status": RequestStatus.LOADING, "recipes": [], "error": ""}
        )

    def fail(self, message: str) -> "FinderState":
        return self.model_copy(
            update={"status": RequestStatus.FAILED, "recipes": [], "error": message}
        )

    def succeed(self, recipes: List[Recipe]) -> "FinderState":
        return self.model_copy(
            update={"status": RequestStatus.SUCCEEDED, "recipes": list(recipes), "error": ""}
        )
