import logging

from langchain_core.runnables import RunnableLambda
from langgraph.graph import END, StateGraph

from rikucook.agents.recipe_agent import RecipeAgent
from rikucook.errors import EMPTY_INGREDIENTS_MESSAGE, RecipeRequestError
from rikucook.schema import FinderState, RequestStatus

logger = logging.getLogger(__name__)


class RecipeFinderAgent:
    """Runs one "Find Recipes" press: validate, then ask the model.

    No request token is kept: when two runs overlap, whichever finishes
    last decides what the page shows.
    """

    def __init__(self, recipe_agent: RecipeAgent):
        self.recipe_agent = recipe_agent

        graph = StateGraph(state_schema=FinderState)
        graph.add_node("validate", self.validate_node)
        graph.add_node(
            "request_recipes",
            RunnableLambda(self.request_recipes_node, afunc=self.arequest_recipes_node),
        )
        graph.set_entry_point("validate")
        graph.add_conditional_edges(
            "validate",
            self.route_after_validate,
            {"request_recipes": "request_recipes", "end": END},
        )
        graph.add_edge("request_recipes", END)
        self.graph = graph.compile()

    def validate_node(self, state: FinderState) -> dict:
        if not state.ingredients:
            failed = state.fail(EMPTY_INGREDIENTS_MESSAGE)
            return {"status": failed.status, "recipes": failed.recipes, "error": failed.error}
        loading = state.start_request()
        logger.info("Requesting recipes for %d ingredients", len(state.ingredients))
        return {"status": loading.status, "recipes": loading.recipes, "error": loading.error}

    def route_after_validate(self, state: FinderState) -> str:
        return "end" if state.status == RequestStatus.FAILED else "request_recipes"

    def request_recipes_node(self, state: FinderState) -> dict:
        try:
            suggestions = self.recipe_agent.invoke(state.ingredients)
        except RecipeRequestError as exc:
            return self._failed(exc)
        return self._succeeded(state, suggestions.recipes)

    async def arequest_recipes_node(self, state: FinderState) -> dict:
        try:
            suggestions = await self.recipe_agent.ainvoke(state.ingredients)
        except RecipeRequestError as exc:
            return self._failed(exc)
        return self._succeeded(state, suggestions.recipes)

    def _failed(self, exc: RecipeRequestError) -> dict:
        logger.error("Recipe request failed: %s", exc, exc_info=exc)
        return {"status": RequestStatus.FAILED, "recipes": [], "error": exc.user_message}

    def _succeeded(self, state: FinderState, recipes) -> dict:
        done = state.succeed(recipes)
        return {"status": done.status, "recipes": done.recipes, "error": done.error}

    def invoke(self, state: FinderState) -> FinderState:
        result = self.graph.invoke(state.model_dump())
        return FinderState.model_validate(dict(result))

    async def ainvoke(self, state: FinderState) -> FinderState:
        result = await self.graph.ainvoke(state.model_dump())
        return FinderState.model_validate(dict(result))
