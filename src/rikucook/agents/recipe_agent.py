import json
import logging
import re
from typing import List

from langchain_core.prompts import PromptTemplate
from pydantic import ValidationError

from rikucook.agents.completion_agent import CompletionAgent
from rikucook.errors import IngredientValidationError, RecipeRequestError
from rikucook.schema import CompletionResponse, RecipeSuggestions

logger = logging.getLogger(__name__)

CODE_FENCE = re.compile(r"```json|```")

RECIPE_PROMPT = (
    "Given these ingredients: {ingredients}, suggest {recipe_count} creative recipes I can make. "
    "For each recipe, provide:\n"
    "1. Recipe name\n"
    "2. Brief description (1 sentence)\n"
    "3. Additional ingredients needed (if any)\n"
    "4. Quick cooking time estimate\n"
    "\n"
    "Format your response as JSON only, no markdown or preamble:\n"
    "{{\n"
    '  "recipes": [\n'
    "    {{\n"
    '      "name": "Recipe Name",\n'
    '      "description": "Brief description",\n'
    '      "additionalIngredients": ["item1", "item2"],\n'
    '      "cookingTime": "X minutes"\n'
    "    }}\n"
    "  ]\n"
    "}}"
)


def strip_code_fences(text: str) -> str:
    return CODE_FENCE.sub("", text).strip()


def parse_suggestions(text: str) -> RecipeSuggestions:
    """Read the model's reply as ``{"recipes": [...]}``.

    Raises RecipeRequestError when the reply is not JSON or ``recipes``
    does not hold recipe objects. A JSON value other than an object has no
    ``recipes`` key and so yields no suggestions.
    """
    cleaned = strip_code_fences(text)
    try:
        parsed = json.loads(cleaned)
    except (ValueError, RecursionError) as exc:
        raise RecipeRequestError(f"Model reply is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        return RecipeSuggestions()

    try:
        return RecipeSuggestions.model_validate(parsed)
    except ValidationError as exc:
        raise RecipeRequestError(f"Model reply does not match the recipe shape: {exc}") from exc


class RecipeAgent:
    def __init__(self, completion_agent: CompletionAgent, recipe_count: int = 3):
        self.completion_agent = completion_agent

        raw_prompt = PromptTemplate.from_template(RECIPE_PROMPT)
        self.prompt = raw_prompt.partial(recipe_count=str(recipe_count))

    def build_prompt(self, ingredients: List[str]) -> str:
        if not ingredients:
            raise IngredientValidationError()
        return self.prompt.format(ingredients=", ".join(ingredients))

    def read_response(self, response: CompletionResponse) -> RecipeSuggestions:
        suggestions = parse_suggestions(response.joined_text())
        logger.info("Model suggested %d recipes", len(suggestions.recipes))
        return suggestions

    def invoke(self, ingredients: List[str]) -> RecipeSuggestions:
        # Example input: ["chicken", "tomatoes", "garlic"]
        prompt = self.build_prompt(ingredients)
        return self.read_response(self.completion_agent.invoke(prompt))

    async def ainvoke(self, ingredients: List[str]) -> RecipeSuggestions:
        prompt = self.build_prompt(ingredients)
        return self.read_response(await self.completion_agent.ainvoke(prompt))
