from .completion_agent import CompletionAgent
from .recipe_agent import RecipeAgent
from .finder_agent import RecipeFinderAgent
__all__ = ["CompletionAgent", "RecipeAgent", "RecipeFinderAgent"]
