from .recipe_schema import Recipe, RecipeSuggestions
from .completion_schema import CompletionMessage, CompletionRequest, ContentBlock, CompletionResponse
from .finder_state import FinderState, RequestStatus
__all__ = ["Recipe", "RecipeSuggestions", "CompletionMessage", "CompletionRequest", "ContentBlock", "CompletionResponse", "FinderState", "RequestStatus"]
