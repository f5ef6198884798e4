EMPTY_INGREDIENTS_MESSAGE = "Please add at least one ingredient"
REQUEST_FAILED_MESSAGE = "Failed to generate recipes. Please try again."


class RikuCookError(Exception):
    user_message = REQUEST_FAILED_MESSAGE


class IngredientValidationError(RikuCookError):
    """Raised when recipes are requested for an empty ingredient list."""

    user_message = EMPTY_INGREDIENTS_MESSAGE

    def __init__(self, message: str = EMPTY_INGREDIENTS_MESSAGE):
        super().__init__(message)


class RecipeRequestError(RikuCookError):
    """Any failure calling the completion API or reading its reply.

    The message carries the diagnostic cause; users only ever see
    ``user_message``.
    """

    user_message = REQUEST_FAILED_MESSAGE
