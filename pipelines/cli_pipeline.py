import asyncio

from rikucook.agents import CompletionAgent, RecipeAgent, RecipeFinderAgent
from rikucook.config import configure_logging, load_settings
from rikucook.schema import FinderState, Recipe

HELP = (
    "Commands:\n"
    "  add <ingredient>     add an ingredient\n"
    "  remove <ingredient>  remove an ingredient\n"
    "  list                 show your ingredients\n"
    "  find                 ask for recipe ideas\n"
    "  quit                 leave\n"
)


def print_recipe(recipe: Recipe):
    print(f"\n🍲 {recipe.name}")
    print(f"   {recipe.description}")
    if recipe.additionalIngredients:
        print("   Additional Ingredients:")
        for item in recipe.additionalIngredients:
            print(f"     - {item}")
    print(f"   Cooking Time: {recipe.cookingTime}")


async def main():
    configure_logging()
    finder_agent = RecipeFinderAgent(RecipeAgent(CompletionAgent(load_settings())))
    state = FinderState()

    print("👨‍🍳 RikuCook: What's in your fridge?\n")
    print(HELP)

    while True:
        command, _, argument = input("> ").strip().partition(" ")
        command = command.lower()

        if command in ["quit", "exit"]:
            print("👋 Happy cooking!")
            break
        elif command == "add":
            state = state.with_ingredient(argument)
        elif command == "remove":
            state = state.without_ingredient(argument.strip())
        elif command == "list":
            print(", ".join(state.ingredients) or "(no ingredients yet)")
        elif command == "find":
            print("\n⏳ Finding Recipes...\n")
            state = await finder_agent.ainvoke(state)
            if state.error:
                print(f"⚠️ {state.error}")
            elif not state.recipes:
                print("No recipes came back. Try different ingredients.")
            else:
                print("Your Recipes")
                for recipe in state.recipes:
                    print_recipe(recipe)
                print()
        elif command:
            print(HELP)


if __name__ == "__main__":
    asyncio.run(main())
