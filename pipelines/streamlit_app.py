import streamlit as st

from rikucook.agents import CompletionAgent, RecipeAgent, RecipeFinderAgent
from rikucook.config import configure_logging, load_settings
from rikucook.schema import FinderState

configure_logging()
st.set_page_config(page_title="RikuCook", page_icon="👨‍🍳")


@st.cache_resource
def build_finder_agent() -> RecipeFinderAgent:
    completion_agent = CompletionAgent(load_settings())
    return RecipeFinderAgent(RecipeAgent(completion_agent))


# Initialize the page store in session_state
if "finder_state" not in st.session_state:
    st.session_state.finder_state = FinderState()


def add_current_input():
    current = st.session_state.finder_state
    updated = current.with_ingredient(st.session_state.get("ingredient_input", ""))
    # Blank or repeated entries stay in the box so they can be fixed
    if updated.ingredients != current.ingredients:
        st.session_state.finder_state = updated
        st.session_state.ingredient_input = ""


def remove(ingredient: str):
    st.session_state.finder_state = st.session_state.finder_state.without_ingredient(ingredient)


# Streamlit UI
st.title("👨‍🍳 RikuCook")
st.caption("What's in your fridge?")

st.subheader("Add Your Ingredients")

# Enter inside a form submits it, same as pressing "Add"
with st.form("add_ingredient", border=False):
    input_col, button_col = st.columns([4, 1])
    input_col.text_input(
        "Ingredient",
        key="ingredient_input",
        placeholder="e.g., chicken, tomatoes, garlic...",
        label_visibility="collapsed",
    )
    button_col.form_submit_button(
        "➕ Add", key="add_button", on_click=add_current_input, use_container_width=True
    )

state: FinderState = st.session_state.finder_state
if state.ingredients:
    chip_cols = st.columns(min(len(state.ingredients), 4))
    for idx, ingredient in enumerate(state.ingredients):
        chip_cols[idx % len(chip_cols)].button(
            f"{ingredient}  ✕",
            key=f"remove_{idx}_{ingredient}",
            on_click=remove,
            args=(ingredient,),
        )

if st.button(
    "🔍 Find Recipes",
    key="find_recipes",
    type="primary",
    disabled=state.submit_disabled,
    use_container_width=True,
):
    # The store is written only when the run completes
    with st.spinner("Finding Recipes..."):
        st.session_state.finder_state = build_finder_agent().invoke(state)

state = st.session_state.finder_state
if state.error:
    st.error(state.error)

# Show suggested recipes
if state.recipes:
    st.header("Your Recipes")
    for recipe in state.recipes:
        with st.container(border=True):
            st.subheader(recipe.name)
            st.write(recipe.description)
            extras_col, time_col = st.columns(2)
            if recipe.additionalIngredients:
                extras_col.markdown("**Additional Ingredients:**")
                extras_col.markdown("\n".join(f"- {item}" for item in recipe.additionalIngredients))
            time_col.markdown("**Cooking Time:**")
            time_col.write(recipe.cookingTime)
