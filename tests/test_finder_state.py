from rikucook.schema import FinderState, Recipe, RequestStatus


def test_initial_state_is_idle_and_submit_disabled():
    state = FinderState()
    assert state.status == RequestStatus.IDLE
    assert state.submit_disabled


def test_submit_enabled_with_ingredients_until_loading():
    state = FinderState().with_ingredient("eggs")
    assert not state.submit_disabled
    assert state.start_request().submit_disabled


def test_start_request_clears_recipes_and_error():
    state = FinderState(ingredients=["eggs"], recipes=[Recipe(name="Toast")], error="boom")
    loading = state.start_request()

    assert loading.status == RequestStatus.LOADING
    assert loading.recipes == []
    assert loading.error == ""
    assert state.recipes[0].name == "Toast"


def test_fail_and_succeed():
    loading = FinderState(ingredients=["eggs"]).start_request()

    failed = loading.fail("nope")
    assert (failed.status, failed.error, failed.recipes) == (RequestStatus.FAILED, "nope", [])

    done = loading.succeed([Recipe(name="Omelette")])
    assert done.status == RequestStatus.SUCCEEDED
    assert done.error == ""
    assert done.recipes[0].name == "Omelette"


def test_ingredient_edits_keep_request_status():
    loading = FinderState(ingredients=["eggs"]).start_request()
    edited = loading.with_ingredient("milk").without_ingredient("eggs")

    assert edited.ingredients == ["milk"]
    assert edited.status == RequestStatus.LOADING


def test_with_ingredient_ignores_blank_and_duplicates():
    state = FinderState().with_ingredient(" eggs ").with_ingredient("eggs").with_ingredient("  ")
    assert state.ingredients == ["eggs"]
