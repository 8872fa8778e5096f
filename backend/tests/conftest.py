import pytest

EXAMPLE = (
    "mxmxvkd kfcds sqjhc nhms (contains dairy, fish)\n\n"
    "trh fvjkl sbzzf mxmxvkd (contains dairy)\n\n"
    "sqjhc fvjkl (contains soy)\n\n"
    "sqjhc mxmxvkd sbzzf (contains fish)"
)


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def store(example_text):
    from allergen_core.store import FoodStore
    return FoodStore.from_text(example_text)
