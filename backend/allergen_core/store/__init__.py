from .food_store import FoodStore

__all__ = ["FoodStore"]
