"""RecipeShare: CRUD HTTP API for recipes."""

__version__ = "0.1.0"
