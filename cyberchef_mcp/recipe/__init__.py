"""Recipe module: argument literals, compilation and shareable URLs."""

from .compiler import CompiledRecipe, CompiledStep, compile_recipe
from .encoding import encode_argument, encode_arguments
from .models import ArgValue, RecipeStep, ToggleValue
from .url import encode_input_fragment, encode_recipe_fragment, to_shareable_url

__all__ = [
    # Models
    "ArgValue",
    "RecipeStep",
    "ToggleValue",
    # Encoding
    "encode_argument",
    "encode_arguments",
    # Compiler
    "CompiledRecipe",
    "CompiledStep",
    "compile_recipe",
    # URL
    "encode_input_fragment",
    "encode_recipe_fragment",
    "to_shareable_url",
]
