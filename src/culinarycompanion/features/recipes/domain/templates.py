# src/culinarycompanion/features/recipes/domain/templates.py

from culinarycompanion.features.recipes.domain.models import Difficulty, RecipeStyle

STYLE_ORDER = (RecipeStyle.FUSION, RecipeStyle.TRADITIONAL, RecipeStyle.MODERN)

QUANTITY_PLACEHOLDER = "1 lb"

PANTRY_STAPLES = (
    "olive oil",
    "salt and pepper",
    "garlic",
    "onion",
    "fresh herbs",
)

EMPTY_MAIN_PLACEHOLDER = "your ingredients"
DEFAULT_SECONDARY = "herb"

TITLE_TEMPLATES = {
    RecipeStyle.FUSION: (
        "{main} Fusion Bowl",
        "Asian-Inspired {main}",
        "Mediterranean {main} Creation",
    ),
    RecipeStyle.TRADITIONAL: (
        "Classic {main} Dish",
        "Rustic {main} with {secondary}",
        "Traditional {main} Recipe",
    ),
    RecipeStyle.MODERN: (
        "Elevated {main}",
        "Contemporary {main} Plate",
        "Modern {main} Composition",
    ),
}

DESCRIPTION_TEMPLATES = {
    RecipeStyle.FUSION: "A delicious fusion dish combining {first_three} with modern cooking techniques.",
    RecipeStyle.TRADITIONAL: "A traditional recipe highlighting the natural flavors of {main} and complementary ingredients.",
    RecipeStyle.MODERN: "An innovative take on classic flavors using {all} with contemporary presentation.",
}

INSTRUCTION_TEMPLATE = (
    "Prepare all ingredients by washing and chopping the {main}.",
    "Heat olive oil in a large pan over medium heat.",
    "Add garlic and onion, sauté until fragrant (about 2 minutes).",
    "Add {main} to the pan and cook according to its requirements.",
    "Season with salt, pepper, and fresh herbs.",
    "Cook until {main} is tender and flavors are well combined.",
    "Taste and adjust seasoning as needed.",
    "Serve hot and enjoy!",
)

STYLE_PROFILES = {
    RecipeStyle.FUSION: {
        "cuisine_type": "International Fusion",
        "prep_time": 15,
        "cook_time": 25,
        "servings": 4,
        "difficulty_level": Difficulty.INTERMEDIATE,
        "tips": (
            "Prep all ingredients before starting to cook",
            "Taste and adjust seasoning throughout cooking",
            "Let the dish rest for 5 minutes before serving",
        ),
    },
    RecipeStyle.TRADITIONAL: {
        "cuisine_type": "Traditional",
        "prep_time": 10,
        "cook_time": 30,
        "servings": 6,
        "difficulty_level": Difficulty.BEGINNER,
        "tips": (
            "Use fresh ingredients when possible",
            "Don't overcook the main ingredients",
            "Season gradually and taste as you go",
        ),
    },
    RecipeStyle.MODERN: {
        "cuisine_type": "Modern Contemporary",
        "prep_time": 20,
        "cook_time": 35,
        "servings": 4,
        "difficulty_level": Difficulty.ADVANCED,
        "tips": (
            "Focus on presentation and plating",
            "Balance flavors and textures carefully",
            "Use high-quality ingredients for best results",
        ),
    },
}
