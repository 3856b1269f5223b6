from __future__ import annotations

from dataclasses import dataclass

from .models import SuggestedRecipe


@dataclass(frozen=True)
class SuggestionTemplate:
    """A fixed recipe offered when any available ingredient contains a trigger word."""

    triggers: tuple[str, ...]
    recipe: SuggestedRecipe

    def matches(self, ingredient_list: list[str]) -> bool:
        return any(trigger in item for item in ingredient_list for trigger in self.triggers)


# ---------------------------------------------------------------------------
# Templates, evaluated in this order
# ---------------------------------------------------------------------------

CHICKEN_SKILLET = SuggestionTemplate(
    triggers=("chicken",),
    recipe=SuggestedRecipe(
        name="Garlic Herb Chicken Skillet",
        description="A flavorful one-pan chicken dish with herbs and your available vegetables",
        ingredients=[
            "2 chicken breasts, sliced",
            "garlic cloves, minced",
            "mixed herbs (thyme, rosemary)",
            "vegetables from your list",
            "olive oil",
            "salt and pepper",
            "lemon juice",
        ],
        instructions=[
            "Season chicken with salt, pepper, and herbs",
            "Heat olive oil in a large skillet over medium-high heat",
            "Cook chicken until golden brown, about 6-7 minutes per side",
            "Add garlic and cook for 1 minute until fragrant",
            "Add your vegetables and cook until tender",
            "Finish with lemon juice and fresh herbs",
            "Serve hot with rice or potatoes",
        ],
        cuisine_type="Mediterranean",
        preparation_time=25,
        servings=4,
        difficulty="Easy",
        tags=["protein-rich", "one-pan", "healthy", "quick"],
    ),
)

GARDEN_PASTA = SuggestionTemplate(
    triggers=("pasta", "spaghetti", "noodle"),
    recipe=SuggestedRecipe(
        name="Fresh Garden Pasta",
        description="Light and fresh pasta featuring your available ingredients",
        ingredients=[
            "pasta of choice (8 oz)",
            "olive oil",
            "garlic, minced",
            "fresh vegetables from your list",
            "parmesan cheese, grated",
            "fresh basil or herbs",
            "salt and pepper",
        ],
        instructions=[
            "Cook pasta according to package directions until al dente",
            "Reserve 1 cup pasta water before draining",
            "Heat olive oil in a large pan over medium heat",
            "Sauté garlic until fragrant, about 1 minute",
            "Add your vegetables, cooking until just tender",
            "Toss in cooked pasta with a splash of pasta water",
            "Add parmesan cheese and fresh herbs",
            "Season with salt and pepper to taste",
        ],
        cuisine_type="Italian",
        preparation_time=20,
        servings=4,
        difficulty="Easy",
        tags=["pasta", "vegetarian", "fresh", "quick"],
    ),
)

RICE_PILAF = SuggestionTemplate(
    triggers=("rice",),
    recipe=SuggestedRecipe(
        name="Savory Rice Pilaf",
        description="A hearty rice dish incorporating your available ingredients",
        ingredients=[
            "1 cup long-grain rice",
            "2 cups chicken or vegetable broth",
            "onion, diced",
            "your protein and vegetables",
            "garlic, minced",
            "herbs and spices",
            "butter or oil",
        ],
        instructions=[
            "Heat butter in a large saucepan over medium heat",
            "Add rice and toast for 2-3 minutes until fragrant",
            "Add onion and garlic, cook until softened",
            "Pour in broth and bring to a boil",
            "Add your protein and harder vegetables",
            "Reduce heat, cover, and simmer for 18-20 minutes",
            "Add softer vegetables in the last 5 minutes",
            "Let stand 5 minutes, then fluff with a fork",
        ],
        cuisine_type="Mediterranean",
        preparation_time=35,
        servings=6,
        difficulty="Medium",
        tags=["rice", "one-pot", "filling", "comfort-food"],
    ),
)

VEGETABLE_MEDLEY = SuggestionTemplate(
    triggers=("tomato", "onion", "carrot", "bell pepper", "zucchini", "mushroom"),
    recipe=SuggestedRecipe(
        name="Mediterranean Vegetable Medley",
        description="A colorful and nutritious vegetable dish bursting with Mediterranean flavors",
        ingredients=[
            "mixed vegetables from your list",
            "olive oil",
            "garlic, minced",
            "onion, sliced",
            "canned diced tomatoes",
            "herbs (oregano, basil, thyme)",
            "feta cheese (optional)",
            "salt and pepper",
        ],
        instructions=[
            "Heat olive oil in a large skillet or dutch oven",
            "Sauté onion until softened, about 5 minutes",
            "Add garlic and cook for 1 minute",
            "Add harder vegetables first, cook for 5-7 minutes",
            "Add tomatoes and herbs, season with salt and pepper",
            "Simmer for 15-20 minutes until vegetables are tender",
            "Add softer vegetables in the last 5 minutes",
            "Serve hot, optionally topped with feta cheese",
        ],
        cuisine_type="Mediterranean",
        preparation_time=30,
        servings=4,
        difficulty="Easy",
        tags=["vegetarian", "healthy", "mediterranean", "colorful"],
    ),
)

VEGETABLE_FRITTATA = SuggestionTemplate(
    triggers=("egg",),
    recipe=SuggestedRecipe(
        name="Rustic Vegetable Frittata",
        description="A protein-packed frittata featuring your fresh ingredients",
        ingredients=[
            "8 large eggs",
            "vegetables from your list, chopped",
            "cheese (optional)",
            "olive oil or butter",
            "onion, diced",
            "herbs (parsley, chives)",
            "salt and pepper",
        ],
        instructions=[
            "Preheat oven to 375°F (190°C)",
            "Heat oil in an oven-safe skillet over medium heat",
            "Sauté onion and harder vegetables until softened",
            "Beat eggs with salt, pepper, and herbs",
            "Pour eggs over vegetables in the skillet",
            "Cook for 3-4 minutes until edges start to set",
            "Sprinkle with cheese if using",
            "Transfer to oven and bake for 12-15 minutes until set",
            "Let cool slightly before slicing and serving",
        ],
        cuisine_type="Italian",
        preparation_time=25,
        servings=6,
        difficulty="Easy",
        tags=["eggs", "protein-rich", "brunch", "versatile"],
    ),
)

TEMPLATES: tuple[SuggestionTemplate, ...] = (
    CHICKEN_SKILLET,
    GARDEN_PASTA,
    RICE_PILAF,
    VEGETABLE_MEDLEY,
    VEGETABLE_FRITTATA,
)
