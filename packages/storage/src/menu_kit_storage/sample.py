"""Built-in sample catalog used when no menu file is available."""

from menu_kit_contracts import Catalog, MenuItem

SAMPLE_MENU: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "chef special mushroom soup",
        (
            "raw sliced chicken",
            "well-done steak",
            "sliced carrot",
            "raw sliced mushroom",
            "raw sliced potato",
        ),
    ),
    (
        "grilled veggie platter",
        (
            "sliced zucchini",
            "sliced bell pepper",
            "sliced eggplant",
            "olive oil drizzle",
            "sea salt",
        ),
    ),
    (
        "spicy chicken tacos",
        (
            "shredded chicken",
            "chopped onion",
            "chopped cilantro",
            "sliced jalapeño",
            "warm tortilla",
        ),
    ),
    (
        "classic beef burger",
        (
            "medium beef patty",
            "sliced tomato",
            "sliced onion",
            "leaf lettuce",
            "toasted bun",
        ),
    ),
    (
        "margherita pizza",
        (
            "rolled pizza dough",
            "tomato sauce",
            "fresh mozzarella slices",
            "basil leaves",
            "olive oil drizzle",
        ),
    ),
    (
        "soba noodle salad",
        (
            "boiled soba noodles",
            "julienned cucumber",
            "julienned carrot",
            "toasted sesame",
            "soy-sesame dressing",
        ),
    ),
    (
        "butter garlic prawns",
        (
            "cleaned prawns",
            "minced garlic",
            "melted butter",
            "chopped parsley",
            "lemon wedge",
        ),
    ),
    (
        "caesar salad",
        (
            "chopped romaine",
            "croutons",
            "shaved parmesan",
            "caesar dressing",
            "lemon wedge",
        ),
    ),
    (
        "vegan buddha bowl",
        (
            "steamed quinoa",
            "roasted chickpeas",
            "sliced avocado",
            "steamed broccoli",
            "tahini drizzle",
        ),
    ),
    (
        "fish and chips",
        (
            "battered white fish",
            "thick-cut fries",
            "lemon wedge",
            "tartar sauce",
            "sea salt",
        ),
    ),
)


def sample_catalog() -> Catalog:
    """Return a fresh, independently mutable copy of the sample catalog."""
    return Catalog(
        items=[MenuItem(name=name, processed=list(processed)) for name, processed in SAMPLE_MENU]
    )
