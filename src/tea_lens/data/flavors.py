"""Flavor-note hint records grouped by top-level flavor category.

Each category has a display ``label``, the ``keywords`` that place a raw note
in that category, optional category-level ``defaults`` and its ``notes``.
Food hints use canonical food names; activity hints are short tags that the
activity registry resolves to canonical activities.
"""

FLAVOR_CATEGORIES = {
    "floral": {
        "label": "Floral",
        "keywords": ["floral", "jasmine", "rose", "orchid", "lilac", "osmanthus", "honeysuckle", "perfumed"],
        "defaults": {
            "food": ["Light Desserts", "Pastries", "Fruit Salad"],
            "seasons": ["Spring", "Summer"],
            "activities": ["Relaxation", "Social"],
        },
        "notes": {
            "jasmine": {
                "food": ["Light Desserts", "Steamed Vegetables", "White Fish", "Rice Dishes"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Relaxation", "Social", "Evening", "Unwinding"],
                "associated": ["perfumed", "jasmine blossom"],
            },
            "rose": {
                "food": ["Pastries", "Fruit Salad", "Middle Eastern Sweets", "Yogurt"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Relaxation", "Social", "Romantic"],
                "associated": ["rose petal"],
            },
            "orchid": {
                "food": ["Creamy Desserts", "Light Cakes", "Tropical Fruit", "Pastries"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Relaxation", "Contemplative", "Social"],
                "associated": ["orchid fragrance", "creamy"],
            },
            "lilac": {
                "food": ["Salads", "Fruit Tarts", "Madeleines"],
                "seasons": ["Spring"],
                "activities": ["Uplifting", "Social", "Creative"],
                "associated": ["spring-like"],
            },
            "osmanthus": {
                "food": ["Pastries", "Moon Cakes", "Cookies"],
                "seasons": ["Autumn", "Spring"],
                "activities": ["Uplifting", "Social", "Relaxation"],
                "associated": ["apricot"],
            },
            "honeysuckle": {
                "food": ["Fruit Salad", "Light Cakes", "Sorbets"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Uplifting", "Relaxation", "Social"],
                "associated": ["nectar"],
            },
        },
    },
    "fruity": {
        "label": "Fruity",
        "keywords": ["fruity", "apple", "pear", "peach", "apricot", "citrus", "lemon", "berry", "tropical", "stone fruit", "muscatel"],
        "defaults": None,
        "notes": {
            "apple": {
                "food": ["Cheese Plates", "Pork Dishes", "Oatmeal", "Light Cakes"],
                "seasons": ["Autumn", "Spring"],
                "activities": ["Social", "Afternoon Break", "Gentle Energy"],
                "associated": ["pear", "crisp"],
            },
            "citrus": {
                "food": ["Seafood", "Salads", "Chicken", "Light Desserts"],
                "seasons": ["Summer", "Spring", "Warm Weather"],
                "activities": ["Energy", "Focus", "Morning", "Refreshment"],
                "associated": ["lemon", "orange", "bergamot", "zesty", "tangy"],
            },
            "berry": {
                "food": ["Desserts", "Yogurt", "Breakfast Foods", "Salads"],
                "seasons": ["Summer", "Spring"],
                "activities": ["Energy", "Social", "Uplifting"],
                "associated": ["raspberry", "blackcurrant", "strawberry"],
            },
            "stone fruit": {
                "food": ["Fruit Tarts", "Scones", "Light Cheese"],
                "seasons": ["Summer"],
                "activities": ["Social", "Afternoon Break"],
                "associated": ["peach", "apricot", "plum", "lychee"],
            },
            "muscatel": {
                "food": ["Cheese Plates", "Fruit Tarts", "Scones"],
                "seasons": ["Summer"],
                "activities": ["Afternoon Break", "Social"],
                "associated": ["muscat grape", "grape"],
            },
        },
    },
    "vegetal": {
        "label": "Vegetal",
        "keywords": ["vegetal", "grassy", "grass", "spinach", "kale", "leafy", "green bean", "broccoli", "cabbage", "herbaceous", "mint"],
        "defaults": {
            "food": ["Savory Dishes", "Steamed Vegetables", "Rice Dishes", "Steamed Foods"],
            "seasons": ["Spring", "Summer"],
            "activities": ["Focus", "Cleansing", "Refreshment"],
        },
        "notes": {
            "leafy": {
                "food": ["Salads", "Steamed Vegetables", "Light Soups"],
                "seasons": ["Spring"],
                "activities": ["Focus", "Cleansing"],
                "associated": ["spinach", "kale", "lettuce", "grass", "grassy", "green bean"],
            },
            "herbaceous": {
                "food": ["Grilled Vegetables", "Savory Pastries", "Cheese", "Light Soups"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Focus", "Refreshment"],
                "associated": ["parsley", "thyme", "mint", "sage", "basil", "herbal"],
            },
        },
    },
    "nutty_and_toasty": {
        "label": "Nutty/Toasty",
        "keywords": ["nutty", "almond", "hazelnut", "walnut", "chestnut", "toasted", "toasty", "grainy", "barley", "rice"],
        "defaults": None,
        "notes": {
            "nuts": {
                "food": ["Baked Goods", "Cheese", "Roasted Vegetables", "Light Meats", "Roasted Nuts", "Hard Cheese"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Warming", "Comfort", "Relaxation", "Focus"],
                "associated": ["almond", "hazelnut", "walnut", "chestnut", "peanut", "nutty"],
            },
            "toasted": {
                "food": ["Breakfast Foods", "Toast", "Roasted Nuts", "Comfort Food", "Baked Goods", "Grilled Meats"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Warming", "Comfort", "Routine"],
                "associated": ["bread", "grain", "grainy", "barley", "rice", "toasty", "biscuit"],
            },
        },
    },
    "spicy": {
        "label": "Spicy",
        "keywords": ["spicy", "pepper", "ginger", "cinnamon", "clove", "anise", "licorice", "camphor"],
        "defaults": None,
        "notes": {
            "pungent": {
                "food": ["Spiced Desserts", "Spiced Cakes", "Curries", "Rich Stews"],
                "seasons": ["Autumn", "Winter", "Cool Weather"],
                "activities": ["Warming", "Energy", "Digestive"],
                "associated": ["pepper", "ginger", "cinnamon", "clove", "anise", "licorice", "spicy"],
            },
            "cooling": {
                "food": ["Fruit Salad", "Dark Chocolate", "Lamb Dishes", "Yogurt"],
                "seasons": ["Summer", "Spring"],
                "activities": ["Refreshment", "Focus", "Digestive"],
                "associated": ["menthol", "camphor"],
            },
        },
    },
    "sweet": {
        "label": "Sweet",
        "keywords": ["sweet", "honey", "caramel", "brown sugar", "molasses", "vanilla", "chocolate", "cocoa", "malt", "malty"],
        "defaults": {
            "food": ["Desserts", "Pastries", "Breakfast Foods"],
            "seasons": ["Autumn"],
            "activities": ["Comfort"],
        },
        "notes": {
            "caramelized": {
                "food": ["Desserts", "Cheese", "Dark Chocolate", "Baked Goods"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Comfort", "Warming", "Relaxation", "Evening"],
                "associated": ["honey", "caramel", "brown sugar", "molasses", "vanilla"],
            },
            "chocolate": {
                "food": ["Desserts", "Fruits", "Dark Chocolate", "Baked Goods", "Roasted Nuts"],
                "seasons": ["Winter", "Autumn"],
                "activities": ["Comfort", "Indulgence", "Relaxation"],
                "associated": ["cocoa", "dark chocolate"],
            },
            "malt": {
                "food": ["Breakfast Foods", "Baked Goods", "Biscuits", "Hard Cheese"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Warming", "Comfort", "Routine"],
                "associated": ["malty", "cereal"],
            },
        },
    },
    "earthy": {
        "label": "Earthy/Mineral",
        "keywords": ["earthy", "mineral", "wet stone", "flint", "slate", "petrichor", "loam", "soil"],
        "defaults": {
            "food": ["Mushrooms", "Root Vegetables", "Rich Stews", "Dark Meats", "Grilled Meats", "Spiced Foods"],
            "seasons": ["Autumn", "Winter"],
            "activities": ["Grounding", "Contemplative", "Warming", "Digestive"],
        },
        "notes": {
            "soil": {
                "food": ["Mushrooms", "Root Vegetables", "Hearty Soups", "Dark Meats", "Grilled Meats"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Grounding", "Contemplative"],
                "associated": ["petrichor", "loam"],
            },
            "mineral": {
                "food": ["Seafood", "Shellfish", "Light Cheese", "Hard Cheese"],
                "seasons": ["Spring", "Summer", "Autumn"],
                "activities": ["Focus", "Refreshment", "Contemplative"],
                "associated": ["wet stone", "flint", "slate", "rocky"],
            },
        },
    },
    "aged": {
        "label": "Aged/Earthy",
        "keywords": ["aged", "leather", "compost", "forest floor", "autumn leaves", "musty"],
        "defaults": None,
        "notes": {
            "aged": {
                "food": ["Rich Foods", "Game Meats", "Dark Chocolate", "Mushrooms", "Root Vegetables", "Spiced Foods"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Contemplative", "Digestive", "Warming"],
                "associated": ["forest floor", "leather", "autumn leaves", "compost"],
            },
        },
    },
    "woody": {
        "label": "Woody",
        "keywords": ["woody", "wood", "cedar", "pine", "oak", "sandalwood", "bamboo"],
        "defaults": {
            "food": ["Smoked Foods", "Grilled Meats", "Cheese", "Mushrooms", "Hard Cheese", "Root Vegetables"],
            "seasons": ["Autumn", "Winter"],
            "activities": ["Grounding", "Contemplative", "Warming"],
        },
        "notes": {
            "cedar": {
                "food": ["Smoked Salmon", "Hard Cheese", "Game Meats", "Grilled Meats"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Focus", "Contemplative"],
                "associated": ["pine", "oak", "sandalwood"],
            },
        },
    },
    "roasted": {
        "label": "Roasted",
        "keywords": ["roasted", "smoky", "smoke", "coffee", "charred", "tobacco", "burnt"],
        "defaults": {
            "food": ["Grilled Meats", "Root Vegetables", "Comfort Food", "Dark Chocolate", "Roasted Nuts", "Hard Cheese", "Spiced Foods", "Baked Goods"],
            "seasons": ["Autumn", "Winter"],
            "activities": ["Warming", "Comfort", "Evening", "Relaxation"],
        },
        "notes": {
            "smoky": {
                "food": ["Smoked Foods", "BBQ", "Strong Cheese", "Bacon", "Grilled Meats", "Dark Chocolate"],
                "seasons": ["Winter", "Autumn"],
                "activities": ["Warming", "Contemplative", "Bold Experience"],
                "associated": ["bonfire", "tobacco", "burnt", "pine resin", "smoke"],
            },
            "roasty": {
                "food": ["Desserts", "Baked Goods", "Cheese", "Roasted Nuts", "Dark Chocolate"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Warming", "Comfort", "Focus"],
                "associated": ["roasted nuts", "coffee", "chicory", "charred"],
            },
        },
    },
    "umami": {
        "label": "Umami/Marine",
        "keywords": ["umami", "marine", "seaweed", "nori", "brothy", "savory", "oceanic"],
        "defaults": None,
        "notes": {
            "marine": {
                "food": ["Seafood", "Sushi", "Rice Dishes", "Steamed Vegetables"],
                "seasons": ["Spring", "Summer"],
                "activities": ["Focus", "Refreshment", "Cleansing"],
                "associated": ["seaweed", "nori", "brine", "oceanic"],
            },
            "brothy": {
                "food": ["Light Soups", "Rich Stews", "Mushrooms", "Savory Dishes", "Miso Soup"],
                "seasons": ["Autumn", "Winter"],
                "activities": ["Warming", "Comfort", "Satiating"],
                "associated": ["savory", "meaty", "broth", "umami"],
            },
        },
    },
}
