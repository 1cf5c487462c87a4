"""Candidate registries, cyclic orderings and grouping tables per matcher domain.

Names listed here are canonical: every rule, hint table and grouping table
must use them verbatim. ``scripts/validate_reference_data.py`` enforces this.
"""

SEASONS = [
    "Early Spring",
    "Spring",
    "Late Spring",
    "Early Summer",
    "Summer",
    "Late Summer",
    "Early Autumn",
    "Autumn",
    "Late Autumn",
    "Early Winter",
    "Winter",
    "Late Winter",
]

# Legacy four-bucket aggregate.
SIMPLIFIED_SEASONS = {
    "Spring": ["Early Spring", "Spring", "Late Spring"],
    "Summer": ["Early Summer", "Summer", "Late Summer"],
    "Autumn": ["Early Autumn", "Autumn", "Late Autumn"],
    "Winter": ["Early Winter", "Winter", "Late Winter"],
}

# A leading run starting at one of these may merge with a trailing run ending
# at one of SEASON_WRAP_END even when the two do not touch.
SEASON_WRAP_START = ["Early Spring", "Spring"]
SEASON_WRAP_END = ["Late Autumn", "Winter", "Late Winter"]

TIME_PERIODS = [
    "Early Morning",
    "Morning",
    "Midday",
    "Afternoon",
    "Evening",
    "Night",
]

ACTIVITY_CLUSTERS = [
    {
        "label": "Mindfulness & Relaxation",
        "members": ["Meditation", "Yoga", "Deep Breathing", "Gentle Stretching", "Mindfulness Practice"],
    },
    {
        "label": "Focus & Productivity",
        "members": [
            "Work",
            "Study",
            "Reading",
            "Writing",
            "Problem Solving",
            "Coding",
            "High-Focus Work",
            "Productivity Sessions",
        ],
    },
    {
        "label": "Creative Pursuits",
        "members": ["Art", "Journaling", "Creative Writing", "Music", "Crafting", "Brainstorming", "Creative Projects"],
    },
    {
        "label": "Social Engagement",
        "members": [
            "Social Gatherings",
            "Conversation",
            "Hosting",
            "Meetings",
            "Group Activities",
            "Tea Ceremony",
            "Social Events",
        ],
    },
    {
        "label": "Active & Energetic",
        "members": [
            "Exercise",
            "Walking",
            "Light Exercise",
            "Sports",
            "Dance",
            "Active Outdoor Activities",
            "Morning Routines",
        ],
    },
    {
        "label": "Evening Wind-Down",
        "members": [
            "Reading Before Bed",
            "Evening Ritual",
            "Relaxation",
            "Light Reading",
            "Evening Wind-Down",
            "Sleep Preparation",
        ],
    },
    {
        "label": "Contemplative & Reflective",
        "members": [
            "Contemplation",
            "Reflection",
            "Journaling",
            "Deep Thinking",
            "Planning",
            "Self-Reflection",
            "Mindful Observation",
        ],
    },
    {
        "label": "Everyday Rituals",
        "members": [
            "Daily Rituals",
            "Morning Routines",
            "Afternoon Break",
            "Casual Sipping",
            "General Enjoyment",
            "Everyday Activities",
        ],
    },
    {
        "label": "Digestion & Comfort",
        "members": ["After-Meal Digestion", "Comfort Sipping", "Warming Up"],
    },
]

# Scored activities that belong to no cluster.
ACTIVITY_EXTRAS = ["General Enjoyment", "Casual Sipping"]

# Short hint tags (lowercase) -> canonical activities they boost.
ACTIVITY_HINT_ALIASES = {
    "focus": ["High-Focus Work"],
    "gentle focus": ["Reading"],
    "social": ["Social Gatherings"],
    "evening": ["Evening Ritual"],
    "unwinding": ["Evening Wind-Down"],
    "romantic": ["Conversation"],
    "contemplative": ["Contemplation"],
    "creative": ["Creative Projects"],
    "uplifting": ["Creative Projects"],
    "gentle energy": ["Walking"],
    "energy": ["Exercise"],
    "strong energy": ["Exercise"],
    "energy (smooth)": ["Productivity Sessions"],
    "morning": ["Morning Routines"],
    "morning boost": ["Morning Routines"],
    "refreshment": ["Afternoon Break"],
    "cleansing": ["After-Meal Digestion"],
    "detox/cleansing": ["After-Meal Digestion"],
    "digestive": ["After-Meal Digestion"],
    "satiating": ["After-Meal Digestion"],
    "warming": ["Warming Up"],
    "comfort": ["Comfort Sipping"],
    "treat": ["Comfort Sipping"],
    "indulgence": ["Comfort Sipping"],
    "routine": ["Daily Rituals"],
    "grounding": ["Meditation"],
    "grounding (physical)": ["Meditation"],
    "bold experience": ["Mindful Observation"],
    "subtle": ["Mindful Observation"],
    "ceremony": ["Tea Ceremony"],
    "deep relaxation": ["Relaxation", "Meditation"],
    "calm & clear": ["Meditation"],
}

FOOD_CLUSTERS = [
    {
        "label": "Breakfast",
        "members": ["Breakfast Foods", "Toast", "Oatmeal", "Yogurt", "Fruit Salad", "Pancakes", "Pastries", "Scones", "Eggs"],
    },
    {
        "label": "Light Lunch",
        "members": [
            "Salads",
            "Sandwiches",
            "Light Soups",
            "Steamed Vegetables",
            "Sushi",
            "Rice Dishes",
            "Light Cheese",
            "Wraps",
            "Quiche",
            "Savory Pastries",
            "Grilled Vegetables",
            "Steamed Foods",
            "Savory Dishes",
            "Light Meats",
        ],
    },
    {
        "label": "Afternoon Tea",
        "members": [
            "Pastries",
            "Light Desserts",
            "Scones",
            "Cookies",
            "Cakes",
            "Biscuits",
            "Fruit Tarts",
            "Madeleines",
            "Tea Cakes",
            "Light Cakes",
            "Moon Cakes",
            "Baked Goods",
        ],
    },
    {
        "label": "Dinner",
        "members": [
            "Grilled Meats",
            "Roasted Vegetables",
            "Stews",
            "Rich Stews",
            "Rich Soups",
            "Hearty Soups",
            "Dark Meats",
            "Game Meats",
            "Pork Dishes",
            "Chicken",
            "Mushrooms",
            "Root Vegetables",
            "Fish Dishes",
            "Hearty Dishes",
            "Rich Foods",
            "Comfort Food",
        ],
    },
    {
        "label": "Dessert",
        "members": [
            "Desserts",
            "Chocolate",
            "Dark Chocolate",
            "Light Desserts",
            "Creamy Desserts",
            "Fruit Desserts",
            "Ice Cream",
            "Sorbets",
            "Sweet Pastries",
            "Rich Desserts",
            "Custards",
        ],
    },
    {
        "label": "Asian Cuisine",
        "members": [
            "Sushi",
            "Steamed Rice",
            "Rice Dishes",
            "Stir-fried Vegetables",
            "Tofu",
            "Miso Soup",
            "Noodles",
            "Dumplings",
            "Thai Curry",
            "Dim Sum",
        ],
    },
    {
        "label": "Seafood",
        "members": ["Seafood", "Shellfish", "White Fish", "Grilled Fish", "Smoked Salmon", "Fish Dishes", "Sushi"],
    },
    {
        "label": "Mediterranean Cuisine",
        "members": [
            "Olive Oil",
            "Fresh Herbs",
            "Cheese",
            "Grilled Fish",
            "Salads",
            "Hummus",
            "Falafel",
            "Mediterranean Dishes",
            "Lamb Dishes",
        ],
    },
    {
        "label": "Cheese Pairing",
        "members": [
            "Cheese",
            "Hard Cheese",
            "Soft Cheese",
            "Strong Cheese",
            "Goat Cheese",
            "Brie",
            "Cheddar",
            "Blue Cheese",
            "Cheese Plates",
            "Light Cheese",
        ],
    },
    {
        "label": "Spiced Foods",
        "members": [
            "Spiced Foods",
            "Spiced Cakes",
            "Spiced Desserts",
            "Curries",
            "Spiced Dishes",
            "Thai Curry",
            "Middle Eastern Sweets",
            "Spiced Tea Cakes",
            "Chai Spice Desserts",
            "Spiced Cookies",
        ],
    },
    {
        "label": "Smoky & Grilled",
        "members": ["Smoked Foods", "BBQ", "Bacon", "Smoked Salmon", "Grilled Meats"],
    },
]

FOOD_EXTRAS = [
    "Roasted Nuts",
    "Fruits",
    "Tropical Fruit",
    "Delicate Foods",
    "Bold Flavored Foods",
    "Fatty Foods",
]
