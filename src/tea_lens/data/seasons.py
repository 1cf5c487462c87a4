"""Harvest-season tables."""

# Northern-hemisphere month -> harvest season. Southern months are shifted by 6.
HARVEST_MONTHS = {
    1: "Winter",
    2: "Winter",
    3: "Early Spring",
    4: "Early Spring",
    5: "Late Spring",
    6: "Summer",
    7: "Summer",
    8: "Summer",
    9: "Autumn",
    10: "Autumn",
    11: "Late Autumn",
    12: "Winter",
}

SEASONAL_PROFILES = {
    "Early Spring": {
        "quality": "Prime / First Flush",
        "notes": ["Fresh", "Delicate", "Floral", "Vegetal (light)", "Sweet", "Umami (esp. shaded)", "Bright", "Aromatic"],
        "description": (
            "Early Spring (First Flush) teas capture the fresh energy after winter dormancy, "
            "yielding delicate, aromatic teas high in amino acids."
        ),
    },
    "Late Spring": {
        "quality": "High / Late First Flush",
        "notes": ["Fresh", "Floral", "Vegetal", "Sweet", "Balanced"],
        "description": (
            "Late Spring harvests keep fresh flavors, though usually less aromatic than the first flush."
        ),
    },
    "Summer": {
        "quality": "Standard / Second Flush",
        "notes": ["Robust", "Bold", "Fruity", "Malty (for black teas)", "Full-bodied", "More Astringent"],
        "description": (
            "Summer harvests produce stronger, bolder teas with more robust character and higher astringency."
        ),
    },
    "Autumn": {
        "quality": "Good / Autumn Flush",
        "notes": ["Mellow", "Sweet", "Nutty", "Roasted (if applicable)", "Woody", "Complex", "Smooth"],
        "description": (
            "Autumn harvests yield deeper, mellower and sometimes sweeter teas as the plant prepares for dormancy."
        ),
    },
    "Late Autumn": {
        "quality": "Variable / Late Flush",
        "notes": ["Deep", "Mature", "Mellow", "Sweet", "Woody"],
        "description": "Late Autumn teas resemble the autumn flush with deeper, more mature notes.",
    },
    "Winter": {
        "quality": "Specialty / Winter Harvest",
        "notes": ["Unique", "Thick", "Subtle Sweetness", "Mineral", "Sometimes Lower Aroma"],
        "description": (
            "Winter harvests are rare and give a thicker character with potentially lower caffeine."
        ),
    },
    "Unknown": {
        "quality": "Unknown",
        "notes": [],
        "description": "The impact of the harvest season is unknown or not applicable.",
    },
}
