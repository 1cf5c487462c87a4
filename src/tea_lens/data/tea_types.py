"""Baseline characteristics per tea type, with optional sub-type overrides."""

TEA_TYPES = {
    "green": {
        "base": {
            "description": (
                "Green teas preserve the fresh character of the leaf through minimal oxidation, "
                "producing vibrant, often vegetal or marine flavors."
            ),
            "caffeine": "Medium",
            "theanine": "Medium-High",
            "flavor_categories": ["Vegetal", "Umami/Marine", "Nutty/Toasty", "Sweet"],
            "seasonal_tendency": "cooling",
            "time_of_day": ["Morning", "Afternoon"],
            "activities": ["Focus", "Gentle Energy", "Refreshment"],
            "processing": ["steamed", "pan-fired", "rolled"],
        },
        "sub_types": {
            "matcha": {
                "description": "Stone-ground powder from shade-grown leaves, consumed whole.",
                "caffeine": "High",
                "theanine": "Very High",
                "flavor_categories": ["Umami/Marine", "Sweet", "Vegetal"],
                "time_of_day": ["Morning"],
                "activities": ["Focus", "Energy (Smooth)", "Ceremony"],
                "processing": ["shade-grown", "steamed"],
            },
            "gyokuro": {
                "description": "Premium shade-grown Japanese green tea with intense umami and sweetness.",
                "caffeine": "Medium-High",
                "theanine": "Very High",
                "flavor_categories": ["Umami/Marine", "Sweet", "Vegetal"],
                "time_of_day": ["Afternoon"],
                "activities": ["Focus", "Calm & Clear", "Contemplative"],
                "processing": ["shade-grown", "steamed", "rolled"],
            },
            "hojicha": {
                "description": "Roasted Japanese green tea with toasty notes and little caffeine.",
                "caffeine": "Low",
                "theanine": "Low",
                "flavor_categories": ["Roasted", "Nutty/Toasty", "Sweet"],
                "seasonal_tendency": "warming",
                "time_of_day": ["Evening"],
                "activities": ["Comfort", "Relaxation", "Digestive"],
                "processing": ["steamed", "medium-roast"],
            },
        },
    },
    "black": {
        "base": {
            "description": (
                "Black teas are fully oxidized, developing robust, malty, fruity or spicy flavors "
                "and typically higher caffeine."
            ),
            "caffeine": "High",
            "theanine": "Low-Medium",
            "flavor_categories": ["Sweet", "Fruity", "Spicy", "Woody", "Roasted"],
            "seasonal_tendency": "warming",
            "time_of_day": ["Morning", "Afternoon"],
            "activities": ["Energy", "Routine", "Focus", "Social"],
            "processing": ["withered", "rolled", "full-oxidation"],
        },
        "sub_types": {
            "assam": {
                "caffeine": "Very High",
                "flavor_categories": ["Sweet", "Roasted"],
                "activities": ["Strong Energy", "Morning Boost"],
            },
            "darjeeling": {
                "caffeine": "Medium-High",
                "theanine": "Medium",
                "flavor_categories": ["Floral", "Fruity", "Earthy/Mineral"],
                "seasonal_tendency": "neutral-warming",
                "activities": ["Focus", "Uplifting", "Social"],
            },
            "lapsang souchong": {
                "flavor_categories": ["Roasted", "Woody"],
                "activities": ["Warming", "Bold Experience"],
                "processing": ["withered", "rolled", "full-oxidation", "smoked"],
            },
        },
    },
    "oolong": {
        "base": {
            "description": (
                "Oolong teas are partially oxidized, spanning light floral styles close to green tea "
                "and dark roasted styles close to black tea."
            ),
            "caffeine": "Medium-High",
            "theanine": "Medium",
            "flavor_categories": ["Floral", "Fruity", "Roasted", "Woody", "Earthy/Mineral"],
            "seasonal_tendency": "neutral",
            "time_of_day": ["Afternoon", "Evening"],
            "activities": ["Social", "Contemplative", "Focus", "Relaxation"],
            "processing": ["withered", "rolled", "partial-oxidation"],
        },
        "sub_types": {
            "tie guan yin": {
                "description": "Lightly oxidized Tie Guan Yin, known for vibrant orchid notes.",
                "caffeine": "Medium",
                "theanine": "Medium-High",
                "flavor_categories": ["Floral", "Sweet"],
                "seasonal_tendency": "cooling",
                "time_of_day": ["Afternoon"],
                "activities": ["Social", "Uplifting", "Relaxation"],
            },
            "da hong pao": {
                "description": "Heavily roasted rock oolong with mineral and caramel notes.",
                "flavor_categories": ["Roasted", "Earthy/Mineral", "Woody", "Sweet"],
                "seasonal_tendency": "warming",
                "time_of_day": ["Afternoon", "Evening"],
                "activities": ["Contemplative", "Warming", "Focus"],
                "processing": ["strip-rolled", "partial-oxidation", "charcoal-roasted"],
            },
        },
    },
    "white": {
        "base": {
            "description": (
                "White teas are only withered and dried, preserving delicate flavors "
                "and high levels of antioxidants."
            ),
            "caffeine": "Low",
            "theanine": "High",
            "flavor_categories": ["Floral", "Fruity", "Sweet"],
            "seasonal_tendency": "cooling",
            "time_of_day": ["Afternoon", "Evening"],
            "activities": ["Relaxation", "Gentle Focus", "Unwinding", "Subtle"],
            "processing": ["withered", "sun-dried", "minimal-processing"],
        },
        "sub_types": {
            "silver needle": {
                "description": "Made only from unopened buds, offering the most delicate flavor.",
                "caffeine": "Very Low",
                "theanine": "Very High",
                "activities": ["Deep Relaxation", "Subtle", "Meditation"],
            },
        },
    },
    "puerh": {
        "base": {
            "description": (
                "Puerh from Yunnan is post-fermented, developing earthy, woody and often sweet "
                "character over time."
            ),
            "caffeine": "Medium-High",
            "theanine": "Medium",
            "flavor_categories": ["Earthy/Mineral", "Woody", "Aged/Earthy", "Sweet"],
            "seasonal_tendency": "warming",
            "time_of_day": ["Afternoon", "Evening"],
            "activities": ["Digestive", "Contemplative", "Grounding", "Warming"],
            "processing": ["withered", "sun-dried", "compressed", "aged"],
        },
        "sub_types": {
            "sheng": {
                "description": "Raw puerh ages naturally, starting vibrant and astringent and mellowing over time.",
                "caffeine": "High",
                "seasonal_tendency": "neutral-cooling",
                "activities": ["Energy", "Focus", "Contemplative", "Digestive"],
            },
            "shou": {
                "description": "Ripe puerh undergoes accelerated fermentation for a dark, smooth, earthy profile.",
                "activities": ["Digestive", "Warming", "Grounding", "Relaxation"],
                "processing": ["pile-fermented", "compressed"],
            },
        },
    },
    "yellow": {
        "base": {
            "description": (
                "Yellow tea is processed like green tea with an added smothering step, "
                "giving unique smoothness and sweetness."
            ),
            "caffeine": "Medium-Low",
            "theanine": "Medium-High",
            "flavor_categories": ["Sweet", "Nutty/Toasty", "Vegetal"],
            "seasonal_tendency": "neutral",
            "time_of_day": ["Afternoon"],
            "activities": ["Gentle Focus", "Relaxation", "Social"],
            "processing": ["pan-fired"],
        },
        "sub_types": {},
    },
    "herbal": {
        "base": {
            "description": "Herbal tisanes contain no tea leaf and are naturally caffeine free.",
            "caffeine": "None",
            "theanine": "None",
            "flavor_categories": [],
            "seasonal_tendency": "neutral",
            "time_of_day": ["Evening"],
            "activities": ["Relaxation", "Unwinding", "Digestive"],
            "processing": [],
        },
        "sub_types": {},
    },
}

# Alternate spellings resolved before lookup.
TYPE_ALIASES = {
    "pu-erh": "puerh",
    "pu'er": "puerh",
    "puer": "puerh",
    "dark": "puerh",
    "tisane": "herbal",
    "ripe": "shou",
    "raw": "sheng",
    "puerh-shou": "puerh shou",
    "puerh-sheng": "puerh sheng",
}
