"""Tea-growing regions with coordinate bounds and influence notes."""

REGIONS = [
    {
        "name": "Uji",
        "country": "Japan",
        "subregion": "Kyoto",
        "bounds": {"lat": (34.7, 35.0), "lon": (135.6, 136.0)},
        "aliases": ["uji", "kyoto"],
        "description": "Historic tea region near Kyoto, famed for high-grade matcha and gyokuro.",
        "notes": ["enhances umami", "smooth texture", "increases L-theanine (shade focus)", "sweet finish"],
    },
    {
        "name": "Wuyi Mountains",
        "country": "China",
        "subregion": "Fujian",
        "bounds": {"lat": (27.5, 28.0), "lon": (117.5, 118.1)},
        "aliases": ["wuyi", "wuyishan", "wuyi mountains"],
        "description": "UNESCO site known for 'rock teas' (yancha) grown in mineral-rich soil.",
        "notes": ["adds minerality ('yan yun')", "roasted notes common", "complex aromatics", "lingering finish"],
    },
    {
        "name": "Darjeeling",
        "country": "India",
        "subregion": "West Bengal",
        "bounds": {"lat": (26.7, 27.3), "lon": (87.9, 88.5)},
        "aliases": ["darjeeling"],
        "description": "Himalayan foothill gardens producing distinct seasonal flushes.",
        "notes": ["enhances brightness", "promotes complex florals (muscatel)", "delicate body", "seasonal variation strong"],
    },
    {
        "name": "Assam",
        "country": "India",
        "subregion": None,
        "bounds": {"lat": (26.0, 27.9), "lon": (89.7, 96.0)},
        "aliases": ["assam"],
        "description": "Low-lying Brahmaputra valley known for bold, malty black teas.",
        "notes": ["promotes boldness", "malty flavors", "full body", "increases caffeine potential"],
    },
    {
        "name": "Alishan",
        "country": "Taiwan",
        "subregion": "Chiayi",
        "bounds": {"lat": (23.3, 23.7), "lon": (120.6, 121.0)},
        "aliases": ["alishan", "ali shan"],
        "description": "High-mountain oolong region with cool, misty slopes.",
        "notes": [
            "enhances florals & sweetness",
            "creamy/silky mouthfeel",
            "increases amino acids (high mountain effect)",
        ],
    },
    {
        "name": "Yunnan",
        "country": "China",
        "subregion": None,
        "bounds": {"lat": (21.1, 29.2), "lon": (97.5, 106.2)},
        "aliases": ["yunnan", "pu'er", "puer", "xishuangbanna"],
        "description": "Birthplace of the tea plant and home of puerh and dian hong.",
        "notes": ["promotes sweetness (honey)", "earthy/woody notes common (esp. Puerh)", "fuller body"],
    },
]
