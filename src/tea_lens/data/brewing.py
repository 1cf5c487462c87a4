"""Brewing parameter rules per brewing style and tea type.

Each type maps to an ordered rule list; the first rule whose conditions all
hold is used. A rule with no conditions is the type's default and comes last.

Condition keys:
    sub_type: the tea's sub-type (sheng, shou, ...)
    processing: every keyword must be present
    any_processing: at least one keyword must be present
    not_processing: no keyword may be present

Steeping times are in seconds, one entry per infusion.
"""

BREWING_STYLES = ["gongfu", "western"]

# Lowercased declared type -> rule table key.
BREWING_TYPE_ALIASES = {
    "green tea": "green",
    "white tea": "white",
    "yellow tea": "yellow",
    "oolong tea": "oolong",
    "black tea": "black",
    "red tea": "black",
    "puerh tea": "puerh",
    "pu-erh": "puerh",
    "pu'er": "puerh",
    "puer": "puerh",
    "raw puerh": "puerh",
    "ripe puerh": "puerh",
    "sheng puerh": "puerh",
    "shou puerh": "puerh",
    "puerh-sheng": "puerh",
    "puerh-shou": "puerh",
    "dark tea": "dark",
    "hei cha": "dark",
    "heicha": "dark",
    "liu bao": "dark",
    "liu an": "dark",
    "fu zhuan": "dark",
}

# Processing wording -> keyword used in rule conditions.
PROCESSING_KEYWORD_ALIASES = {
    "ball rolled": "ball-rolled",
    "rolled": "ball-rolled",
    "hand rolled": "ball-rolled",
    "hand-rolled": "ball-rolled",
    "pearl": "ball-rolled",
    "strip rolled": "strip-rolled",
    "strip-style": "strip-rolled",
    "twisted": "strip-rolled",
    "strip": "strip-rolled",
    "light oxidation": "light-oxidized",
    "medium oxidation": "medium-oxidized",
    "heavy oxidation": "heavy-oxidized",
    "full oxidation": "fully-oxidized",
    "full-oxidation": "fully-oxidized",
    "fully oxidized": "fully-oxidized",
    "pan fired": "pan-fired",
    "wok fired": "pan-fired",
    "wok-fired": "pan-fired",
    "sun dried": "sun-dried",
    "shade grown": "shade-grown",
    "pile fermented": "pile-fermented",
    "wet piled": "pile-fermented",
    "wet-piled": "pile-fermented",
    "basket aged": "basket-aged",
    "fungal fermented": "fungal-fermented",
    "golden flowers": "fungal-fermented",
    "yellow mold": "fungal-fermented",
    "wet stored": "humid-stored",
    "wet-stored": "humid-stored",
    "humid stored": "humid-stored",
    "dry stored": "dry-stored",
    "well aged": "well-aged",
    "aged tea": "aged",
}

_GAIWANS = ["Glass Gaiwan", "Porcelain Gaiwan"]
_CLAY = ["Clay Teapot", "Ceramic Gaiwan"]
_AGED_CLAY = ["Clay Teapot", "Jianshui Clay"]
_GLASS_POTS = ["Glass Teapot", "Porcelain Teapot"]
_CERAMIC_POTS = ["Ceramic Teapot", "Porcelain Teapot"]
_HEAVY_POTS = ["Clay Teapot", "Ceramic Teapot", "Cast Iron Teapot"]

GONGFU_RULES = {
    "white": [
        {
            "conditions": {"processing": ["buds-only", "unrolled", "light-oxidized"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "70-75°C",
            "steeping_times": [45, 60, 75, 90],
            "vessels": _GAIWANS,
            "notes": "Downy buds need longer steeps; the higher leaf ratio makes up for their volume.",
            "examples": ["Silver Needle", "Moonlight White", "Yunnan Silver Needle"],
        },
        {
            "conditions": {"processing": ["withered", "unrolled", "aged"]},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "85-95°C",
            "steeping_times": [20, 30, 45, 60],
            "vessels": ["Porcelain Gaiwan", "Clay Teapot"],
            "notes": "Aging allows hotter water and brings out deeper notes.",
            "examples": ["Aged Shou Mei", "Aged Gong Mei", "Aged White Moonlight"],
        },
        {
            "conditions": {"processing": ["withered", "unrolled", "light-oxidized"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "75-85°C",
            "steeping_times": [30, 45, 60, 75],
            "vessels": _GAIWANS,
            "notes": "A mix of buds and leaves extracts more easily than buds alone.",
            "examples": ["White Peony", "Gong Mei", "New Vitality"],
        },
        {
            "conditions": {},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "75-85°C",
            "steeping_times": [30, 45, 60, 75],
            "vessels": _GAIWANS,
            "notes": "Delicate leaves that reward careful temperature control.",
        },
    ],
    "green": [
        {
            "conditions": {"processing": ["shade-grown", "steamed", "unwithered"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "50-60°C",
            "steeping_times": [60, 90, 120, 150],
            "vessels": ["Preheated Glass", "Porcelain Gaiwan"],
            "notes": "Very low temperatures keep the umami and sweetness from shading.",
            "examples": ["Gyokuro", "Kabusecha", "Shade-grown Tencha"],
        },
        {
            "conditions": {"processing": ["pan-fired", "unwithered"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "75-85°C",
            "steeping_times": [15, 25, 35, 45],
            "vessels": _GAIWANS,
            "notes": "Pan-firing develops nutty flavors that extract well at moderate temperatures.",
            "examples": ["Long Jing", "Tai Ping Hou Kui", "Liu An Gua Pian"],
        },
        {
            "conditions": {"processing": ["steamed", "unwithered"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "65-75°C",
            "steeping_times": [30, 45, 60, 75],
            "vessels": _GAIWANS,
            "notes": "Steaming keeps bright vegetal notes that turn bitter if the water is too hot.",
            "examples": ["Sencha", "Shincha", "Asamushi Sencha"],
        },
        {
            "conditions": {"processing": ["roasted", "unwithered"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "85-95°C",
            "steeping_times": [30, 45, 60, 75],
            "vessels": ["Ceramic Gaiwan", "Clay Teapot"],
            "notes": "Roasting lowers astringency and handles hotter water.",
            "examples": ["Hojicha", "Kyobancha", "Aged Kukicha"],
        },
        {
            "conditions": {},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "70-80°C",
            "steeping_times": [20, 30, 40, 50],
            "vessels": _GAIWANS,
            "notes": "Water that is too hot makes green tea bitter.",
        },
    ],
    "yellow": [
        {
            "conditions": {"processing": ["pan-fired", "yellowed"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "80-85°C",
            "steeping_times": [25, 35, 45, 55],
            "vessels": ["Porcelain Gaiwan", "Glass Gaiwan"],
            "notes": "Wok-firing before yellowing gives more body than most yellow teas.",
            "examples": ["Mengding Huangya", "Mo Gan Huang Ya", "Wen Shan Huang Ya"],
        },
        {
            "conditions": {"processing": ["withered", "yellowed", "medium-oxidized"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "75-85°C",
            "steeping_times": [25, 35, 45, 55],
            "vessels": ["Porcelain Gaiwan", "Glass Gaiwan"],
            "notes": "Slight oxidation sits between green tea and oolong.",
            "examples": ["Huoshan Huangya", "Meng Ding Huang Ya", "Huang Tang"],
        },
        {
            "conditions": {},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "75-85°C",
            "steeping_times": [25, 35, 45, 55],
            "vessels": ["Porcelain Gaiwan", "Glass Gaiwan"],
            "notes": "Yellowing reduces astringency, so slightly hotter water than green tea works.",
            "examples": ["Junshan Yinzhen", "Huo Mountain Yellow Buds"],
        },
    ],
    "oolong": [
        {
            "conditions": {"processing": ["withered", "medium-oxidized", "strip-rolled", "roasted"]},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [15, 25, 35, 45],
            "vessels": _CLAY,
            "notes": "Medium oxidation and roasting want hotter water.",
            "examples": ["Wuyi Rock", "Shui Xian", "Rou Gui"],
        },
        {
            "conditions": {"processing": ["withered", "heavy-roasted"]},
            "leaf_amount": "6-8g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [20, 30, 45, 60],
            "vessels": _CLAY,
            "notes": "Heavy roasting calls for boiling water; later infusions need longer steeps.",
            "examples": ["Traditional Tie Guan Yin", "Aged Dong Ding", "Heavy-Roasted Bei Dou"],
        },
        {
            "conditions": {"processing": ["withered", "strip-rolled"], "not_processing": ["light-oxidized"]},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [15, 20, 30, 45],
            "vessels": ["Clay Teapot", "Porcelain Gaiwan"],
            "notes": "Quick early steeps at high temperature keep the aromatics from turning astringent.",
            "examples": ["Dan Cong", "Mi Lan Xiang", "Ya Shi Xiang"],
        },
        {
            "conditions": {"processing": ["withered", "ball-rolled"], "not_processing": ["roasted"]},
            "leaf_amount": "5-7g per 100ml",
            "water_temperature": "85-90°C",
            "steeping_times": [25, 35, 45, 55],
            "rinses": 1,
            "vessels": ["Porcelain Gaiwan", "Thin-walled Clay", "Glass Gaiwan"],
            "notes": "A rinse wakes up tightly rolled leaves, which unfold over several infusions.",
            "examples": ["Ali Shan", "Jin Xuan", "Li Shan High Mountain"],
        },
        {
            "conditions": {},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [20, 30, 40, 50],
            "vessels": ["Clay Teapot", "Porcelain Gaiwan"],
            "notes": "A high leaf ratio and many short infusions show the tea's range.",
        },
    ],
    "black": [
        {
            "conditions": {"processing": ["orthodox", "spring-harvest"], "not_processing": ["fully-oxidized"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "80-85°C",
            "steeping_times": [15, 25, 35, 45],
            "vessels": _GAIWANS,
            "notes": "Spring pickings with lighter oxidation need cooler water.",
            "examples": ["First Flush Darjeeling", "Himalayan First Flush"],
        },
        {
            "conditions": {"processing": ["ctc"]},
            "leaf_amount": "3-4g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [10, 15, 25, 35],
            "vessels": ["Ceramic Gaiwan", "Clay Teapot"],
            "notes": "Broken leaf extracts very quickly, so keep steeps short.",
            "examples": ["Assam CTC", "Kenya CTC", "Ceylon Dust"],
        },
        {
            "conditions": {"processing": ["smoked"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [20, 30, 45, 60],
            "vessels": ["Dedicated Clay Teapot", "Ceramic Gaiwan"],
            "notes": "Use a dedicated vessel since smoke aroma lingers.",
            "examples": ["Zheng Shan Xiao Zhong", "Lapsang Souchong", "Russian Caravan"],
        },
        {
            "conditions": {"processing": ["orthodox", "fully-oxidized"]},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [15, 30, 45, 60],
            "vessels": ["Porcelain Gaiwan", "Ceramic Gaiwan", "Clay Teapot"],
            "notes": "Full oxidation takes hot water without harsh astringency.",
            "examples": ["Keemun", "Yunnan Dian Hong", "Jin Jun Mei"],
        },
        {
            "conditions": {},
            "leaf_amount": "4-5g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [15, 30, 45, 60],
            "vessels": ["Porcelain Gaiwan", "Clay Teapot", "Ceramic Gaiwan"],
            "notes": "Most black teas take hot water; delicate first flush teas prefer it cooler.",
        },
    ],
    "puerh": [
        {
            "conditions": {"sub_type": "sheng", "processing": ["humid-stored", "compressed"]},
            "leaf_amount": "6-7g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [10, 15, 25, 40],
            "rinses": 1,
            "vessels": _AGED_CLAY,
            "notes": "Humid storage brings earthy notes that prefer slightly cooler water.",
            "examples": ["Hong Kong Storage", "Traditional Storage", "Guangdong Stored"],
        },
        {
            "conditions": {"sub_type": "sheng", "processing": ["aged", "compressed"]},
            "leaf_amount": "6-7g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [10, 15, 25, 40],
            "rinses": 1,
            "vessels": _AGED_CLAY,
            "notes": "Aging softens astringency, so boiling water works and the leaves last many infusions.",
            "examples": ["Aged Raw Puerh", "1990s 7542", "Aged Yiwu"],
        },
        {
            "conditions": {"sub_type": "sheng", "processing": ["sun-dried", "compressed"]},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "85-90°C",
            "steeping_times": [10, 15, 20, 30],
            "rinses": 2,
            "vessels": ["Clay Teapot", "Porcelain Gaiwan"],
            "notes": "Two rinses and quick early steeps keep young sheng from getting harsh.",
            "examples": ["Young Raw Puerh", "Jingmai Maocha", "Menghai Spring Buds"],
        },
        {
            "conditions": {"sub_type": "shou", "processing": ["pile-fermented", "compressed"]},
            "leaf_amount": "6-8g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [10, 15, 25, 40],
            "rinses": 2,
            "vessels": _AGED_CLAY,
            "notes": "Rinse twice to clear dust and fermentation notes from newer productions.",
            "examples": ["Ripe Puerh", "Menghai V93", "7581 Recipe"],
        },
        {
            "conditions": {"sub_type": "sheng"},
            "leaf_amount": "5-6g per 100ml",
            "water_temperature": "90-95°C",
            "steeping_times": [10, 15, 20, 30, 45, 60],
            "rinses": 1,
            "vessels": ["Clay Teapot", "Porcelain Gaiwan"],
            "notes": "Young sheng may want 85-90°C; aged sheng takes boiling water.",
        },
        {
            "conditions": {"sub_type": "shou"},
            "leaf_amount": "6-8g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [10, 15, 25, 40, 60, 80],
            "rinses": 2,
            "vessels": _AGED_CLAY,
            "notes": "Rinse twice; ripe puerh handles many infusions.",
        },
        {
            "conditions": {},
            "leaf_amount": "5-7g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [10, 15, 25, 40, 60],
            "rinses": 1,
            "vessels": ["Clay Teapot", "Porcelain Gaiwan"],
            "notes": "Rinse first, then lengthen each infusion a little.",
        },
    ],
    "dark": [
        {
            "conditions": {"processing": ["pile-fermented", "basket-aged"]},
            "leaf_amount": "5-7g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [15, 25, 40, 60],
            "rinses": 1,
            "vessels": _CLAY,
            "notes": "Fermentation gives an earthy character that needs high temperature.",
            "examples": ["Liu Bao", "Guangxi Heicha", "Three Cranes Liu Bao"],
        },
        {
            "conditions": {"processing": ["compressed", "fungal-fermented"]},
            "leaf_amount": "5-7g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [15, 25, 40, 60],
            "rinses": 2,
            "vessels": _CLAY,
            "notes": "Golden flowers need full boiling water to open up.",
            "examples": ["Fu Zhuan", "An Hua Fu Brick", "Golden Flowers Brick"],
        },
        {
            "conditions": {},
            "leaf_amount": "5-7g per 100ml",
            "water_temperature": "95-100°C",
            "steeping_times": [15, 25, 40, 60],
            "rinses": 1,
            "vessels": _CLAY,
            "notes": "Rinse first; dark teas handle full boiling water well.",
            "examples": ["Liu Bao", "Fu Zhuan", "Tian Jian"],
        },
    ],
}

WESTERN_RULES = {
    "white": [
        {
            "conditions": {"processing": ["buds-only", "unrolled", "light-oxidized"]},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "70-80°C",
            "steeping_times": [240],
            "vessels": _GLASS_POTS,
            "examples": ["Silver Needle", "Moonlight White"],
        },
        {
            "conditions": {"processing": ["withered", "unrolled", "aged"]},
            "leaf_amount": "6-8g per 500ml",
            "water_temperature": "85-95°C",
            "steeping_times": [240],
            "vessels": _CERAMIC_POTS,
            "examples": ["Aged Shou Mei", "Aged Gong Mei"],
        },
        {
            "conditions": {},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "75-85°C",
            "steeping_times": [180],
            "vessels": _GLASS_POTS,
            "examples": ["White Peony", "Shou Mei"],
        },
    ],
    "green": [
        {
            "conditions": {"processing": ["shade-grown", "steamed", "unwithered"]},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "50-60°C",
            "steeping_times": [150],
            "vessels": _GLASS_POTS,
            "examples": ["Gyokuro", "Kabusecha"],
        },
        {
            "conditions": {"processing": ["pan-fired", "unwithered"]},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "75-85°C",
            "steeping_times": [120],
            "vessels": _GLASS_POTS,
            "examples": ["Long Jing", "Tai Ping Hou Kui"],
        },
        {
            "conditions": {"processing": ["steamed", "unwithered"]},
            "leaf_amount": "4-5g per 500ml",
            "water_temperature": "65-75°C",
            "steeping_times": [90],
            "vessels": _GLASS_POTS,
            "examples": ["Sencha", "Shincha"],
        },
        {
            "conditions": {"processing": ["roasted", "unwithered"]},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "85-95°C",
            "steeping_times": [150],
            "vessels": ["Ceramic Teapot", "Cast Iron Teapot"],
            "examples": ["Hojicha", "Kyobancha"],
        },
        {
            "conditions": {},
            "leaf_amount": "4-5g per 500ml",
            "water_temperature": "70-80°C",
            "steeping_times": [120],
            "vessels": _GLASS_POTS,
            "examples": ["Long Jing", "Sencha", "Bi Luo Chun"],
        },
    ],
    "yellow": [
        {
            "conditions": {},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "75-85°C",
            "steeping_times": [150],
            "vessels": _GLASS_POTS,
            "examples": ["Junshan Yinzhen", "Huoshan Huangya"],
        },
    ],
    "oolong": [
        {
            "conditions": {"processing": ["withered", "heavy-roasted"]},
            "leaf_amount": "7-9g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [240],
            "vessels": ["Ceramic Teapot", "Clay Teapot", "Cast Iron Teapot"],
            "examples": ["Traditional Tie Guan Yin", "Heavy-Roasted Bei Dou"],
        },
        {
            "conditions": {"processing": ["withered", "strip-rolled"], "not_processing": ["light-oxidized"]},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "90-95°C",
            "steeping_times": [150],
            "vessels": _CERAMIC_POTS,
            "examples": ["Wuyi Rock", "Dan Cong"],
        },
        {
            "conditions": {"processing": ["withered", "ball-rolled"], "not_processing": ["roasted"]},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "85-90°C",
            "steeping_times": [180],
            "vessels": _GLASS_POTS,
            "examples": ["Ali Shan", "Jin Xuan"],
        },
        {
            "conditions": {},
            "leaf_amount": "5-7g per 500ml",
            "water_temperature": "90-95°C",
            "steeping_times": [180],
            "vessels": _CERAMIC_POTS,
        },
    ],
    "black": [
        {
            "conditions": {"processing": ["orthodox", "spring-harvest"], "not_processing": ["fully-oxidized"]},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "80-85°C",
            "steeping_times": [180],
            "vessels": ["Porcelain Teapot", "Glass Teapot"],
            "examples": ["First Flush Darjeeling"],
        },
        {
            "conditions": {"processing": ["ctc"]},
            "leaf_amount": "3-5g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [120],
            "vessels": ["Ceramic Teapot", "Cast Iron Teapot"],
            "examples": ["Assam CTC", "Kenya CTC"],
        },
        {
            "conditions": {"processing": ["smoked"]},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [210],
            "vessels": ["Ceramic Teapot", "Dedicated Teapot"],
            "examples": ["Lapsang Souchong", "Russian Caravan"],
        },
        {
            "conditions": {},
            "leaf_amount": "4-6g per 500ml",
            "water_temperature": "90-95°C",
            "steeping_times": [180],
            "vessels": _CERAMIC_POTS,
            "examples": ["Keemun", "Dian Hong", "Assam", "Darjeeling"],
        },
    ],
    "puerh": [
        {
            "conditions": {"sub_type": "sheng", "processing": ["aged", "compressed"]},
            "leaf_amount": "7-9g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [210],
            "rinses": 1,
            "vessels": _HEAVY_POTS,
            "examples": ["Aged Raw Puerh", "Aged Yiwu"],
        },
        {
            "conditions": {"sub_type": "shou", "processing": ["pile-fermented", "compressed"]},
            "leaf_amount": "7-9g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [240],
            "rinses": 2,
            "vessels": _HEAVY_POTS,
            "examples": ["Ripe Puerh", "Menghai V93"],
        },
        {
            "conditions": {"sub_type": "sheng"},
            "leaf_amount": "6-8g per 500ml",
            "water_temperature": "90-95°C",
            "steeping_times": [180],
            "rinses": 1,
            "vessels": ["Clay Teapot", "Ceramic Teapot"],
        },
        {
            "conditions": {"sub_type": "shou"},
            "leaf_amount": "7-9g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [240],
            "rinses": 1,
            "vessels": _HEAVY_POTS,
        },
        {
            "conditions": {},
            "leaf_amount": "6-8g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [210],
            "rinses": 1,
            "vessels": ["Clay Teapot", "Ceramic Teapot"],
        },
    ],
    "dark": [
        {
            "conditions": {"processing": ["compressed", "fungal-fermented"]},
            "leaf_amount": "6-8g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [240],
            "rinses": 1,
            "vessels": _HEAVY_POTS,
            "examples": ["Fu Zhuan", "Golden Flowers Brick"],
        },
        {
            "conditions": {},
            "leaf_amount": "6-8g per 500ml",
            "water_temperature": "95-100°C",
            "steeping_times": [210],
            "rinses": 1,
            "vessels": _HEAVY_POTS,
            "examples": ["Liu Bao", "Tian Jian"],
        },
    ],
}

BREWING_RULES = {
    "gongfu": GONGFU_RULES,
    "western": WESTERN_RULES,
}
