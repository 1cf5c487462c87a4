"""Climate bucket tables used by the geography calculator."""

import math

ELEVATION_LEVELS = [
    {
        "label": "Very Low",
        "min": 0,
        "max": 300,
        "description": "Very low gardens tend towards robust teas with bold flavors and higher astringency.",
        "flavor": ["bold flavors", "higher astringency"],
        "mouthfeel": ["fuller body", "more robust"],
        "compound": ["potentially higher caffeine", "faster growth cycle"],
    },
    {
        "label": "Low",
        "min": 300,
        "max": 600,
        "description": "Low elevation teas often have stronger flavors with moderate complexity.",
        "flavor": ["strong flavors", "moderate complexity"],
        "mouthfeel": ["good body"],
        "compound": [],
    },
    {
        "label": "Medium",
        "min": 600,
        "max": 1200,
        "description": "Medium elevation teas typically balance complexity and strength.",
        "flavor": ["balanced complexity", "developed flavors"],
        "mouthfeel": ["medium body", "smoother texture"],
        "compound": [],
    },
    {
        "label": "High",
        "min": 1200,
        "max": 1800,
        "description": "High elevation teas grow slowly and show complex, bright flavors.",
        "flavor": ["complex aromatics", "brighter notes", "enhanced sweetness"],
        "mouthfeel": ["smoother texture", "more delicate body"],
        "compound": ["increases amino acids (L-theanine)", "potentially lower caffeine"],
    },
    {
        "label": "Very High",
        "min": 1800,
        "max": math.inf,
        "description": "Very high elevation teas develop exceptional complexity and delicate aromas.",
        "flavor": ["exceptional complexity", "delicate aromas", "subtle sweetness", "lingering finish (hui gan)"],
        "mouthfeel": ["very smooth texture", "silky body"],
        "compound": ["higher amino acids (L-theanine)", "concentrated flavor compounds"],
    },
]

LATITUDE_ZONES = [
    {
        "label": "Tropical",
        "min": 0,
        "max": 15,
        "description": "Tropical teas grow year-round in warm, humid conditions.",
        "flavor": ["vibrant flavors", "rich character", "potentially fruity notes"],
        "mouthfeel": ["full body"],
        "compound": ["faster growth, potentially higher yield"],
    },
    {
        "label": "Lower Subtropical",
        "min": 15,
        "max": 23.5,
        "description": "Lower subtropical teas benefit from warm seasons and mild winters.",
        "flavor": ["balanced profiles", "good aromatic development"],
        "mouthfeel": ["medium to full body"],
        "compound": [],
    },
    {
        "label": "Upper Subtropical",
        "min": 23.5,
        "max": 30,
        "description": "Upper subtropical teas see noticeable seasonal variation.",
        "flavor": ["good complexity", "distinct seasonal notes (flushes)"],
        "mouthfeel": ["medium body"],
        "compound": [],
    },
    {
        "label": "Temperate",
        "min": 30,
        "max": 45,
        "description": "Temperate teas have distinct seasons and slower growth.",
        "flavor": ["delicate flavors", "nuanced profiles", "strong seasonal variation"],
        "mouthfeel": ["lighter to medium body"],
        "compound": ["slower growth concentrates compounds"],
    },
    {
        "label": "Subpolar",
        "min": 45,
        "max": math.inf,
        "description": "Subpolar teas are rare and grow in short, challenging seasons.",
        "flavor": ["unique characteristics"],
        "mouthfeel": ["variable"],
        "compound": ["slowest growth"],
    },
]

HUMIDITY_LEVELS = [
    {
        "label": "Very Low",
        "min": 0,
        "max": 40,
        "description": "Very low humidity can stress plants and concentrate flavors.",
        "flavor": ["concentrated flavors", "potentially sharp notes"],
        "mouthfeel": ["can increase dryness/astringency"],
        "compound": [],
    },
    {
        "label": "Low",
        "min": 40,
        "max": 55,
        "description": "Low humidity can lead to more pronounced flavor intensity.",
        "flavor": ["pronounced intensity", "clear profiles"],
        "mouthfeel": [],
        "compound": [],
    },
    {
        "label": "Moderate",
        "min": 55,
        "max": 70,
        "description": "Moderate humidity supports balanced growth.",
        "flavor": ["balanced development"],
        "mouthfeel": ["smooth texture"],
        "compound": [],
    },
    {
        "label": "High",
        "min": 70,
        "max": 85,
        "description": "High humidity promotes lush growth and smoother textures.",
        "flavor": ["subtle sweetness", "complex aromas (mist effect)"],
        "mouthfeel": ["smoother texture", "fuller body"],
        "compound": ["lush growth", "may support amino acid development (if cool)"],
    },
    {
        "label": "Very High",
        "min": 85,
        "max": math.inf,
        "description": "Very high humidity can create mineral notes but risks mold.",
        "flavor": ["distinctive mineral notes (coastal/mist)", "potential for off-notes if poorly managed"],
        "mouthfeel": ["very smooth", "potentially thicker"],
        "compound": ["can affect microbial activity during processing/aging"],
    },
]

TEMPERATURE_LEVELS = [
    {
        "label": "Very Cool",
        "min": 0,
        "max": 10,
        "description": "Very cool climates are rare and develop slowly.",
        "flavor": ["very delicate flavors", "unique characteristics"],
        "mouthfeel": ["very light body"],
        "compound": ["highest amino acid concentration", "slowest catechin development"],
    },
    {
        "label": "Cool",
        "min": 10,
        "max": 16,
        "description": "Cool climates give delicate flavors with good clarity.",
        "flavor": ["delicate flavors", "good clarity", "enhanced aromatics"],
        "mouthfeel": ["lighter body"],
        "compound": ["promotes amino acids", "slower catechin development"],
    },
    {
        "label": "Moderate",
        "min": 16,
        "max": 22,
        "description": "Moderate temperatures offer balanced growth.",
        "flavor": ["balanced flavors", "good complexity"],
        "mouthfeel": ["medium body"],
        "compound": ["balanced compound development"],
    },
    {
        "label": "Warm",
        "min": 22,
        "max": 28,
        "description": "Warm climates grow faster with stronger flavors.",
        "flavor": ["stronger flavors", "potentially higher astringency"],
        "mouthfeel": ["fuller body"],
        "compound": ["faster catechin development", "potentially higher caffeine"],
    },
    {
        "label": "Very Warm",
        "min": 28,
        "max": math.inf,
        "description": "Very warm climates grow rapidly with bolder character.",
        "flavor": ["bold flavors", "potentially less complexity"],
        "mouthfeel": ["heaviest body", "potential roughness"],
        "compound": ["rapid catechin development", "higher tannins", "reduced amino acids"],
    },
]

SOLAR_RADIATION_LEVELS = [
    {
        "label": "Very Low",
        "min": 0,
        "max": 130,
        "description": "Shade-like light produces delicate flavors and more amino acids.",
        "flavor": ["enhanced umami", "increased sweetness", "reduced bitterness"],
        "mouthfeel": ["smoother"],
        "compound": ["increases L-theanine", "reduces catechins"],
    },
    {
        "label": "Low",
        "min": 130,
        "max": 170,
        "description": "Low solar radiation promotes slower growth.",
        "flavor": ["good sweetness", "reduced astringency"],
        "mouthfeel": ["smooth texture"],
        "compound": ["higher L-theanine to catechin ratio"],
    },
    {
        "label": "Moderate",
        "min": 170,
        "max": 210,
        "description": "Moderate solar radiation supports balanced compound development.",
        "flavor": ["balanced flavor profile"],
        "mouthfeel": ["medium body"],
        "compound": ["balanced compound development"],
    },
    {
        "label": "High",
        "min": 210,
        "max": 250,
        "description": "High solar radiation leads to stronger flavors.",
        "flavor": ["stronger flavors", "increased potential bitterness"],
        "mouthfeel": ["increased astringency"],
        "compound": ["higher catechin production", "reduced amino acids"],
    },
    {
        "label": "Very High",
        "min": 250,
        "max": math.inf,
        "description": "Very high solar radiation raises catechin content and astringency.",
        "flavor": ["bold flavors", "heightened bitterness", "potentially less complexity"],
        "mouthfeel": ["highest astringency"],
        "compound": ["maximum catechin development", "lowest amino acid retention"],
    },
]
