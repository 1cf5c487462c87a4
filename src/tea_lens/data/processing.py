"""Processing-method impact records, keyed by lowercase method tag."""

PROCESSING_METHODS = {
    "steamed": {
        "flavor": ["enhances vegetal/marine notes", "preserves freshness", "reduces bitterness compared to pan-firing"],
        "body": "Lighter",
        "tendency": "cooling",
        "alertness": "clean focus",
        "compound": ["preserves catechins well", "maintains L-theanine"],
    },
    "pan-fired": {
        "flavor": ["adds subtle nutty/toasty notes", "reduces vegetal intensity compared to steaming", "creates mellow sweetness"],
        "body": "Medium",
        "tendency": "neutral",
        "alertness": "focused",
        "compound": ["slightly modifies catechins", "preserves most compounds"],
    },
    "kill-green": {
        "flavor": ["stops development of oxidized notes", "preserves existing fresh notes"],
        "body": "Variable",
        "tendency": "neutral",
        "alertness": "neutral",
        "compound": ["stops enzymatic changes"],
    },
    "rolled": {
        "flavor": ["concentrates flavor compounds", "can increase extraction rate", "enhances complexity"],
        "body": "Fuller",
        "tendency": "neutral",
        "alertness": "enhanced strength",
        "compound": ["increased compound extraction", "accelerates oxidation when used before firing"],
    },
    "hand-rolled": {
        "flavor": ["creates complex flavor profile", "preserves leaf integrity", "gentler extraction"],
        "body": "Refined",
        "tendency": "neutral",
        "alertness": "balanced extraction",
        "compound": ["controls oxidation rate", "preserves leaf structure"],
    },
    "ball-rolled": {
        "flavor": ["creates multi-infusion complexity", "protects aromatic compounds", "concentrated flavor release"],
        "body": "Silky",
        "tendency": "neutral",
        "alertness": "gradual release",
        "compound": ["extended release of compounds", "preserves volatile aromatics"],
    },
    "strip-rolled": {
        "flavor": ["balanced flavor profile", "moderate extraction rate", "preserves complexity"],
        "body": "Medium",
        "tendency": "neutral",
        "alertness": "balanced",
        "compound": ["balanced oxidation", "moderate cell rupture"],
    },
    "machine-rolled": {
        "flavor": ["accelerates extraction", "can increase astringency", "consistent flavor profile"],
        "body": "Astringent",
        "tendency": "neutral",
        "alertness": "intensified",
        "compound": ["increases cell wall rupture", "faster compound release"],
    },
    "minimal-roast": {
        "flavor": ["enhances aroma", "adds subtle warmth", "preserves most original flavors"],
        "body": "Unchanged",
        "tendency": "neutral",
        "alertness": "smooths slightly",
        "compound": [],
    },
    "light-roast": {
        "flavor": ["adds light nutty/grainy notes", "enhances sweetness", "rounds off sharp edges"],
        "body": "Slightly Fuller",
        "tendency": "warming",
        "alertness": "smooths",
        "compound": ["starts Maillard reactions"],
    },
    "medium-roast": {
        "flavor": ["develops nutty/caramel/toasty notes", "reduces floral/vegetal notes", "increases perceived sweetness"],
        "body": "Fuller",
        "tendency": "warming",
        "alertness": "smooths significantly",
        "compound": ["promotes Maillard reactions", "may slightly degrade some volatile compounds"],
    },
    "heavy-roast": {
        "flavor": [
            "adds dark caramel/chocolate/burnt sugar notes",
            "significantly reduces original fresh/floral notes",
            "mellows tannins",
        ],
        "body": "Much Fuller",
        "tendency": "warming",
        "alertness": "very smooth, blunts peak",
        "compound": ["significant Maillard/caramelization", "may degrade catechins/vitamins"],
    },
    "charcoal-roasted": {
        "flavor": ["adds deep nutty/caramel notes", "adds subtle mineral/smoky hint", "creates complexity"],
        "body": "Fuller",
        "tendency": "warming",
        "alertness": "very smooth, complex energy",
        "compound": ["similar to heavy roast", "may add trace elements"],
    },
    "post-processing-roasted": {
        "flavor": ["refreshes aroma", "adds warmth", "can mellow aged notes"],
        "body": "Slightly Fuller",
        "tendency": "warming",
        "alertness": "smooths",
        "compound": ["further Maillard reactions"],
    },
    "withered": {
        "flavor": ["develops floral precursors", "reduces grassy notes slightly"],
        "body": "Unchanged",
        "tendency": "neutral",
        "alertness": "neutral",
        "compound": ["starts enzymatic activity", "reduces water content"],
    },
    "sun-dried": {
        "flavor": ["adds subtle honey/fruity notes", "preserves delicate aromas"],
        "body": "Lighter",
        "tendency": "neutral",
        "alertness": "neutral",
        "compound": ["UV exposure can alter some compounds"],
    },
    "oxidised": {
        "flavor": ["reduces vegetal notes", "develops fruity/malty/floral notes (depending on level)"],
        "body": "Fuller",
        "tendency": "warming",
        "alertness": "smooths (compared to green)",
        "compound": ["converts catechins to theaflavins/thearubigins"],
    },
    "partial-oxidation": {
        "flavor": ["develops diverse floral/fruity/roasted notes", "reduces vegetal notes"],
        "body": "Variable",
        "tendency": "neutral",
        "alertness": "balanced/smooth",
        "compound": ["partial catechin conversion"],
    },
    "full-oxidation": {
        "flavor": ["develops malty/fruity/spicy notes", "eliminates vegetal notes"],
        "body": "Robust",
        "tendency": "warming",
        "alertness": "strong but less sharp",
        "compound": ["maximizes theaflavins/thearubigins"],
    },
    "shade-grown": {
        "flavor": ["enhances umami", "increases sweetness", "reduces bitterness/astringency", "adds 'marine' notes"],
        "body": "Thicker",
        "tendency": "cooling",
        "alertness": "enhanced focus, calming influence",
        "compound": ["increases L-theanine", "increases chlorophyll", "reduces catechins slightly"],
    },
    "minimal-processing": {
        "flavor": ["preserves delicate/subtle notes", "often adds hay/dried fruit notes"],
        "body": "Delicate",
        "tendency": "cooling",
        "alertness": "gentle",
        "compound": ["preserves high levels of antioxidants", "minimal enzymatic change"],
    },
    "gaba-processed": {
        "flavor": ["adds unique tangy/fruity notes", "can have slight savory quality"],
        "body": "Smooth",
        "tendency": "neutral",
        "alertness": "calming influence, reduces sharp peak",
        "compound": ["significantly increases GABA", "increases alanine"],
    },
    "aged": {
        "flavor": ["mellows astringency/bitterness", "develops complexity", "adds earthy/woody/fruity notes"],
        "body": "Smooth",
        "tendency": "neutral",
        "alertness": "smooth, sustained",
        "compound": ["slow oxidation/fermentation continues", "volatile compounds change"],
    },
    "compressed": {
        "flavor": ["facilitates slower, different aging profile vs loose leaf"],
        "body": "Thicker",
        "tendency": "neutral",
        "alertness": "neutral",
        "compound": ["affects microbial activity during aging"],
    },
    "fermented": {
        "flavor": ["adds strong earthy/woody/mossy notes", "eliminates bitterness/astringency", "adds unique sweetness (hui gan)"],
        "body": "Thick",
        "tendency": "warming",
        "alertness": "smooth, grounding energy",
        "compound": ["microbial transformation of compounds", "reduces caffeine bioavailability"],
    },
    "pile-fermented": {
        "flavor": ["develops earthy/woody notes", "reduces bitterness", "can have compost-like qualities when young"],
        "body": "Thick",
        "tendency": "warming",
        "alertness": "gentle, grounding",
        "compound": ["rapid microbial transformation", "changes compound profile"],
    },
    "jasmine-scented": {
        "flavor": ["adds strong floral jasmine aroma/flavor"],
        "body": "Unchanged",
        "tendency": "cooling",
        "alertness": "calming influence",
        "compound": ["adds volatile aroma compounds from jasmine"],
    },
    "rose-scented": {
        "flavor": ["adds sweet floral rose notes", "enhances perceived sweetness"],
        "body": "Unchanged",
        "tendency": "cooling",
        "alertness": "uplifting, calming",
        "compound": ["adds rose volatile compounds"],
    },
    "osmanthus-scented": {
        "flavor": ["adds apricot-like floral sweetness", "fruity undertones"],
        "body": "Unchanged",
        "tendency": "neutral",
        "alertness": "uplifting",
        "compound": ["adds fruity-floral volatiles"],
    },
    "smoked": {
        "flavor": ["adds smoky pine notes", "masks delicate aromatics"],
        "body": "Fuller",
        "tendency": "warming",
        "alertness": "grounding",
        "compound": ["adds phenolic smoke compounds"],
    },
    "ctc": {
        "flavor": ["creates strong, bold, often one-dimensional flavor", "high astringency"],
        "body": "Strong",
        "tendency": "warming",
        "alertness": "sharp peak, fast acting",
        "compound": ["maximizes surface area for quick extraction", "can damage leaf structure"],
    },
}
