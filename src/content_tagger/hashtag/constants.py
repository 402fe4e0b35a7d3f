"""Hashtag category keywords.

Every hashtag produced by the analysis endpoint is matched against these
lowercase keyword tuples. The tuples are ordered and never mutated.
"""

# Output fields of a user_metadata record, in storage order
METADATA_FIELDS: tuple[str, ...] = (
    "source",
    "sector",
    "emotions",
    "brands",
    "locations",
    "demographics",
)

DEMOGRAPHICS_KEYWORDS: tuple[str, ...] = (
    "male",
    "female",
    "18-25",
    "25-34",
    "35-44",
    "45-54",
    "55+",
)

SECTOR_KEYWORDS: tuple[str, ...] = (
    "beauty",
    "fashion",
    "tech",
    "travel",
    "cpg",
    "food",
    "bev",
    "retail",
)

EMOTION_KEYWORDS: tuple[str, ...] = (
    "happy",
    "positive",
    "happypositive",
    "happy/positive",
    "exciting",
    "relaxing",
    "inspiring",
    "serious",
    "festive",
    "calm",
    "determined",
)

# Entries with a space can never match a whitespace-split token
LOCATION_KEYWORDS: tuple[str, ...] = (
    "seoul",
    "dubai",
    "doha",
    "newyork",
    "new york",
    "paris",
    "tokyo",
    "london",
    "berlin",
    "lasvegas",
    "las vegas",
    "france",
    "korea",
    "qatar",
    "uae",
    "usa",
    "bocachica",
    "bocachicabeach",
    "marathon",
)

BRAND_KEYWORDS: tuple[str, ...] = (
    "fentybeauty",
    "adidas",
    "nike",
    "spacex",
    "apple",
    "microsoft",
    "google",
    "amazon",
    "ferrari",
    "heineken",
    "redbullracing",
    "redbull",
    "sailgp",
    "fifaworldcup",
    "fifa",
    "tourdefrance",
    "nttdata",
    "oracle",
)

# Exact-match priority: first category containing the token wins
CLASSIFICATION_ORDER: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("demographics", DEMOGRAPHICS_KEYWORDS),
    ("sector", SECTOR_KEYWORDS),
    ("emotions", EMOTION_KEYWORDS),
    ("locations", LOCATION_KEYWORDS),
    ("brands", BRAND_KEYWORDS),
)

# Options a user may pick when editing metadata by hand
ALLOWED_DEMOGRAPHICS: tuple[str, ...] = ("Male", "Female", "18-25", "25-34", "35-44", "45-54", "55+")
ALLOWED_SECTORS: tuple[str, ...] = ("Beauty", "Fashion", "Tech", "Travel", "CPG", "Food & Bev", "Retail")
ALLOWED_EMOTIONS: tuple[str, ...] = (
    "happy/positive",
    "exciting",
    "relaxing",
    "inspiring",
    "serious",
    "festive",
    "calm",
)
