"""Feature declarations: input keys, form fields (UI bounds), tooltips, demo sample."""

# Order matters: scoring and rendering iterate these sequences as declared.
FEATURE_KEYS = (
    "wine-type",
    "fixed-acidity",
    "volatile-acidity",
    "citric-acid",
    "residual-sugar",
    "chlorides",
    "free-sulfur",
    "density",
    "ph",
    "sulphates",
    "alcohol",
)

WINE_TYPES = {0: "Red", 1: "White"}

# UI bounds only drive validity styling; normalization ranges live in src.scoring.normalize.
FORM_FIELDS = [
    {"key": "wine-type", "label": "Wine Type", "min": 0, "max": 1, "step": 1},
    {"key": "fixed-acidity", "label": "Fixed Acidity (g/dm³)", "min": 3.0, "max": 16.0, "step": 0.1},
    {"key": "volatile-acidity", "label": "Volatile Acidity (g/dm³)", "min": 0.05, "max": 1.6, "step": 0.01},
    {"key": "citric-acid", "label": "Citric Acid (g/dm³)", "min": 0.0, "max": 1.7, "step": 0.01},
    {"key": "residual-sugar", "label": "Residual Sugar (g/dm³)", "min": 0.5, "max": 66.0, "step": 0.1},
    {"key": "chlorides", "label": "Chlorides (g/dm³)", "min": 0.005, "max": 0.62, "step": 0.001},
    {"key": "free-sulfur", "label": "Free Sulfur Dioxide (mg/dm³)", "min": 1, "max": 290, "step": 1},
    {"key": "density", "label": "Density (g/cm³)", "min": 0.985, "max": 1.04, "step": 0.001},
    {"key": "ph", "label": "pH", "min": 2.7, "max": 4.1, "step": 0.01},
    {"key": "sulphates", "label": "Sulphates (g/dm³)", "min": 0.2, "max": 2.0, "step": 0.01},
    {"key": "alcohol", "label": "Alcohol (% vol)", "min": 8.0, "max": 15.0, "step": 0.1},
]

FORM_FIELDS_BY_KEY = {f["key"]: f for f in FORM_FIELDS}

TOOLTIPS = {
    "fixed-acidity": "Most acids involved with wine - tartaric, malic, citric, etc.",
    "volatile-acidity": "Amount of acetic acid in wine - high levels lead to unpleasant vinegar taste",
    "citric-acid": "Found in small quantities - can add freshness and flavor",
    "residual-sugar": "Amount of sugar remaining after fermentation stops",
    "chlorides": "Amount of salt in the wine",
    "free-sulfur": "Prevents microbial growth and oxidation of wine",
    "density": "Density of water is close to that of wine depending on alcohol and sugar content",
    "ph": "Describes how acidic or basic wine is on scale from 0 (very acidic) to 14 (very basic)",
    "sulphates": "Wine additive which can contribute to SO2 levels",
    "alcohol": "Percent alcohol content of the wine",
}

# Raw strings, as a browser would submit them.
DEMO_DATA = {
    "wine-type": "1",
    "fixed-acidity": "7.4",
    "volatile-acidity": "0.27",
    "citric-acid": "0.36",
    "residual-sugar": "20.7",
    "chlorides": "0.045",
    "free-sulfur": "45",
    "density": "1.001",
    "ph": "3.0",
    "sulphates": "0.45",
    "alcohol": "8.8",
}
