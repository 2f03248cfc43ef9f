"""Constants for translation comparison."""

# Input layout: <root>/<language>/translation.json
TRANSLATION_FILENAME = "translation.json"

# Fuzzy search (0 = exact match, 1 = match anything)
DEFAULT_SEARCH_THRESHOLD = 0.3

# Sentinel used for missing values in the flat (string) representation
ABSENT_TEXT = ""
