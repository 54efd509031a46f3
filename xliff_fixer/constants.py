# Labels of the repair steps, used in progress logs.
FIX_STEPS = {
    "ENCODING": "Checking encoding...",
    "ILLEGAL_CHARS": "Stripping illegal control characters...",
    "ENTITIES": "Fixing unescaped entities (&, <, >)...",
    "TAGS": "Attempting to balance tags...",
    "VALIDATION": "Validating XML structure...",
}

UNKNOWN_PARSE_ERROR = "Unknown XML parsing error"
