"""
Configuration constants for Phrase Validation Service
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Repetition rule
DEFAULT_MAX_REPEATS = 2
MAX_REPEATS = int(os.getenv("PHRASE_MAX_REPEATS", str(DEFAULT_MAX_REPEATS)))

# Sensitive language rule
DEFAULT_SENSITIVE_WORDS = ["bad", "worst", "terrible"]
SENSITIVE_WORDS = [
    word.strip()
    for word in os.getenv(
        "PHRASE_SENSITIVE_WORDS", ",".join(DEFAULT_SENSITIVE_WORDS)
    ).split(",")
    if word.strip()
]

# Rule names (shown to users as-is)
REPETITION_RULE_NAME = "No more than {max_repeats} repeating words"
SENSITIVE_LANGUAGE_RULE_NAME = "No sensitive language"

# Token delimiter for the repetition rule
WORD_DELIMITER = " "

# Logging Configuration
LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Development/Production Mode
DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
LOG_LEVEL = "DEBUG" if DEBUG_MODE else "INFO"
