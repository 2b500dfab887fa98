"""Default values and limits shared by the masking engine and the CLI."""

# Input and mask limits
MAX_INPUT_LENGTH = 1_000_000
MAX_MASK_CHAR_LENGTH = 10

# Standard masking defaults
DEFAULT_MASK_CHAR = "*"
DEFAULT_PREFIX_LENGTH = 3
DEFAULT_SUFFIX_LENGTH = 3
DEFAULT_MIN_MASK_LENGTH = 0

# Cache and async tuning
DEFAULT_CACHE_SIZE = 100
DEFAULT_ASYNC_CHUNK_SIZE = 10_000

# Characters drawn by the random masking strategy
RANDOM_MASK_PALETTE = "*#@$%&!?"

# Digits that must be present before a digit-based preset masks anything
CREDIT_CARD_MIN_DIGITS = 8
PHONE_MIN_DIGITS = 7
VISIBLE_TRAILING_DIGITS = 4

# Named recipes, keyed by their case-folded names
PRESET_NAMES = {
    "email": "email",
    "creditcard": "creditCard",
    "phone": "phone",
}

PATTERN_NAMES = {
    "email": "email",
    "phone": "phone",
    "generic": "generic",
    "auto": "auto",
}

# Non-text input handling for the engine
INPUT_POLICIES = {"empty", "coerce", "reject"}
