# Shared MRN constants

MRN_LENGTH = 18
COUNTRY_CODE_LENGTH = 2

# Year (2) + country code (2) are fixed; the remaining 14 positions before the
# check digit hold the optional office code followed by random filler.
FILLER_LENGTH = 14
PROCEDURE_OFFSET = 16

CHECKSUM_MODULUS = 11

ALPHANUMERIC_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# --- Logging Configuration ---
# Level name read from the environment, e.g. MRN_LOG_LEVEL=DEBUG
LOG_LEVEL_ENV = "MRN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
