# Default settings for Tally

TALLY_DEFAULT_STEP = 1
TALLY_VALIDATE_RANGE = True
