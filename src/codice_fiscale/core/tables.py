"""Fixed lookup tables of the fiscal code scheme.

Every value here must match other implementations of the scheme exactly:
changing any of them produces codes that no one else can validate.
"""

CODE_LENGTH = 16
PARTIAL_CODE_LENGTH = 15

MIN_BIRTH_YEAR = 1700

# Added to the day of month for female subjects (days 41-71)
FEMALE_DAY_OFFSET = 40

# Space is in both sets so that it is dropped from either extraction
VOWELS = frozenset("AEIOU ")
CONSONANTS = frozenset("BCDFGHJKLMNPQRSTVWXYZ ")

# Index = month - 1
MONTH_CODES = "ABCDEHLMPRST"

# Checksum contributions, indexed by digit value or by letter offset from 'A'.
# Odd/even refers to the 1-indexed character position.
CHECK_CODE_NUM_ODD = (1, 0, 5, 7, 9, 13, 15, 17, 19, 21)
CHECK_CODE_NUM_EVEN = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
CHECK_CODE_LET_ODD = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18,
    20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)
CHECK_CODE_LET_EVEN = tuple(range(26))

# 0-indexed positions whose digits may be replaced by letters
OMOCODE_POSITIONS = (6, 7, 9, 10, 12, 13, 14)

# Index = digit value
OMOCODE_LETTERS = "LMNPQRSTUV"
