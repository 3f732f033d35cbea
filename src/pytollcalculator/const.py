"""Calendar constants for toll-free dates."""

# (month, day)
FIXED_HOLIDAYS = (
    (1, 1),
    (1, 6),
    (5, 1),
    (6, 6),
    (12, 24),
    (12, 25),
    (12, 26),
    (12, 31),
)

# Days relative to Easter Sunday.
GOOD_FRIDAY_OFFSET = -2
EASTER_MONDAY_OFFSET = 1
ASCENSION_DAY_OFFSET = 39
PENTECOST_OFFSET = 49

MIDSUMMER_SEARCH_START = (6, 19)
TOLL_FREE_MONTH = 7
