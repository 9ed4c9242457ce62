"""Selection and sampling defaults."""

# Sentinel selecting every episode (or season) in a dataset
ALL_SELECTOR = "all"

# Language tag used when none is given
DEFAULT_LANGUAGE = "pt-br"

# Number of names returned by get() when no count is given
DEFAULT_COUNT = 1
