"""Sample texts shared across test modules."""

TEN_WORDS = "the quick brown fox jumps over the lazy dog again"
OTHER_TEN = "alpha beta gamma delta epsilon zeta eta theta iota kappa"
NINE_WORDS = "one two three four five six seven eight nine"
