import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

# se eliminan, no se reemplazan por espacio
PUNCTUATION = re.compile(r"[.,!?;:\"'()\-]")


def tokenize(text: str) -> list[str]:
    cleaned = PUNCTUATION.sub("", text.lower())
    return [w for w in cleaned.split() if w]


def round_half_up(value: float, places: int = 2) -> float:
    q = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(q, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class SimilarityResult:
    text1_word_count: int
    text2_word_count: int
    shared_words: tuple
    shared_word_count: int
    similarity_score: float

    def to_dict(self):
        return {
            "text1WordCount": self.text1_word_count,
            "text2WordCount": self.text2_word_count,
            "sharedWords": list(self.shared_words),
            "sharedWordCount": self.shared_word_count,
            "similarityScore": self.similarity_score,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            text1_word_count=int(data.get("text1WordCount", 0)),
            text2_word_count=int(data.get("text2WordCount", 0)),
            shared_words=tuple(data.get("sharedWords") or ()),
            shared_word_count=int(data.get("sharedWordCount", 0)),
            similarity_score=float(data.get("similarityScore", 0.0)),
        )


def compare_tokens(words1: list[str], words2: list[str]) -> SimilarityResult:
    """Jaccard index over the unique tokens of both sequences, as a percentage."""
    unique1, unique2 = set(words1), set(words2)
    shared = sorted(unique1 & unique2)
    union = unique1 | unique2

    score = 0.0
    if union:
        score = round_half_up(len(shared) / len(union) * 100)

    return SimilarityResult(
        text1_word_count=len(words1),
        text2_word_count=len(words2),
        shared_words=tuple(shared),
        shared_word_count=len(shared),
        similarity_score=score,
    )


def score(text1: str, text2: str) -> SimilarityResult:
    return compare_tokens(tokenize(text1), tokenize(text2))
