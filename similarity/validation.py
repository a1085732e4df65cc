from .text import tokenize


class ValidationError(Exception):
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingInput(ValidationError):
    def __init__(self):
        super().__init__("Both text blocks are required")


class InsufficientLength(ValidationError):
    def __init__(self, which, min_words):
        super().__init__(f"Text {which} must have at least {min_words} words")
        self.which = which


def _text_field(payload, key):
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        return None
    return value


def validate(payload, min_words=10):
    """Check a request body and return both texts with their tokens.

    Raises MissingInput when a field is absent, empty or not a string, and
    InsufficientLength when a text has fewer than ``min_words`` tokens (text 1
    is checked before text 2).
    """
    payload = payload if isinstance(payload, dict) else {}
    text1 = _text_field(payload, "text1")
    text2 = _text_field(payload, "text2")
    if text1 is None or text2 is None:
        raise MissingInput()

    words1 = tokenize(text1)
    words2 = tokenize(text2)
    if len(words1) < min_words:
        raise InsufficientLength(1, min_words)
    if len(words2) < min_words:
        raise InsufficientLength(2, min_words)

    return text1, text2, words1, words2
