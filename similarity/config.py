import os
from dataclasses import dataclass

MONGODB_URI        = os.getenv("MONGODB_URI", "mongodb://localhost:27017/textSimilarity")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "2000"))
USE_MONGODB        = os.getenv("USE_MONGODB", "1") not in ("0", "false", "no")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

MIN_WORDS    = int(os.getenv("MIN_WORDS", "10"))
RECENT_LIMIT = int(os.getenv("RECENT_LIMIT", "10"))

# 0 = sin limite (comportamiento original, crece sin cota)
MEMORY_STORE_CAPACITY = int(os.getenv("MEMORY_STORE_CAPACITY", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SIMILARITY_URL = os.getenv("SIMILARITY_URL", "http://localhost:5000")


@dataclass
class Settings:
    mongodb_uri: str = MONGODB_URI
    mongodb_timeout_ms: int = MONGODB_TIMEOUT_MS
    use_mongodb: bool = USE_MONGODB
    min_words: int = MIN_WORDS
    recent_limit: int = RECENT_LIMIT
    memory_store_capacity: int = MEMORY_STORE_CAPACITY
