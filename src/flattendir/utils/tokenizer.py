# src/flattendir/utils/tokenizer.py
import logging

import tiktoken

logger = logging.getLogger(__name__)

ENCODING_NAMES = ("cl100k_base", "p50k_base")

# Rough characters-per-token ratio used when no encoding can be loaded
CHARS_PER_TOKEN = 4


class Tokenizer:
    _encoding = None

    @classmethod
    def get_encoding(cls):
        """Loads the first available encoding once; raises if none can be loaded."""
        if cls._encoding is None:
            last_error = None
            for name in ENCODING_NAMES:
                try:
                    cls._encoding = tiktoken.get_encoding(name)
                    break
                except Exception as e:
                    last_error = e
            else:
                raise RuntimeError(f"no tiktoken encoding available: {last_error}")
        return cls._encoding

    @staticmethod
    def count(text: str) -> int:
        """Token count of the flattened output, for the stats line only."""
        try:
            encoding = Tokenizer.get_encoding()
            return len(encoding.encode(text, disallowed_special=()))
        except Exception as e:
            # Encodings are downloaded on first use, so offline runs land here
            logger.debug("Token count estimated (%s)", e)
            return len(text) // CHARS_PER_TOKEN
