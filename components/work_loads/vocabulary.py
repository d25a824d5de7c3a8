from dataclasses import dataclass
from typing import List, Optional

from faker import Faker

from lextree import AlphabetCodec

## === Config Class === ##

@dataclass
class VocabularyConfig:
    """
    Configuration for faker_vocabulary
        locale: str, Faker locale whose word provider is sampled
        batch_size: int, words requested from Faker per round
        max_rounds: int, rounds before giving up on reaching num_words
        seed: int, seed for the Faker instance
    """
    locale: str = "en_US"
    batch_size: int = 512
    max_rounds: int = 200
    seed: Optional[int] = None

    def __post_init__(self):
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive")


def faker_vocabulary(num_words, config: Optional[VocabularyConfig] = None) -> List[str]:
    """Return up to `num_words` distinct lowercase words the tree accepts.

    Faker's word provider has a finite list, so fewer words may come back
    when `num_words` exceeds it.
    """
    if num_words < 1:
        raise ValueError("num_words must be positive")
    config = config or VocabularyConfig()

    fake = Faker(config.locale)
    if config.seed is not None:
        fake.seed_instance(config.seed)

    seen = set()
    vocab = []
    for _ in range(config.max_rounds):
        for w in fake.words(nb=config.batch_size):
            w = w.lower()
            if w and w not in seen and AlphabetCodec.is_accepted(w):
                seen.add(w)
                vocab.append(w)
                if len(vocab) >= num_words:
                    return vocab
    return vocab
