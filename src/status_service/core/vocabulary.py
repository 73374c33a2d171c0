"""Fixed vocabulary used by the periodic log emitter."""

import random
from typing import Tuple

VOCABULARY: Tuple[str, ...] = (
    "cloud", "docker", "kubernetes", "java", "maven", "aws", "spring", "microservice", "scalability",
    "observability", "monitoring", "resilience", "automation", "performance", "infra", "logs",
    "debugging", "reliability", "containerization", "serverless",
)


def pick_word(rng: random.Random, vocabulary: Tuple[str, ...] = VOCABULARY) -> str:
    """Pick one word uniformly at random."""
    return rng.choice(vocabulary)
