import random
import sys
from pathlib import Path

import pytest

# Ensure the repository root is on sys.path so `fivecard` can be imported when
# the project is not installed as a package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fivecard.core.deck import Deck


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def deck(rng: random.Random) -> Deck:
    return Deck(rng=rng)
