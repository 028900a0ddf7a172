import random

import pytest

from rrsim import make_processes


def random_workload(seed, n=None, max_arrival=30, max_burst=25):
    rng = random.Random(seed)
    n = n if n is not None else rng.randint(1, 12)
    return make_processes((rng.randint(0, max_arrival), rng.randint(0, max_burst)) for _ in range(n))


@pytest.fixture
def workload():
    return random_workload
