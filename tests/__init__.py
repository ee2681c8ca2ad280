import random

SMALL_SIZE = 8
BASE_SIZE = 2000
NUM_TESTS = 750


def random_indices(seed: int, count: int = NUM_TESTS, size: int = BASE_SIZE) -> list[int]:
    """
    Generates a reproducible sample of bit indices. The sample is not guaranteed to be unique.
    """

    rng = random.Random(seed)
    return [rng.randrange(0, size) for _ in range(count)]
