import random
from collections import Counter

from episode_names.utils.shuffle import fisher_yates_shuffle


def test_shuffle_returns_permutation_and_leaves_input_alone():
    items = ("a", "b", "c", "d", "e")
    shuffled = fisher_yates_shuffle(items, random.Random(7))

    assert sorted(shuffled) == sorted(items)
    assert items == ("a", "b", "c", "d", "e")
    assert isinstance(shuffled, list)


def test_shuffle_handles_empty_and_single():
    assert fisher_yates_shuffle([]) == []
    assert fisher_yates_shuffle(["only"]) == ["only"]


def test_shuffle_is_reproducible_with_seeded_rng():
    items = list(range(20))
    assert fisher_yates_shuffle(items, random.Random(123)) == fisher_yates_shuffle(items, random.Random(123))


def test_shuffle_is_roughly_uniform_over_permutations():
    rng = random.Random(2024)
    counts = Counter(tuple(fisher_yates_shuffle("abc", rng)) for _ in range(6000))

    # all 6 permutations, each near the expected 1000
    assert len(counts) == 6
    for permutation, count in counts.items():
        assert 800 < count < 1200, (permutation, count)
