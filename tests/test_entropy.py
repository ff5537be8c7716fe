# tests/test_entropy.py
import math
import random

import pytest

from id3_tree.utils import calculate_entropy, majority_label, count_labels, is_homogeneous


def test_single_class_entropy_is_exactly_zero():
    assert calculate_entropy(["Yes"]) == 0.0
    assert calculate_entropy(["No", "No", "No"]) == 0.0


def test_balanced_two_class_entropy_is_one_bit():
    assert calculate_entropy(["No", "No", "Yes", "Yes"]) == pytest.approx(1.0)


def test_play_tennis_label_entropy():
    labels = ["Yes"] * 9 + ["No"] * 5
    assert calculate_entropy(labels) == pytest.approx(0.940286, abs=1e-6)


def test_entropy_is_order_independent():
    assert calculate_entropy(["a", "b", "b", "c"]) == pytest.approx(calculate_entropy(["c", "b", "a", "b"]))


def test_entropy_bounds_on_random_distributions():
    rng = random.Random(7)
    for _ in range(200):
        alphabet = [f"L{i}" for i in range(rng.randint(1, 6))]
        labels = [rng.choice(alphabet) for _ in range(rng.randint(1, 40))]
        distinct = len(set(labels))
        h = calculate_entropy(labels)
        assert h >= 0.0
        assert h <= math.log2(distinct) + 1e-12
        assert (h == 0.0) == (distinct == 1)


def test_entropy_of_empty_labels_is_rejected():
    with pytest.raises(ValueError):
        calculate_entropy([])


def test_majority_label_tie_goes_to_first_encountered():
    assert majority_label(["B", "A", "A", "B"]) == "B"
    assert majority_label(["A", "B", "B", "A", "C"]) == "A"


def test_majority_label_picks_most_frequent():
    assert majority_label(["x", "y", "y", "z", "y", "x"]) == "y"


def test_count_labels_keeps_first_occurrence_order():
    assert list(count_labels(["c", "a", "c", "b", "a"])) == ["c", "a", "b"]


def test_is_homogeneous():
    assert is_homogeneous(["a", "a"])
    assert not is_homogeneous(["a", "b", "a"])
