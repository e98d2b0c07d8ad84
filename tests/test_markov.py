import math

import pytest

from nucleoscan.markov import (
    DEFAULT_CUTOFF,
    NON_OPEN_READING_FRAME,
    OPEN_READING_FRAME,
    MarkovModel,
    classify,
    codon_transitions,
    count_transitions,
    transition_probabilities,
)


def test_codon_transitions_steps_by_codon():
    assert codon_transitions("AAACCCGGG") == [("AAA", "CCC"), ("CCC", "GGG")]


def test_codon_transitions_too_short():
    assert codon_transitions("AAACC") == []
    assert codon_transitions("") == []


def test_count_transitions_accumulates():
    counts = count_transitions(["AAACCC", "AAACCCAAA"])
    assert counts[("AAA", "CCC")] == 2
    assert counts[("CCC", "AAA")] == 1
    assert sum(counts.values()) == 3


def test_transition_rows_sum_to_one():
    matrix = transition_probabilities(count_transitions(["AAACCCAAAGGGTTTAAA"]))
    for row in matrix.values():
        assert math.isclose(sum(row.values()), 1.0)


def test_transition_rows_are_zero_filled():
    matrix = transition_probabilities(count_transitions(["AAACCCAAAGGG"]))
    columns = {target for row in matrix.values() for target in row}
    for row in matrix.values():
        assert set(row) == columns
    assert matrix["CCC"]["GGG"] == 0


def test_model_requires_transitions():
    with pytest.raises(ValueError):
        MarkovModel(["AAA"], ["AAACCC"])
    with pytest.raises(ValueError):
        MarkovModel(["AAACCC"], [])


def test_score_log_odds():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCC"])
    assert model.score("AAACCC") == 1.0


def test_identical_training_sets_score_zero_on_seen_transitions():
    seqs = ["AAACCCGGGTTT"]
    model = MarkovModel(seqs, seqs)
    assert model.score("AAACCCGGGTTT") == 0.0


def test_unknown_transition_contributes_nothing():
    model = MarkovModel(["AAACCC"], ["AAACCC"])
    assert model.score("TTTGGG") == 0.0


def test_score_is_additive_over_transitions():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCCGGG"])
    whole = model.score("AAACCCAAA")
    parts = model.score("AAACCC") + model.score("CCCAAA")
    assert math.isclose(whole, parts)


def test_floors_are_half_the_smallest_proportion():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCCGGG"])
    smallest = min(p for row in model.noncoding.values() for p in row.values() if p)
    assert model.noncoding_floor * 2 == smallest


def test_unseen_noncoding_transition_uses_coding_floor():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCCGGG"])
    assert model.scores[("CCC", "GGG")] == math.log2(model.coding_floor)


def test_transition_absent_from_both_uses_smaller_floor():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCCGGG"])
    expected = min(model.noncoding_floor, model.coding_floor)
    assert model.scores[("AAA", "AAA")] == expected


def test_normalized_score_divides_by_length():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCC"])
    seq = "AAACCCAAA"
    assert math.isclose(model.normalized_score(seq), model.score(seq) / len(seq))


def test_normalized_score_rejects_empty():
    model = MarkovModel(["AAACCC"], ["AAACCC"])
    with pytest.raises(ValueError):
        model.normalized_score("")


def test_transitions_from_each_model():
    model = MarkovModel(["AAACCCAAAGGG"], ["AAACCC"])
    assert model.transitions_from("AAA", coding=True) == {"CCC": 1.0}
    assert math.isclose(sum(model.transitions_from("AAA").values()), 1.0)


def test_transitions_from_unknown_codon():
    model = MarkovModel(["AAACCC"], ["AAACCC"])
    with pytest.raises(KeyError):
        model.transitions_from("TTT")


def test_classify_cutoff_inclusive():
    assert classify(DEFAULT_CUTOFF) == OPEN_READING_FRAME
    assert classify(DEFAULT_CUTOFF - 0.001) == NON_OPEN_READING_FRAME
    assert classify(0.5, cutoff=1.0) == NON_OPEN_READING_FRAME