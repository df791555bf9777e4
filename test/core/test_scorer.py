from picker.scorer import SCALE, edit_distance, score


def test_edit_distance_classic_pairs() -> None:
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("flaw", "lawn") == 2
    assert edit_distance("abc", "abc") == 0


def test_edit_distance_with_empty_sides() -> None:
    assert edit_distance("", "") == 0
    assert edit_distance("", "main") == 4
    assert edit_distance("dev", "") == 3


def test_edit_distance_accepts_character_lists() -> None:
    assert edit_distance(list("dev"), list("develop")) == 4


def test_score_is_zero_for_identical_strings() -> None:
    for text in ["main", "feature/login", "a", "release-2024.10"]:
        assert score(text, text) == 0


def test_score_normalizes_by_candidate_length() -> None:
    # 4 insertions over 7 characters
    assert score("dev", "develop") == round(4 / 7 * SCALE)
    # 3 substitutions + 1 insertion over 4 characters
    assert score("dev", "main") == SCALE


def test_empty_query_scores_every_candidate_the_same() -> None:
    assert {score("", c) for c in ["main", "", "feature/login"]} == {0}


def test_empty_candidate_does_not_divide_by_zero() -> None:
    assert score("abc", "") == 3 * SCALE


def test_score_is_case_sensitive() -> None:
    assert score("Main", "main") == round(1 / 4 * SCALE)
