"""Tests for the TopK, TopP and MinP filters."""

from __future__ import annotations

import numpy as np
import pytest

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.samplers import filters
from logit_sampler.samplers.base import EXCLUDED, is_excluded
from logit_sampler.samplers.filters import MinP, TopK, TopP


def _survivors(logits: np.ndarray) -> list[int]:
    return np.flatnonzero(~is_excluded(logits)).tolist()


class TestTopK:
    """Tests for top-k filtering."""

    @pytest.mark.parametrize("k", [0, -1, -100])
    def test_rejects_non_positive(self, k: int) -> None:
        with pytest.raises(InvalidParameterError, match="k must be positive"):
            TopK(k)

    @pytest.mark.parametrize("k", [5, 6, 1000])
    def test_k_at_least_length_is_identity(self, sample_logits: np.ndarray, k: int) -> None:
        original = sample_logits.copy()
        result = TopK(k).sample(sample_logits)
        np.testing.assert_array_equal(result, original)

    def test_keeps_k_largest(self) -> None:
        logits = np.array([1.0, 9.0, 3.0, 7.0, 5.0])
        result = TopK(2).sample(logits)
        assert _survivors(result) == [1, 3]
        np.testing.assert_array_equal(result[[1, 3]], [9.0, 7.0])

    def test_exactly_k_survive(self, sample_logits_large_vocab: np.ndarray) -> None:
        original = sample_logits_large_vocab.copy()
        result = TopK(50).sample(sample_logits_large_vocab)
        kept = _survivors(result)
        assert len(kept) == 50
        assert sorted(kept) == sorted(np.argsort(original)[-50:].tolist())

    def test_ties_are_deterministic(self) -> None:
        logits = np.array([1.0, 2.0, 2.0, 2.0])
        first = _survivors(TopK(2).sample(logits.copy()))
        second = _survivors(TopK(2).sample(logits.copy()))
        assert first == second == [1, 2]

    def test_excluded_never_reinstated(self) -> None:
        logits = np.array([EXCLUDED, 1.0, 2.0, 3.0])
        result = TopK(3).sample(logits)
        assert _survivors(result) == [1, 2, 3]


class TestTopP:
    """Tests for nucleus filtering."""

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.5, 1.5])
    def test_rejects_outside_open_interval(self, p: float) -> None:
        with pytest.raises(InvalidParameterError, match="p must be between 0 and 1"):
            TopP(p)

    def test_minimal_prefix_exceeding_p(self) -> None:
        logits = np.log(np.array([0.5, 0.3, 0.15, 0.05]))
        result = TopP(0.6).sample(logits)
        assert _survivors(result) == [0, 1]

    def test_keeps_original_scores(self) -> None:
        logits = np.array([3.0, 2.0, -5.0])
        result = TopP(0.5).sample(logits.copy())
        assert result[0] == 3.0

    def test_dominant_token_alone(self, sample_logits_peaked: np.ndarray) -> None:
        result = TopP(0.9).sample(sample_logits_peaked)
        assert _survivors(result) == [0]

    def test_never_empty(self, sample_logits_large_vocab: np.ndarray) -> None:
        result = TopP(1e-9).sample(sample_logits_large_vocab)
        assert len(_survivors(result)) == 1

    def test_uniform_keeps_enough_mass(self) -> None:
        """Ten equal tokens with p=0.35 need four to exceed 0.35."""
        result = TopP(0.35).sample(np.zeros(10))
        assert _survivors(result) == [0, 1, 2, 3]

    def test_respects_prior_exclusions(self) -> None:
        logits = np.array([EXCLUDED, 1.0, 1.0, EXCLUDED])
        result = TopP(0.4).sample(logits)
        assert _survivors(result) == [1]


class TestMinP:
    """Tests for min-p filtering."""

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 2.0])
    def test_rejects_outside_open_interval(self, p: float) -> None:
        with pytest.raises(InvalidParameterError, match="p must be between 0 and 1"):
            MinP(p)

    def test_threshold_relative_to_max(self) -> None:
        logits = np.log(np.array([0.6, 0.3, 0.1]))
        # threshold = 0.4 * 0.6 = 0.24
        result = MinP(0.4).sample(logits)
        assert _survivors(result) == [0, 1]

    def test_probability_at_threshold_is_kept(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(filters, "softmax", lambda _: np.array([0.5, 0.25, 0.2, 0.05]))
        result = MinP(0.5).sample(np.array([4.0, 3.0, 2.0, 1.0]))
        assert _survivors(result) == [0, 1]

    def test_keeps_original_scores(self) -> None:
        result = MinP(0.1).sample(np.array([2.0, 1.5, -20.0]))
        np.testing.assert_array_equal(result[:2], [2.0, 1.5])
        assert is_excluded(result)[2]

    def test_max_always_survives(self, sample_logits_large_vocab: np.ndarray) -> None:
        best = int(np.argmax(sample_logits_large_vocab))
        result = MinP(0.99).sample(sample_logits_large_vocab)
        assert best in _survivors(result)

    def test_all_excluded_is_noop(self) -> None:
        result = MinP(0.5).sample(np.array([EXCLUDED, EXCLUDED]))
        assert np.all(is_excluded(result))


class TestFilterComposition:
    """Filters are order sensitive."""

    def test_top_k_first_narrows_nucleus(self) -> None:
        """Top-p renormalizes over what top-k left, so it can cut deeper."""
        logits = np.log(np.array([0.4, 0.3, 0.2, 0.1]))
        k_then_p = TopP(0.5).sample(TopK(2).sample(logits.copy()))
        p_then_k = TopK(2).sample(TopP(0.5).sample(logits.copy()))
        # 0.4 / 0.7 alone exceeds 0.5 once only two tokens remain.
        assert _survivors(k_then_p) == [0]
        assert _survivors(p_then_k) == [0, 1]

    def test_top_k_one_leaves_single_candidate_in_either_order(self) -> None:
        logits = np.log(np.array([0.4, 0.3, 0.2, 0.1]))
        k_then_p = TopP(0.9).sample(TopK(1).sample(logits.copy()))
        p_then_k = TopK(1).sample(TopP(0.9).sample(logits.copy()))
        assert _survivors(k_then_p) == _survivors(p_then_k) == [0]
