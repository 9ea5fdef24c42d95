"""
Tests for free-text relevance scoring.

Run with: pytest storefront/product_match/tests/test_scoring.py -v
"""

from storefront.product_match.scoring import score_match, token_pair_score


class TestTokenPairScore:
    """Tier policy for a single (query token, target token) pair."""

    def test_exact(self):
        assert token_pair_score("فلتر", "فلتر") == 3

    def test_contained(self):
        assert token_pair_score("زيت", "الزيت") == 2
        assert token_pair_score("zz", "buzz") == 2

    def test_single_edit_always_allowed(self):
        assert token_pair_score("pad", "pod") == 1
        assert token_pair_score("فلتر", "فلاتر") == 1

    def test_long_token_scaled_allowance(self):
        # len 7 -> 7 // 3 + 1 = 3 edits allowed
        assert token_pair_score("bearing", "baering") == 1

    def test_short_token_rejects_two_edits(self):
        # len 2 gets no scaled allowance: distance 2 is too far
        assert token_pair_score("zz", "bzaz") == 0
        assert token_pair_score("pad", "pda") == 0

    def test_long_token_over_allowance(self):
        # len 5 -> 2 edits allowed, "sprak" -> "brake" needs 3
        assert token_pair_score("sprak", "brake") == 0

    def test_asymmetric(self):
        # query token inside target counts, target inside query does not
        assert token_pair_score("pad", "pads") == 2
        assert token_pair_score("pads", "pad") == 1


class TestScoreMatch:

    def test_both_tokens_exact(self):
        assert score_match("فلتر زيت", "فلتر زيت تويوتا") == 6

    def test_article_prefixed_target(self):
        # "زيت" is contained in "الزيت" rather than equal to it
        assert score_match("فلتر زيت", "فلتر الزيت الأصلي تويوتا") == 5

    def test_mixed_tiers(self):
        assert score_match("brake pad", "Front BRAKE PADS set") == 5

    def test_typo(self):
        assert score_match("brakk pad", "Brake Pad Front") == 4

    def test_best_target_token_wins(self):
        assert score_match("oil", "soil oil") == 3

    def test_repeated_query_tokens_count_each_time(self):
        assert score_match("oil oil", "oil") == 6

    def test_extra_target_words_cost_nothing(self):
        short = score_match("spark plug", "spark plug")
        long = score_match("spark plug", "spark plug iridium changan cs35 2019 original")
        assert short == long == 6

    def test_no_match(self):
        assert score_match("wiper", "فلتر زيت") == 0

    def test_empty_inputs(self):
        assert score_match("", "anything") == 0
        assert score_match("anything", "") == 0
        assert score_match(None, None) == 0

    def test_single_letter_query_ignored(self):
        assert score_match("a", "a b c") == 0
