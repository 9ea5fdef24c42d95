"""
Free-text relevance scoring.

Each query token is matched against its best target token:

| Pair                                  | Score |
|---------------------------------------|-------|
| identical                             | 3     |
| query token inside target token       | 2     |
| within edit tolerance (see below)     | 1     |
| otherwise                             | 0     |

Edit tolerance: distance <= 1 always passes; tokens longer than 4 chars
may also have up to len // 3 + 1 edits.

The total is the sum of each query token's best score, so extra words in
the target never cost anything.
"""

from .distance import levenshtein
from .text import tokenize

EXACT_TOKEN_SCORE = 3
CONTAINED_TOKEN_SCORE = 2
FUZZY_TOKEN_SCORE = 1

# Tokens longer than this get the length-scaled edit allowance
FUZZY_LONG_TOKEN_LENGTH = 4


def token_pair_score(query_token: str, target_token: str) -> int:
    if query_token == target_token:
        return EXACT_TOKEN_SCORE
    if query_token in target_token:
        return CONTAINED_TOKEN_SCORE

    dist = levenshtein(query_token, target_token)
    allowed = len(query_token) // 3 + 1
    if dist <= 1 or (len(query_token) > FUZZY_LONG_TOKEN_LENGTH and dist <= allowed):
        return FUZZY_TOKEN_SCORE
    return 0


def score_match(query: str, target: str) -> int:
    """Relevance of target text for a free-text query (0 = no match)."""
    query_tokens = tokenize(query)
    target_tokens = tokenize(target)

    total = 0
    for q_token in query_tokens:
        best = 0
        for t_token in target_tokens:
            score = token_pair_score(q_token, t_token)
            if score > best:
                best = score
                if best == EXACT_TOKEN_SCORE:
                    break
        total += best

    return total
