"""Levenshtein edit distance."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions
    that turn *a* into *b*.

    Characters are compared as code points, the same unit PrefixSet uses
    for its edges.
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )

    return dp[m][n]
