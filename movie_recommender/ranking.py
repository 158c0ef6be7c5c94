"""
Shared top-K selection used by both recommenders.
"""


def top_k(scored_items, k):
    """
    Select the k highest-scoring entries.

    Sorting is stable, so entries with equal scores keep the order in which
    they were supplied. Callers pass candidates in catalog order to get a
    catalog-order tie-break.

    Args:
        scored_items: Sequence of (item, score) pairs
        k: Maximum number of entries to return

    Returns:
        List of at most k (item, score) pairs, highest score first
    """
    if k <= 0:
        return []
    ranked = sorted(scored_items, key=lambda pair: pair[1], reverse=True)
    return ranked[:k]
