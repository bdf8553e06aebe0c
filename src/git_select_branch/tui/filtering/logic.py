"""Pure filtering logic for the branch picker."""

from collections.abc import Sequence

from textual.fuzzy import Matcher


def filter_option_indices(labels: Sequence[str], query: str) -> list[int]:
    """Fuzzy-match labels against a query.

    Matching is case-insensitive and treats the query as a subsequence of the
    label. Better matches come first; equally good matches keep their original
    order.

    Args:
        labels: Option labels in display order
        query: Text typed into the filter input

    Returns:
        Indices into `labels` of the matching options.
        Returns every index, in order, if query is empty.
    """
    if not query:
        return list(range(len(labels)))

    matcher = Matcher(query)
    scored: list[tuple[float, int]] = []
    for index, label in enumerate(labels):
        score = matcher.match(label)
        if score > 0:
            scored.append((score, index))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [index for _, index in scored]
