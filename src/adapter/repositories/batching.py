"""Bounded IN-list batching for repository queries"""

from typing import Iterator, List, Sequence

IN_CLAUSE_BATCH_SIZE = 500


def batched(values: Sequence[str], size: int = IN_CLAUSE_BATCH_SIZE) -> Iterator[List[str]]:
    values = list(values)
    for start in range(0, len(values), size):
        yield values[start:start + size]
