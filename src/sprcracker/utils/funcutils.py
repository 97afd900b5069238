from itertools import chain
from typing import Iterable, Iterator, Tuple, TypeVar

T = TypeVar('T')


def flatten(ls: Iterable[Iterable[T]]) -> Iterator[T]:
    # flatten(['ABC', 'DEF']) --> A B C D E F
    """Flatten one level of nesting."""
    return chain.from_iterable(ls)


def chunked(iterable: Iterable[T], n: int) -> Iterator[Tuple[T, ...]]:
    """Collect data into fixed-length chunks, incomplete tail is dropped."""
    # chunked('ABCDEFG', 3) --> ABC DEF
    args = [iter(iterable)] * n
    return zip(*args)
