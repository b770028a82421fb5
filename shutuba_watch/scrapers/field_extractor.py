"""Document-order field extraction.

This module walks a parsed page once and dispatches every element matched
by a handler's CSS selector to that handler, threading an immutable
accumulator through the calls.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from bs4 import BeautifulSoup, Tag

T = TypeVar("T")


@dataclass(frozen=True)
class FieldHandler(Generic[T]):
    """A named handler for the elements matching a CSS selector.

    Attributes:
        name: Handler name (for logging and tests).
        selector: CSS selector of the elements to handle.
        handle: Function taking (accumulator, element) and returning
            the updated accumulator.
    """

    name: str
    selector: str
    handle: Callable[[T, Tag], T]


def extract_fields(
    soup: BeautifulSoup, handlers: list[FieldHandler[T]], initial: T
) -> T:
    """Run handlers over the matched elements in document order.

    Each matched element is passed exactly once to each handler whose
    selector matches it. When one element matches several handlers, they
    run in the order of the handlers list.

    Args:
        soup: The parsed page.
        handlers: Handlers to dispatch to.
        initial: The initial accumulator.

    Returns:
        The accumulator returned by the last handler call.
    """
    matched: list[set[int]] = [
        {id(element) for element in soup.select(handler.selector)}
        for handler in handlers
    ]

    acc = initial
    for element in soup.find_all(True):
        for handler, ids in zip(handlers, matched):
            if id(element) in ids:
                acc = handler.handle(acc, element)
    return acc
