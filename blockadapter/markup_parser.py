"""Parsing raw block markup into MarkupNode trees.

BeautifulSoup does the actual parsing; the resulting tags are copied into
immutable MarkupNode tuples so that cached trees can be shared between calls.
"""

from functools import lru_cache
from typing import Iterable, List, Tuple, Union

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from .constants import MARKUP_PARSER, PARSE_CACHE_SIZE
from .markup_node import MarkupNode

# Non-content strings that never count as text children
SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def convert_tree(elements: Iterable[PageElement]) -> Tuple[MarkupNode, ...]:
    """Convert BeautifulSoup elements and their descendants into MarkupNodes.

    Uses an explicit work stack, so nesting depth is not limited by the
    interpreter's recursion limit.
    """
    roots: List[MarkupNode] = []
    built: List[Tuple[MarkupNode, List[MarkupNode]]] = []
    work: List[Tuple[PageElement, List[MarkupNode]]] = [
        (element, roots) for element in reversed(list(elements))
    ]
    while work:
        element, siblings = work.pop()
        if isinstance(element, Tag):
            attributes = {key: str(value) for key, value in element.attrs.items()}
            node = MarkupNode(tag_name=element.name, attributes=attributes)
            children: List[MarkupNode] = []
            built.append((node, children))
            siblings.append(node)
            work.extend((child, children) for child in reversed(list(element.children)))
        elif isinstance(element, SKIPPED_STRINGS):
            continue
        elif isinstance(element, NavigableString):
            siblings.append(MarkupNode.text_node(str(element)))

    # Children are complete only once the whole tree has been walked
    for node, children in built:
        node.children = tuple(children)
    return tuple(roots)


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def _parse_cached(markup: str) -> Tuple[MarkupNode, ...]:
    soup = BeautifulSoup(markup, MARKUP_PARSER, multi_valued_attributes=None)
    return convert_tree(soup.contents)


def parse_dom(markup: Union[str, object]) -> Tuple[MarkupNode, ...]:
    """Parse markup text and return its top-level nodes.

    The input is coerced to ``str`` before lookup, so equal payloads share one
    cache entry. Parsing is lenient: unbalanced or unknown markup never raises.
    """
    return _parse_cached(str(markup))


def clear_parse_cache() -> None:
    _parse_cached.cache_clear()


def parse_cache_info():
    return _parse_cached.cache_info()
