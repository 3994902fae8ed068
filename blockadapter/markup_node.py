"""MarkupNode class for representing parsed block markup."""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple


class MarkupNode:
    """A node of the parsed markup tree: either an element or a text node.

    Element nodes carry a tag name, read-only attributes and children. Text
    nodes carry only ``text``; their ``tag_name`` is ``None``.
    """

    def __init__(
        self,
        tag_name: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
        children: Optional[Tuple["MarkupNode", ...]] = None,
        text: Optional[str] = None,
    ) -> None:
        self.tag_name = tag_name
        self.attributes: Mapping[str, str] = MappingProxyType(dict(attributes or {}))
        self.children: Tuple[MarkupNode, ...] = tuple(children or ())
        self.text = text

    @classmethod
    def element(cls, tag_name: str, attributes: Optional[Dict[str, str]] = None, *children: "MarkupNode") -> "MarkupNode":
        return cls(tag_name=tag_name, attributes=attributes, children=children)

    @classmethod
    def text_node(cls, text: str) -> "MarkupNode":
        return cls(text=text)

    @property
    def is_element(self) -> bool:
        return self.tag_name is not None

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag comparison; always False for text nodes."""
        return self.tag_name is not None and self.tag_name.lower() == tag

    def element_children(self) -> Iterator["MarkupNode"]:
        """Yield child elements, skipping text nodes."""
        return (child for child in self.children if child.is_element)

    def get(self, attribute: str) -> Optional[str]:
        return self.attributes.get(attribute)

    def text_content(self) -> str:
        """Return the text of a text node.

        Raises:
            TypeError: If called on an element node.
        """
        if self.is_element or self.text is None:
            raise TypeError(f"<{self.tag_name}> is an element, not a text node")
        return self.text

    def __repr__(self) -> str:
        if not self.is_element:
            return f"MarkupNode(text={self.text!r})"
        return f"MarkupNode(<{self.tag_name}> {dict(self.attributes)!r}, {len(self.children)} children)"
