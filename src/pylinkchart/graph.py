"""
Items, links and the per-call graph index.

Layout strategies accept items and links in several shapes (library
objects, dicts from a JSON store, arbitrary objects with the right
attributes). Graph normalizes them once per call and derives the
structures the strategies share: parent/child forest, undirected
adjacency and degree counts.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union
import datetime
import logging

from .geom import ItemId

logger = logging.getLogger(__name__)


Timestamp = Union[datetime.datetime, datetime.date, str, int, float]


class Item:
    """
    Chart entity or event.

    Attributes:
        id: Identifier, unique within a layout call
        type: Category label used by the grouped layout
        timestamp: Instant used by the timeline layout
    """

    __slots__ = ('id', 'type', 'timestamp')

    def __init__(
        self,
        id: ItemId,
        type: Optional[str] = None,
        timestamp: Optional[Timestamp] = None
    ):
        self.id = id
        self.type = type
        self.timestamp = timestamp

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, type={self.type!r}, timestamp={self.timestamp!r})"


class Link:
    """
    Directed relationship between two items.

    Attributes:
        source: Id of the item the link starts from
        target: Id of the item the link points to
    """

    __slots__ = ('source', 'target')

    def __init__(self, source: ItemId, target: ItemId):
        self.source = source
        self.target = target

    def __repr__(self) -> str:
        return f"Link(source={self.source!r}, target={self.target!r})"


_MISSING = object()


def _field(obj: Any, *names: str) -> Any:
    """Read the first present key or attribute of obj."""
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        else:
            value = getattr(obj, name, _MISSING)
            if value is not _MISSING:
                return value
    return _MISSING


def as_item(obj: Any) -> Item:
    """
    Coerce obj to an Item.

    Args:
        obj: Item, mapping with an ``id`` key, or object with an ``id`` attribute

    Returns:
        The Item

    Raises:
        TypeError: If obj has no id
    """
    if isinstance(obj, Item):
        return obj
    item_id = _field(obj, 'id')
    if item_id is _MISSING or item_id is None:
        raise TypeError(f"item has no id: {obj!r}")
    item_type = _field(obj, 'type')
    timestamp = _field(obj, 'timestamp')
    return Item(
        item_id,
        None if item_type is _MISSING else item_type,
        None if timestamp is _MISSING else timestamp
    )


def as_link(obj: Any) -> Link:
    """
    Coerce obj to a Link.

    Mappings may spell the endpoints ``from``/``to`` or ``source``/``target``.

    Raises:
        TypeError: If either endpoint is missing
    """
    if isinstance(obj, Link):
        return obj
    source = _field(obj, 'source', 'from')
    target = _field(obj, 'target', 'to')
    if source is _MISSING or target is _MISSING:
        raise TypeError(f"link needs both endpoints: {obj!r}")
    return Link(source, target)


class Graph:
    """
    Normalized view of the items and links of one layout call.

    Attributes:
        items: Items in input order, first occurrence of each id only
        links: Links whose endpoints both name known items
        ids: Item ids in input order
    """

    def __init__(self, items: Iterable[Any], links: Iterable[Any] = ()):
        self.items: list[Item] = []
        seen: set[ItemId] = set()
        for obj in items:
            item = as_item(obj)
            if item.id in seen:
                continue
            seen.add(item.id)
            self.items.append(item)

        self.ids: list[ItemId] = [item.id for item in self.items]

        self.links: list[Link] = []
        ignored = 0
        for obj in links:
            link = as_link(obj)
            if link.source in seen and link.target in seen:
                self.links.append(link)
            else:
                ignored += 1
        if ignored:
            logger.debug("Ignoring %d link(s) with unknown endpoints", ignored)

    def __len__(self) -> int:
        return len(self.items)

    def children(self) -> dict[ItemId, list[ItemId]]:
        """Child lists keyed by link source, one entry per link."""
        result: dict[ItemId, list[ItemId]] = {item_id: [] for item_id in self.ids}
        for link in self.links:
            result[link.source].append(link.target)
        return result

    def roots(self) -> list[ItemId]:
        """
        Items that are no link's target.

        Falls back to the first item when every item has a parent.
        """
        has_parent = {link.target for link in self.links}
        roots = [item_id for item_id in self.ids if item_id not in has_parent]
        if not roots and self.ids:
            roots = [self.ids[0]]
        return roots

    def neighbours(self) -> dict[ItemId, dict[ItemId, None]]:
        """Undirected adjacency as insertion-ordered sets (dict keys)."""
        result: dict[ItemId, dict[ItemId, None]] = {item_id: {} for item_id in self.ids}
        for link in self.links:
            result[link.source][link.target] = None
            result[link.target][link.source] = None
        return result

    def degrees(self) -> dict[ItemId, int]:
        """Number of link ends touching each item."""
        result = dict.fromkeys(self.ids, 0)
        for link in self.links:
            result[link.source] += 1
            result[link.target] += 1
        return result

    def hub(self) -> ItemId:
        """Id of the first item with the highest degree."""
        degrees = self.degrees()
        return max(self.ids, key=lambda item_id: degrees[item_id])
