"""Content-addressed LRU cache of parsed SVG documents."""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict

from ledlayout.svg.parser import GlyphDocument, parse_svg

logger = logging.getLogger(__name__)


def outline_key(svg_text: str, samples_per_segment: int) -> str:
    digest = hashlib.sha256()
    digest.update(svg_text.encode("utf-8"))
    digest.update(f"|spp={samples_per_segment}".encode("ascii"))
    return digest.hexdigest()


class OutlineCache:
    """Parsed outlines keyed by the SVG content that produced them.

    Shapes are never mutated by the placer, so a cached document can be
    shared between requests.
    """

    def __init__(self, maxsize: int = 64) -> None:
        self.maxsize = maxsize
        self._entries: OrderedDict[str, GlyphDocument] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_parse(self, svg_text: str, samples_per_segment: int = 16) -> GlyphDocument:
        key = outline_key(svg_text, samples_per_segment)
        with self._lock:
            doc = self._entries.get(key)
            if doc is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return doc
            self.misses += 1

        doc = parse_svg(svg_text, samples_per_segment)

        with self._lock:
            self._entries[key] = doc
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted outline %s", evicted[:12])
        return doc

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)
