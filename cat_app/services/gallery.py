# cat_app/services/gallery.py

import math
import time
from dataclasses import dataclass, replace
from typing import Dict, List

ALL_TAGS = "all"
PAGE_SIZE = 9


@dataclass(frozen=True)
class GalleryState:
    """
    What the gallery is currently showing. Kept in st.session_state and
    passed to the render functions instead of living in module globals.
    """
    search: str = ""
    tag: str = ALL_TAGS
    page: int = 1

    def with_filters(self, search: str, tag: str) -> "GalleryState":
        # Any change of filter starts again from the first page.
        if search == self.search and tag == self.tag:
            return self
        return replace(self, search=search, tag=tag, page=1)

    def with_page(self, page: int) -> "GalleryState":
        return replace(self, page=page)


def collect_tags(cats: List[Dict]) -> List[str]:
    """Distinct non-empty tags, sorted."""
    return sorted({c["tag"] for c in cats if c.get("tag")})


def matches_search(cat: Dict, search: str) -> bool:
    term = search.strip().lower()
    tag = (cat.get("tag") or "").lower()
    description = (cat.get("description") or "").lower()
    if not term:
        return bool(tag or description)
    return term in tag or term in description


def matches_tag(cat: Dict, tag: str) -> bool:
    return tag == ALL_TAGS or cat.get("tag") == tag


def filter_cats(cats: List[Dict], state: GalleryState) -> List[Dict]:
    return [c for c in cats if matches_search(c, state.search) and matches_tag(c, state.tag)]


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def clamp_page(page: int, count: int, page_size: int = PAGE_SIZE) -> int:
    return min(max(page, 1), max(total_pages(count, page_size), 1))


def paginate(items: List[Dict], page: int, page_size: int = PAGE_SIZE) -> List[Dict]:
    page = clamp_page(page, len(items), page_size)
    start = (page - 1) * page_size
    return items[start:start + page_size]


def new_cat_id() -> str:
    """Cat ids are picked by the client: the current time in milliseconds."""
    return str(int(time.time() * 1000))
