"""Political/election topic filter shared by the venue feeds."""

from typing import Iterable, Optional

POLITICAL_KEYWORDS: tuple[str, ...] = (
    "trump",
    "biden",
    "harris",
    "president",
    "election",
    "republican",
    "democrat",
    "senate",
    "congress",
    "governor",
    "vote",
    "electoral",
    "primary",
    "nominee",
    "vance",
    "walz",
    "cabinet",
    "inauguration",
    "popular vote",
    "swing state",
)

POLITICAL_TAGS: frozenset[str] = frozenset({"politics", "elections"})


def mentions_political_keyword(text: str, tags: Iterable[str] = ()) -> bool:
    """True if any political keyword occurs in ``text`` or inside any tag."""
    lowered = text.lower()
    tag_list = [tag.lower() for tag in tags]
    return any(
        keyword in lowered or any(keyword in tag for tag in tag_list)
        for keyword in POLITICAL_KEYWORDS
    )


def is_political_category(category: Optional[str]) -> bool:
    return category is not None and "politic" in category.lower()
