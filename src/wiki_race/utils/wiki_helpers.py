"""
Helper functions for comparing, classifying and validating article titles.
"""

from typing import Iterable, List

DISAMBIGUATION_MARKER = "disambiguation"
LIST_PREFIX = "List of"


def title_key(page_title: str) -> str:
    """Returns the key used to compare and remember a page title.

    Titles are compared case-insensitively and nothing else: whitespace and
    punctuation are kept as they are.

    Examples:
      "Ice cream"   =>   "ice cream"
      "ICE  Cream"  =>   "ice  cream"
    """
    return page_title.lower()


def titles_equal(first: str, second: str) -> bool:
    """Returns whether two titles name the same article."""
    return title_key(first) == title_key(second)


def is_namespaced(page_title: str) -> bool:
    """Returns whether the title belongs to a namespace ("Category:", "File:", ...).

    Any title containing a colon is treated as namespaced.
    """
    return ":" in page_title


def is_structural_noise(page_title: str) -> bool:
    """Returns whether the title is a non-informational page.

    Examples:
      "Mercury (disambiguation)"   =>   True
      "List of rivers of Europe"   =>   True
      "Template:Infobox"           =>   True
      "Mercury (planet)"           =>   False
    """
    return (
        DISAMBIGUATION_MARKER in page_title.lower()
        or LIST_PREFIX in page_title
        or is_namespaced(page_title)
    )


def unique_titles(titles: Iterable[str]) -> List[str]:
    """Drops case-insensitive duplicates, keeping the first occurrence."""
    seen = set()
    result = []
    for title in titles:
        key = title_key(title)
        if key in seen:
            continue
        seen.add(key)
        result.append(title)
    return result


def is_str(val) -> bool:
    """Returns whether or not the provided value is a string type.

    Args:
      val: The value to check.

    Returns:
      bool: Whether or not the provided value is a string type.
    """
    return isinstance(val, str)


def validate_page_title(page_title: str):
    """Validates the provided value is a valid page title.

    Args:
      page_title: The page title to validate.

    Returns:
      None

    Raises:
      ValueError: If the provided page title is invalid.
    """
    if not is_str(page_title) or not page_title.strip():
        raise ValueError(
            f'Invalid page title "{page_title}" provided. Page title must be a non-empty string.'
        )
