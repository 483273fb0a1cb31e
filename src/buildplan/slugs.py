"""Slug to title conversion."""

# Connective words kept lowercase in titles
LOWERCASE_WORDS = frozenset({"and"})


def slug_to_title(slug: str | None) -> str:
    """Convert a dash-separated slug to a title.

    Each word gets its first letter capitalized, except connective words
    such as "and" which stay lowercase. The rest of each word is unchanged.

    Args:
        slug: Dash-separated slug, e.g. "make-and-build"

    Returns:
        Title string, e.g. "Make and Build"; empty for None or ""

    Example:
        >>> slug_to_title("make-and-build")
        'Make and Build'
    """
    if not slug:
        return ""
    words = slug.split("-")
    return " ".join(word if word in LOWERCASE_WORDS else word[:1].upper() + word[1:] for word in words)
