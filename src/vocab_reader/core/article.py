"""Article entity - a readable text stored in the article store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """Represents a stored article.

    Attributes:
        id: Unique identifier in the database.
        title: Display title.
        content: Plain text, paragraphs separated by a single newline.
        created_at: Creation timestamp as stored (ISO-like string).
        updated_at: Last update timestamp as stored.
    """

    id: int
    title: str
    content: str
    created_at: str
    updated_at: str
