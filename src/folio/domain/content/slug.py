"""URL slug derivation for blog titles."""

from slugify import slugify

from folio.domain.shared.exceptions import ErrorCode, ValidationError

# Fits the slug column; transliterated titles can be much longer than the title
MAX_SLUG_LENGTH = 300


def slugify_title(title: str) -> str:
    """Derive the URL slug for a title.

    Lowercase ASCII words joined by single hyphens; every other character is
    transliterated or dropped. "Hello, World!" becomes "hello-world". Long
    slugs are cut at a word boundary to at most MAX_SLUG_LENGTH characters.

    Raises
    ------
    ValidationError
        If nothing slug-worthy is left (e.g. a title made only of symbols)
    """
    slug = slugify(
        title or "",
        lowercase=True,
        max_length=MAX_SLUG_LENGTH,
        word_boundary=True,
        save_order=True,
    )
    if not slug:
        msg = f"Title '{title}' does not produce a valid slug"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_SLUG,
            details={"field": "title"},
        )
    return slug
