"""Tests for title slug derivation."""

import pytest

from folio.domain.content import MAX_SLUG_LENGTH, slugify_title
from folio.domain.shared.exceptions import ErrorCode, ValidationError


class TestSlugifyTitle:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Hello World", "hello-world"),
            ("Hello, World!", "hello-world"),
            ("  Many   spaces  here ", "many-spaces-here"),
            ("Café Crème", "cafe-creme"),
            ("Python 3.12 released", "python-3-12-released"),
        ],
    )
    def test_slug_is_lowercase_and_hyphenated(self, title: str, expected: str):
        assert slugify_title(title) == expected

    def test_slug_is_deterministic(self):
        assert slugify_title("Same Title") == slugify_title("Same Title")

    def test_title_without_slug_characters_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            slugify_title("!!!")

        assert exc_info.value.code == ErrorCode.INVALID_SLUG

    def test_long_transliterated_title_is_capped(self):
        title = "你好世界" * 75

        slug = slugify_title(title)

        assert len(title) == 300
        assert len(slug) <= MAX_SLUG_LENGTH
        assert slug.startswith("ni-hao-shi-jie-")
        assert not slug.endswith("-")
        assert slug == slugify_title(title)

    def test_cap_cuts_at_word_boundary(self):
        slug = slugify_title("word " * 100)

        assert len(slug) <= MAX_SLUG_LENGTH
        assert set(slug.split("-")) == {"word"}
