"""Unit tests for thoughts, comments and the shared content rules."""

from uuid import uuid4

import pytest

from thoughtline.domain.content import (
    MAX_CONTENT_LENGTH,
    Comment,
    InvalidContentError,
    Thought,
    validate_content,
)
from thoughtline.domain.shared import ErrorCode


class TestValidateContent:
    def test_accepts_normal_text(self):
        assert validate_content("hello") == "hello"

    def test_accepts_single_character(self):
        assert validate_content("x") == "x"

    def test_accepts_exactly_max_length(self):
        text = "x" * MAX_CONTENT_LENGTH

        assert validate_content(text) == text

    def test_rejects_one_over_max_length(self):
        with pytest.raises(InvalidContentError, match="280 characters"):
            validate_content("x" * (MAX_CONTENT_LENGTH + 1))

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_rejects_empty_or_blank(self, text):
        with pytest.raises(InvalidContentError, match="cannot be empty"):
            validate_content(text)

    def test_does_not_trim(self):
        assert validate_content("  padded  ") == "  padded  "

    def test_error_code(self):
        with pytest.raises(InvalidContentError) as exc_info:
            validate_content("")

        assert exc_info.value.code == ErrorCode.INVALID_CONTENT


class TestThought:
    def setup_method(self):
        self.author_id = uuid4()

    def test_create(self):
        thought = Thought.create(user_id=self.author_id, content="hi")

        assert thought.user_id == self.author_id
        assert thought.content == "hi"
        assert thought.updated_at == thought.created_at

    def test_create_with_invalid_content(self):
        with pytest.raises(InvalidContentError):
            Thought.create(user_id=self.author_id, content=" ")

    def test_is_owned_by(self):
        thought = Thought.create(user_id=self.author_id, content="hi")

        assert thought.is_owned_by(self.author_id)
        assert not thought.is_owned_by(uuid4())

    def test_edit_replaces_content_and_keeps_identity(self):
        thought = Thought.create(user_id=self.author_id, content="hi")
        created = thought.created_at

        thought.edit("edited")

        assert thought.content == "edited"
        assert thought.user_id == self.author_id
        assert thought.created_at == created
        assert thought.updated_at >= created

    def test_edit_with_invalid_content_keeps_old_text(self):
        thought = Thought.create(user_id=self.author_id, content="hi")

        with pytest.raises(InvalidContentError):
            thought.edit("x" * 281)

        assert thought.content == "hi"


class TestComment:
    def test_create(self):
        thought_id = uuid4()
        user_id = uuid4()

        comment = Comment.create(
            thought_id=thought_id,
            user_id=user_id,
            content="nice",
        )

        assert comment.thought_id == thought_id
        assert comment.user_id == user_id
        assert comment.content == "nice"

    def test_content_rules_apply(self):
        with pytest.raises(InvalidContentError):
            Comment.create(thought_id=uuid4(), user_id=uuid4(), content="")
