"""Unit tests for comment add/delete rules."""

from __future__ import annotations

import pytest

from motohub.errors import BadRequest, CommentNotFound, Unauthorized
from motohub.social import CommentEngine


@pytest.fixture
def comments(doc_store) -> CommentEngine:
    return CommentEngine(doc_store)


class TestAddComment:
    async def test_snapshot_of_author(self, comments, make_post, make_user) -> None:
        post = make_post()
        author = make_user("u1", name="Alice")
        result = await comments.add(post, author, "Nice bike")
        entry = result[0]
        assert entry["user"] == "u1"
        assert entry["name"] == "Alice"
        assert entry["avatar"] == author.avatar
        assert entry["text"] == "Nice bike"
        assert entry["id"]
        assert entry["date"]

    async def test_newest_first(self, comments, make_post, make_user) -> None:
        post = make_post()
        await comments.add(post, make_user("u1"), "first")
        result = await comments.add(post, make_user("u2"), "second")
        assert [c["user"] for c in result] == ["u2", "u1"]

    async def test_blank_text_rejected(self, comments, doc_store, make_post, make_user) -> None:
        post = make_post()
        with pytest.raises(BadRequest):
            await comments.add(post, make_user("u1"), "   ")
        assert post.comments == []
        assert doc_store.saves == 0


class TestDeleteComment:
    async def test_unknown_comment(self, comments, make_post) -> None:
        post = make_post()
        with pytest.raises(CommentNotFound, match="Comment does not exist"):
            await comments.delete(post, "missing", "u1")

    async def test_not_author(self, comments, doc_store, make_post, make_user) -> None:
        post = make_post()
        result = await comments.add(post, make_user("u1"), "mine")
        saves = doc_store.saves
        with pytest.raises(Unauthorized, match="not authorized"):
            await comments.delete(post, result[0]["id"], "u2")
        assert len(post.comments) == 1
        assert doc_store.saves == saves

    async def test_delete_own_comment(self, comments, make_post, make_user) -> None:
        post = make_post()
        await comments.add(post, make_user("u1"), "keep")
        result = await comments.add(post, make_user("u2"), "drop")
        result = await comments.delete(post, result[0]["id"], "u2")
        assert [c["text"] for c in result] == ["keep"]

    async def test_removes_first_comment_by_same_author(self, comments, make_post, make_user) -> None:
        """Deleting C1 when the same author also wrote C2 removes C2 (list is newest first)."""
        post = make_post()
        author = make_user("u1")
        after_c1 = await comments.add(post, author, "C1")
        c1_id = after_c1[0]["id"]
        after_c2 = await comments.add(post, author, "C2")
        assert [c["text"] for c in after_c2] == ["C2", "C1"]

        result = await comments.delete(post, c1_id, "u1")
        assert [c["text"] for c in result] == ["C1"]
        assert result[0]["id"] == c1_id

    async def test_author_compared_as_string(self, comments, make_post) -> None:
        post = make_post()
        post.comments.append({"id": "c1", "user": 42, "text": "legacy", "date": "2024-01-01T00:00:00+00:00"})
        result = await comments.delete(post, "c1", "42")
        assert result == []
