"""Unit tests for love/like bookkeeping."""

from __future__ import annotations

import pytest

from motohub.errors import AlreadyReacted, NotReacted
from motohub.social import ReactionEngine


@pytest.fixture
def loves(doc_store) -> ReactionEngine:
    return ReactionEngine(
        doc_store,
        "loves",
        already_message="User already loved this motorcycle",
        missing_message="User has not loved motorcycle yet",
    )


class TestAdd:
    async def test_add_inserts_at_front(self, loves, doc_store, make_motorcycle) -> None:
        bike = make_motorcycle()
        await loves.add(bike, "u1")
        result = await loves.add(bike, "u2")
        assert [r["user"] for r in result] == ["u2", "u1"]
        assert doc_store.saves == 2

    async def test_each_entry_has_its_own_id(self, loves, make_motorcycle) -> None:
        bike = make_motorcycle()
        await loves.add(bike, "u1")
        result = await loves.add(bike, "u2")
        assert result[0]["id"] != result[1]["id"]

    async def test_second_add_is_rejected(self, loves, doc_store, make_motorcycle) -> None:
        bike = make_motorcycle()
        await loves.add(bike, "u1")
        with pytest.raises(AlreadyReacted, match="already loved"):
            await loves.add(bike, "u1")
        assert len(bike.loves) == 1
        assert doc_store.saves == 1

    async def test_returns_a_copy(self, loves, make_motorcycle) -> None:
        bike = make_motorcycle()
        result = await loves.add(bike, "u1")
        result.clear()
        assert len(bike.loves) == 1


class TestRemove:
    async def test_remove_never_reacted(self, loves, doc_store, make_motorcycle) -> None:
        bike = make_motorcycle()
        with pytest.raises(NotReacted, match="has not loved"):
            await loves.remove(bike, "u1")
        assert doc_store.saves == 0

    async def test_remove_only_that_user(self, loves, make_motorcycle) -> None:
        bike = make_motorcycle()
        for user in ("u1", "u2", "u3"):
            await loves.add(bike, user)
        result = await loves.remove(bike, "u2")
        assert [r["user"] for r in result] == ["u3", "u1"]

    async def test_add_remove_add(self, loves, make_motorcycle) -> None:
        bike = make_motorcycle()
        await loves.add(bike, "u1")
        assert await loves.remove(bike, "u1") == []
        result = await loves.add(bike, "u1")
        assert [r["user"] for r in result] == ["u1"]

    async def test_likes_field_on_posts(self, doc_store, make_post) -> None:
        likes = ReactionEngine(doc_store, "likes")
        post = make_post()
        await likes.add(post, "u1")
        assert [r["user"] for r in post.likes] == ["u1"]
        with pytest.raises(AlreadyReacted):
            await likes.add(post, "u1")
