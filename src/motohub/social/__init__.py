"""Reaction, comment and ownership rules shared by posts and motorcycles."""

from motohub.social.comments import CommentEngine
from motohub.social.ownership import assert_owner
from motohub.social.reactions import ReactionEngine

__all__ = ["CommentEngine", "ReactionEngine", "assert_owner"]
