from dataclasses import dataclass, field
from typing import Optional, Union

NOT_OWNER_MESSAGE = "You do not own this post."


@dataclass(frozen=True)
class Allowed:
    allowed = True
    reason: Optional[str] = field(default=None, init=False)


@dataclass(frozen=True)
class Denied:
    reason: str
    allowed = False


Decision = Union[Allowed, Denied]


def authorize_modify(actor_id, resource_owner_id) -> Decision:
    """Chỉ chủ bài viết mới được sửa / xoá bài viết đó."""
    if actor_id == resource_owner_id:
        return Allowed()
    return Denied(NOT_OWNER_MESSAGE)


class PostPolicy:
    def modify(self, user, post) -> Decision:
        return authorize_modify(user.id, post.user_id)
