import logging

from rest_framework.permissions import BasePermission, SAFE_METHODS

from .policies import PostPolicy

logger = logging.getLogger(__name__)


class IsPostOwner(BasePermission):
    """Đọc thì ai cũng được, sửa / xoá thì phải là chủ bài viết."""

    policy_class = PostPolicy

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True

        decision = self.policy_class().modify(request.user, obj)
        if not decision.allowed:
            # DRF lấy message này làm "detail" của response 403
            self.message = decision.reason
            logger.info(
                "User %s denied %s on post %s (owner %s)",
                request.user.id, request.method, obj.pk, obj.user_id,
            )
        return decision.allowed
