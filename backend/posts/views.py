from rest_framework import serializers, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from oauth2_provider.contrib.rest_framework import OAuth2Authentication
from rest_framework.authentication import SessionAuthentication

from .models import Post
from .permissions import IsPostOwner
from .serializers import PostSerializer

# id hợp lệ phải nằm trong cột BigAutoField
USER_ID_FIELD = serializers.IntegerField(min_value=1, max_value=2**63 - 1)


class PostViewSet(viewsets.ModelViewSet):
    serializer_class = PostSerializer
    permission_classes = [IsAuthenticated, IsPostOwner]
    authentication_classes = [OAuth2Authentication, SessionAuthentication]

    def get_queryset(self):
        qs = Post.objects.select_related("user")

        user_id = self.request.query_params.get("user")
        if user_id:
            try:
                user_id = USER_ID_FIELD.run_validation(user_id)
            except ValidationError as exc:
                raise ValidationError({"user": exc.detail})
            qs = qs.filter(user_id=user_id)

        return qs

    def perform_create(self, serializer):
        # chủ bài viết luôn là người đang đăng nhập
        serializer.save(user=self.request.user)

    # GET /api/posts/mine/
    @action(methods=["get"], detail=False, url_path="mine")
    def mine(self, request):
        qs = Post.objects.filter(user=request.user).select_related("user")
        return Response(self.get_serializer(qs, many=True).data)
