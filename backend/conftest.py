import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def alice(django_user_model):
    return django_user_model.objects.create_user(username="alice", password="secret123")


@pytest.fixture
def bob(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="secret123")


@pytest.fixture
def alice_post(alice):
    from posts.models import Post

    return Post.objects.create(user=alice, title="Hello", body="first post")
