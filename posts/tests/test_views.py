"""
API tests for posts: authorship, explicit ordering and soft delete.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from posts.models import Post
from users.tests.conftest import UserFactory, PostFactory


@pytest.mark.integration
@pytest.mark.django_db
class TestPostViews:

    def test_create_sets_author_from_request(self, auth_client, user):
        other = UserFactory()

        response = auth_client.post('/api/posts/', {
            'title': 'Sunday long run',
            'description': '21 km',
            'created_by': other.id,
        }, format='json')

        assert response.status_code == 201
        post = Post.objects.get(id=response.json()['id'])
        assert post.created_by == user
        assert post.post_slug.startswith('sunday-long-run-')
        assert 'created_by' not in response.json()
        assert response.json()['author'] == {
            'id': user.id, 'name': user.name, 'email': user.email, 'phone': None,
        }

    def test_list_is_newest_first_and_hides_deleted(self, auth_client):
        old = PostFactory()
        new = PostFactory()
        gone = PostFactory()
        Post.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=2))
        gone.soft_delete()

        response = auth_client.get('/api/posts/')

        assert [p['id'] for p in response.json()['results']] == [new.id, old.id]

    def test_filter_by_author(self, auth_client, user):
        mine = PostFactory(created_by=user)
        PostFactory()

        response = auth_client.get('/api/posts/?author=me')

        assert [p['id'] for p in response.json()['results']] == [mine.id]

    def test_delete_is_soft(self, auth_client, user):
        post = PostFactory(created_by=user)

        response = auth_client.delete(f'/api/posts/{post.id}/')

        assert response.status_code == 204
        post.refresh_from_db()
        assert post.is_deleted
        assert auth_client.get(f'/api/posts/{post.id}/').status_code == 404

    def test_only_author_can_modify(self, auth_client):
        post = PostFactory()

        assert auth_client.patch(f'/api/posts/{post.id}/', {'title': 'Mine now'}, format='json').status_code == 403
        assert auth_client.delete(f'/api/posts/{post.id}/').status_code == 403
        post.refresh_from_db()
        assert not post.is_deleted

    def test_author_can_update(self, auth_client, user):
        post = PostFactory(created_by=user)

        response = auth_client.patch(f'/api/posts/{post.id}/', {'status': 'draft'}, format='json')

        assert response.status_code == 200
        assert response.json()['status'] == 'draft'
