import logging
from rest_framework import generics
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from .models import Post
from .serializers import PostSerializer

logger = logging.getLogger(__name__)


class PostListCreateView(generics.ListCreateAPIView):
    serializer_class = PostSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qs = Post.objects.alive().select_related('created_by')
        author = self.request.query_params.get('author')
        if author == 'me':
            qs = qs.filter(created_by=self.request.user)
        elif author and author.isdigit():
            qs = qs.filter(created_by_id=int(author))
        return qs.newest_first()

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class PostDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = PostSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Post.objects.alive().select_related('created_by')

    def _check_owner(self, post):
        if post.created_by_id != self.request.user.id:
            raise PermissionDenied('Not your post')

    def perform_update(self, serializer):
        self._check_owner(serializer.instance)
        serializer.save()

    def perform_destroy(self, instance):
        self._check_owner(instance)
        instance.soft_delete()
        logger.info(f'Post {instance.id} soft-deleted by user {self.request.user.id}')
