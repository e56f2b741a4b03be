from rest_framework import generics
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.shortcuts import get_object_or_404
from users.models import User
from .serializers import SocialUserSerializer, FriendRequestSerializer
from .services import FriendshipService, FollowService, FriendshipError, friendship_status


def _target(user_id):
    return get_object_or_404(User.objects.alive(), id=user_id)


class FriendActionView(APIView):
    """POST /friends/<user_id>/<action>/ for request, accept, deny and block."""
    permission_classes = [IsAuthenticated]
    action_methods = {
        'request': 'befriend',
        'accept': 'accept',
        'deny': 'deny',
        'block': 'block',
    }

    def post(self, request, user_id, action):
        if action not in self.action_methods:
            return Response({'error': 'Unknown action'}, status=404)
        other = _target(user_id)
        service = FriendshipService(request.user)
        try:
            getattr(service, self.action_methods[action])(other)
        except FriendshipError as e:
            return Response({'error': str(e)}, status=400)
        return Response({'user_id': other.id, 'friendship_status': friendship_status(request.user, other)})


class FriendDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        other = _target(user_id)
        return Response({
            'user_id': other.id,
            'friendship_status': friendship_status(request.user, other),
            'is_following': FollowService(request.user).is_following(other),
        })

    def delete(self, request, user_id):
        other = _target(user_id)
        service = FriendshipService(request.user)
        if not (service.unfriend(other) or service.unblock(other)):
            return Response({'error': 'No friendship found'}, status=404)
        return Response(status=204)


class FriendsListView(generics.ListAPIView):
    serializer_class = SocialUserSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return FriendshipService(self.request.user).friends()


class PendingRequestsView(generics.ListAPIView):
    serializer_class = FriendRequestSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return FriendshipService(self.request.user).pending_requests()


class FollowView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, user_id):
        other = _target(user_id)
        try:
            _, created = FollowService(request.user).follow(other)
        except FriendshipError as e:
            return Response({'error': str(e)}, status=400)
        return Response({'following': True}, status=201 if created else 200)

    def delete(self, request, user_id):
        other = _target(user_id)
        if not FollowService(request.user).unfollow(other):
            return Response({'error': 'Not following'}, status=404)
        return Response(status=204)


class FollowersView(generics.ListAPIView):
    serializer_class = SocialUserSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return FollowService(self.request.user).followers()


class FollowingView(generics.ListAPIView):
    serializer_class = SocialUserSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return FollowService(self.request.user).following()
