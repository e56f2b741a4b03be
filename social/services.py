"""
Friendship and follow relationships.

Both services are bound to one acting user and take the other party
explicitly, so nothing here reads the request's logged-in user.
"""
import logging
from django.contrib.auth import get_user_model
from django.db.models import Q
from .models import Friendship, Follow

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    Friendship.PENDING: 'PENDING',
    Friendship.ACCEPTED: 'ACCEPTED',
    Friendship.DENIED: 'DENIED',
    Friendship.BLOCKED: 'BLOCKED',
}


class FriendshipError(Exception):
    pass


def _between(user, other):
    return Friendship.objects.filter(
        Q(sender=user, recipient=other) | Q(sender=other, recipient=user)
    )


def friendship_status(viewer, other):
    """Status label of the friendship between `viewer` and `other`, or None."""
    if viewer is None or not getattr(viewer, 'is_authenticated', False):
        return None
    if viewer.pk == other.pk:
        return None
    friendship = _between(viewer, other).first()
    if friendship is None:
        return None
    return STATUS_LABELS.get(friendship.status)


class FriendshipService:
    def __init__(self, user):
        self.user = user

    def get_friendship(self, other):
        return _between(self.user, other).first()

    def befriend(self, recipient):
        if recipient.pk == self.user.pk:
            raise FriendshipError('You cannot befriend yourself')
        existing = self.get_friendship(recipient)
        if existing is not None:
            if existing.status != Friendship.DENIED:
                raise FriendshipError('Friendship already exists')
            existing.delete()
        friendship = Friendship.objects.create(sender=self.user, recipient=recipient)
        logger.info(f'Friend request {self.user.id} -> {recipient.id}')
        return friendship

    def _pending_from(self, sender):
        friendship = Friendship.objects.filter(
            sender=sender, recipient=self.user, status=Friendship.PENDING
        ).first()
        if friendship is None:
            raise FriendshipError('No pending friend request')
        return friendship

    def accept(self, sender):
        friendship = self._pending_from(sender)
        friendship.status = Friendship.ACCEPTED
        friendship.save(update_fields=['status', 'updated_at'])
        return friendship

    def deny(self, sender):
        friendship = self._pending_from(sender)
        friendship.status = Friendship.DENIED
        friendship.save(update_fields=['status', 'updated_at'])
        return friendship

    def block(self, other):
        if other.pk == self.user.pk:
            raise FriendshipError('You cannot block yourself')
        existing = self.get_friendship(other)
        if existing is not None and existing.status == Friendship.BLOCKED and existing.sender_id != self.user.pk:
            raise FriendshipError('You are blocked by this user')
        _between(self.user, other).delete()
        friendship = Friendship.objects.create(sender=self.user, recipient=other, status=Friendship.BLOCKED)
        logger.info(f'User {self.user.id} blocked {other.id}')
        return friendship

    def unblock(self, other):
        deleted, _ = Friendship.objects.filter(
            sender=self.user, recipient=other, status=Friendship.BLOCKED
        ).delete()
        return deleted > 0

    def unfriend(self, other):
        deleted, _ = _between(self.user, other).exclude(status=Friendship.BLOCKED).delete()
        return deleted > 0

    def is_friend_with(self, other):
        return _between(self.user, other).filter(status=Friendship.ACCEPTED).exists()

    def friends(self):
        accepted = Friendship.objects.filter(status=Friendship.ACCEPTED)
        sent = accepted.filter(sender=self.user).values('recipient_id')
        received = accepted.filter(recipient=self.user).values('sender_id')
        return get_user_model().objects.alive().filter(
            Q(id__in=sent) | Q(id__in=received)
        ).order_by('id')

    def pending_requests(self):
        return Friendship.objects.filter(
            recipient=self.user, status=Friendship.PENDING
        ).select_related('sender').order_by('-created_at')


class FollowService:
    def __init__(self, user):
        self.user = user

    def follow(self, other):
        if other.pk == self.user.pk:
            raise FriendshipError('You cannot follow yourself')
        follow, created = Follow.objects.get_or_create(follower=self.user, followed=other)
        return follow, created

    def unfollow(self, other):
        deleted, _ = Follow.objects.filter(follower=self.user, followed=other).delete()
        return deleted > 0

    def is_following(self, other):
        return Follow.objects.filter(follower=self.user, followed=other).exists()

    def following(self):
        return get_user_model().objects.alive().filter(
            follower_links__follower=self.user
        ).order_by('id')

    def followers(self):
        return get_user_model().objects.alive().filter(
            following_links__followed=self.user
        ).order_by('id')
