"""
Factory definitions shared by the test suites of all apps.

Other apps import them with `from users.tests.conftest import UserFactory`.
"""

import factory
from django.contrib.auth import get_user_model

from activities.models import ActivityLog
from badges.models import BadgeUnit, Badge, UserUnitTotal
from posts.models import Post
from users.models import Profile

User = get_user_model()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f'runner{n}')
    email = factory.LazyAttribute(lambda obj: f'{obj.username}@example.com')
    name = factory.LazyAttribute(lambda obj: obj.username.title())
    password = factory.django.Password('testpass123')


class ProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Profile

    user = factory.SubFactory(UserFactory)
    city = 'Dhaka'
    country = 'Bangladesh'
    address = factory.Sequence(lambda n: f'{n} Lake Road')


class BadgeUnitFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = BadgeUnit
        django_get_or_create = ('short_name',)

    short_name = 'distance'
    name = factory.LazyAttribute(lambda obj: obj.short_name.title())


class BadgeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Badge

    name = factory.Sequence(lambda n: f'Badge {n}')
    unit = factory.SubFactory(BadgeUnitFactory)
    threshold = 10


class UnitTotalFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = UserUnitTotal

    user = factory.SubFactory(UserFactory)
    unit = factory.SubFactory(BadgeUnitFactory)
    grand_total = 0


class ActivityLogFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ActivityLog

    user = factory.SubFactory(UserFactory)
    activity = factory.LazyFunction(lambda: {'distance': 1.0})


class PostFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Post

    title = factory.Sequence(lambda n: f'Morning run {n}')
    description = 'Easy pace along the river.'
    created_by = factory.SubFactory(UserFactory)


def log_at(user, activity, when):
    """Create an activity log and backdate it; created_at is auto_now_add."""
    log = ActivityLog.objects.create(user=user, activity=activity)
    ActivityLog.objects.filter(pk=log.pk).update(created_at=when)
    log.refresh_from_db()
    return log
