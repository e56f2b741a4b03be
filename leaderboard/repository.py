"""
Read-only ORM access for the ranking engine.

Soft-deleted users are filtered here explicitly; nothing relies on a
default manager hiding them.
"""
from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.utils import timezone
from activities.models import ActivityLog
from badges.models import BadgeUnit, UserUnitTotal
from users.models import User
from .ranking import UserSummary


def summarize(user):
    try:
        profile = user.profile
    except ObjectDoesNotExist:
        profile = None
    return UserSummary(
        id=user.id,
        name=user.display_name,
        headshot=user.headshot or None,
        city=profile.city if profile else None,
        country=profile.country if profile else None,
        address=profile.address if profile else None,
    )


class RankingRepository:
    def __init__(self, month_matches_year=None):
        if month_matches_year is None:
            month_matches_year = settings.LEADERBOARD_MONTH_MATCHES_YEAR
        self.month_matches_year = month_matches_year

    def fetch_users_with_profiles(self):
        users = User.objects.alive().select_related('profile').order_by('id')
        return [summarize(u) for u in users]

    def resolve_unit_id(self, short_name):
        return BadgeUnit.objects.filter(short_name=short_name).values_list('id', flat=True).first()

    def fetch_unit_total(self, user_id, unit_short_name):
        return UserUnitTotal.objects.filter(
            user_id=user_id, unit__short_name=unit_short_name
        ).values_list('grand_total', flat=True).first()

    def fetch_unit_totals(self, unit_id):
        """{user_id: grand_total} for every user holding a total in `unit_id`."""
        return dict(
            UserUnitTotal.objects.filter(unit_id=unit_id).values_list('user_id', 'grand_total')
        )

    def fetch_current_month_activity_logs(self, now=None):
        """
        Users with at least one log in the current month, each paired with the
        raw payloads of those logs: {user_id: (UserSummary, [payload, ...])}.

        The month is taken from `now` in the active time zone. Unless
        `month_matches_year` is set, the year is not compared.
        """
        local_now = timezone.localtime(now or timezone.now())
        logs = ActivityLog.objects.filter(
            created_at__month=local_now.month,
            user__deleted_at__isnull=True,
        )
        if self.month_matches_year:
            logs = logs.filter(created_at__year=local_now.year)

        grouped = {}
        for log in logs.select_related('user', 'user__profile').order_by('user_id', 'id'):
            if log.user_id not in grouped:
                grouped[log.user_id] = (summarize(log.user), [])
            grouped[log.user_id][1].append(log.activity)
        return grouped
