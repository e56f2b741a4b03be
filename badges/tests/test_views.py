"""
API tests for badge listings.
"""

import pytest

from badges.models import UserBadge
from users.tests.conftest import BadgeFactory, BadgeUnitFactory, UnitTotalFactory


@pytest.mark.integration
@pytest.mark.django_db
class TestBadgeViews:

    def test_lists_active_badges(self, auth_client):
        active = BadgeFactory(name='Marathoner', threshold=42.2)
        BadgeFactory(is_active=False)

        response = auth_client.get('/api/badges/')

        assert response.status_code == 200
        results = response.json()['results']
        assert [b['id'] for b in results] == [active.id]
        assert results[0]['unit'] == 'distance'

    def test_my_badges_newest_first(self, auth_client, user):
        older = UserBadge.objects.create(user=user, badge=BadgeFactory(threshold=5))
        newer = UserBadge.objects.create(user=user, badge=BadgeFactory(threshold=10))

        response = auth_client.get('/api/badges/mine/')

        assert [row['id'] for row in response.json()['results']] == [newer.id, older.id]

    def test_my_unit_totals(self, auth_client, user):
        UnitTotalFactory(user=user, unit=BadgeUnitFactory(), grand_total=12)

        response = auth_client.get('/api/badges/totals/')

        assert response.json() == [{'short_name': 'distance', 'grand_total': 12.0}]
