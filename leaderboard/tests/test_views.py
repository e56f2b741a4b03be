"""
API tests for the /ranks/ endpoints.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from users.tests.conftest import (
    UserFactory, ProfileFactory, BadgeUnitFactory, UnitTotalFactory, ActivityLogFactory, log_at,
)


@pytest.mark.integration
@pytest.mark.django_db
class TestRankViews:

    def test_requires_authentication(self, api_client):
        assert api_client.get('/ranks/global/').status_code == 401
        assert api_client.get('/ranks/monthly/').status_code == 401

    def test_global_ranks(self, auth_client, user):
        unit = BadgeUnitFactory()
        leader = ProfileFactory(city='Khulna', country='Bangladesh', address='7 River Ln').user
        UnitTotalFactory(user=leader, unit=unit, grand_total=42)
        UnitTotalFactory(user=user, unit=unit, grand_total=3)

        response = auth_client.get('/ranks/global/')

        assert response.status_code == 200
        data = response.json()
        assert [row['id'] for row in data] == [leader.id, user.id]
        assert data[0] == {
            'id': leader.id,
            'name': leader.name,
            'headshot': None,
            'city': 'Khulna',
            'country': 'Bangladesh',
            'address': '7 River Ln',
            'metric': 42.0,
        }
        assert data[1]['city'] is None

    def test_global_ranks_include_users_without_totals(self, auth_client, user):
        BadgeUnitFactory()
        others = [UserFactory() for _ in range(3)]

        data = auth_client.get('/ranks/global/').json()

        assert len(data) == 1 + len(others)
        assert all(row['metric'] == 0 for row in data)

    def test_monthly_ranks(self, auth_client, user):
        runner = UserFactory()
        ActivityLogFactory(user=runner, activity={'distance': 2})
        ActivityLogFactory(user=runner, activity={'distance': 3})
        ActivityLogFactory(user=user, activity={'distance': 1.5})
        idle = UserFactory()
        log_at(idle, {'distance': 30}, timezone.now() - timedelta(days=40))

        response = auth_client.get('/ranks/monthly/')

        assert response.status_code == 200
        assert [(row['id'], row['metric']) for row in response.json()] == [
            (runner.id, 5.0), (user.id, 1.5),
        ]

    def test_monthly_ranks_empty(self, auth_client):
        response = auth_client.get('/ranks/monthly/')

        assert response.status_code == 200
        assert response.json() == []
