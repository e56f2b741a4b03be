"""
Unit tests for RankingEngine against an in-memory repository.

Tests cover:
- global ranking order, zero-fill and unit lookup fallback
- current-month summation, exclusion and malformed payload handling
"""

import pytest

from leaderboard.ranking import LeaderboardEntry, RankingEngine, UserSummary


class FakeRepository:
    def __init__(self, users=(), totals=None, unit_id=1, monthly=None):
        self.users = list(users)
        self.totals = totals or {}
        self.unit_id = unit_id
        self.monthly = monthly or {}
        self.resolved = []

    def fetch_users_with_profiles(self):
        return list(self.users)

    def resolve_unit_id(self, short_name):
        self.resolved.append(short_name)
        return self.unit_id

    def fetch_unit_totals(self, unit_id):
        return dict(self.totals)

    def fetch_current_month_activity_logs(self, now=None):
        return dict(self.monthly)


def summary(user_id, name=None, **kwargs):
    return UserSummary(id=user_id, name=name or f'user{user_id}', **kwargs)


def metrics(entries):
    return [(e.id, e.metric) for e in entries]


@pytest.mark.unit
class TestGlobalRanking:

    def test_scenario_orders_by_distance_total(self):
        a, b, c = summary(1, 'A'), summary(2, 'B'), summary(3, 'C')
        repo = FakeRepository(users=[a, b, c], totals={1: 10, 3: 25})

        ranking = RankingEngine(repo, distance_unit='distance').compute_global_ranking()

        assert [e.name for e in ranking] == ['C', 'A', 'B']
        assert [e.metric for e in ranking] == [25.0, 10.0, 0.0]

    def test_user_without_total_is_present_with_zero(self):
        repo = FakeRepository(users=[summary(1), summary(2)], totals={1: 4.5})

        ranking = RankingEngine(repo, distance_unit='distance').compute_global_ranking()

        assert len(ranking) == 2
        assert ranking[-1].id == 2
        assert ranking[-1].metric == 0

    def test_result_is_non_increasing(self):
        users = [summary(i) for i in range(1, 8)]
        totals = {1: 3, 2: 17.5, 3: 0, 5: 17.5, 6: 2, 7: 40}
        repo = FakeRepository(users=users, totals=totals)

        ranking = RankingEngine(repo, distance_unit='distance').compute_global_ranking()

        values = [e.metric for e in ranking]
        assert values == sorted(values, reverse=True)
        assert len(ranking) == len(users)

    def test_ties_are_broken_by_user_id(self):
        repo = FakeRepository(users=[summary(9), summary(4), summary(6)], totals={9: 5, 4: 5, 6: 5})

        ranking = RankingEngine(repo, distance_unit='distance').compute_global_ranking()

        assert [e.id for e in ranking] == [4, 6, 9]

    def test_missing_unit_falls_back_to_zero_for_everyone(self):
        repo = FakeRepository(users=[summary(1), summary(2)], totals={1: 50}, unit_id=None)

        ranking = RankingEngine(repo, distance_unit='distance').compute_global_ranking()

        assert metrics(ranking) == [(1, 0.0), (2, 0.0)]

    def test_uses_configured_unit(self, settings):
        settings.LEADERBOARD_DISTANCE_UNIT = 'km'
        repo = FakeRepository(users=[summary(1)])

        RankingEngine(repo).compute_global_ranking()

        assert repo.resolved == ['km']

    def test_profile_fields_are_carried_over(self):
        user = summary(1, 'Mita', headshot='https://cdn.example.com/m.png',
                       city='Sylhet', country='Bangladesh', address='12 Tea Rd')
        repo = FakeRepository(users=[user], totals={1: 8})

        entry = RankingEngine(repo, distance_unit='distance').compute_global_ranking()[0]

        assert entry.as_dict() == {
            'id': 1, 'name': 'Mita', 'headshot': 'https://cdn.example.com/m.png',
            'city': 'Sylhet', 'country': 'Bangladesh', 'address': '12 Tea Rd', 'metric': 8.0,
        }

    def test_empty_population(self):
        repo = FakeRepository()
        assert RankingEngine(repo, distance_unit='distance').compute_global_ranking() == []

    def test_repeated_calls_are_identical(self):
        repo = FakeRepository(users=[summary(1), summary(2), summary(3)], totals={2: 1, 3: 1})
        engine = RankingEngine(repo, distance_unit='distance')

        assert engine.compute_global_ranking() == engine.compute_global_ranking()


@pytest.mark.unit
class TestCurrentMonthRanking:

    def test_sums_distances(self):
        repo = FakeRepository(monthly={
            1: (summary(1), [{'distance': 3.0}, {'distance': 4.5}, {'distance': 0.0}]),
        })

        ranking = RankingEngine(repo).compute_current_month_ranking()

        assert metrics(ranking) == [(1, 7.5)]

    def test_scenario_only_users_with_logs(self):
        repo = FakeRepository(
            users=[summary(1, 'X'), summary(2, 'Y')],
            monthly={1: (summary(1, 'X'), [{'distance': 2}, {'distance': 3}])},
        )

        ranking = RankingEngine(repo).compute_current_month_ranking()

        assert [(e.name, e.metric) for e in ranking] == [('X', 5.0)]

    def test_orders_descending(self):
        repo = FakeRepository(monthly={
            1: (summary(1), [{'distance': 1}]),
            2: (summary(2), [{'distance': 9}, {'distance': 1}]),
            3: (summary(3), [{'distance': 4}]),
        })

        ranking = RankingEngine(repo).compute_current_month_ranking()

        assert [e.id for e in ranking] == [2, 3, 1]

    def test_json_text_payloads_are_decoded(self):
        repo = FakeRepository(monthly={
            1: (summary(1), ['{"distance": 2.5, "steps": 3000}', {'distance': 1}]),
        })

        assert metrics(RankingEngine(repo).compute_current_month_ranking()) == [(1, 3.5)]

    def test_malformed_payloads_are_skipped(self, caplog):
        repo = FakeRepository(monthly={
            1: (summary(1), [
                {'distance': 2}, {'steps': 100}, 'not json', {'distance': 'far'}, {'distance': 10 ** 400},
            ]),
            2: (summary(2), [{'distance': 1}]),
        })

        with caplog.at_level('WARNING', logger='leaderboard.ranking'):
            ranking = RankingEngine(repo).compute_current_month_ranking()

        assert metrics(ranking) == [(1, 2.0), (2, 1.0)]
        assert 'skipped 4 malformed' in caplog.text

    def test_user_with_only_malformed_payloads_stays_with_zero(self):
        repo = FakeRepository(monthly={1: (summary(1), [{'duration': 30}])})

        assert metrics(RankingEngine(repo).compute_current_month_ranking()) == [(1, 0.0)]

    def test_repeated_calls_are_identical(self):
        repo = FakeRepository(monthly={
            1: (summary(1), [{'distance': 2}]),
            2: (summary(2), [{'distance': 2}]),
        })
        engine = RankingEngine(repo)

        first = engine.compute_current_month_ranking()
        assert first == engine.compute_current_month_ranking()
        assert all(isinstance(e, LeaderboardEntry) for e in first)
