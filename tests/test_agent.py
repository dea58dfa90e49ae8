"""
Tests for simulation/agent.py

Harvesting, movement decisions, movement cost and metabolism.
"""

import pytest

from resource_competition.simulation import (
    MOVEMENT_COST,
    Agent,
    ConfigError,
    Neighbor,
    NotAliveError,
    Updatable,
)


def dead_agent() -> Agent:
    return Agent(id=7, cid=1, consumption_rate=3, health_point=0)


class TestAgentConstruction:
    """Tests for Agent initialization."""

    def test_fields(self):
        agent = Agent(id=1, cid=2, consumption_rate=3, health_point=5, allocated_resource=4)
        assert agent.id == 1
        assert agent.cid == 2
        assert agent.consumption_rate == 3
        assert agent.allocated_resource == 4
        assert agent.health_point == 5
        assert agent.is_alive

    def test_zero_health_is_dead(self):
        assert not dead_agent().is_alive

    def test_negative_values_rejected(self):
        with pytest.raises(ConfigError):
            Agent(id=0, cid=0, consumption_rate=-1, health_point=5)

    def test_is_updatable(self):
        assert isinstance(Agent(id=0, cid=0, consumption_rate=1, health_point=1), Updatable)


class TestRetrieveResource:
    """Tests for retrieve_resource."""

    def test_takes_up_to_consumption_rate(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        leftover = agent.retrieve_resource(10)
        assert agent.allocated_resource == 3
        assert leftover == 7
        assert not agent.is_hungry

    def test_takes_everything_when_short(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        leftover = agent.retrieve_resource(2)
        assert agent.allocated_resource == 2
        assert leftover == 0
        assert agent.is_hungry

    def test_replaces_previous_allocation(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5, allocated_resource=3)
        agent.retrieve_resource(1)
        assert agent.allocated_resource == 1

    def test_dead_agent_rejected(self):
        agent = dead_agent()
        with pytest.raises(NotAliveError) as exc_info:
            agent.retrieve_resource(5)
        assert exc_info.value.agent_id == 7
        assert agent.allocated_resource == 0


class TestDecideMove:
    """Tests for decide_move."""

    def test_picks_richest_neighbor(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        neighbors = [Neighbor(1, 1), Neighbor(2, 10), Neighbor(3, 5), None]
        assert agent.decide_move(neighbors) == 2

    def test_four_way_tie_goes_right(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        neighbors = [Neighbor(1, 5), Neighbor(2, 5), Neighbor(3, 5), Neighbor(4, 5)]
        for _ in range(3):
            assert agent.decide_move(neighbors) == 4

    def test_tie_goes_to_last_candidate(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        neighbors = [Neighbor(1, 5), None, Neighbor(3, 5), None]
        assert agent.decide_move(neighbors) == 3

    def test_fed_agent_stays(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5, allocated_resource=3)
        assert agent.decide_move([Neighbor(1, 50), None, None, None]) is None

    def test_empty_neighbors_never_chosen(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        assert agent.decide_move([Neighbor(1, 0), Neighbor(2, 0), None, None]) is None

    def test_no_neighbors(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5)
        assert agent.decide_move([None, None, None, None]) is None
        assert agent.decide_move([]) is None


class TestMoveTo:
    """Tests for move_to."""

    def test_changes_cell_and_costs_health(self):
        agent = Agent(id=0, cid=1, consumption_rate=3, health_point=5)
        agent.move_to(2)
        assert agent.cid == 2
        assert agent.health_point == 5 - MOVEMENT_COST
        assert agent.is_alive

    def test_last_health_point_kills(self):
        agent = Agent(id=0, cid=1, consumption_rate=3, health_point=1)
        agent.move_to(2)
        assert agent.health_point == 0
        assert not agent.is_alive
        assert agent.cid == 2

    def test_dead_agent_rejected(self):
        agent = dead_agent()
        with pytest.raises(NotAliveError):
            agent.move_to(2)
        assert agent.cid == 1
        assert agent.health_point == 0


class TestMetabolism:
    """Tests for update (metabolism)."""

    def test_fed_agent_keeps_health(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5, allocated_resource=3)
        agent.update()
        assert agent.health_point == 5
        assert agent.allocated_resource == 0
        assert agent.is_alive

    def test_hungry_agent_loses_health(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=5, allocated_resource=2)
        agent.update()
        assert agent.health_point == 4
        assert agent.allocated_resource == 0

    def test_starvation_kills_at_zero(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=1)
        agent.update()
        assert agent.health_point == 0
        assert not agent.is_alive

    def test_dead_agent_rejected(self):
        agent = dead_agent()
        with pytest.raises(NotAliveError):
            agent.update()
        assert agent.health_point == 0

    def test_death_is_permanent(self):
        agent = Agent(id=0, cid=0, consumption_rate=3, health_point=2)
        agent.update()
        agent.update()
        assert not agent.is_alive
        for op in (agent.update, lambda: agent.move_to(1), lambda: agent.retrieve_resource(9)):
            with pytest.raises(NotAliveError):
                op()
        assert agent.health_point == 0
        assert not agent.is_alive

    def test_zero_consumption_never_starves(self):
        agent = Agent(id=0, cid=0, consumption_rate=0, health_point=1)
        agent.update()
        assert agent.is_alive
