import pytest

from acequia.network import AcequiaNetwork
from acequia.testing import make_network


@pytest.fixture
def balanced_network() -> AcequiaNetwork:
    return make_network()


@pytest.fixture
def scenario_dict() -> dict:
    return {
        "hour_limit": 12,
        "regions": [
            {"name": "North", "water_level": 100.0, "water_need": 50.0, "water_capacity": 200.0},
            {"name": "South", "water_level": 10.0, "water_need": 80.0, "water_capacity": 100.0},
            {"name": "East", "water_level": 50.0, "water_need": 50.0, "water_capacity": 100.0},
        ],
        "canals": [
            {"name": "Canal A", "source": "North", "target": "South"},
            {"name": "Canal B", "source": "South", "target": "East"},
            {"name": "Canal C", "source": "North", "target": "East"},
            {"name": "Canal D", "source": "East", "target": "North"},
        ],
    }
