import pytest

from graph import Graph
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def example_graph():
    return Graph.example()


@pytest.fixture
def fork_graph():
    """A with two leaf children B and C."""
    return Graph.from_dict({"A": ["B", "C"], "B": [], "C": []})


@pytest.fixture
def diamond_graph():
    return Graph.from_dict({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})

