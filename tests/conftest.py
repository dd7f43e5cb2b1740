"""Shared fixtures for boundedlayers tests."""

import pytest

from boundedlayers import configure
from boundedlayers.models import Graph, Node


@pytest.fixture
def make_project():
    """Build a node whose id is its name, as in hand-built test graphs."""
    def _make_project(name: str, *referenced: str) -> Node:
        return Node(id=name, name=name, references=referenced)
    return _make_project


@pytest.fixture
def default_layout():
    """Shared/App layers with Core/Host components.

    +-------------+       +-------------+
    | Shared.Core | <---- | Shared.Host |
    +-------------+       +-------------+
           ^   ^                 ^
           |   +-------------+   |
           |                 |   |
    +-------------+       +-------------+
    |  App.Core   | <---- |  App.Host   |
    +-------------+       +-------------+
    """
    return (
        configure()
        .layer("Shared").has_no_references()
        .layer("App").allow_references("Shared")
        .component("Core").has_no_references()
        .component("Host").allow_references("Core")
    )


@pytest.fixture
def all_together(make_project):
    """Graph that satisfies the default layout."""
    return [
        make_project("Shared.Core"),
        make_project("Shared.Host", "Shared.Core"),
        make_project("App.Core", "Shared.Core"),
        make_project("App.Host", "Shared.Core", "Shared.Host", "App.Core"),
    ]


@pytest.fixture
def all_together_graph(all_together):
    return Graph(all_together)
