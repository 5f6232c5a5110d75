"""Tests for configuration, logging setup and the DI container."""

import logging

import pytest

from kiwiland.config import AppConfig, GraphConfig, ObservabilityConfig, get_config, reset_config
from kiwiland.container import Container, get_container, reset_container
from kiwiland.domain.errors import DuplicateEdgeError
from kiwiland.graph import DEFAULT_EDGE_TOKENS, RailwayGraph
from kiwiland.logging_config import PACKAGE_LOGGER, configure_logging
from kiwiland.ports.graph import GraphRepositoryPort
from kiwiland.services import RailwayQueryService


@pytest.fixture(autouse=True)
def fresh_state():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


class FakeRepository:
    def __init__(self, graph):
        self.graph = graph
        self.calls = 0

    def load(self):
        self.calls += 1
        return self.graph


def test_config_defaults():
    config = get_config()

    assert config.graph.edges == DEFAULT_EDGE_TOKENS
    assert config.graph.edges_file is None
    assert config.api.port == 3000
    assert config.api.prefix == "/api"


def test_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    monkeypatch.setenv("KIWI_API_PORT", "8080")

    assert get_config() is first

    reset_config()
    assert get_config().api.port == 8080


def test_default_container_builds_service():
    service = get_container().resolve(RailwayQueryService)

    assert service.shortest("B", "B").distance == 9
    assert get_container().resolve(RailwayQueryService) is service


def test_container_propagates_construction_errors():
    config = AppConfig(graph=GraphConfig(edges=["AB1", "AB2"]))
    container = Container.create_default(config)

    with pytest.raises(DuplicateEdgeError):
        container.resolve(RailwayQueryService)


def test_container_accepts_replacement_repository():
    container = Container.create_default(AppConfig())
    fake = FakeRepository(RailwayGraph.from_tokens(["XY4", "YX4"]))
    container.register(GraphRepositoryPort, lambda: fake)

    service = container.resolve(RailwayQueryService)

    assert service.shortest("X", "X").distance == 8
    assert fake.calls == 1


def test_resolve_unregistered_raises():
    with pytest.raises(KeyError):
        Container(config=AppConfig()).resolve(RailwayQueryService)


def test_non_singleton_factories_build_each_time():
    container = Container(config=AppConfig())
    container.register(list, lambda: [], singleton=False)

    assert container.resolve(list) is not container.resolve(list)


def test_configure_logging_is_idempotent():
    logger = configure_logging(ObservabilityConfig(level="debug"))
    handlers = list(logger.handlers)

    configure_logging(ObservabilityConfig(level="WARNING"))

    assert logger.name == PACKAGE_LOGGER
    assert logger.handlers == handlers
    assert len(handlers) == 1
    assert logger.level == logging.WARNING


def test_clear_singletons_rebuilds_on_next_resolve():
    container = Container.create_default(AppConfig())
    first = container.resolve(RailwayQueryService)

    container.clear_singletons()
    second = container.resolve(RailwayQueryService)

    assert second is not first
    assert second.shortest("A", "C").distance == 9
