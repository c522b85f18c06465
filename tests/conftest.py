import io
import os
import sys

import pytest

# Ensure engine modules can be imported
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def fresh_application():
    """
    Drop the process-wide Application around every test so no test
    sees another test's scene or pending requests.
    """
    from tickengine.core.application import reset_application

    reset_application()
    yield
    reset_application()


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from tickengine.core.events import EventBus
    return EventBus()


@pytest.fixture
def output():
    """In-memory stream standing in for the terminal."""
    return io.StringIO()


def _make_app(output, policy):
    from tickengine.core.application import AppConfig, get_application
    from tickengine.graphics.screen import TerminalScreen

    app = get_application(AppConfig(tick_interval=0, scene_switch=policy))
    app.screen = TerminalScreen(stream=output)
    return app


@pytest.fixture
def app(output):
    """Process-wide Application with the default (deferred) policy."""
    from tickengine.core.application import SceneSwitchPolicy
    return _make_app(output, SceneSwitchPolicy.DEFERRED)


@pytest.fixture
def immediate_app(output):
    """Process-wide Application that swaps scenes immediately."""
    from tickengine.core.application import SceneSwitchPolicy
    return _make_app(output, SceneSwitchPolicy.IMMEDIATE)


@pytest.fixture
def sample_entity():
    """Entity with a position."""
    from tickengine.core.entity import Entity
    from tickgame.components import PositionState

    entity = Entity("Sample")
    entity.add(PositionState(x=0, y=0))
    return entity
