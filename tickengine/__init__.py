"""
Tick Engine

A small entity-component runtime with scene lifecycle management,
driven by a fixed tick loop.

Quick Start:
    from tickengine.core import Component, Scene, get_application

    class Blink(Component):
        def update(self, entity) -> None:
            pass

    class MyScene(Scene):
        def populate(self) -> None:
            self.create_entity("Light").add(Blink())

    app = get_application()
    app.change_scene(MyScene())
    app.run()
"""

__version__ = "0.1.0"

# Re-export core components for convenience
from tickengine.core import (
    Application,
    AppConfig,
    SceneSwitchPolicy,
    get_application,
    reset_application,
    Scene,
    SceneState,
    register_scene,
    create_scene,
    Entity,
    Component,
    register_component,
    EventBus,
    Event,
    EngineEvent,
)

from tickengine.graphics.screen import TerminalScreen

__all__ = [
    # Application
    "Application",
    "AppConfig",
    "SceneSwitchPolicy",
    "get_application",
    "reset_application",
    # Scene
    "Scene",
    "SceneState",
    "register_scene",
    "create_scene",
    # ECS
    "Entity",
    "Component",
    "register_component",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
    # Output
    "TerminalScreen",
]
