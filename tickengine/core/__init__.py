"""
Core engine module.

Exports:
- Application, AppConfig, SceneSwitchPolicy: Controller and configuration
- get_application, reset_application: Process-wide access point
- Scene, SceneState: Scene base and population state
- register_scene, create_scene, get_scene_type: Scene registry
- Entity: Component container
- Component, register_component: Component base and registration
- EventBus, Event, EngineEvent: Event system
"""

from tickengine.core.application import (
    Application,
    AppConfig,
    SceneSwitchPolicy,
    get_application,
    reset_application,
)
from tickengine.core.scene import (
    Scene,
    SceneState,
    register_scene,
    create_scene,
    get_scene_type,
)
from tickengine.core.entity import Entity
from tickengine.core.component import Component, register_component, get_component_type
from tickengine.core.events import EventBus, Event, EngineEvent

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
    "get_scene_type",
    # ECS
    "Entity",
    "Component",
    "register_component",
    "get_component_type",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
]
