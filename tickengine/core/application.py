"""
Application controller with a fixed tick loop.

The Application is the single process-wide controller. It handles:
- Owning the active scene
- The update / render / sleep tick loop
- Scene changes and reset requests coming from components

Components reach it through get_application(). Requests made while the
active scene is being updated are handled according to the configured
SceneSwitchPolicy so the entity list being walked is never mutated.

Usage:
    app = get_application(AppConfig(tick_interval=0.5))
    app.change_scene(HomeScene())
    app.run()
"""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum

from tickengine.core.events import EventBus, EngineEvent
from tickengine.core.scene import Scene
from tickengine.graphics.screen import TerminalScreen


logger = logging.getLogger(__name__)


class SceneSwitchPolicy(Enum):
    """When scene changes and resets requested during update take effect."""

    # Swap the scene as soon as it is requested; reset right after update
    IMMEDIATE = "immediate"
    # Queue both until the start of the next update pass
    DEFERRED = "deferred"


class AppConfig:
    """Configuration for the application controller."""

    def __init__(
        self,
        title: str = "Tick Engine",
        tick_interval: float = 0.5,
        max_ticks: int | None = None,
        scene_switch: SceneSwitchPolicy | str = SceneSwitchPolicy.DEFERRED,
        clear_screen: bool = True,
        log_level: str = "INFO",
    ):
        self.title = title
        self.tick_interval = tick_interval
        self.max_ticks = max_ticks
        self.scene_switch = SceneSwitchPolicy(scene_switch)
        self.clear_screen = clear_screen
        self.log_level = log_level


class Application:
    """
    Main controller.

    Owns at most one scene at a time and drives it one tick at a time:
    update, render, then sleep for the configured interval.

    Prefer get_application() over constructing this directly; components
    talk to the instance returned there.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        screen: TerminalScreen | None = None,
    ):
        self.config = config or AppConfig()
        self.event_bus = EventBus()
        self.screen = screen or TerminalScreen(clear=self.config.clear_screen)

        self._running = True
        self._reset_requested = False
        self._scene: Scene | None = None
        self._pending_scene: Scene | None = None
        self._updating = False
        self._tick_count = 0

        logger.info("Application initialized: %s", self.config.title)

    @property
    def current_scene(self) -> Scene | None:
        """The active scene."""
        return self._scene

    @property
    def pending_scene(self) -> Scene | None:
        """Scene waiting to be adopted (deferred policy only)."""
        return self._pending_scene

    @property
    def running(self) -> bool:
        return self._running

    @property
    def reset_pending(self) -> bool:
        """Whether a reset has been requested but not applied yet."""
        return self._reset_requested

    @property
    def tick_count(self) -> int:
        """Number of update passes run so far."""
        return self._tick_count

    @property
    def is_deferred(self) -> bool:
        return self.config.scene_switch is SceneSwitchPolicy.DEFERRED

    # Mutation surface (safe to call from component updates)

    def change_scene(self, scene: Scene) -> None:
        """
        Replace the active scene and start the new one.

        With the deferred policy, a call made during an update pass only
        queues the scene; it becomes active when the next pass begins.
        """
        if self.is_deferred and self._updating:
            logger.debug("Scene change to %s queued", scene.name)
            self._pending_scene = scene
            self.event_bus.publish(EngineEvent.SCENE_CHANGE_REQUESTED, scene=scene)
            return

        self._pending_scene = None
        self._do_change_scene(scene)

    def request_reset(self) -> None:
        """Ask for the active scene to be reset once the update pass is over."""
        if not self._reset_requested:
            logger.debug("Scene reset requested")
            self.event_bus.publish(EngineEvent.RESET_REQUESTED, scene=self._scene)
        self._reset_requested = True

    # Tick

    def update(self) -> None:
        """Run one update pass over the active scene."""
        if self.is_deferred:
            self._process_pending()

        if self._scene is not None:
            self._updating = True
            try:
                self._scene.update()
            finally:
                self._updating = False

        if not self.is_deferred:
            self._consume_reset()

        self._tick_count += 1

    def render(self) -> None:
        """Present a new frame and render the active scene into it."""
        self.screen.clear()

        if self._scene is not None:
            self._scene.render()

        self.screen.flush()

    def tick(self) -> None:
        """Update, then render."""
        self.update()
        self.render()

    def run(self) -> None:
        """
        Start the main loop.

        Runs until stop() is called or config.max_ticks ticks have run.
        The iteration in progress when stop() is called is completed; after
        stop() the loop does not run again.
        """
        self.event_bus.publish(EngineEvent.APP_STARTED)
        logger.info("Main loop started")

        ticks = 0
        while self._running:
            self.tick()
            ticks += 1
            self.event_bus.publish(EngineEvent.TICK_COMPLETED, tick=self._tick_count)

            if self.config.max_ticks is not None and ticks >= self.config.max_ticks:
                self._running = False

            if self._running and self.config.tick_interval > 0:
                time.sleep(self.config.tick_interval)

        logger.info("Main loop stopped after %d ticks", ticks)
        self.event_bus.publish(EngineEvent.APP_STOPPED, ticks=ticks)

    def stop(self) -> None:
        """Request loop shutdown after the current iteration."""
        self._running = False

    # Internal

    def _process_pending(self) -> None:
        """Apply queued scene change, then queued reset."""
        if self._pending_scene is not None:
            scene, self._pending_scene = self._pending_scene, None
            self._do_change_scene(scene)

        self._consume_reset()

    def _consume_reset(self) -> None:
        if not self._reset_requested:
            return

        self._reset_requested = False
        if self._scene is not None:
            self._scene.reset()
            self.event_bus.publish(EngineEvent.SCENE_RESET, scene=self._scene)

    def _do_change_scene(self, scene: Scene) -> None:
        old_scene, self._scene = self._scene, scene

        if old_scene is not None:
            old_scene.on_destroy()

        logger.info(
            "Scene changed: %s -> %s",
            old_scene.name if old_scene else None,
            scene.name,
        )
        scene.start()
        self.event_bus.publish(
            EngineEvent.SCENE_CHANGED, scene=scene, previous=old_scene
        )


_instance: Application | None = None
_instance_lock = threading.Lock()


def get_application(config: AppConfig | None = None) -> Application:
    """
    Get the process-wide Application, creating it on first call.

    Args:
        config: Used only when the instance is created
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Application(config)
    return _instance


def reset_application() -> None:
    """Discard the process-wide Application (the next access creates a new one)."""
    global _instance
    with _instance_lock:
        _instance = None
