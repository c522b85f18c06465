"""
Entry point: start at the Home scene and tick forever.

Run: python -m tickgame
"""

import logging

from tickengine.core import AppConfig, Application, Event, EngineEvent, get_application

from tickgame.scenes import HomeScene


logger = logging.getLogger("tickgame")


def watch_transitions(app: Application) -> None:
    """Log every scene change and reset with the number of ticks run so far."""

    def on_changed(event: Event) -> None:
        logger.info("Entered %s after %d ticks", event["scene"].name, app.tick_count)

    def on_reset(event: Event) -> None:
        logger.info("Reset %s after %d ticks", event["scene"].name, app.tick_count)

    app.event_bus.subscribe(EngineEvent.SCENE_CHANGED, on_changed)
    app.event_bus.subscribe(EngineEvent.SCENE_RESET, on_reset)


def main() -> None:
    config = AppConfig(title="Tick Game")
    logging.basicConfig(level=config.log_level)

    app = get_application(config)
    watch_transitions(app)
    app.change_scene(HomeScene())

    try:
        app.run()
    except KeyboardInterrupt:
        app.stop()
        logger.info("Interrupted, shutting down.")


if __name__ == "__main__":
    main()
