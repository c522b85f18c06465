"""
Whole-loop runs of the bundled scenes.
"""

import logging

from tickengine.core.application import AppConfig, get_application
from tickengine.graphics.screen import CLEAR_SEQUENCE, TerminalScreen
from tickgame.components import PositionState
from tickgame.scenes import HomeScene, GameScene


def enemy_position(app, name="Enemy"):
    return app.current_scene.get_entity_by_name(name).get(PositionState).position


def test_home_enemy_trajectory(app):
    app.change_scene(HomeScene())

    expected = [(11, 4), (12, 6), (13, 8), (14, 10)]
    for position in expected:
        app.tick()
        assert enemy_position(app) == position
        assert isinstance(app.current_scene, HomeScene)
        assert app.pending_scene is None


def test_deferred_change_renders_home_on_trigger_tick(app):
    app.change_scene(HomeScene())
    for _ in range(4):
        app.tick()

    # Tick 5: x reaches 15, the change is queued
    app.tick()
    assert isinstance(app.current_scene, HomeScene)
    assert isinstance(app.pending_scene, GameScene)
    assert app.screen.frame == ["[Player] (5, 5)", "[Enemy] (15, 12)"]

    # Tick 6: Game scene adopted, then updated once
    app.tick()
    assert isinstance(app.current_scene, GameScene)
    assert app.screen.frame == ["[Player] (15, 4)", "[Enemy2] (10, 4)"]


def test_immediate_change_renders_game_on_trigger_tick(immediate_app):
    app = immediate_app
    home = HomeScene()
    app.change_scene(home)
    enemy = home.get_entity_by_name("Enemy")

    for _ in range(5):
        app.tick()

    assert isinstance(app.current_scene, GameScene)
    # The detached Enemy kept its final Home state
    assert enemy.get(PositionState).position == (15, 12)
    assert app.screen.frame == ["[Player] (15, 4)", "[Enemy2] (10, 2)"]


def test_game_scene_resets_deferred(app):
    app.change_scene(GameScene())

    for tick in range(1, 9):
        app.tick()
        assert enemy_position(app, "Enemy2") == (10, 2 + 2 * tick)
    assert not app.reset_pending

    # Tick 9: y reaches 20, reset requested but the frame still shows it
    app.tick()
    assert app.reset_pending
    assert app.screen.frame == ["[Player] (15, 4)", "[Enemy2] (10, 20)"]

    # Tick 10: reset before the update
    app.tick()
    assert not app.reset_pending
    assert enemy_position(app, "Enemy2") == (10, 4)
    assert isinstance(app.current_scene, GameScene)


def test_game_scene_resets_immediate(immediate_app):
    app = immediate_app
    app.change_scene(GameScene())

    for _ in range(9):
        app.tick()

    assert not app.reset_pending
    assert app.screen.frame == ["[Player] (15, 4)", "[Enemy2] (10, 2)"]


def test_reset_keeps_scene_instance(app):
    app.change_scene(GameScene())
    scene = app.current_scene
    for _ in range(10):
        app.tick()
    assert app.current_scene is scene


def test_full_run_output(output):
    app = get_application(AppConfig(tick_interval=0, max_ticks=6))
    app.screen = TerminalScreen(stream=output)
    app.change_scene(HomeScene())
    app.run()

    frames = output.getvalue().split(CLEAR_SEQUENCE)[1:]
    assert len(frames) == 6
    assert frames[0] == "[Player] (5, 5)\n[Enemy] (11, 4)\n"
    assert frames[4] == "[Player] (5, 5)\n[Enemy] (15, 12)\n"
    assert frames[5] == "[Player] (15, 4)\n[Enemy2] (10, 4)\n"


def test_main_starts_home_and_stops_on_interrupt(monkeypatch):
    from tickengine.core.application import Application
    from tickgame.__main__ import main

    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(Application, "run", interrupted)
    main()

    app = get_application()
    assert isinstance(app.current_scene, HomeScene)
    assert not app.running
    assert app.config.title == "Tick Game"


def test_transitions_are_logged(app, caplog):
    from tickgame.__main__ import watch_transitions

    watch_transitions(app)
    with caplog.at_level(logging.INFO, logger="tickgame"):
        app.change_scene(HomeScene())
        for _ in range(15):
            app.tick()

    messages = [r.getMessage() for r in caplog.records if r.name == "tickgame"]
    assert messages == [
        "Entered HomeScene after 0 ticks",
        "Entered GameScene after 5 ticks",
        "Reset GameScene after 14 ticks",
    ]


def test_explicit_change_drops_queued_home_transition(app):
    home = HomeScene()
    app.change_scene(home)
    for _ in range(5):
        app.tick()
    assert isinstance(app.pending_scene, GameScene)

    app.change_scene(home)
    app.tick()
    assert app.current_scene is home
    assert enemy_position(app) == (11, 4)
