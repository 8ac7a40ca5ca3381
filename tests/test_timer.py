"""
Unit tests for the GameClock.
"""


class TestGameClock:
    """Tests for the GameClock class."""

    def test_default_interval(self, qapp):
        """Clock should tick once per second by default."""
        from engine.timer import GameClock

        clock = GameClock()

        assert clock.interval_ms == 1000
        assert not clock.is_running

    def test_custom_interval(self, qapp):
        """Clock should accept a custom interval."""
        from engine.timer import GameClock

        clock = GameClock(interval_ms=250)

        assert clock.interval_ms == 250

    def test_start_sets_running(self, qapp):
        """Starting the clock should set is_running."""
        from engine.timer import GameClock

        clock = GameClock()
        clock.start()

        assert clock.is_running
        clock.stop()

    def test_stop_clears_running(self, qapp):
        """Stopping the clock should clear is_running."""
        from engine.timer import GameClock

        clock = GameClock()
        clock.start()
        clock.stop()

        assert not clock.is_running

    def test_restart_keeps_running(self, qapp):
        """Restarting works whether or not the clock was running."""
        from engine.timer import GameClock

        clock = GameClock()
        clock.restart()
        assert clock.is_running

        clock.restart()
        assert clock.is_running
        clock.stop()

    def test_timeout_emits_tick(self, qapp):
        """Each timeout should emit tick."""
        from engine.timer import GameClock

        clock = GameClock()
        ticks = []
        clock.tick.connect(lambda: ticks.append(1))

        clock._on_timeout()
        clock._on_timeout()

        assert len(ticks) == 2

    def test_clock_drives_engine(self, qapp):
        """Connected to an engine, ticks advance the countdown."""
        from engine.timer import GameClock
        from engine.game import GameEngine, GameState

        clock = GameClock()
        engine = GameEngine()
        clock.tick.connect(engine.tick)

        engine.start_game()
        for _ in range(3):
            clock._on_timeout()

        assert engine.state == GameState.PLAYING
