import os
import tempfile
import unittest
from types import SimpleNamespace
from unittest import mock

from snake_config import DEFAULT_CONFIG
from snake_logic import DIRECTION_ORDER

try:
    import snake_ui
except Exception:  # arcade necesita pyglet y, según el sistema, un display
    snake_ui = None


@unittest.skipIf(snake_ui is None, "arcade no se puede importar en este entorno")
class TestSpriteLoading(unittest.TestCase):
    def test_missing_sprite_is_a_startup_error(self):
        with self.assertRaises(snake_ui.StartupError):
            snake_ui.load_sprite_texture(os.path.join("no", "existe", "guy.png"))

    def test_corrupt_sprite_is_a_startup_error(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "roto.png")
            with open(path, "wb") as f:
                f.write(b"esto no es un png")
            with self.assertRaises(snake_ui.StartupError) as ctx:
                snake_ui.load_sprite_texture(path)
            self.assertIsNotNone(ctx.exception.__cause__)

    def test_shipped_sprites_load(self):
        for path in (DEFAULT_CONFIG.snake_sprite_file, DEFAULT_CONFIG.food_sprite_file):
            texture = snake_ui.load_sprite_texture(path)
            self.assertGreater(texture.width, 0)
            self.assertGreater(texture.height, 0)

    def test_arrow_keys_cover_every_direction(self):
        self.assertEqual(set(snake_ui.KEY_TO_DIRECTION.values()), set(DIRECTION_ORDER))


class RecordingLogic:
    """Lógica falsa que apunta en orden las llamadas que recibe la ventana."""

    def __init__(self, collide=False):
        self.calls = []
        self.collide = collide
        self.snake_body = [{'x': 0, 'y': 0}]

    def steer(self, held_directions):
        self.calls.append(('steer', frozenset(held_directions)))

    def step(self):
        self.calls.append(('step', None))
        return {'collided': self.collide, 'ate_food': False}

    @property
    def steps(self):
        return sum(1 for name, _ in self.calls if name == 'step')


def make_window(logic=None, fps=10):
    # Sustituto de SnakeGameUI con solo el estado que usan on_update y los eventos
    return SimpleNamespace(
        game_logic=logic if logic is not None else RecordingLogic(),
        movement_timer=0.0,
        time_per_move=1.0 / fps,
        held_directions=set(),
        close=mock.Mock(),
    )


@unittest.skipIf(snake_ui is None, "arcade no se puede importar en este entorno")
class TestGameLoop(unittest.TestCase):
    def tick(self, window, delta_time, times=1):
        for _ in range(times):
            snake_ui.SnakeGameUI.on_update(window, delta_time)

    def test_steady_ticks_give_fps_moves_per_second(self):
        window = make_window()
        window.held_directions.add('right')
        # 10 segundos a 60 actualizaciones por segundo
        self.tick(window, 1 / 60, times=600)
        self.assertEqual(window.game_logic.steps, 100)

    def test_pacing_at_other_rates(self):
        window = make_window(fps=4)
        self.tick(window, 1 / 60, times=300)
        self.assertEqual(window.game_logic.steps, 20)

    def test_no_move_before_time_per_move(self):
        window = make_window()
        self.tick(window, 1 / 60, times=5)
        self.assertEqual(window.game_logic.steps, 0)
        self.tick(window, 1 / 60)
        self.assertEqual(window.game_logic.steps, 1)

    def test_long_frame_gives_a_single_move(self):
        window = make_window()
        self.tick(window, 0.5)
        self.assertEqual(window.game_logic.steps, 1)
        # Sin frames de recuperación después del retraso
        self.tick(window, 1 / 60)
        self.assertEqual(window.game_logic.steps, 1)

    def test_steer_runs_before_step(self):
        window = make_window()
        window.held_directions.update({'up', 'left'})
        self.tick(window, 0.1)
        self.assertEqual(window.game_logic.calls,
                         [('steer', frozenset({'up', 'left'})), ('step', None)])

    def test_collision_is_reported(self):
        window = make_window(RecordingLogic(collide=True))
        with mock.patch('builtins.print') as fake_print:
            self.tick(window, 0.1)
        fake_print.assert_called_once()

    def test_quiet_frames_print_nothing(self):
        window = make_window()
        with mock.patch('builtins.print') as fake_print:
            self.tick(window, 1 / 60, times=60)
        fake_print.assert_not_called()


@unittest.skipIf(snake_ui is None, "arcade no se puede importar en este entorno")
class TestKeyboard(unittest.TestCase):
    def press(self, window, key):
        snake_ui.SnakeGameUI.on_key_press(window, key, 0)

    def release(self, window, key):
        snake_ui.SnakeGameUI.on_key_release(window, key, 0)

    def test_press_and_release_track_held_keys(self):
        window = make_window()
        self.press(window, snake_ui.arcade.key.LEFT)
        self.press(window, snake_ui.arcade.key.UP)
        self.assertEqual(window.held_directions, {'left', 'up'})
        self.release(window, snake_ui.arcade.key.LEFT)
        self.assertEqual(window.held_directions, {'up'})
        self.release(window, snake_ui.arcade.key.UP)
        self.assertEqual(window.held_directions, set())

    def test_other_keys_are_ignored(self):
        window = make_window()
        self.press(window, snake_ui.arcade.key.SPACE)
        self.release(window, snake_ui.arcade.key.SPACE)
        self.release(window, snake_ui.arcade.key.DOWN)
        self.assertEqual(window.held_directions, set())
        window.close.assert_not_called()

    def test_escape_closes_and_reports(self):
        window = make_window()
        with mock.patch('builtins.print') as fake_print:
            self.press(window, snake_ui.arcade.key.ESCAPE)
        window.close.assert_called_once_with()
        fake_print.assert_called_once_with(snake_ui.CLOSE_MESSAGE)
        self.assertEqual(window.held_directions, set())


if __name__ == '__main__':
    unittest.main()
