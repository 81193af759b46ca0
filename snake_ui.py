# snake_ui.py
import os
import sys

import arcade

from snake_config import DEFAULT_CONFIG
from snake_logic import SnakeLogic

# --- Colores ---
BACKGROUND_COLOR = arcade.color.BLACK

# --- Teclas ---
KEY_TO_DIRECTION = {
    arcade.key.LEFT: 'left',
    arcade.key.RIGHT: 'right',
    arcade.key.DOWN: 'down',
    arcade.key.UP: 'up',
}

# --- Tiempo ---
# Margen para el error de coma flotante al acumular delta_time (6 * 1/60 < 0.1)
TIMER_TOLERANCE = 1e-9

CLOSE_MESSAGE = "Ventana cerrada por el usuario."


class StartupError(Exception):
    """No se pudo abrir la ventana o cargar un sprite. Es fatal."""


def load_sprite_texture(path):
    """Carga una imagen como textura de arcade, o lanza StartupError."""
    if not os.path.isfile(path):
        raise StartupError(f"No existe el fichero de sprite '{path}'")
    try:
        return arcade.load_texture(path)
    except Exception as e:
        raise StartupError(f"No se pudo cargar el sprite '{path}': {e}") from e


class SnakeGameUI(arcade.Window):
    def __init__(self, snake_logic_instance: SnakeLogic, config=DEFAULT_CONFIG):
        try:
            super().__init__(config.window_width, config.window_height,
                             config.window_title, update_rate=1/60, vsync=True)
        except Exception as e:
            raise StartupError(f"No se pudo crear la ventana: {e}") from e
        self.background_color = BACKGROUND_COLOR

        self.config = config
        self.game_logic = snake_logic_instance

        # Control de tiempo: un movimiento cada config.time_per_move segundos
        self.movement_timer = 0.0
        self.time_per_move = config.time_per_move

        # Teclas de dirección mantenidas en este momento
        self.held_directions = set()

        try:
            self.snake_texture = load_sprite_texture(config.snake_sprite_file)
            self.food_texture = load_sprite_texture(config.food_sprite_file)
        except StartupError:
            self.close()
            raise

        self.food_sprite = self._make_cell_sprite(self.food_texture)
        self.food_sprites = arcade.SpriteList()
        self.food_sprites.append(self.food_sprite)
        self.snake_sprites = arcade.SpriteList()

    def _make_cell_sprite(self, texture):
        # Escalar el sprite para que ocupe exactamente una celda
        sprite = arcade.Sprite(texture)
        sprite.width = self.config.cell_size
        sprite.height = self.config.cell_size
        return sprite

    def _place_in_cell(self, sprite, x, y):
        half = self.config.cell_size / 2
        sprite.center_x = x + half
        sprite.center_y = y + half

    def _sync_snake_sprites(self):
        """Ajusta la lista de sprites al largo actual del cuerpo y los coloca."""
        body = self.game_logic.snake_body
        while len(self.snake_sprites) < len(body):
            self.snake_sprites.append(self._make_cell_sprite(self.snake_texture))
        while len(self.snake_sprites) > len(body):
            self.snake_sprites.pop()
        for sprite, segment in zip(self.snake_sprites, body):
            self._place_in_cell(sprite, segment['x'], segment['y'])

    def on_draw(self):
        self.clear()
        self._place_in_cell(self.food_sprite,
                            self.game_logic.food_x, self.game_logic.food_y)
        self.food_sprites.draw()
        self._sync_snake_sprites()
        self.snake_sprites.draw()

    def on_update(self, delta_time: float):
        self.movement_timer += delta_time
        if self.movement_timer + TIMER_TOLERANCE < self.time_per_move:
            return
        # Se resta el tiempo de un movimiento para no perder el sobrante entre
        # frames; si un frame se retrasa más de un movimiento no se recupera
        self.movement_timer -= self.time_per_move
        if self.movement_timer + TIMER_TOLERANCE >= self.time_per_move:
            self.movement_timer = 0.0

        self.game_logic.steer(self.held_directions)
        info = self.game_logic.step()
        if info['collided']:
            print("La serpiente se ha mordido y vuelve a empezar desde la cabeza.")

    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            # close() no dispara on_close, así que se avisa aquí también
            print(CLOSE_MESSAGE)
            self.close()
            return
        direction = KEY_TO_DIRECTION.get(key)
        if direction is not None:
            self.held_directions.add(direction)

    def on_key_release(self, key, modifiers):
        self.held_directions.discard(KEY_TO_DIRECTION.get(key))

    def on_close(self):
        print(CLOSE_MESSAGE)
        super().on_close()


def run(config=DEFAULT_CONFIG):
    """Abre la ventana y bloquea hasta que se cierra."""
    game_logic = SnakeLogic(config)
    game_ui = SnakeGameUI(game_logic, config)
    print(f"Iniciando Snake: {config.horizontal_cells}x{config.vertical_cells} celdas "
          f"de {config.cell_size}px ({game_ui.width}x{game_ui.height}) a {config.fps} FPS")
    arcade.run()


def main():
    try:
        run()
    except StartupError as e:
        print(f"Error al iniciar el juego: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
