# snake_logic.py
import math
import random

from snake_config import DEFAULT_CONFIG

# --- Direcciones ---
# En unidades de celda. El eje Y crece hacia arriba, igual que en arcade.
DIRECTION_MAP = {
    'left':  {'dx': -1, 'dy': 0},
    'right': {'dx': 1, 'dy': 0},
    'down':  {'dx': 0, 'dy': -1},
    'up':    {'dx': 0, 'dy': 1},
}

# Orden en el que se evalúan las teclas mantenidas. La última pulsada en este
# orden gana, así que 'up' tiene prioridad sobre todas las demás.
DIRECTION_ORDER = ('left', 'right', 'down', 'up')


class SnakeLogic:
    """
    Estado y reglas del juego, sin nada de arcade para poder probarlo sin ventana.

    El cuerpo es una lista de {'x': x, 'y': y} ordenada de la cola a la cabeza,
    así que la cabeza siempre es el último elemento. Todas las coordenadas son
    la esquina inferior izquierda de su celda, en píxeles.
    """

    def __init__(self, config=DEFAULT_CONFIG, rng=None):
        self.config = config
        self.width = config.window_width
        self.height = config.window_height
        self.step_size = config.cell_size
        # Se puede inyectar un random.Random con semilla para tener partidas reproducibles
        self.rng = rng if rng is not None else random.Random()

        self.snake_x = 0
        self.snake_y = 0
        self.snake_dx_step = 0
        self.snake_dy_step = 0
        self.snake_body = []
        self.food_x = 0
        self.food_y = 0

        self.setup()

    def setup(self):
        # La serpiente empieza quieta en el centro, con un único segmento
        self.snake_x, self.snake_y = self.config.center
        self.snake_dx_step = 0
        self.snake_dy_step = 0
        self.snake_body = [{'x': self.snake_x, 'y': self.snake_y}]
        self._place_food()

    def reset(self):
        self.setup()

    def _random_cell(self):
        x = self.rng.randrange(self.config.horizontal_cells) * self.step_size
        y = self.rng.randrange(self.config.vertical_cells) * self.step_size
        return x, y

    def _place_food(self):
        # No se comprueba si cae encima de la serpiente: puede aparecer bajo el cuerpo
        self.food_x, self.food_y = self._random_cell()

    def _snap_to_grid(self, value):
        """Redondea una coordenada a la celda más cercana (los empates se alejan del cero)."""
        cells = math.floor(abs(value) / self.step_size + 0.5)
        return int(math.copysign(cells, value)) * self.step_size

    def _wrap(self, x, y):
        # Salir por un borde es entrar por el opuesto (toroide en ambos ejes)
        if x > self.width - self.step_size:
            x = 0
        if x < 0:
            x = self.width - self.step_size
        if y > self.height - self.step_size:
            y = 0
        if y < 0:
            y = self.height - self.step_size
        return x, y

    @property
    def head(self):
        return {'x': self.snake_x, 'y': self.snake_y}

    def steer(self, held_directions):
        """
        Actualiza la velocidad según las direcciones mantenidas ('left', 'right',
        'down', 'up'). Si no hay ninguna se conserva la velocidad actual.
        """
        for direction in DIRECTION_ORDER:
            if direction in held_directions:
                move = DIRECTION_MAP[direction]
                self.snake_dx_step = move['dx'] * self.step_size
                self.snake_dy_step = move['dy'] * self.step_size

    def step(self):
        """
        Avanza un frame de simulación. Devuelve un dict con lo que ha pasado:
        {'collided': bool, 'ate_food': bool}.
        """
        info = {'collided': False, 'ate_food': False}

        # 1. Mover la cabeza y mantenerla en la cuadrícula
        new_x = self._snap_to_grid(self.snake_x + self.snake_dx_step)
        new_y = self._snap_to_grid(self.snake_y + self.snake_dy_step)
        self.snake_x, self.snake_y = self._wrap(new_x, new_y)

        # 2. Cada segmento ocupa el sitio del siguiente; la cabeza va al final
        self.snake_body.append(self.head)
        self.snake_body.pop(0)

        # 3. Comprobar colisión consigo misma (todo menos la cabeza)
        head = self.head
        for segment in self.snake_body[:-1]:
            if segment == head:
                info['collided'] = True
                break

        if info['collided']:
            # Penalización: la serpiente vuelve a medir un segmento, sin reiniciar nada más
            self.snake_body = [head]

        # 4. Comer. El segmento nuevo se coloca en la posición de la nueva comida
        if head['x'] == self.food_x and head['y'] == self.food_y:
            info['ate_food'] = True
            self._place_food()
            self.snake_body.append({'x': self.food_x, 'y': self.food_y})

        return info
