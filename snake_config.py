# snake_config.py
import os
from dataclasses import dataclass

# --- Rutas de los Sprites ---
SPRITES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sprites")
SNAKE_SPRITE_FILE = os.path.join(SPRITES_DIR, "snake.png")
FOOD_SPRITE_FILE = os.path.join(SPRITES_DIR, "food.png")

# --- Constantes de la Cuadrícula ---
HORIZONTAL_CELLS = 30
VERTICAL_CELLS = 20
CELL_SIZE = 40  # Píxeles por celda, también es el tamaño del paso

# --- Constantes de la Pantalla ---
FPS = 10  # Movimientos de la serpiente por segundo
WINDOW_TITLE = "Snake"


@dataclass(frozen=True)
class GameConfig:
    """
    Configuración inmutable del juego. Se pasa a la lógica y a la ventana
    en lugar de leer las constantes globales, así los tests pueden usar
    cuadrículas más pequeñas.
    """
    horizontal_cells: int = HORIZONTAL_CELLS
    vertical_cells: int = VERTICAL_CELLS
    cell_size: int = CELL_SIZE
    fps: int = FPS
    window_title: str = WINDOW_TITLE
    snake_sprite_file: str = SNAKE_SPRITE_FILE
    food_sprite_file: str = FOOD_SPRITE_FILE

    def __post_init__(self):
        if self.horizontal_cells <= 0 or self.vertical_cells <= 0:
            raise ValueError(
                f"La cuadrícula debe tener al menos una celda: "
                f"{self.horizontal_cells}x{self.vertical_cells}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size debe ser positivo: {self.cell_size}")
        if self.fps <= 0:
            raise ValueError(f"fps debe ser positivo: {self.fps}")

    @property
    def window_width(self):
        return self.horizontal_cells * self.cell_size

    @property
    def window_height(self):
        return self.vertical_cells * self.cell_size

    @property
    def time_per_move(self):
        # Segundos entre movimientos (0.1 para 10 mov/seg)
        return 1.0 / self.fps

    @property
    def center(self):
        """Esquina inferior izquierda de la celda central, alineada a la cuadrícula."""
        return ((self.horizontal_cells // 2) * self.cell_size,
                (self.vertical_cells // 2) * self.cell_size)


DEFAULT_CONFIG = GameConfig()
