"""World factory for creating open and randomized grid worlds."""

from typing import Optional, List
from ..domain.types import Position, TileStatus
from ..domain.world import GridWorld
from .rng import SeededRNG


def create_open_world(rows: int, cols: int, start: Position, target: Position) -> GridWorld:
    """
    Create a world with no impassable tiles.

    Args:
        rows: Number of rows (must be > 0)
        cols: Number of columns (must be > 0)
        start: Robot start position
        target: Target position

    Returns:
        New GridWorld with every tile CLEAN except the target

    Raises:
        ValueError: If dimensions are not positive or positions are out of bounds
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"World dimensions must be positive, got {rows}x{cols}")
    if not (0 <= target[0] < rows and 0 <= target[1] < cols):
        raise ValueError(f"Target position {target} is out of bounds")

    tiles = [[TileStatus.CLEAN] * cols for _ in range(rows)]
    tiles[target[0]][target[1]] = TileStatus.TARGET
    return GridWorld(tiles, Position(*start))


def generate_random_world(rows: int, cols: int, wall_density: float = 0.25,
                          seed: Optional[int] = None,
                          start: Optional[Position] = None,
                          target: Optional[Position] = None) -> GridWorld:
    """
    Create a world with randomly placed impassable tiles.

    The start and target tiles are never walled. The target is not
    guaranteed to be reachable.

    Args:
        rows: Number of rows
        cols: Number of columns
        wall_density: Fraction of the remaining tiles to wall (0.0 to 1.0)
        seed: Random seed for reproducibility
        start: Robot start (random if None)
        target: Target position (random if None)
    """
    if not (0.0 <= wall_density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {wall_density}")
    if rows * cols < 2:
        raise ValueError("World needs at least two tiles for a start and a target")

    rng = SeededRNG(seed)
    coords: List[Position] = [Position(r, c) for r in range(rows) for c in range(cols)]

    if start is None:
        start = rng.choice([p for p in coords if p != target])
    if target is None:
        target = rng.choice([p for p in coords if p != start])
    start, target = Position(*start), Position(*target)
    if start == target:
        raise ValueError("Start and target positions cannot be the same")

    world = create_open_world(rows, cols, start, target)

    free = [p for p in coords if p != start and p != target]
    num_walls = min(int(len(free) * wall_density), len(free))
    for position in rng.sample(free, num_walls):
        world.set_tile_status(position, TileStatus.IMPASSABLE)

    return world


def scatter_dirt(world: GridWorld, density: float, seed: Optional[int] = None) -> int:
    """Mark a fraction of the CLEAN tiles DIRTY. Returns the number changed."""
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    rng = SeededRNG(seed)
    clean = [
        Position(r, c)
        for r in range(world.rows)
        for c in range(world.cols)
        if world.tile_status(Position(r, c)) is TileStatus.CLEAN
    ]
    chosen = rng.sample(clean, int(len(clean) * density))
    for position in chosen:
        world.set_tile_status(position, TileStatus.DIRTY)
    return len(chosen)
