from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    tile_size: int
    surface_size: int
