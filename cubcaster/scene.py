"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from cubcaster.geometry import TILE_SIZE, Point
from cubcaster.textutil import atoi, find_within, split_lines, trim

TEXTURE_DIR = "./src/texture/texture_img/"
TEXTURE_FILES = frozenset(
    TEXTURE_DIR + name
    for name in ("blue.xpm", "redBrick.xpm", "eagle.xpm", "khilota.xpm")
)

_TEXTURE_KEYS = {"N": "NO ", "S": "SO ", "W": "WE ", "E": "EA "}
_PLAYER_DIRECTIONS = {"N": 270.0, "S": 90.0, "W": 180.0, "E": 0.0}
_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"
_MAP_EDGE_CHARS = "1 \t*"
_CONFIG_LINES_REQUIRED = 6
_OUTSIDE = "*"


class SceneError(ValueError):
    """Raised when a scene file or its arguments are invalid."""


@dataclass(frozen=True)
class Scene:
    """A parsed scene: padded map grid, colours, textures and start pose."""

    grid: tuple[str, ...]
    ceiling: tuple[int, int, int]
    floor: tuple[int, int, int]
    north: Path
    south: Path
    west: Path
    east: Path
    start: Point
    direction: float


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command-line arguments (without the program name).

    Exactly one argument naming a ``.cub`` file is accepted; it is returned.
    """
    if len(argv) != 1:
        raise SceneError("invalid argument")
    path = argv[0]
    if find_within(path, ".cub", len(path)) is None:
        raise SceneError("invalid argument")
    return path


def is_map_line(line: str) -> bool:
    """True when every character may appear on the border of a map."""
    return all(char in _MAP_EDGE_CHARS for char in line)


def _is_valid_field(field: str) -> bool:
    if any(char not in _SPACES and char not in _DIGITS for char in field):
        return False
    return atoi(field) <= 255


def parse_color(line: str) -> tuple[int, int, int]:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into its three components."""
    if not (
        line.count(",") == 2
        and line[:1] in ("F", "C")
        and line[1:2] in (" ", "\t")
    ):
        raise SceneError("misconfigured color")
    body = line[2:].lstrip(_SPACES)
    if any(
        char not in _SPACES and char not in _DIGITS and char != ","
        for char in body
    ):
        raise SceneError("misconfigured color")
    if body.endswith(","):
        raise SceneError("misconfigured color")
    fields = body.split(",")
    if not all(_is_valid_field(field) for field in fields):
        raise SceneError("misconfigured color")
    red, green, blue = (atoi(field) for field in fields)
    return red, green, blue


def _texture_path(line: str, key: str, root: Path) -> Path:
    if not (line.startswith(key) or line[2:3] == "\t"):
        raise SceneError("texture file error")
    start = find_within(line, TEXTURE_DIR, len(line))
    if start is None:
        raise SceneError("texture file error")
    name = line[start:]
    if name not in TEXTURE_FILES:
        raise SceneError("texture file error")
    path = root / name
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise SceneError("texture file error") from exc
    return path


def _is_closed(cells: list[list[str]], row: int, col: int) -> bool:
    for y, x in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            return False
        if cells[y][x] == _OUTSIDE:
            return False
    return True


def _build_map(rows: Sequence[str]) -> tuple[tuple[str, ...], Point, float]:
    lines = [trim(row, "\n") for row in rows]
    width = max((len(line) for line in lines), default=0)
    cells = [list(line.ljust(width, _OUTSIDE)) for line in lines]

    start: Point | None = None
    direction = 0.0
    for y, row in enumerate(cells):
        for x, char in enumerate(row):
            if char in " \t":
                row[x] = _OUTSIDE
            elif char in _PLAYER_DIRECTIONS:
                if start is not None:
                    raise SceneError("more than one player")
                direction = _PLAYER_DIRECTIONS[char]
                start = Point(
                    x * TILE_SIZE + TILE_SIZE // 2,
                    y * TILE_SIZE + TILE_SIZE // 2,
                )
                row[x] = "0"
            elif char not in "01" + _OUTSIDE:
                raise SceneError("invalid map")

    grid = tuple("".join(row) for row in cells)
    last = len(grid) - 1
    for y, row in enumerate(grid):
        if y == last and row and not is_map_line(row):
            raise SceneError("map error")
        for x, char in enumerate(row):
            if char == "0" and not _is_closed(cells, y, x):
                raise SceneError("map error")

    if start is None:
        raise SceneError("no player")
    return grid, start, direction


def parse_scene(text: str, root: str | Path = ".") -> Scene:
    """Parse the text of a scene; texture paths are resolved against root."""
    root = Path(root)
    lines = split_lines(text, "\n")
    textures: dict[str, Path] = {}
    colors: dict[str, tuple[int, int, int]] = {}
    empty = 0
    map_start = len(lines)

    for index, raw in enumerate(lines):
        line = trim(raw, "\t \n")
        if line and is_map_line(line):
            map_start = index
            break
        if not line:
            empty += 1
            continue
        kind = line[0]
        if kind in _TEXTURE_KEYS:
            path = _texture_path(line, _TEXTURE_KEYS[kind], root)
            if kind in textures:
                raise SceneError("duplicate symbol")
            textures[kind] = path
        elif kind in ("F", "C"):
            colors[kind] = parse_color(line)
        else:
            raise SceneError("map error: unexpected line")

    if map_start - empty < _CONFIG_LINES_REQUIRED:
        raise SceneError("missing data")
    if len(textures) < len(_TEXTURE_KEYS) or len(colors) < 2:
        raise SceneError("missing data")

    grid, start, direction = _build_map(lines[map_start:])
    return Scene(
        grid=grid,
        ceiling=colors["C"],
        floor=colors["F"],
        north=textures["N"],
        south=textures["S"],
        west=textures["W"],
        east=textures["E"],
        start=start,
        direction=direction,
    )


def load_scene(path: str | Path, root: str | Path = ".") -> Scene:
    """Read and parse a scene file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise SceneError("invalid argument") from exc
    return parse_scene(text, root)