# cubcaster

A small raycasting engine that turns a `.cub` scene file into a
first-person walk through a tile maze. Walls are textured, and the
ceiling and floor are flat colours.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cubcaster maps/level.cub
```

Exactly one argument must be given, and its name must contain `.cub`.
If the arguments, the scene file or a texture are wrong, a message
starting with `Error` goes to standard error and the program exits with
status 1.

## Controls

| Key           | Action              |
|---------------|---------------------|
| W / S         | move forward / back |
| A / D         | strafe left / right |
| Left / Right  | turn                |
| Mouse motion  | turn                |
| Esc           | quit                |

Closing the window also quits. A move that would end inside a wall or
outside the map is not made.

## Scene files

A scene file has six element lines, in any order and with blank lines
allowed between them. The map comes after them:

```
NO ./src/texture/texture_img/blue.xpm
SO ./src/texture/texture_img/redBrick.xpm
WE ./src/texture/texture_img/eagle.xpm
EA ./src/texture/texture_img/khilota.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` name the wall texture for each side. The
  path must be one of `./src/texture/texture_img/blue.xpm`,
  `redBrick.xpm`, `eagle.xpm` or `khilota.xpm` in that directory, and
  the file must exist. Each side may be given only once.
- `F` and `C` set the floor and ceiling colours. Each takes three
  comma-separated values from 0 to 255.
- The map starts at the first line that holds nothing but `1`, spaces
  and tabs. In the map, `1` is a wall, `0` is open floor and a space is
  void. Exactly one of `N`, `S`, `E` or `W` marks where the player
  starts and which way they face. Every open cell must have a wall or
  floor on all four sides, and the last line may hold only walls and
  void.

Texture paths are resolved against the directory the game is started
in.

## Using the library

You can use the parts of the game without opening a window:

```python
from cubcaster.scene import load_scene
from cubcaster.player import Player
from cubcaster.raycast import cast_ray

scene = load_scene("maps/level.cub")
player = Player(scene.start, scene.direction)
hit = cast_ray(player.position, player.direction, scene.grid)
print(hit.distance, hit.vertical)
```

To draw a view into memory instead of onto the screen:

```python
from cubcaster.render import Frame, Texture, TextureSet, project_3d

textures = TextureSet(
    north=Texture.load(scene.north),
    south=Texture.load(scene.south),
    west=Texture.load(scene.west),
    east=Texture.load(scene.east),
)
frame = Frame()
project_3d(frame, player, scene, textures)
# frame.pixels holds 720 x 720 row-major 0xRRGGBB values
```

The modules:

- `cubcaster.geometry`: the `Point` type and the angle, distance and
  projection helpers.
- `cubcaster.raycast`: `cast_ray` and `RayHit`.
- `cubcaster.player`: `Player`, `Buttons` and the `Key` codes.
- `cubcaster.scene`: `load_scene`, `parse_scene`, `Scene` and
  `SceneError`.
- `cubcaster.render`: textures, the frame buffer and `project_3d`.
- `cubcaster.app`: `Game`, which runs a scene in a pygame window, and
  `main`, which the `cubcaster` command runs.

## Limitations

- Walls can only use the four texture files listed above.
- There is no minimap, and there are no sprites, doors or sound.