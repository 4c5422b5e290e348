# pokewalk

A small tile-based puzzle game. You walk a creature around a walled map,
collect every ball on it, and then reach the exit. Each step is counted,
shown in the window and printed on the terminal as `Steps: N`.

## Installing

    pip install .

## Playing

    pokewalk maps/map.ber

The game takes exactly one argument: the path of a map file. The first
dot in the path must begin `.ber`, so give a path such as `maps/map.ber`
rather than `./maps/map.ber`. With the wrong number of arguments the
command prints `Error` and `Invalid arguments.`; with a map that cannot
be read or is not valid it prints `Error` and `Invalid map`.

### Controls

| Key                 | Action     |
|---------------------|------------|
| Up, `w`, `q`        | move up    |
| Down, `s`, `z`      | move down  |
| Left, `a`           | move left  |
| Right, `d`          | move right |
| Escape / close box  | quit       |

Walls block a step. You may walk over the exit while balls remain; once
every collectible has been picked up, stepping onto the exit wins and
closes the window.

### Images

Tiles are drawn from image files looked up relative to the current
directory, under `textures/` (for example `textures/grass2.xpm` and
`textures/tree_wall_ground.xpm`). The package ships no images: any file
that is missing or cannot be loaded is drawn as a flat coloured square,
so the game stays playable without them.

## Map format

A map is a text file of equal-length lines made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | open ground  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if it is rectangular, fully enclosed by walls,
holds exactly one `P`, exactly one `E` and at least one `C`, and every
`C` and the `E` can be reached from the player's position. The row width
is taken from the first line, which must end with a newline; a blank
trailing line counts as a row and makes the map invalid.

Example:

    1111111
    1P0C0E1
    1111111

## Using the code directly

    from pokewalk.gamemap import load_map, MapError

    try:
        game_map = load_map("maps/map.ber")
    except MapError as exc:
        print("Invalid map:", exc)
    else:
        print(game_map)

- `pokewalk.gamemap` — `load_map`, `parse_map`, the `GameMap` dataclass
  (`grid`, `player`, `exit`, `collectibles`, `find`, `count`) and the
  individual checks `has_ber_extension`, `is_rectangular`,
  `has_valid_chars`, `is_walled`, `has_valid_objects` and `flood_fill`.
  Positions are `(row, column)` pairs.
- `pokewalk.game` — `Game` holds the play state (`player`, `moves`,
  `collectibles`, `running`, `won`) and is driven without a window through
  `Game.move(Direction.UP)` or `Game.handle_key("w")`; `Game.draw_list()`
  gives the images to draw as `(path, x, y)` tuples.
- `pokewalk.app` — `run(game)` opens the pygame window and plays until the
  game ends, returning `True` on a win; `main(argv)` is the command.
- `pokewalk.linereader` — `LineReader`, which reads a text stream one line
  at a time in fixed-size chunks, and `read_lines(path)`.
- `pokewalk.printer` — `format` and `printf` for `%c %s %d %i %u %x %X %p %%`,
  plus `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `pokewalk.chars`, `pokewalk.textops`, `pokewalk.memory` — character,
  string and byte-buffer helpers with C-style semantics.

## Tests

    pip install ".[test]"
    pytest