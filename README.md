# solong

The rules of a small puzzle game played on a rectangular tile map. The
player (`P`) walks around, picks up every collectable (`C`) and then
reaches the exit (`E`). Walls are `1`, open floor is `0`.

## Installing

    pip install .

## Map files

Maps are plain text files whose names end in `.ber`, one row per line:

    111111
    1P0C01
    1000E1
    111111

`solong.maps.load_map` accepts a map only when:

- the file name ends in `.ber` and the file can be read and is not empty;
- every row has the same width;
- the first and last rows are walls, and every row starts and ends with a
  wall;
- it contains only the characters `0`, `1`, `C`, `E` and `P`;
- the map is at least 3 rows high and 6 columns wide;
- there is at least one collectable, exactly one exit and exactly one
  player;
- the player, every collectable and the exit can all be reached from the
  player's start without crossing a wall.

Anything else raises `solong.maps.MapError` with a short reason, such as
`Wrong map size`, `Wrong exit number` or `Invalid map construction`.

## Command line

Check a map:

    solong maps/level1.ber

The command takes exactly one argument. With any other number of
arguments it prints `Error number of arguments` and exits with status 2.
A rejected map is reported as `ERROR: <reason>` with exit status 1; an
accepted map gives exit status 0 and no output.

## Library use

    from solong.maps import load_map, MapError
    from solong.moves import Game, Direction, Key

    try:
        game_map = load_map("maps/level1.ber")
    except MapError as exc:
        print(exc)
    else:
        game = Game(game_map)
        game.step(Direction.RIGHT)   # prints "Moves: 1" if the way is open
        game.handle_key(Key.ESCAPE)  # ends the game

`solong.maps` holds `check_extension`, `read_rows`, `check_wall_row`,
`load_map`, `MapError` and the `GameMap` class, a frozen grid of rows with
`height`, `width`, `players`, `collectibles` and `exits`, and the methods
`player_position`, `flood_fill`, `check_reachable` and `validate`.

`solong.moves` holds the play rules. A `Game` keeps its own copy of the
grid, the player's `position`, and counts of `collected` items and
`moves`. `step(direction)` moves one tile unless a wall or the map edge is
in the way, prints `Moves: N` for every move, turns a collected `C` into
floor, and sets `won` and closes the game when the player reaches the exit
with every collectable picked up. `handle_key(key)` maps the arrow keys of
`Key` to steps and `Key.ESCAPE` to `close()`. Once closed, a game ignores
further steps.

The package also carries small helpers:

- `solong.printf`: `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`;
- `solong.chars`: ASCII classification (`is_alpha`, `is_digit`, ...),
  `to_lower`, `to_upper`, `atoi` and `itoa`;
- `solong.strings`: `split`, `strchr`, `strrchr`, `strjoin`, `strmapi`,
  `striteri`, `strncmp`, `strnstr`, `strtrim` and `substr`;
- `solong.memory`: `bytearray` helpers `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset`, `bzero`, `calloc`, `strlcpy` and `strlcat`;
- `solong.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`, writing to a text stream.

## What it does not do

There is no window, graphics or keyboard input. The `solong` command only
checks a map; playing means driving a `Game` from your own code, calling
`step` or `handle_key` for each move.

## Running the tests

    pip install .[test]
    pytest