import pytest

from solong.maps import (
    GameMap,
    MapError,
    check_extension,
    check_wall_row,
    load_map,
    read_rows,
)

GOOD = ["111111", "1PC0E1", "111111"]


def write(tmp_path, lines, name="map.ber", newline=True):
    path = tmp_path / name
    text = "\n".join(lines) + ("\n" if newline else "")
    path.write_text(text, encoding="utf-8")
    return path


def test_check_extension_accepts_ber():
    assert check_extension("maps/level.ber") == "maps/level.ber"


@pytest.mark.parametrize("name", ["abc", "x.txt", "map.bex", "mapber"])
def test_check_extension_rejects(name):
    with pytest.raises(MapError):
        check_extension(name)


def test_read_rows_round_trip(tmp_path):
    assert read_rows(write(tmp_path, GOOD)) == GOOD


def test_read_rows_without_final_newline(tmp_path):
    assert read_rows(write(tmp_path, GOOD, newline=False)) == GOOD


def test_read_rows_unequal_rows(tmp_path):
    with pytest.raises(MapError):
        read_rows(write(tmp_path, ["111111", "1PCE1", "111111"]))


def test_read_rows_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MapError, match="Invalid map"):
        read_rows(path)


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_rows(tmp_path / "absent.ber")


@pytest.mark.parametrize("row", ["110111", "1a1111", "0111"])
def test_check_wall_row_rejects(row):
    with pytest.raises(MapError, match="Incorrect characters"):
        check_wall_row(row)


def test_load_map_good(tmp_path):
    game_map = load_map(write(tmp_path, GOOD))
    assert game_map.rows == tuple(GOOD)
    assert game_map.height == len(GOOD)
    assert game_map.width == len(GOOD[0])
    assert game_map.collectibles == 1
    assert game_map.exits == 1
    assert game_map.rows[game_map.player_position()[0]][
        game_map.player_position()[1]
    ] == "P"


def test_load_map_checks_extension(tmp_path):
    with pytest.raises(MapError, match="file format"):
        load_map(write(tmp_path, GOOD, name="map.txt"))


@pytest.mark.parametrize(
    "rows, message",
    [
        (["111111", "1P00E1", "111111"], "Wrong collectable number"),
        (["111111", "1PCEE1", "111111"], "Wrong exit number"),
        (["111111", "1PCPE1", "111111"], "wrong players number"),
        (["11111", "1PCE1", "11111"], "Wrong map size"),
        (["111111", "1PCXE1", "111111"], "Invalid characters"),
        (["111111", "0PC0E1", "111111"], "Incorrect characters"),
        (["111111", "1PC0E0", "111111"], "Incorrect characters"),
        (["111011", "1PC0E1", "111111"], "Incorrect characters"),
        (["1111111", "1P0E1C1", "1111111"], "Invalid map construction"),
    ],
)
def test_validate_errors(rows, message):
    with pytest.raises(MapError, match=message):
        GameMap(rows).validate()


def test_validate_returns_self():
    game_map = GameMap(GOOD)
    assert game_map.validate() is game_map


def test_validate_empty():
    with pytest.raises(MapError):
        GameMap([]).validate()


def test_flood_fill_invariants():
    game_map = GameMap(["1111111", "1P0E1C1", "1111111"])
    start = game_map.player_position()
    reached = game_map.flood_fill(start)
    assert start in reached
    assert all(game_map.rows[r][c] != "1" for r, c in reached)
    exit_pos = (1, game_map.rows[1].index("E"))
    collect_pos = (1, game_map.rows[1].index("C"))
    assert exit_pos in reached
    assert collect_pos not in reached


def test_flood_fill_from_wall_is_empty():
    game_map = GameMap(GOOD)
    assert game_map.flood_fill((0, 0)) == frozenset()