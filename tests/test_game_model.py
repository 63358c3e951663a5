import pytest

from godsfun.creature import Cell, Creature
from godsfun.game_field import GameFieldExcludedCells
from godsfun.game_field_area import GameFieldExcludedCellsAreaFactory
from godsfun.game_model import GameModel, is_alive_next


def make_area(width, height, excluded=()):
    field = GameFieldExcludedCells(width, height, Cell(Creature(0)), excluded)
    area = GameFieldExcludedCellsAreaFactory().create_area(
        field, (0, 0), (width - 1, height - 1)
    )
    return area


def put(area, x, y, creature_id):
    creature = area.get_cell(x, y).creature
    creature.id = creature_id
    creature.revive()


def alive_cells(area):
    return {
        (x, y): area.get_cell(x, y).creature.id
        for y in range(area.height())
        for x in range(area.width())
        if area.is_cell_available(x, y) and area.get_cell(x, y).creature.is_alive
    }


@pytest.mark.parametrize(
    "alive, count, expected",
    [
        (False, 3, True),
        (True, 3, True),
        (True, 4, True),
        (True, 2, False),
        (False, 2, False),
        (False, 4, False),
        (True, 0, False),
    ],
)
def test_is_alive_next(alive, count, expected):
    assert is_alive_next(alive, count) is expected


def test_empty_area_is_a_draw():
    area = make_area(4, 4)
    assert GameModel(area, 2).compute() == (False, -1)


def test_block_is_stable_and_single_owner_wins():
    area = make_area(4, 4)
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    for x, y in block:
        put(area, x, y, 1)
    model = GameModel(area, 1)
    assert model.compute() == (False, 1)
    assert alive_cells(area) == {pos: 1 for pos in block}
    model.compute()
    assert alive_cells(area) == {pos: 1 for pos in block}


def test_two_owners_keep_the_game_going():
    area = make_area(8, 4)
    for x, y in [(1, 1), (2, 1), (1, 2), (2, 2)]:
        put(area, x, y, 1)
    for x, y in [(5, 1), (6, 1), (5, 2), (6, 2)]:
        put(area, x, y, 2)
    assert GameModel(area, 2).compute() == (True, 0)


def test_birth_takes_majority_owner():
    area = make_area(3, 3)
    put(area, 0, 0, 1)
    put(area, 1, 0, 1)
    put(area, 0, 1, 2)
    result = GameModel(area, 2).compute()
    assert alive_cells(area) == {(1, 1): 1}
    assert result == (False, 1)


def test_dead_cells_are_reset():
    area = make_area(3, 3)
    put(area, 0, 0, 2)
    GameModel(area, 1).compute()
    creature = area.get_cell(0, 0).creature
    assert creature.is_alive is False
    assert creature.id == 0


def test_locked_area_is_not_computed():
    area = make_area(4, 4)
    for x, y in [(1, 1), (2, 1), (1, 2), (2, 2)]:
        put(area, x, y, 1)
    area.lock()
    assert GameModel(area, 1).compute() == (False, -1)
    area.unlock()
    assert set(alive_cells(area)) == {(1, 1), (2, 1), (1, 2), (2, 2)}


def test_excluded_cells_are_skipped():
    area = make_area(3, 3, excluded=[(1, 1)])
    put(area, 0, 0, 1)
    put(area, 1, 0, 1)
    put(area, 0, 1, 1)
    GameModel(area, 1).compute()
    assert (1, 1) not in alive_cells(area)
    assert area.field.is_excluded_cell(1, 1)