import pytest

from godsfun.creature import Cell, Creature
from godsfun.game_field import GameFieldExcludedCells
from godsfun.observer import GameEvent, Observer


class Recorder(Observer):
    def __init__(self):
        self.calls = []

    def update(self, subject, event):
        self.calls.append((subject, event))


@pytest.fixture
def field():
    return GameFieldExcludedCells(4, 3, Cell(Creature(0)), [(1, 1), (3, 0)])


def test_dimensions(field):
    assert field.width() == 4
    assert field.height() == 3


def test_cells_start_as_independent_copies(field):
    field.get_cell(0, 0).creature.revive()
    assert field.get_cell(0, 0).creature.is_alive is True
    assert field.get_cell(2, 0).creature.is_alive is False
    assert field.get_cell(0, 0) is not field.get_cell(2, 0)


def test_init_cell_is_not_shared():
    init = Cell(Creature(5))
    field = GameFieldExcludedCells(2, 2, init)
    init.creature.revive()
    assert field.get_cell(1, 1).creature.is_alive is False
    assert field.get_cell(1, 1).creature.id == 5


def test_set_cell_stores_copy(field):
    cell = Cell(Creature(9, "green"))
    field.set_cell(2, 1, cell)
    stored = field.get_cell(2, 1)
    assert stored == cell
    assert stored is not cell
    cell.creature.revive()
    assert stored.creature.is_alive is False


def test_set_cell_uses_x_as_column(field):
    field.set_cell(3, 2, Cell(Creature(6)))
    assert field.get_cell(3, 2).creature.id == 6
    assert field.get_cell(2, 3 - 1).creature.id == 0


def test_excluded_cells(field):
    assert field.is_excluded_cell(1, 1) is True
    assert field.is_excluded_cell(3, 0) is True
    assert field.is_excluded_cell(0, 0) is False


def test_get_excluded_cell_raises(field):
    with pytest.raises(ValueError):
        field.get_cell(1, 1)


def test_set_excluded_cell_raises(field):
    with pytest.raises(ValueError):
        field.set_cell(3, 0, Cell(Creature(1)))


@pytest.mark.parametrize("pos", [(4, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_raises(field, pos):
    with pytest.raises(IndexError):
        field.get_cell(*pos)


def test_set_cell_notifies_update(field):
    recorder = Recorder()
    field.attach(recorder, GameEvent.GAME_FIELD_UPDATE)
    field.set_cell(0, 2, Cell(Creature(2)))
    assert recorder.calls == [(field, GameEvent.GAME_FIELD_UPDATE)]


def test_failed_set_does_not_notify(field):
    recorder = Recorder()
    field.attach(recorder, GameEvent.GAME_FIELD_UPDATE)
    with pytest.raises(ValueError):
        field.set_cell(1, 1, Cell(Creature(2)))
    assert recorder.calls == []


def test_clear_empties_field(field):
    field.clear()
    assert field.height() == 0
    assert field.width() == 0
    with pytest.raises(IndexError):
        field.get_cell(0, 0)