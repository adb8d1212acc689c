import pytest

from gridsnake.state import Cell, Direction, Snake


def test_initial_snake_lies_on_row_zero_head_first():
    s = Snake.initial(5)
    assert s.cells == ((4, 0), (3, 0), (2, 0), (1, 0), (0, 0))
    assert s.head() == Cell(4, 0)


def test_push_and_pop():
    s = Snake([(1, 0), (0, 0)])
    s.push_head((2, 0))
    assert len(s) == 3
    assert s.head() == (2, 0)
    assert s.pop_tail() == (0, 0)
    assert s.cells == ((2, 0), (1, 0))


def test_pop_last_cell_is_an_engine_bug():
    s = Snake([(0, 0)])
    with pytest.raises(AssertionError):
        s.pop_tail()


def test_empty_snake_is_rejected():
    with pytest.raises(AssertionError):
        Snake([])


def test_occupies_can_skip_head():
    s = Snake([(2, 0), (1, 0), (0, 0)])
    assert s.occupies((2, 0))
    assert not s.occupies((2, 0), include_head=False)
    assert s.occupies((0, 0), include_head=False)
    assert not s.occupies((5, 5))


@pytest.mark.parametrize(
    "a, b",
    [(Direction.UP, Direction.DOWN), (Direction.LEFT, Direction.RIGHT)],
)
def test_opposites(a, b):
    assert a.opposite is b
    assert b.opposite is a
    assert a.is_opposite(b)
    assert not a.is_opposite(a)


def test_perpendicular_is_not_opposite():
    assert not Direction.UP.is_opposite(Direction.LEFT)
    assert not Direction.RIGHT.is_opposite(Direction.DOWN)
