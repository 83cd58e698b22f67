import pytest

from classicds.inventory import Cap, Capboard, Shirt, Stock


def test_in_storage_adds():
    s = Shirt("Nanchang", 235, 150, "cotton")
    before = s.count
    s.in_storage(10)
    assert s.count == before + 10


def test_out_storage_removes():
    s = Shirt("Nanchang", 235, 150, "cotton")
    before = s.count
    s.out_storage(20)
    assert s.count == before - 20


def test_out_storage_everything_is_allowed():
    c = Cap("Chengdu", 88, 150, "nylon", "flat")
    c.out_storage(150)
    assert c.count == 0


def test_insufficient_stock_empties_and_raises():
    board = Capboard("Kunming", 3500, 10, "pine", "natural")
    with pytest.raises(ValueError):
        board.out_storage(11)
    assert board.count == 0
    assert board.total_value() == 0


def test_total_value_of_single_item_is_unit_price():
    s = Stock("anywhere", 88, 1)
    assert s.total_value() == 88


def test_total_value_scales_with_count():
    s = Stock("anywhere", 88, 3)
    value = s.total_value()
    s.in_storage(s.count)
    assert s.total_value() == 2 * value


def test_subclass_fields():
    cap = Cap("Chengdu", 88, 150, "nylon", "flat")
    board = Capboard("Kunming", 3500, 10, "pine", "natural")
    shirt = Shirt("Nanchang", 235, 150, "cotton")
    assert (cap.material, cap.shape) == ("nylon", "flat")
    assert (board.material, board.color) == ("pine", "natural")
    assert shirt.material == "cotton"
    assert isinstance(board, Stock) and board.area == "Kunming"