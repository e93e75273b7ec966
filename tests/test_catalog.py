import pytest

from bookshop import catalog
from bookshop.errors import SelectionError


@pytest.mark.parametrize("item_id, title, amount", [
    ("1", "The Art of Doing Science and Engineering", 2300),
    ("2", "The Making of Prince of Persia: Journals 1985-1993", 2500),
    ("3", "Working in Public: The Making and Maintenance of Open Source", 2800),
])
def test_lookup_known_items(item_id, title, amount):
    item = catalog.lookup(item_id)
    assert item.id == item_id
    assert item.title == title
    assert item.unit_amount == amount


@pytest.mark.parametrize("item_id", ["9", "0", "", None, " 1", "01", "one"])
def test_lookup_unknown_item(item_id):
    with pytest.raises(SelectionError, match="No item selected"):
        catalog.lookup(item_id)


def test_find_by_amount():
    assert catalog.find_by_amount(2800).id == "3"

    with pytest.raises(SelectionError):
        catalog.find_by_amount(1)


def test_all_items_are_fixed():
    assert [item.id for item in catalog.all_items()] == ["1", "2", "3"]
