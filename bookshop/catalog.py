from typing import Optional

from bookshop.errors import SelectionError
from bookshop.models import CatalogItem

NO_ITEM_SELECTED = "No item selected"

ITEMS = {
    item.id: item
    for item in (
        CatalogItem(id="1", title="The Art of Doing Science and Engineering", unit_amount=2300),
        CatalogItem(id="2", title="The Making of Prince of Persia: Journals 1985-1993", unit_amount=2500),
        CatalogItem(id="3", title="Working in Public: The Making and Maintenance of Open Source", unit_amount=2800),
    )
}


def all_items() -> list[CatalogItem]:
    return list(ITEMS.values())


def lookup(item_id: Optional[str]) -> CatalogItem:
    item = ITEMS.get(item_id) if item_id else None
    if item is None:
        raise SelectionError(NO_ITEM_SELECTED)
    return item


def find_by_amount(amount: int) -> CatalogItem:
    """Return the catalog item priced at `amount` minor units.

    Lets a client that only posts an amount pay for a real catalog item,
    never for an arbitrary figure.
    """
    for item in ITEMS.values():
        if item.unit_amount == amount:
            return item
    raise SelectionError(NO_ITEM_SELECTED)
