"""Equipment service exceptions."""


class EquipmentError(Exception):
    """Base class for equipment failures. State is never modified when raised."""


class IncompatibleSlotError(EquipmentError):
    """Raised when an item's types do not allow the requested slot."""

    def __init__(self, item_id, slot):
        self.item_id = item_id
        self.slot = slot
        super().__init__(f"Item {item_id} cannot be equipped in slot '{getattr(slot, 'value', slot)}'")


class ItemNotFoundError(EquipmentError):
    """Raised when the catalog has no item with the given id."""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found in catalog")


class HeroNotFoundError(EquipmentError):
    """Raised when the store has no hero with the given id."""

    def __init__(self, hero_id):
        self.hero_id = hero_id
        super().__init__(f"Hero {hero_id} not found")


class ItemNotOwnedError(EquipmentError):
    """Raised when ownership is required and the hero has none of the item."""

    def __init__(self, hero_id, item_id):
        self.hero_id = hero_id
        self.item_id = item_id
        super().__init__(f"Hero {hero_id} does not own item {item_id}")


class ConcurrentModificationError(EquipmentError):
    """Raised when a hero's equipment kept changing underneath us. Safe to retry."""

    def __init__(self, hero_id, attempts: int):
        self.hero_id = hero_id
        self.attempts = attempts
        super().__init__(f"Equipment of hero {hero_id} changed concurrently ({attempts} attempts)")


class StoreUnavailableError(EquipmentError):
    """Raised when the database cannot be reached or fails mid-transaction."""
