from .enums import EquipmentSlot, HeroRace, ItemType
from .hero import Hero
from .item import Item

# Equipment & inventory
from .hero_inventory import HeroInventory
from .hero_equipment import HeroEquipment
