import enum


class HeroRace(str, enum.Enum):
    elf = "elf"
    goblin = "goblin"
    human = "human"
    orc = "orc"


class EquipmentSlot(str, enum.Enum):
    """One equipped item per hero per slot."""
    helm = "helm"
    weapon = "weapon"
    shield = "shield"
    armor = "armor"
    gloves = "gloves"


class ItemType(str, enum.Enum):
    """
    Slot tags carried by an item.
    The five slot names plus two multi-slot tags:
    - two_handed_weapon: weapon or shield (only one of them at a time)
    - robe: armor or helm
    """
    helm = "helm"
    weapon = "weapon"
    shield = "shield"
    armor = "armor"
    gloves = "gloves"
    two_handed_weapon = "two_handed_weapon"
    robe = "robe"


def enum_values(enum_cls) -> list[str]:
    return [m.value for m in enum_cls]
