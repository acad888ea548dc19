"""A text-mode survival journey game with loot, crafting, clothing upgrades and river crossings."""

__version__ = "0.1.0"