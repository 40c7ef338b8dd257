"""Grid bags, coin purses, bank, loot pool, keyring, staging area, merchant and equipment for role-playing games."""

__version__ = "0.1.0"