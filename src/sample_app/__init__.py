"""Sample App - user accounts, follow relationships and micropost feeds."""

__version__ = "0.1.0"
