# testlab/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # Catalogue-level errors (InvalidInputError, SelfCheckError, ...)

from .base import TestlabError, InvalidInputError, SelfCheckError, UnknownLocaleError

__all__ = [
    "TestlabError",
    "InvalidInputError",
    "SelfCheckError",
    "UnknownLocaleError",
]
