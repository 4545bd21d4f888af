# recipe_keeper/services/ids.py
from typing import Callable
from uuid import uuid4

IdFactory = Callable[[], str]


def make_id() -> str:
    """Retorna um identificador único (uuid4) em formato texto."""
    return str(uuid4())
