from .lens import PERSON_AGE, PERSON_NAME, Lens, lens
from .property import ALICE, Person, get_property, pick

__all__ = (
    # Records
    "ALICE",
    "Person",
    # Accessors
    "get_property",
    "pick",
    # Lenses
    "Lens",
    "lens",
    "PERSON_AGE",
    "PERSON_NAME",
)
