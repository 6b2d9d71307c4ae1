"""SQLAlchemy models for LightBnB.

All models are imported here so that ``Base.metadata`` knows every table
before ``Store.create_all`` runs. If you add a new model, import it in this file.
"""

from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.models.user import User

__all__ = [
    "Property",
    "PropertyReview",
    "Reservation",
    "User",
]
