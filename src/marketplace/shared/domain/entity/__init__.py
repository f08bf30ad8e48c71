from .aggregate import AggregateRoot, utc_now
from .entity import Entity

__all__ = ["AggregateRoot", "Entity", "utc_now"]
