import enum


class PutResult(enum.Enum):
    """Outcome of MovieStore.put_if_absent. Returned, never raised."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"
