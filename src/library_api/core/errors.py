"""Errors raised by the record layer."""


class NotFoundError(LookupError):
    """No record of the given kind exists for the identifier."""

    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")
