import attrs


@attrs.define(frozen=True)
class ReservationResult:
    """
    Outcome of a reservation attempt.

    ``reserved`` below ``requested`` is a partial fulfillment, not an error.
    """

    reserved: int
    requested: int

    @property
    def is_fulfilled(self) -> bool:
        return self.reserved >= self.requested
