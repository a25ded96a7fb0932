"""
Rental return settlement.

Settling a return closes the customer's open rental for a movie,
charges ``dailyRentalRate`` for every whole day the movie was out and
puts the copy back into stock.  The rental update and the stock
increment are two independent writes: if the increment fails the
rental stays closed and the stock count is one short.

The service works only through the ``RentalStore`` and
``InventoryStore`` it is given and keeps no state between calls.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId

from vidly_api.app.core.db import utcnow
from vidly_api.app.core.errors import AlreadyProcessedError, NotFoundError
from vidly_api.app.core.stores import InventoryStore, RentalStore

logger = logging.getLogger(__name__)


def number_of_days(date_returned: datetime, date_out: datetime) -> int:
    """Whole days elapsed between checkout and return.

    Partial days are dropped: a movie returned 7 days and 3 hours
    after checkout is charged for 7 days, one returned the same day
    for 0.  A return stamped before checkout also counts as
    0 days.
    """
    return max(0, int((date_returned - date_out).total_seconds() // 86400))


def compute_rental_fee(date_returned: datetime, date_out: datetime, daily_rental_rate: float) -> float:
    return number_of_days(date_returned, date_out) * daily_rental_rate


class ReturnService:
    """Settlement of returned rentals."""

    @classmethod
    async def settle_return(
        cls,
        rentals: RentalStore,
        inventory: InventoryStore,
        customer_id: ObjectId,
        movie_id: ObjectId,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Close the rental of ``movie_id`` by ``customer_id``.

        Parameters
        ----------
        rentals : RentalStore
            Lookup and persistence of rentals.
        inventory : InventoryStore
            Stock counters of movies.
        customer_id, movie_id : ObjectId
            Business key of the rental.
        now : Optional[datetime]
            Return timestamp (naive UTC).  Defaults to the current time.

        Returns
        -------
        dict
            The updated rental document.

        Raises
        ------
        NotFoundError
            No rental exists for the customer/movie pair.
        AlreadyProcessedError
            The rental was already returned.
        """
        rental = rentals.find_rental(customer_id, movie_id)
        if rental is None:
            raise NotFoundError("Rental not found.")
        if rental.get("dateReturned") is not None:
            raise AlreadyProcessedError("Return already processed.")

        rental = dict(rental)
        rental["dateReturned"] = now or utcnow()
        rental["rentalFee"] = compute_rental_fee(
            rental["dateReturned"], rental["dateOut"], rental["movie"]["dailyRentalRate"]
        )
        rentals.save_rental(rental)
        inventory.increment_stock(movie_id, 1)

        logger.info(
            "Rental %s returned after %s day(s), fee %s",
            rental["_id"],
            number_of_days(rental["dateReturned"], rental["dateOut"]),
            rental["rentalFee"],
        )
        return rental
