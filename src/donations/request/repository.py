from donations.browse.query import REQUEST_QUERY
from donations.domain import donations
from donations.request.food_request import FoodRequest
from donations.shared.store import DocumentStore


@donations.repository(part_of=FoodRequest)
class FoodRequestRepository(DocumentStore):
    def made_by(self, requester_email: str, raw_params=None):
        """Requests placed by one recipient, newest first."""
        return self.find(REQUEST_QUERY.build(raw_params, requester_email=requester_email))
