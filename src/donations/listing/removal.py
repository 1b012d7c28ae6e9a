"""Listing removal: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.listing.listing import Listing

logger = structlog.get_logger(__name__)


@donations.command(part_of="Listing")
class DeleteListing:
    listing_id = Identifier(required=True)


@donations.command_handler(part_of=Listing)
class DeleteListingHandler:
    @handle(DeleteListing)
    def delete_listing(self, command):
        """Delete unconditionally. A missing listing deletes nothing and is not an error."""
        deleted = current_domain.repository_for(Listing).delete(command.listing_id)
        logger.info("Listing deleted", listing_id=str(command.listing_id), deleted=deleted)
        return deleted
