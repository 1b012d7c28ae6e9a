"""Donations bounded context: listings, food requests and bulk orders.

Donors list surplus food, recipients request or bulk-order it, and every
successful request or order notifies the donor by email after the write
has been committed.
"""

from protean.domain import Domain

from donations.utils.logging import configure_logging, get_environment, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="foodshare")

logger = get_logger(__name__)

# Domain Composition Root
donations = Domain(name="donations")

logger.debug("Domain created", domain=donations.name, environment=get_environment())
