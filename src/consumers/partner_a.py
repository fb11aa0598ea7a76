"""Partner A notification handler.

Partner A is notified by a simulated e-mail rendered as log lines.
"""

from __future__ import annotations

from core.logging_config import get_logger
from dispatch.commands import NotifyPartnerACommand

_LOGGER = get_logger(__name__)


class NotifyPartnerACommandHandler:
    """Simulate the partner A e-mail for a processed instrument."""

    def handle(self, command: NotifyPartnerACommand) -> None:
        """Emit the simulated e-mail."""
        _LOGGER.info(
            "partner_a_email_simulated",
            correlation_id=str(command.correlation_id),
            product_name_full=command.product_name_full,
            ibt_type_code=command.ibt_type_code,
            event_type=command.event_type,
            isin=command.isin,
        )
