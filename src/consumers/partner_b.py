"""Partner B notification file emitter.

Instrument notification events with an ISIN are written as a small XML
document carrying the processing timestamp and the ISIN. Other events
are skipped without side effects.
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from core.constants import INSTRUMENT_NOTIFICATION_EVENT_TYPE, PARTNER_B_OUTPUT_FILE_NAME
from core.errors import IbtConsumerError
from core.logging_config import get_logger
from dispatch.commands import ProcessPartnerBDataCommand

_LOGGER = get_logger(__name__)


class ProcessPartnerBDataCommandHandler:
    """Write the partner B notification for instrument notification events."""

    def __init__(self, output_dir: Path) -> None:
        self._output_path = output_dir / PARTNER_B_OUTPUT_FILE_NAME

    @property
    def output_path(self) -> Path:
        """Return the notification file location."""
        return self._output_path

    def handle(self, command: ProcessPartnerBDataCommand) -> Path | None:
        """Emit the notification document when the command qualifies.

        Args:
            command: Partner B command.

        Returns:
            Written file path, or ``None`` when the command was skipped.

        Raises:
            IbtConsumerError: If the document cannot be written.
        """
        correlation_id = str(command.correlation_id)
        if command.event_type != INSTRUMENT_NOTIFICATION_EVENT_TYPE:
            _LOGGER.debug(
                "partner_b_skipped_event_type",
                correlation_id=correlation_id,
                event_type=command.event_type,
                required_event_type=INSTRUMENT_NOTIFICATION_EVENT_TYPE,
            )
            return None
        if not command.isin:
            _LOGGER.warning(
                "partner_b_skipped_missing_isin",
                correlation_id=correlation_id,
                reason="Skipping file creation - ISIN is missing",
            )
            return None
        document = build_notification_document(command)
        try:
            document.write(self._output_path, encoding="utf-8", xml_declaration=True)
        except OSError as error:
            _LOGGER.error(
                "partner_b_write_failed",
                correlation_id=correlation_id,
                output_path=str(self._output_path),
                error=str(error),
            )
            raise IbtConsumerError(
                f"Failed to write partner B notification to {self._output_path}: {error}. "
                "Check the output directory and retry."
            ) from error
        _LOGGER.info(
            "partner_b_file_created",
            correlation_id=correlation_id,
            output_path=str(self._output_path),
        )
        return self._output_path


def build_notification_document(command: ProcessPartnerBDataCommand) -> ElementTree.ElementTree:
    """Build the ``InstrumentNotification`` document for one command."""
    root = ElementTree.Element("InstrumentNotification")
    ElementTree.SubElement(root, "Timespan").text = command.processing_timestamp.isoformat()
    ElementTree.SubElement(root, "ISIN").text = command.isin
    return ElementTree.ElementTree(root)
