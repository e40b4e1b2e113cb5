"""
Report change events.

``report_changed`` is sent after a report has been created, signed or deleted
and the change is committed. Listeners redraw from the store.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with kwargs: kind, report_id, action ('created', 'signed', 'deleted')
report_changed = Signal()


@receiver(report_changed)
def log_report_change(sender, kind, report_id, action, **kwargs):
    logger.info(f"{kind} report {report_id} was {action}")
