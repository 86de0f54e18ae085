"""
BusMetrics: Tracks simple statistics for EventBus message flow.
"""

class BusMetrics:
    """
    Tracks metrics for published events and subscriber deliveries.

    Attributes:
        published (int): Total number of events published.
        delivered (int): Number of successful subscriber callbacks.
        failed (int): Number of subscriber callbacks that raised.
    """

    def __init__(self):
        """Initialize all counters to zero."""
        self.published = 0
        self.delivered = 0
        self.failed = 0

    def report(self) -> dict:
        """
        Return a snapshot of current metrics.

        Returns:
            dict: Dictionary containing 'published', 'delivered' and 'failed' counters.
        """
        return {
            "published": self.published,
            "delivered": self.delivered,
            "failed": self.failed,
        }
