"""Key namespaces for the durable store."""

# Shared with existing on-disk stores, do not change.
CONNECTIONS_NAMESPACE = "nuclide-connections"


class CacheKeys:
    """Key builders for all namespaces."""

    @staticmethod
    def connection(host: str) -> str:
        """Record key for a hostname or an IP address alias."""
        return f"{CONNECTIONS_NAMESPACE}:{host}"
