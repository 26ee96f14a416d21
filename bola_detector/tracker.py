"""Per-caller access history and the BOLA classification rule."""

import logging
from typing import Iterator

logger = logging.getLogger(__name__)


class AccessHistory:
    """Resource ids seen per caller identity during one run.

    The first distinct resource a caller touches is never suspicious. Every
    later, not yet seen resource for that caller is. Repeats are ignored.
    The history only grows; build a new instance for every run.
    """

    def __init__(self):
        self._seen: dict[str, set[str]] = {}

    def classify(self, identity: str, resource_id: str) -> bool:
        """Record one (identity, resource_id) access, True if suspicious."""
        if not identity or not resource_id:
            return False

        resources = self._seen.setdefault(identity, set())
        if resource_id in resources:
            return False

        suspicious = len(resources) > 0
        resources.add(resource_id)
        if suspicious:
            logger.debug("Caller %s reached resource %s (%d distinct)",
                         identity, resource_id, len(resources))
        return suspicious

    def callers(self) -> Iterator[str]:
        """Iterate caller identities in first-seen order."""
        return iter(self._seen)

    def resources_for(self, identity: str) -> frozenset[str]:
        return frozenset(self._seen.get(identity, ()))

    def __contains__(self, identity: str) -> bool:
        return identity in self._seen

    def __len__(self) -> int:
        return len(self._seen)
