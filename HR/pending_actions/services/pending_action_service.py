import logging
from datetime import datetime
from typing import List, Optional

from django.db import DatabaseError
from django.utils import timezone

from HR.pending_actions.collectors import registry
from HR.pending_actions.config import PendingActionConfig
from HR.pending_actions.dtos import ActionRecord, CallerScope, CollectionContext
from HR.pending_actions.exceptions import PendingActionsUnavailable
from HR.pending_actions.scope import resolve_scope

logger = logging.getLogger(__name__)


class PendingActionService:
    """Service layer assembling the pending actions feed"""

    @staticmethod
    def get_pending_actions(
        user,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
        config: Optional[PendingActionConfig] = None,
        collector_registry=None,
    ) -> List[ActionRecord]:
        """
        Build the ranked feed of the user.

        Args:
            user: Authenticated CustomUser
            limit: Maximum number of records (None = configured default,
                0 = empty feed)
            now: Reference time for deadlines and look-ahead windows
            config: Engine configuration (defaults to settings)
            collector_registry: Registry to draw collectors from (defaults
                to the built-in one)

        Returns:
            List of ActionRecord, most urgent first

        Raises:
            PendingActionsUnavailable: If a source read fails and collector
                failures are not isolated
        """
        config = config or PendingActionConfig.from_settings()
        scope = resolve_scope(user)
        records = PendingActionService.collect(
            scope,
            now=now,
            config=config,
            collector_registry=collector_registry,
        )

        if limit is None:
            limit = config.default_limit
        ranked = PendingActionService.rank(records, limit)

        logger.debug(
            "Pending actions for user %s (role=%s): %d collected, %d returned",
            scope.user_id, scope.role or '-', len(records), len(ranked),
        )
        return ranked

    @staticmethod
    def collect(
        scope: CallerScope,
        now: Optional[datetime] = None,
        config: Optional[PendingActionConfig] = None,
        collector_registry=None,
    ) -> List[ActionRecord]:
        """
        Run every collector of the caller's groups and merge their output.

        Records whose id was already produced are dropped (first wins).
        """
        config = config or PendingActionConfig.from_settings()
        now = now or timezone.now()
        context = CollectionContext(now=now, today=timezone.localdate(now), config=config)
        collectors = (collector_registry or registry).for_groups(scope.groups)

        merged = []
        seen_ids = set()
        for collector in collectors:
            for record in PendingActionService._run_collector(collector, scope, context):
                if record.id in seen_ids:
                    continue
                seen_ids.add(record.id)
                merged.append(record)
        return merged

    @staticmethod
    def rank(records: List[ActionRecord], limit: int) -> List[ActionRecord]:
        """
        Order by priority tier, then due date (dated records first), keeping
        production order for ties, and cut to the limit.
        """
        limit = max(limit, 0)
        return sorted(records, key=ActionRecord.sort_key)[:limit]

    @staticmethod
    def _run_collector(collector, scope, context) -> List[ActionRecord]:
        try:
            return collector.run(scope, context)
        except DatabaseError as exc:
            if context.config.isolate_collector_failures:
                logger.exception(
                    "Collector %s failed for user %s; continuing without it",
                    collector.category, scope.user_id,
                )
                return []
            logger.error(
                "Collector %s failed for user %s: %s",
                collector.category, scope.user_id, exc,
            )
            raise PendingActionsUnavailable(collector.category) from exc
