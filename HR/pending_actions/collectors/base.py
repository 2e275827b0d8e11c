"""
Collector interface and registry.

A collector reads one HR domain and turns its pending records into
ActionRecords. Collectors are registered per scope group; the feed service
asks the registry for the collectors of the caller's groups.

    @registry.register
    class GoalDraftCollector(PendingActionCollector):
        category = ActionCategory.GOAL_DRAFT
        group = ScopeGroup.INDIVIDUAL
        limit = 5

        def collect(self, scope, context):
            ...
"""

from typing import List, Optional

from ..dtos import ActionRecord, CallerScope, CollectionContext
from ..urgency import as_deadline, calculate_priority


class PendingActionCollector:
    """Base class of all collectors"""

    category = None
    group = None
    limit = 5
    # Scope keys that must be present for the collector to run at all.
    requires_employee = True
    requires_company = True

    def applies_to(self, scope: CallerScope) -> bool:
        """False when the caller lacks the employee/company the query needs."""
        if self.requires_employee and scope.employee_id is None:
            return False
        if self.requires_company and scope.company_id is None:
            return False
        return True

    def collect(self, scope: CallerScope, context: CollectionContext) -> List[ActionRecord]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement collect()"
        )

    def run(self, scope: CallerScope, context: CollectionContext) -> List[ActionRecord]:
        """Collect for the caller, or return nothing when the scope does not apply."""
        if not self.applies_to(scope):
            return []
        return self.collect(scope, context)

    def build(
        self,
        context: CollectionContext,
        source_id,
        title: str,
        description: str,
        link: str,
        due_date=None,
        actionable: bool = True,
        priority=None,
    ) -> ActionRecord:
        """
        Create the ActionRecord of one source record.

        The priority is derived from the due date unless the category forces
        one (payroll, bulk leave, escalations).
        """
        deadline = as_deadline(due_date)
        if priority is None:
            priority = calculate_priority(
                deadline,
                now=context.now,
                urgent_within_days=context.config.urgent_within_days,
                high_within_days=context.config.high_within_days,
            )

        return ActionRecord(
            id=f"{str(self.category)}-{source_id}",
            category=self.category,
            title=title,
            description=description,
            priority=priority,
            due_date=deadline,
            source_id=str(source_id),
            link=link,
            actionable=actionable,
        )


class CollectorRegistry:
    """Ordered set of collector instances, keyed by category"""

    def __init__(self):
        self._collectors = {}

    def register(self, collector_class):
        """
        Class decorator adding a collector to the registry.

        Raises:
            ValueError: If the class has no category/group or the category
                is already registered
        """
        if collector_class.category is None or collector_class.group is None:
            raise ValueError(
                f"{collector_class.__name__} must define category and group"
            )
        key = str(collector_class.category)
        if key in self._collectors:
            raise ValueError(f"A collector for '{key}' is already registered")

        self._collectors[key] = collector_class()
        return collector_class

    def get(self, category) -> Optional[PendingActionCollector]:
        return self._collectors.get(str(category))

    def for_groups(self, groups) -> List[PendingActionCollector]:
        """Collectors of the given groups, in registration order."""
        wanted = {str(group) for group in groups}
        return [c for c in self._collectors.values() if str(c.group) in wanted]

    def __iter__(self):
        return iter(self._collectors.values())

    def __len__(self):
        return len(self._collectors)


registry = CollectorRegistry()
