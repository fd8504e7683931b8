from events.filters.controller import SearchFilterController, build_query_string
from events.filters.scheduler import AsyncioScheduler, Scheduler

__all__ = ["SearchFilterController", "build_query_string", "AsyncioScheduler", "Scheduler"]
