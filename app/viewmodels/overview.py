from typing import Awaitable, Callable, List, Optional
from app.schemas.property import FetchStatus, Property, PropertyFilter
from app.services import properties as property_service
from app.state.observable import ObservableState, ReadOnlyState
from app.state.scope import TaskScope
from structlog import get_logger

logger = get_logger()

PropertyFetcher = Callable[[PropertyFilter], Awaitable[List[Property]]]

class PropertyFeedController:
    """Fetches listings for the overview screen and publishes them as observable state.

    Must be created inside a running event loop: construction starts the first
    fetch with ``initial_filter``. All publishes happen on that loop. Overlapping
    fetches are not ordered, so whichever completes last decides the state.
    ``dispose()`` cancels every fetch still in flight; nothing is published
    after it.
    """

    def __init__(
        self,
        fetch_properties: Optional[PropertyFetcher] = None,
        initial_filter: PropertyFilter = PropertyFilter.SHOW_ALL,
    ):
        self._fetch_properties = fetch_properties or property_service.get_properties
        self._status: ObservableState[FetchStatus] = ObservableState()
        self._properties: ObservableState[List[Property]] = ObservableState()
        self._navigate_to_selected_property: ObservableState[Property] = ObservableState()
        self._scope = TaskScope(name="property-feed")

        self.status = self._status.as_read_only()
        self.properties = self._properties.as_read_only()
        self.navigate_to_selected_property = self._navigate_to_selected_property.as_read_only()

        self._fetch(initial_filter, self._scope)

    @property
    def disposed(self) -> bool:
        return self._scope.cancelled

    def _fetch(self, filter: PropertyFilter, scope: TaskScope):
        return scope.launch(self._load(filter, scope))

    async def _load(self, filter: PropertyFilter, scope: TaskScope):
        try:
            result = await self._fetch_properties(filter)
        except Exception as e:
            if scope.cancelled:
                logger.info("Dropped failed fetch after dispose", filter=filter.value, error=str(e))
                return
            logger.warning("Property fetch failed", filter=filter.value, error=str(e))
            self._status.set_value(FetchStatus.ERROR)
            self._properties.set_value([])
            return

        if scope.cancelled:
            logger.info("Dropped fetch result after dispose", filter=filter.value)
            return
        # An empty result leaves the current list in place
        if len(result) > 0:
            self._properties.set_value(list(result))
        logger.info("Property fetch finished", filter=filter.value, count=len(result))

    def update_filter(self, filter: PropertyFilter):
        if self.disposed:
            logger.warning("Filter update ignored, controller disposed", filter=filter.value)
            return None
        return self._fetch(filter, self._scope)

    def request_navigation_to(self, property: Property) -> None:
        self._navigate_to_selected_property.set_value(property)

    def acknowledge_navigation_complete(self) -> None:
        self._navigate_to_selected_property.set_value(None)

    def dispose(self) -> None:
        self._scope.cancel()

    async def join(self) -> None:
        """Wait until every fetch launched so far has finished or been cancelled."""
        await self._scope.join()
