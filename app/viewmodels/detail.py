from app.schemas.property import Property
from app.state.observable import ObservableState

class PropertyDetailController:
    """Backs the detail screen for one selected property."""

    def __init__(self, property: Property):
        self._selected_property: ObservableState[Property] = ObservableState(property)
        self.selected_property = self._selected_property.as_read_only()

    @property
    def display_property_price(self) -> str:
        item = self._selected_property.value
        # Rentals are priced per month
        if item.is_rental:
            return f"${item.price:,.0f}/month"
        return f"${item.price:,.0f}"

    @property
    def display_property_type(self) -> str:
        item = self._selected_property.value
        return "Available for {}".format("Rent" if item.is_rental else "Sale")

    def displayed(self) -> dict:
        return {
            "property": self._selected_property.value,
            "display_price": self.display_property_price,
            "display_type": self.display_property_type,
        }
