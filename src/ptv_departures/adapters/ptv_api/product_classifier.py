"""Mapping of PTV transport type strings to products."""

from ptv_departures.domain.errors import UnknownTransportTypeError
from ptv_departures.domain.models.location import Product

TRANSPORT_TYPE_PRODUCTS: dict[str, Product] = {
    "train": Product.SUBURBAN_TRAIN,
    "tram": Product.TRAM,
    "bus": Product.BUS,
    "vline": Product.REGIONAL_TRAIN,
    "nightrider": Product.BUS,
}


def classify_product(transport_type: str) -> Product:
    """Return the product for a PTV transport type.

    Raises:
        UnknownTransportTypeError: If the string is not an exact known type.
    """
    try:
        return TRANSPORT_TYPE_PRODUCTS[transport_type]
    except (KeyError, TypeError):
        raise UnknownTransportTypeError(transport_type) from None
