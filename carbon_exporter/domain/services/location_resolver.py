"""Domain service resolving user supplied location codes."""

from typing import Dict, List

from carbon_exporter.domain.entities.errors import InvalidLocationError
from carbon_exporter.domain.entities.location import ComputingLocation

_GRID_LOCATIONS: Dict[str, str] = {
    "at": "Austria",
    "be": "Belgium",
    "bg": "Bulgaria",
    "ch": "Switzerland",
    "cz": "Czech Republic",
    "de": "Germany",
    "dk": "Denmark",
    "ee": "Estonia",
    "es": "Spain",
    "fi": "Finland",
    "fr": "France",
    "gr": "Greece",
    "hr": "Croatia",
    "hu": "Hungary",
    "ie": "Ireland",
    "it": "Italy",
    "lt": "Lithuania",
    "lu": "Luxembourg",
    "lv": "Latvia",
    "nl": "Netherlands",
    "no": "Norway",
    "pl": "Poland",
    "pt": "Portugal",
    "ro": "Romania",
    "rs": "Serbia",
    "se": "Sweden",
    "si": "Slovenia",
    "sk": "Slovakia",
}

# Cloud regions resolve to the grid they draw power from.
_REGION_ALIASES: Dict[str, str] = {
    # Azure
    "germanywestcentral": "de",
    "germanynorth": "de",
    "westeurope": "nl",
    "northeurope": "ie",
    "francecentral": "fr",
    "francesouth": "fr",
    "switzerlandnorth": "ch",
    "switzerlandwest": "ch",
    "norwayeast": "no",
    "norwaywest": "no",
    "swedencentral": "se",
    "polandcentral": "pl",
    "italynorth": "it",
    "spaincentral": "es",
    # AWS
    "eu-central-1": "de",
    "eu-central-2": "ch",
    "eu-west-1": "ie",
    "eu-west-3": "fr",
    "eu-north-1": "se",
    "eu-south-1": "it",
    "eu-south-2": "es",
    # Google Cloud
    "europe-west1": "be",
    "europe-west3": "de",
    "europe-west4": "nl",
    "europe-west6": "ch",
    "europe-west8": "it",
    "europe-west9": "fr",
    "europe-north1": "fi",
    "europe-central2": "pl",
    "europe-southwest1": "es",
}


def supported_location_codes() -> List[str]:
    """Return every code accepted by :func:`resolve_location`, sorted."""
    return sorted([*_GRID_LOCATIONS, *_REGION_ALIASES])


def resolve_location(code: str) -> ComputingLocation:
    """
    Resolve a grid code or cloud region name to a computing location.

    Lookup ignores case and surrounding whitespace.

    Raises:
        InvalidLocationError: If the code is not in the catalog.
    """
    key = (code or "").strip().lower()
    grid_code = _REGION_ALIASES.get(key, key)
    name = _GRID_LOCATIONS.get(grid_code)
    if name is None:
        raise InvalidLocationError(code, details={"code": code})
    return ComputingLocation(code=grid_code, name=name)
