"""Mock catalog source for testing and offline use."""

import copy
from typing import Any, Optional

from ..exceptions import SourceError
from ..models import Native
from .natives_client import parse_snapshot

# Small slice of the real reference, in the same shape the API returns.
SAMPLE_DOCUMENT: dict[str, dict[str, dict[str, Any]]] = {
    "ENTITY": {
        "0xEA1C610A04DB6BBB": {
            "jhash": "0xD3A183A3",
            "comment": "Sets the visibility of an entity.",
            "hashes": {"1604": "0x1794B4FCC84D812F", "2189": "0x8FE22675A5A45817"},
            "altName": "setEntityVisible",
        },
        "0x47D6F43D77935C75": {
            "jhash": "0x72C0C4A8",
            "comment": "",
            "hashes": {"1604": "0xF3E3F56B1D0B2CD3"},
            "altName": "isEntityVisible",
        },
        "0x3FEF770D40960D5A": {
            "jhash": "0x742A7CB0",
            "comment": "Gets the current coordinates for a specified entity.",
            "hashes": {"1604": "0xA6BA9D7EB8A4F10E"},
            "altName": "getEntityCoords",
        },
        "0x06843DA7060A026B": {
            "jhash": "0xDC2F4F2B",
            "comment": None,
            "hashes": None,
            "altName": "setEntityCoords",
        },
    },
    "PLAYER": {
        "0x4F8644AF03D0E0D6": {
            "jhash": "0x8D32347D",
            "comment": "Gets the ped for the local player.",
            "hashes": {"1604": "0x2B0A3D3B3A5C3B90"},
            "altName": "playerPedId",
        },
        "0xD80958FC74E988A6": {
            "jhash": "0x8126C3C5",
            "comment": "",
            "hashes": {},
            "altName": "playerId",
        },
    },
    "VEHICLE": {
        "0xAF35D0D2583051B0": {
            "jhash": "0xDD75460A",
            "comment": "Creates a vehicle with the specified model at the specified position.",
            "hashes": {"1604": "0x7F1A7A1A3D4B6C21"},
            "altName": "createVehicle",
        },
        "0xEA386986E786A54F": {
            "jhash": "0x9803AF60",
            "comment": "Deletes a vehicle.",
            "hashes": {"1604": "0x4C7F1E2A3B9D0E55"},
            "altName": "deleteVehicle",
        },
        "0x1F2AA07F00B3217A": {
            "jhash": "0x2B2F9FF0",
            "comment": "",
            "hashes": {"1604": "0x0A8B6F5E4D3C2B1A"},
            "altName": "setVehicleEngineOn",
        },
    },
}


class MockNativesClient:
    """Mock source returning a fixed snapshot.

    Can be told to fail a number of times before succeeding, or forever,
    to exercise the loader's retry policy.
    """

    def __init__(
        self,
        document: Optional[dict[str, Any]] = None,
        fail_times: int = 0,
    ):
        """Initialize the mock source.

        Args:
            document: Raw natives document. Defaults to SAMPLE_DOCUMENT.
            fail_times: Number of initial fetches that raise SourceError.
                Negative means every fetch fails.
        """
        self._document = copy.deepcopy(document if document is not None else SAMPLE_DOCUMENT)
        self._fail_times = fail_times
        self.fetch_count = 0

    @property
    def url(self) -> str:
        """Pseudo URL shown in status output."""
        return "mock://natives"

    def fetch_snapshot(self) -> dict[str, Native]:
        """Return the mock snapshot, or fail as configured."""
        self.fetch_count += 1
        if self._fail_times < 0 or self.fetch_count <= self._fail_times:
            raise SourceError(f"Mock fetch failure #{self.fetch_count}")
        return parse_snapshot(self._document)
