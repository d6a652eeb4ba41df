"""
Shared fixtures for dashboard_map tests.
"""
import httpx
import pytest

from dashboard_config.types import DashboardConfig


PERSONS = [
    {
        "id": "1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "address": {"street": "Hauptstr. 1", "postalCode": "10115", "city": "Berlin", "country": "DE"},
        "circles": ["dev"],
    },
    {
        "id": "2",
        "firstName": "Alan",
        "lastName": "Turing",
        "address": {"street": "Marktplatz 5", "postalCode": "80331", "city": "Muenchen", "country": "DE"},
        "circles": ["dev", "ops"],
    },
    {"id": "3", "firstName": "No", "lastName": "Address"},
]


@pytest.fixture
def raw_config():
    """Dashboard configuration mapping with every section filled in."""
    return {
        "Services": {"StammServiceUrl": "", "ServiceTemplateUrl": "https://{service}.internal/api"},
        "Authentication": {
            "TokenUrl": "https://auth.internal/connect/token",
            "ClientId": "dashboard",
            "ClientSecret": "s3cr3t",
        },
        "Nominatim": {"BaseUrl": "https://nominatim.test", "RequestIntervalSeconds": 0},
        "Company": {
            "Name": "OBS",
            "Street": "Hauptstr. 1",
            "PostalCode": "10115",
            "City": "Berlin",
            "Country": "DE",
            "Latitude": 52.53,
            "Longitude": 13.38,
        },
        "Circles": [
            {"Name": "dev", "DisplayName": "Development", "Color": "#00ff00"},
            {"Name": "sales"},
        ],
        "EmployeeAddresses": [
            {"EmployeeId": "10", "Name": "Grace Hopper", "Street": "Ring 2", "City": "Hamburg", "Circles": ["dev"]},
            {"EmployeeId": "11", "Name": "Linus", "City": "Koeln", "Circles": ["support"]},
        ],
        "EmployeeCoordinates": [
            {"EmployeeId": "10", "Latitude": 53.55, "Longitude": 9.99},
        ],
    }


@pytest.fixture
def dashboard_config(raw_config):
    """Validated DashboardConfig built from raw_config."""
    return DashboardConfig.model_validate(raw_config)


@pytest.fixture
def backend():
    """Fake token endpoint, OBS-Stamm and Nominatim behind one MockTransport."""

    class Backend:
        def __init__(self):
            self.requests = []
            self.token = "tok123"
            self.persons = list(PERSONS)
            self.geocode = {
                "Hauptstr. 1, 10115 Berlin, DE": (52.53, 13.38),
                "Marktplatz 5, 80331 Muenchen, DE": (48.14, 11.58),
                "Ring 2, Hamburg": (53.55, 9.99),
            }

        def __call__(self, request):
            self.requests.append(request)
            host = request.url.host
            if host == "auth.internal":
                return httpx.Response(200, json={"access_token": self.token})
            if host == "obsstamm.internal":
                return httpx.Response(200, json=self.persons)
            if host == "nominatim.test":
                hit = self.geocode.get(request.url.params["q"])
                if hit is None:
                    return httpx.Response(200, json=[])
                return httpx.Response(200, json=[{"lat": str(hit[0]), "lon": str(hit[1])}])
            return httpx.Response(404)

        def requests_to(self, host):
            return [request for request in self.requests if request.url.host == host]

        def client(self):
            return httpx.AsyncClient(transport=httpx.MockTransport(self))

    return Backend()
