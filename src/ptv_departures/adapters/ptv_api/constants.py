"""Constants for the PTV Timetable API adapter.

API Documentation: https://timetableapi.ptv.vic.gov.au/swagger/ui/index
Every request must carry a devid and an HMAC-SHA1 signature.
"""

PTV_BASE_URL = "https://timetableapi.ptv.vic.gov.au"
API_VERSION = "v2"
SERVER_PRODUCT = "ptv"

HEALTH_CHECK_PATH = f"/{API_VERSION}/healthcheck"
NEARBY_PATH = f"/{API_VERSION}/nearme/latitude/{{lat}}/longitude/{{lon}}"
SEARCH_PATH = f"/{API_VERSION}/search/{{text}}"
# mode 0 is ignored by the by-destination board but required in the path
DEPARTURES_PATH = (
    f"/{API_VERSION}/mode/0/stop/{{stop_id}}/departures/by-destination/limit/{{limit}}"
)

DEVID_PARAM = "devid"
SIGNATURE_PARAM = "signature"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
