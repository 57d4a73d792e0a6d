"""Internal constants shared across the library."""

BASE_URL = "http://localhost:9000"
CITIES_ENDPOINT = "/cities"
USER_AGENT = "worldwise-python"

# ------------------------------------------------------------------
# Store rejection messages (shown verbatim by presentation code)
# ------------------------------------------------------------------

LOAD_CITIES_ERROR = "There was an error loading cities..."
LOAD_CITY_ERROR = "There was an error loading city..."
CREATE_CITY_ERROR = "There was an error creating city..."
DELETE_CITY_ERROR = "There was an error deleting city..."
