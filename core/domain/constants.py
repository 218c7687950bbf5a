"""
Domain constants - table names, RPC names, limits.
Centralized here so repositories and services agree on them.
"""

# === Tables ===
CLUBS_TABLE = "clubs"
CLUB_MEMBERS_TABLE = "club_members"
USER_CLUBS_TABLE = "user_clubs"
MATCHES_TABLE = "matches"
MATCH_PARTICIPANTS_TABLE = "match_participants"
PROFILES_TABLE = "profiles"

# === Remote procedures ===
RPC_DELETE_CLUB_CASCADE = "delete_club_cascade"
RPC_NULLIFY_PREFERRED_CLUB = "nullify_preferred_club"
RPC_GET_BASIC_COUNTS = "get_basic_counts"

# PostgREST error code for "function not found in schema cache"
POSTGREST_MISSING_FUNCTION = "PGRST202"

# === Clubs ===
# The clubs.location column is NOT NULL and must never be blank
LOCATION_PLACEHOLDER = "Non spécifié"

# === Statistics ===
TREND_MONTHS = 6
TOP_CLUBS_LIMIT = 5

# === Places ===
MIN_PLACES_QUERY_LENGTH = 3
MAX_PLACE_SUGGESTIONS = 5
PLACES_TYPE = "geocode"
PLACE_DETAIL_FIELDS = ["address_components", "formatted_address", "geometry", "name", "place_id"]
