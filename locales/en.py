"""English strings."""

EN_STRINGS = {
    # === AUTH ===
    "auth_required": "User is not authenticated",
    "auth_invalid_token": "Invalid or expired session",

    # === CLUBS ===
    "clubs_fetch_failed": "Failed to fetch clubs: {error}",
    "club_create_failed": "Failed to create club: {error}",
    "club_update_failed": "Failed to update club: {error}",
    "club_not_found": "Club with ID {club_id} not found",

    # === CASCADE DELETE STAGES ===
    "delete_stage_user_clubs": "Failed to delete user-club links: {error}",
    "delete_stage_match_lookup": "Failed to fetch club matches: {error}",
    "delete_stage_match_participants": "Failed to delete match participants: {error}",
    "delete_stage_matches": "Failed to delete matches: {error}",
    "delete_stage_club_members": "Failed to delete club members: {error}",
    "delete_stage_club": "Failed to delete club: {error}",

    # === STATISTICS ===
    "statistics_fetch_failed": "Failed to fetch statistics",
    "statistics_read_failed": "Failed to read {table}: {error}",

    # === PLACES ===
    "places_missing_key": "Google Places API key is missing",
    "places_load_failed": "Could not load the Google Places API",
    "places_request_failed": "Google Places error: {status}",
    "places_no_coordinates": "Address has no coordinates",

    # === MONTHS ===
    "month_1": "Jan",
    "month_2": "Feb",
    "month_3": "Mar",
    "month_4": "Apr",
    "month_5": "May",
    "month_6": "Jun",
    "month_7": "Jul",
    "month_8": "Aug",
    "month_9": "Sep",
    "month_10": "Oct",
    "month_11": "Nov",
    "month_12": "Dec",
}
