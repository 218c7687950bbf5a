"""French strings - default language of the admin back office."""

FR_STRINGS = {
    # === AUTH ===
    "auth_required": "Utilisateur non authentifié",
    "auth_invalid_token": "Session invalide ou expirée",

    # === CLUBS ===
    "clubs_fetch_failed": "Erreur lors de la récupération des clubs: {error}",
    "club_create_failed": "Erreur lors de la création du club: {error}",
    "club_update_failed": "Erreur lors de la mise à jour du club: {error}",
    "club_not_found": "Club avec l'ID {club_id} non trouvé",

    # === CASCADE DELETE STAGES ===
    "delete_stage_user_clubs": "Erreur lors de la suppression des relations utilisateur-club: {error}",
    "delete_stage_match_lookup": "Erreur lors de la récupération des matchs: {error}",
    "delete_stage_match_participants": "Erreur lors de la suppression des participants aux matchs: {error}",
    "delete_stage_matches": "Erreur lors de la suppression des matchs: {error}",
    "delete_stage_club_members": "Erreur lors de la suppression des membres du club: {error}",
    "delete_stage_club": "Erreur lors de la suppression du club: {error}",

    # === STATISTICS ===
    "statistics_fetch_failed": "Impossible de récupérer les statistiques",
    "statistics_read_failed": "Erreur lors de la lecture de {table}: {error}",

    # === PLACES ===
    "places_missing_key": "Clé API Google Places manquante",
    "places_load_failed": "Impossible de charger l'API Google Places",
    "places_request_failed": "Erreur Google Places: {status}",
    "places_no_coordinates": "Adresse sans coordonnées",

    # === MONTHS (short, as rendered by fr-FR locales) ===
    "month_1": "janv.",
    "month_2": "févr.",
    "month_3": "mars",
    "month_4": "avr.",
    "month_5": "mai",
    "month_6": "juin",
    "month_7": "juil.",
    "month_8": "août",
    "month_9": "sept.",
    "month_10": "oct.",
    "month_11": "nov.",
    "month_12": "déc.",
}
