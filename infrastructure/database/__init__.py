from infrastructure.database.club_repository import SupabaseClubRepository
from infrastructure.database.club_deletion import AtomicClubDeletion, StepwiseClubDeletion
from infrastructure.database.statistics_repository import SupabaseStatisticsRepository
from infrastructure.database.auth_gateway import SupabaseAuthGateway

__all__ = [
    "SupabaseClubRepository",
    "AtomicClubDeletion",
    "StepwiseClubDeletion",
    "SupabaseStatisticsRepository",
    "SupabaseAuthGateway",
]
