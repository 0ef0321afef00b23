"""
Application constants following kkb_fastapi pattern.
"""
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class ActivityCategory:
    """Stored activity category constants."""
    FOOD = "food"
    TRANSPORT = "transport"
    ENERGY = "energy"
    WASTE = "waste"
    DIET = "diet"
    RECYCLING = "recycling"


class ActivityCategoryEnum(str, Enum):
    """Activity category enum as submitted by the activity form."""
    FOOD = "Food"
    TRANSPORT = "Transport"
    ELECTRICITY = "Electricity"
    WASTE = "Waste"
    DIET = "Diet"
    RECYCLING = "Recycling"


class LeaderboardScopeEnum(str, Enum):
    """Leaderboard visibility partition."""
    GLOBAL = "global"
    FRIENDS = "friends"
    REGIONAL = "regional"


class FriendRequestStatus:
    """Friend request status constants."""
    PENDING = "pending"
    ACCEPTED = "accepted"


class FriendStatus:
    """Friend relation as seen by the requester."""
    ACCEPTED = "accepted"
    PENDING = "pending"
    INCOMING = "incoming"


class AustralianStateEnum(str, Enum):
    """Australian states and territories used as region tags."""
    ACT = "au-act"
    NSW = "au-nsw"
    NT = "au-nt"
    QLD = "au-qld"
    SA = "au-sa"
    TAS = "au-tas"
    VIC = "au-vic"
    WA = "au-wa"


class FactorSource:
    """Where an effective emission factor came from."""
    LOCAL = "local"
    DATABASE = "database"


DEFAULT_DISPLAY_NAME = "Anon"
USER_ID_HEADER = "X-User-Id"
