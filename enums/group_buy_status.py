from enum import Enum


class GroupBuyStatus(str, Enum):
    """Lifecycle of a group-buy campaign. Only ACTIVE campaigns affect pricing."""
    PENDING = "pending"
    ACTIVE = "active"
    GOAL_MET_PENDING_PAYMENT = "goal_met_pending_payment"
    GOAL_MET_FINALIZED = "goal_met_finalized"
    FAILED_EXPIRED = "failed_expired"
    FAILED_CANCELLED = "failed_cancelled"
