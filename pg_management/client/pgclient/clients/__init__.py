from .base import CacheTag, PgApiClient
from .payments import AdvancePaymentsApi, RefundPaymentsApi, RentPaymentsApi
from .tenants import TenantsApi

__all__ = [
    "CacheTag",
    "PgApiClient",
    "AdvancePaymentsApi",
    "RefundPaymentsApi",
    "RentPaymentsApi",
    "TenantsApi",
]
