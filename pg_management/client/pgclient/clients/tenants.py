from __future__ import annotations

from ..schemas import Tenant
from .base import PgApiClient


class TenantsApi:
    def __init__(self, client: PgApiClient) -> None:
        self.client = client

    def get(self, tenant_id: int) -> Tenant:
        """Aggregate view: occupancy, due amounts, rent badges, unpaid months."""
        return self.client.fetch("GET", f"/tenants/{int(tenant_id)}", Tenant)
