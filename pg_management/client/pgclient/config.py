from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PG_", extra="ignore")

    # ---- App ----
    app_env: str = "local"  # local|dev|prod

    # ---- Backend ----
    api_base_url: str = "http://localhost:3000/api/v1"
    api_timeout_seconds: float = 20.0

    # ---- Session / context ----
    access_token: str | None = None
    user_id: int | None = None
    organization_id: int | None = None
    pg_location_id: int | None = None

    # ---- Rent cycles ----
    default_rent_cycle_type: str | None = None  # CALENDAR|MIDMONTH
    default_payment_method: str = "CASH"

    def model_post_init(self, __context) -> None:
        if self.default_rent_cycle_type is not None:
            cycle = self.default_rent_cycle_type.strip().upper()
            if cycle not in ("CALENDAR", "MIDMONTH"):
                raise ValueError(f"default_rent_cycle_type must be CALENDAR or MIDMONTH, got {cycle!r}")
            object.__setattr__(self, "default_rent_cycle_type", cycle)

        env = (self.app_env or "local").strip().lower()
        if env in ("prod", "production"):
            # Tokens travel in headers; never over plain http in prod
            if self.api_base_url.strip().lower().startswith("http://"):
                raise ValueError("SECURITY: api_base_url must use https in prod")


settings = Settings()
