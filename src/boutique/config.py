"""Storefront settings.

Values come from built-in defaults, then the ``[custom]`` table of the
Protean domain configuration (``domain.toml``), then ``BOUTIQUE_*``
environment variables, each source overriding the previous one.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

ENV_PREFIX = "BOUTIQUE_"


@dataclass(frozen=True)
class StorefrontSettings:
    shop_name: str = "KEV'SCUE BOUTIQUE"
    currency_label: str = "KSh"
    delivery_fee: int = 150
    whatsapp_number: str = "254743455893"
    cart_snapshot_key: str = "cart"
    snapshot_dir: Path = Path(".boutique")

    @classmethod
    def load(cls, domain=None, environ=None) -> "StorefrontSettings":
        """Build settings from the domain's custom config and the environment."""
        environ = os.environ if environ is None else environ
        settings = cls()

        if domain is not None:
            custom = domain.config.get("custom") or {}
            settings = settings._merge({key.lower(): value for key, value in custom.items()})

        overrides = {}
        for field in fields(cls):
            env_key = f"{ENV_PREFIX}{field.name.upper()}"
            if env_key in environ:
                overrides[field.name] = environ[env_key]
        return settings._merge(overrides)

    def _merge(self, values: dict) -> "StorefrontSettings":
        known = {field.name for field in fields(self)}
        coerced = {}
        for name, value in values.items():
            if name not in known:
                continue
            if name == "delivery_fee":
                value = int(value)
                if value < 0:
                    raise ValueError(f"Delivery fee must be non-negative, got {value}")
            elif name == "snapshot_dir":
                value = Path(value)
            else:
                value = str(value)
            coerced[name] = value
        return replace(self, **coerced)
