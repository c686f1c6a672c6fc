from ship_catalog.infra.db.models.base import Base
from ship_catalog.infra.db.models.ship import ShipRow

__all__ = ["Base", "ShipRow"]
