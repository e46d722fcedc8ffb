"""Column helpers shared by the models."""
from sqlalchemy import Enum


def enum_column_type(enum_cls, name: str) -> Enum:
    """SQL enum persisted by member value (``"heavy_rain"``), not name."""
    return Enum(enum_cls, name=name, values_callable=lambda members: [m.value for m in members])
