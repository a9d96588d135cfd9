"""Database query utility functions."""
from typing import Optional, TypeVar, Type, Any
from sqlalchemy.orm import Session

T = TypeVar("T")


def get_by_id(db: Session, model: Type[T], id_value: Any) -> Optional[T]:
    """
    Get a model instance by primary key.

    Args:
        db: Database session
        model: SQLAlchemy model class
        id_value: Primary key value

    Returns:
        Model instance, or None if no row has that key
    """
    return db.get(model, id_value)


def get_by_field(db: Session, model: Type[T], field_name: str, field_value: Any) -> Optional[T]:
    """
    Get the first model instance whose field equals a value.

    Args:
        db: Database session
        model: SQLAlchemy model class
        field_name: Name of the field to filter by
        field_value: Value to filter by

    Returns:
        Model instance or None
    """
    field = getattr(model, field_name)
    return db.query(model).filter(field == field_value).first()


def list_ordered(db: Session, model: Type[T], order_field: str = "order") -> list[T]:
    """
    Get all rows of a model sorted ascending by one column.

    Args:
        db: Database session
        model: SQLAlchemy model class
        order_field: Column to sort by

    Returns:
        List of model instances
    """
    return db.query(model).order_by(getattr(model, order_field).asc()).all()
