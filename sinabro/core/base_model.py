from datetime import datetime

from .. import db, Base


class BaseModel(Base):
    """
    Base model holding the shared persistence helpers.
    SQLAlchemy does not create a table for this class.

    Each subclass declares its own integer primary key column.
    """
    __abstract__ = True

    def save(self):
        db.session.add(self)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return self

    def delete_permanently(self):
        """Delete the current instance from the database."""
        try:
            db.session.delete(self)
            db.session.commit()
            return self
        except Exception as e:
            db.session.rollback()
            raise e

    def as_dict(self, exclude=None):
        """
        Return a dictionary of the mapped columns.
        Datetime values are converted to ISO format strings.
        """
        if exclude is None:
            exclude = []

        data = {}
        for column in self.__table__.columns:
            if column.name not in exclude:
                value = getattr(self, column.name)
                if isinstance(value, datetime):
                    data[column.name] = value.isoformat()
                else:
                    data[column.name] = value
        return data

    def __repr__(self):
        pk = self.__mapper__.primary_key[0].name
        return f'<{self.__class__.__name__} {pk}={getattr(self, pk)}>'
