"""
Column types that behave the same on PostgreSQL and SQLite.
"""
import json
import uuid

from sqlalchemy import TypeDecorator, CHAR, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID


class GUID(TypeDecorator):
    """
    UUID primary/foreign key.

    Native UUID on PostgreSQL, CHAR(36) text everywhere else.
    """
    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(UUID(as_uuid=True))
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        if dialect.name == 'postgresql':
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


class StringList(TypeDecorator):
    """
    Ordered list of strings (requirements, benefits, skills, keywords).

    Maps to a text[] column on PostgreSQL, matching the hosted schema,
    and to a JSON-encoded TEXT column on SQLite.
    """
    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(ARRAY(Text()))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        items = [str(item) for item in value]
        if dialect.name == 'postgresql':
            return items
        return json.dumps(items)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if dialect.name == 'postgresql':
            return list(value)
        return json.loads(value)
