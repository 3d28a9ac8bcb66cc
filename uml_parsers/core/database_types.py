"""
Database type policies.

Each supported backend exposes the primitive types it can store and the
words it refuses as class, table or field names. Policies are built once
at import time and shared read-only by every parser.
"""
from typing import Dict, FrozenSet

from pydantic import BaseModel


# Java keywords and literals can't name an entity or a field
JAVA_KEYWORDS = frozenset({
    "ABSTRACT", "ASSERT", "BOOLEAN", "BREAK", "BYTE", "CASE", "CATCH",
    "CHAR", "CLASS", "CONST", "CONTINUE", "DEFAULT", "DO", "DOUBLE",
    "ELSE", "ENUM", "EXTENDS", "FINAL", "FINALLY", "FLOAT", "FOR", "GOTO",
    "IF", "IMPLEMENTS", "IMPORT", "INSTANCEOF", "INT", "INTERFACE", "LONG",
    "NATIVE", "NEW", "PACKAGE", "PRIVATE", "PROTECTED", "PUBLIC", "RETURN",
    "SHORT", "STATIC", "STRICTFP", "SUPER", "SWITCH", "SYNCHRONIZED",
    "THIS", "THROW", "THROWS", "TRANSIENT", "TRY", "VOID", "VOLATILE",
    "WHILE", "TRUE", "FALSE", "NULL",
})

# Entities the generated application already defines
FRAMEWORK_CLASS_NAMES = frozenset({
    "ACCOUNT", "AUTHORITY", "PERSISTENTTOKEN", "PERSISTENTAUDITEVENT",
    "ENTITY", "OBJECT", "STRING", "INTEGER", "LONG", "SYSTEM",
})

# USER is left out so the generator's User entity can exist on sql
SQL_KEYWORDS = frozenset({
    "ADD", "ALL", "ALTER", "AND", "ANY", "AS", "ASC", "BETWEEN", "BY",
    "CASCADE", "CASE", "CHECK", "COLUMN", "CONSTRAINT", "CREATE", "CROSS",
    "CURRENT_DATE", "CURRENT_TIME", "CURRENT_TIMESTAMP", "DATABASE",
    "DEFAULT", "DELETE", "DESC", "DISTINCT", "DROP", "ELSE", "END",
    "EXCEPT", "EXISTS", "FETCH", "FOREIGN", "FROM", "FULL", "GRANT",
    "GROUP", "HAVING", "IN", "INDEX", "INNER", "INSERT", "INTERSECT",
    "INTO", "IS", "JOIN", "KEY", "LEFT", "LIKE", "LIMIT", "NATURAL",
    "NOT", "NULL", "OFFSET", "ON", "OR", "ORDER", "OUTER", "PRIMARY",
    "PROCEDURE", "REFERENCES", "REVOKE", "RIGHT", "ROW", "ROWS", "SCHEMA",
    "SELECT", "SET", "TABLE", "THEN", "TO", "TRIGGER", "TRUNCATE",
    "UNION", "UNIQUE", "UPDATE", "USING", "VALUES", "VIEW", "WHEN",
    "WHERE", "WITH",
})

MONGODB_KEYWORDS = frozenset({
    "ADMIN", "CONFIG", "LOCAL", "SYSTEM", "SYSTEM_INDEXES",
    "SYSTEM_NAMESPACES", "SYSTEM_PROFILE", "SYSTEM_JS", "SYSTEM_USERS",
    "SYSTEM_VERSION", "SYSTEM_VIEWS",
})

CASSANDRA_KEYWORDS = frozenset({
    "ADD", "AGGREGATE", "ALL", "ALLOW", "ALTER", "AND", "ANY", "APPLY",
    "AS", "ASC", "ASCII", "AUTHORIZE", "BATCH", "BEGIN", "BIGINT", "BLOB",
    "BOOLEAN", "BY", "CLUSTERING", "COLUMNFAMILY", "COMPACT",
    "CONSISTENCY", "COUNT", "COUNTER", "CREATE", "CUSTOM", "DECIMAL",
    "DELETE", "DESC", "DISTINCT", "DOUBLE", "DROP", "EACH_QUORUM",
    "ENTRIES", "EXISTS", "FILTERING", "FLOAT", "FROM", "FROZEN", "FULL",
    "GRANT", "IF", "IN", "INDEX", "INET", "INFINITY", "INSERT", "INT",
    "INTO", "KEY", "KEYSPACE", "KEYSPACES", "LEVEL", "LIMIT", "LIST",
    "LOCAL_ONE", "LOCAL_QUORUM", "MAP", "MATERIALIZED", "MODIFY", "NAN",
    "NORECURSIVE", "NOSUPERUSER", "NOT", "OF", "ON", "ONE", "ORDER",
    "PARTITION", "PASSWORD", "PER", "PERMISSION", "PERMISSIONS",
    "PRIMARY", "QUORUM", "RENAME", "REVOKE", "SCHEMA", "SELECT", "SET",
    "STATIC", "STORAGE", "SUPERUSER", "TABLE", "TEXT", "TIME", "TIMESTAMP",
    "TIMEUUID", "THREE", "TO", "TOKEN", "TRUNCATE", "TTL", "TUPLE", "TWO",
    "TYPE", "UNLOGGED", "UPDATE", "USE", "USER", "USERS", "USING", "UUID",
    "VALUES", "VARCHAR", "VARINT", "VIEW", "WHERE", "WITH", "WRITETIME",
})


class DatabaseTypes(BaseModel):
    """Primitive types and reserved words of one storage backend."""

    name: str
    types: FrozenSet[str]
    reserved_class_names: FrozenSet[str]
    reserved_table_names: FrozenSet[str]
    reserved_field_names: FrozenSet[str]

    class Config:
        frozen = True

    def contains(self, type_name: str) -> bool:
        """Return True if the backend can store the given primitive type."""
        if not type_name:
            return False
        return type_name.upper() in {t.upper() for t in self.types}

    def get_name(self) -> str:
        return self.name

    def is_reserved_class_name(self, name: str) -> bool:
        return bool(name) and name.upper() in self.reserved_class_names

    def is_reserved_table_name(self, name: str) -> bool:
        return bool(name) and name.upper() in self.reserved_table_names

    def is_reserved_field_name(self, name: str) -> bool:
        return bool(name) and name.upper() in self.reserved_field_names


def _build(name: str, types: set, keywords: FrozenSet[str]) -> DatabaseTypes:
    return DatabaseTypes(
        name=name,
        types=frozenset(types),
        reserved_class_names=JAVA_KEYWORDS | FRAMEWORK_CLASS_NAMES,
        reserved_table_names=keywords,
        reserved_field_names=JAVA_KEYWORDS | keywords,
    )


DATABASE_TYPES: Dict[str, DatabaseTypes] = {
    "sql": _build("sql", {
        "String", "Integer", "Long", "BigDecimal", "Float", "Double",
        "Enum", "Boolean", "LocalDate", "ZonedDateTime", "Instant",
        "Duration", "UUID", "Blob", "AnyBlob", "ImageBlob", "TextBlob",
    }, SQL_KEYWORDS),
    "mongodb": _build("mongodb", {
        "String", "Integer", "Long", "BigDecimal", "Float", "Double",
        "Enum", "Boolean", "LocalDate", "ZonedDateTime", "Instant",
        "Duration", "Blob", "AnyBlob", "ImageBlob", "TextBlob",
    }, MONGODB_KEYWORDS),
    "cassandra": _build("cassandra", {
        "String", "Integer", "Long", "BigDecimal", "Float", "Double",
        "Enum", "Boolean", "Date", "UUID", "Instant",
    }, CASSANDRA_KEYWORDS),
}


def get_database_types(name: str) -> DatabaseTypes:
    """
    Get the type policy of a backend.

    Args:
        name: Backend name ("sql", "mongodb" or "cassandra")

    Returns:
        The shared DatabaseTypes instance

    Raises:
        ValueError: If the backend is unknown
    """
    policy = DATABASE_TYPES.get((name or "").lower())
    if not policy:
        available = ", ".join(DATABASE_TYPES.keys())
        raise ValueError(
            f"Unknown database type '{name}'. "
            f"Available database types: {available}"
        )
    return policy
