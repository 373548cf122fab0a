"""
SQL Helpers
Raw query shortcuts on top of Tortoise ORM connections
"""
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from tortoise import Tortoise
from tortoise.backends.base.client import BaseDBAsyncClient

from zancommon.logging import getLogger

logger = getLogger(__name__)


class Sql:
    """
    Raw SQL helpers

    Every query helper accepts a Tortoise connection, or None for the
    'default' connection. Parameters are positional and use the placeholder
    style of the connection's driver ('?' for SQLite, '%s' for MySQL,
    '$1' for PostgreSQL).

    Usage:
        rows = await Sql.to_array(con, 'select * from orders where status = ?', ['open'])
        names = await Sql.to_flat_array(con, 'select name from users')
        count = await Sql.single_value(con, 'select count(*) from users')
    """

    TABLE_LIST_QUERIES = {
        'sqlite': "select name from sqlite_master where type = 'table'",
        'mysql': "show tables",
        'postgres': (
            "select tablename from pg_catalog.pg_tables "
            "where schemaname not in ('pg_catalog', 'information_schema')"
        ),
    }

    SERVER_VERSION_QUERIES = {
        'mysql': "select @@version",
        'sqlite': "select sqlite_version()",
        'postgres': "show server_version",
    }

    @staticmethod
    def _connection(con: Optional[BaseDBAsyncClient]) -> BaseDBAsyncClient:
        return con if con is not None else Tortoise.get_connection('default')

    @staticmethod
    def dialect(con: Optional[BaseDBAsyncClient] = None) -> str:
        """Returns the connection dialect ('sqlite', 'mysql', 'postgres', ...)"""
        return Sql._connection(con).capabilities.dialect

    @staticmethod
    async def query(
        con: Optional[BaseDBAsyncClient],
        query: str,
        params: Optional[Sequence[Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Execute a query and return its rows as dicts

        Args:
            con: Tortoise connection (None for the default connection)
            query: SQL with positional placeholders
            params: Parameter values

        Returns:
            List of rows
        """
        logger.debug("Executing raw query", extra={'sql': query})
        return await Sql._connection(con).execute_query_dict(query, list(params or []))

    @staticmethod
    async def to_array(
        con: Optional[BaseDBAsyncClient],
        query: str,
        params: Optional[Sequence[Any]] = None
    ) -> List[Dict[str, Any]]:
        """Returns all rows as a list of column -> value dicts"""
        return await Sql.query(con, query, params)

    @staticmethod
    async def to_flat_array(
        con: Optional[BaseDBAsyncClient],
        query: str,
        params: Optional[Sequence[Any]] = None
    ) -> List[Any]:
        """
        Returns the first column of every row

        For example, if the query returns:

            Name    Age
            -----   -----
            Jim     12
            Bob     20

        this returns ['Jim', 'Bob']
        """
        rows = await Sql.query(con, query, params)
        return [next(iter(row.values())) for row in rows if row]

    @staticmethod
    async def single_value(
        con: Optional[BaseDBAsyncClient],
        query: str,
        params: Optional[Sequence[Any]] = None
    ) -> Any:
        """Returns the first column of the first row, or None when there are no rows"""
        row = await Sql.single_row(con, query, params)
        for value in row.values():
            return value

        return None

    @staticmethod
    async def single_row(
        con: Optional[BaseDBAsyncClient],
        query: str,
        params: Optional[Sequence[Any]] = None
    ) -> Dict[str, Any]:
        """Returns the first row as a column -> value dict, or {} when there are no rows"""
        rows = await Sql.query(con, query, params)
        return rows[0] if rows else {}

    @staticmethod
    def escape_like_parameter(value: str, prefix: str = '%', postfix: str = '%') -> str:
        """
        Escapes a value for use in a LIKE query

        % and _ are backslash-escaped so they match literally. The default
        prefix and postfix let the value appear anywhere in the column; pass
        prefix='' to match values that start with it.

        Example:
            await Sql.to_array(con, 'select * from reports where label like ?',
                               [Sql.escape_like_parameter(search)])
        """
        escaped = re.sub(r'([%_])', r'\\\1', value)

        return f"{prefix}{escaped}{postfix}"

    @staticmethod
    async def get_server_version(con: Optional[BaseDBAsyncClient] = None) -> Optional[str]:
        """
        Returns a string describing the version of the database server

        Returns:
            Version string, or None for unsupported databases
        """
        version_query = Sql.SERVER_VERSION_QUERIES.get(Sql.dialect(con))
        if version_query is None:
            return None

        version = await Sql.single_value(con, version_query)
        return str(version) if version is not None else None

    @staticmethod
    def build_set_info_from_map(
        fields: Dict[str, Any],
        extra_query_parts: Optional[List[str]] = None,
        placeholder: str = '?'
    ) -> Dict[str, Any]:
        """
        Build the column list and parameters for an update/insert "set" clause

        Args:
            fields: Column -> value mapping
            extra_query_parts: Literal parts to put before the generated ones
            placeholder: Placeholder style; '{}' is replaced with the 1-based
                parameter position (use '${}' for PostgreSQL)

        Returns:
            {'query': 'a = ?, b = ?', 'parameters': [1, 2]}

        Example:
            set_info = Sql.build_set_info_from_map({'requester_uid': 100, 'comments': 'hi'})
            await Sql.query(con, "update orders set " + set_info['query'] + " where id = ?",
                            set_info['parameters'] + [order_id])
        """
        query_parts = list(extra_query_parts or [])
        parameters = []

        for name, value in fields.items():
            parameters.append(value)
            marker = placeholder.format(len(parameters)) if '{}' in placeholder else placeholder
            query_parts.append(f"{name} = {marker}")

        return {
            'query': ', '.join(query_parts),
            'parameters': parameters,
        }

    @staticmethod
    def quote(value: Any, dialect: Optional[str] = None) -> str:
        """
        Quote a value as a SQL literal

        MySQL treats backslash as an escape character inside string literals,
        so pass dialect='mysql' (see Sql.dialect) when quoting for MySQL.
        Prefer bound parameters; use in_from_array for IN lists.

        Example:
            Sql.quote("O'Brien")              # "'O''Brien'"
            Sql.quote('C:\\tmp', 'mysql')     # "'C:\\\\tmp'"
            Sql.quote(None)                   # 'NULL'
        """
        if value is None:
            return 'NULL'
        if isinstance(value, bool):
            return '1' if value else '0'
        if isinstance(value, (int, float)):
            return str(value)

        text = str(value)
        if dialect == 'mysql':
            text = text.replace('\\', '\\\\')

        return "'" + text.replace("'", "''") + "'"

    @staticmethod
    def in_from_array(values: Iterable[Any], placeholder: str = '?') -> Dict[str, Any]:
        """
        Build the placeholders and parameters for an IN clause

        Args:
            values: Values to match
            placeholder: Placeholder style; '{}' is replaced with the 1-based
                parameter position (use '${}' for PostgreSQL)

        Returns:
            {'query': '?, ?, ?', 'parameters': [1, 2, 3]}

        Example:
            in_info = Sql.in_from_array(container_ids)
            rows = await Sql.to_array(con, "select * from customers where id in (" + in_info['query'] + ")",
                                      in_info['parameters'])
        """
        parameters = list(values)
        markers = [
            placeholder.format(position) if '{}' in placeholder else placeholder
            for position in range(1, len(parameters) + 1)
        ]

        return {
            'query': ', '.join(markers),
            'parameters': parameters,
        }

    @staticmethod
    async def table_exists(con: Optional[BaseDBAsyncClient], table_name: str) -> bool:
        """
        Returns True if a table named table_name exists

        The first column of the dialect's table listing is taken as the table name.
        """
        list_query = Sql.TABLE_LIST_QUERIES.get(Sql.dialect(con))
        if list_query is None:
            raise NotImplementedError(f"table_exists is not supported for {Sql.dialect(con)}")

        return table_name in await Sql.to_flat_array(con, list_query)
