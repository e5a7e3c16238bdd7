"""Authenticated probes for the SQL and document databases."""

from __future__ import annotations

import asyncio
from typing import Optional

import asyncpg
import pymysql
from pymongo import MongoClient
from pymongo.errors import OperationFailure

from src.domain.entities.probe import Credentials

from .base import BaseProbe

MYSQL_ACCESS_DENIED_CODES = frozenset({1044, 1045, 1698})


class MySqlProbe(BaseProbe):
    """Logs in to MySQL/MariaDB with the administrative credentials."""

    name = "mysql"

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        user = credentials.user if credentials else "root"
        password = credentials.password if credentials else ""

        def _connect() -> None:
            connection = pymysql.connect(
                host=host,
                port=port,
                user=user,
                password=password,
                connect_timeout=max(timeout, 0.1),
                read_timeout=max(timeout, 0.1),
            )
            connection.close()

        await asyncio.to_thread(_connect)

    def _is_rejection(self, exc: Exception) -> bool:
        if isinstance(exc, pymysql.err.OperationalError) and exc.args:
            return exc.args[0] in MYSQL_ACCESS_DENIED_CODES
        return False


class PgSqlProbe(BaseProbe):
    """Logs in to PostgreSQL with the administrative credentials."""

    name = "pgsql"

    def __init__(self, database: str = "postgres") -> None:
        self._database = database

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        connection = await asyncpg.connect(
            host=host,
            port=port,
            user=credentials.user if credentials else "postgres",
            password=credentials.password if credentials else None,
            database=self._database,
            timeout=timeout,
        )
        await connection.close()

    def _is_rejection(self, exc: Exception) -> bool:
        # Any server-side error means the server was reached.
        return isinstance(exc, asyncpg.PostgresError)


class MongoProbe(BaseProbe):
    """Runs the ``ping`` admin command against MongoDB."""

    name = "mongo"

    AUTH_ERROR_CODES = frozenset({13, 18})

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        timeout_ms = max(int(timeout * 1000), 100)
        options = {}
        if credentials:
            options = {"username": credentials.user, "password": credentials.password}

        def _ping() -> None:
            client: MongoClient = MongoClient(
                host=host,
                port=port,
                directConnection=True,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms,
                socketTimeoutMS=timeout_ms,
                **options,
            )
            try:
                client.admin.command("ping")
            finally:
                client.close()

        await asyncio.to_thread(_ping)

    def _is_rejection(self, exc: Exception) -> bool:
        return isinstance(exc, OperationFailure) and exc.code in self.AUTH_ERROR_CODES
