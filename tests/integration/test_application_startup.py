"""Integration tests for application lifecycle and startup behavior."""

import pytest
from sqlalchemy import inspect

from src.storefront.runtime.config.config_data import ConfigData, DatabaseConfig
from src.storefront.runtime.context import with_context

pytestmark = pytest.mark.integration

EXPECTED_TABLES = {
    "usertable",
    "categorytable",
    "producttable",
    "ordertable",
    "reviewtable",
}


class TestApplicationStartup:
    """Test application startup and shutdown hooks."""

    @pytest.mark.asyncio
    async def test_startup_creates_tables(self):
        import src.storefront.api.http.app as application

        await application.startup()
        try:
            engine = application.app.state.app_dependencies.database_service.engine
            assert EXPECTED_TABLES <= set(inspect(engine).get_table_names())
        finally:
            await application.shutdown()

    @pytest.mark.asyncio
    async def test_startup_skips_tables_when_disabled(self):
        import src.storefront.api.http.app as application

        override = ConfigData(database=DatabaseConfig(url="sqlite://", create_tables=False))
        with with_context(override):
            await application.startup()
        try:
            engine = application.app.state.app_dependencies.database_service.engine
            assert inspect(engine).get_table_names() == []
        finally:
            await application.shutdown()

    @pytest.mark.asyncio
    async def test_startup_uses_configured_bcrypt_rounds(self):
        import src.storefront.api.http.app as application

        await application.startup()
        try:
            assert application.app.state.app_dependencies.password_hasher.rounds == 4
        finally:
            await application.shutdown()
