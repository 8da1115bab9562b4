"""create_app(settings) — the passed settings drive startup, not the environment."""

from datetime import date

from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.config import Settings
from app.main import create_app, lifespan


async def test_lifespan_uses_settings_given_to_factory(tmp_path):
    db_path = tmp_path / "factory.db"
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        upload_dir=str(tmp_path / "photos"),
        passkeys={"key": "couple"},
        default_anniversary_date=date(2020, 1, 1),
        log_format="text",
    )
    app = create_app(settings)
    assert app.state.settings is settings

    original_manager = db_module.db_manager
    try:
        async with lifespan(app):
            assert db_module.db_manager.engine.url.database == str(db_path)
            assert (tmp_path / "photos").is_dir()

            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test",
            ) as client:
                res = await client.post("/api/v1/auth/login", json={"passkey": "key"})
                assert res.status_code == 200
                headers = {"Authorization": f"Bearer {res.json()['token']}"}

                res = await client.get(
                    "/api/v1/countdown", headers=headers,
                    params={"now": "2024-06-01T00:00:00"},
                )
                assert res.status_code == 200
                assert res.json()["anniversary"]["yearsPassed"] == 4
        assert db_path.exists()
    finally:
        db_module.db_manager = original_manager
