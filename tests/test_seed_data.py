"""
Tests for demo content seeding
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.database.seed_data import DEMO_CONTENT, seed_demo_content
from inkwell.dbmodels import Writer


def session_with_existing(writer_id):
    db = AsyncMock(spec=AsyncSession)
    result = MagicMock()
    result.scalar_one_or_none.return_value = writer_id
    db.execute.return_value = result
    return db


class TestSeedDemoContent:
    @pytest.mark.asyncio
    async def test_seeds_empty_store(self):
        db = session_with_existing(None)

        written = await seed_demo_content(db)

        assert written is True
        added = [call.args[0] for call in db.add.call_args_list]
        assert [w.name for w in added] == [entry["name"] for entry in DEMO_CONTENT]
        assert all(isinstance(w, Writer) for w in added)
        assert [len(w.articles) for w in added] == [2, 1, 0]
        db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_custom_content(self):
        db = session_with_existing(None)

        await seed_demo_content(
            db,
            content=[{"name": "Ana", "email": "a@x.com", "articles": [{"title": "T1", "slug": "t1"}]}],
        )

        writer = db.add.call_args.args[0]
        assert writer.email == "a@x.com"
        assert writer.articles[0].slug == "t1"
        assert writer.articles[0].published_at is not None

    @pytest.mark.asyncio
    async def test_skips_when_writers_exist(self):
        db = session_with_existing(1)

        written = await seed_demo_content(db)

        assert written is False
        db.add.assert_not_called()
        db.flush.assert_not_awaited()
