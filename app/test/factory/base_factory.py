"""
Base factory for async SQLAlchemy models following kkb_fastapi pattern.
"""
import asyncio
import inspect
from typing import Any

import factory
from factory.alchemy import SQLAlchemyOptions
from sqlalchemy import select


class AsyncSQLAlchemyFactory(factory.Factory):
    """
    Factory whose instances are committed through their own async session.

    ``await SomeFactory(...)`` returns the committed row. SubFactory values
    arrive as tasks and are awaited before the row is built. Fields listed
    in ``Meta.sqlalchemy_get_or_create`` reuse an existing row.
    """

    _options_class = SQLAlchemyOptions

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        async def maker_coroutine():
            for key, value in kwargs.items():
                if inspect.isawaitable(value):
                    kwargs[key] = await value

            if cls._meta.sqlalchemy_get_or_create:
                return await cls._get_or_create(model_class, *args, **kwargs)
            return await cls._save(model_class, *args, **kwargs)

        # A Task can be awaited multiple times, unlike a coroutine
        return asyncio.create_task(maker_coroutine())

    @classmethod
    async def _get_or_create(cls, model_class, *args, **kwargs) -> Any:
        lookup = {
            field: kwargs[field]
            for field in cls._meta.sqlalchemy_get_or_create
            if field in kwargs
        }
        async with cls._meta.sqlalchemy_session() as session:
            stmt = select(model_class)
            for field, value in lookup.items():
                stmt = stmt.where(getattr(model_class, field) == value)
            instance = (await session.execute(stmt)).scalars().first()

        if instance is not None:
            return instance
        return await cls._save(model_class, *args, **kwargs)

    @classmethod
    async def _save(cls, model_class, *args, **kwargs) -> Any:
        async with cls._meta.sqlalchemy_session() as session:
            obj = model_class(*args, **kwargs)
            session.add(obj)
            await session.commit()
            return obj

    @classmethod
    async def create_batch(cls, size: int, **kwargs) -> list[Any]:
        return [await cls.create(**kwargs) for _ in range(size)]
