"""
Async session source for test factories following kkb_fastapi pattern.
"""
from app.database.session_manager.db_session import Database


class LazySessionMaker:
    """
    Sessionmaker stand-in resolved at call time.

    The Database singleton is re-initialised for every test, so the factory
    Meta cannot hold the session maker itself.
    """

    def __call__(self):
        if Database._async_session_maker is None:
            raise RuntimeError(
                "Database not initialized. Call Database.init() in conftest first."
            )
        return Database._async_session_maker()


async_session = LazySessionMaker()
