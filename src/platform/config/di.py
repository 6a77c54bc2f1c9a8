"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.matchday.driven_adapter.repo.customer_repo_impl import CustomerRepoImpl
from src.service.matchday.driven_adapter.repo.game_query_repo_impl import GameQueryRepoImpl
from src.service.matchday.driven_adapter.repo.seat_inventory_command_repo_impl import (
    SeatInventoryCommandRepoImpl,
)
from src.service.matchday.driven_adapter.repo.seat_inventory_query_repo_impl import (
    SeatInventoryQueryRepoImpl,
)
from src.service.matchday.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.matchday.driving_adapter.http_controller.auth.session_auth import SessionAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine, SQLite or PostgreSQL by URL)
    database = providers.Singleton(Database, db_url=config_service.provided.DATABASE_URL_ASYNC)

    # Repositories (stateless - use session_factory per-request)
    seat_inventory_query_repo = providers.Singleton(
        SeatInventoryQueryRepoImpl, session_factory=database.provided.session
    )
    seat_inventory_command_repo = providers.Singleton(
        SeatInventoryCommandRepoImpl, session_factory=database.provided.session
    )
    game_query_repo = providers.Singleton(
        GameQueryRepoImpl, session_factory=database.provided.session
    )
    customer_repo = providers.Singleton(CustomerRepoImpl, session_factory=database.provided.session)

    # Auth service
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    session_auth = providers.Singleton(
        SessionAuth, settings=config_service, password_hasher=password_hasher
    )


container = Container()
