from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_customer_repo import ICustomerRepo
from src.service.matchday.domain.entity.customer_entity import CustomerEntity
from src.service.matchday.driven_adapter.model.customer_model import CustomerModel


class CustomerRepoImpl(ICustomerRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        async with self.session_factory() as session:
            customer_model = await session.get(CustomerModel, customer_id)

        return self._model_to_entity(customer_model) if customer_model else None

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.email == email)
            )
            customer_model = result.scalar_one_or_none()

        return self._model_to_entity(customer_model) if customer_model else None

    @Logger.io
    async def create_if_absent(self, *, customer: CustomerEntity) -> Optional[CustomerEntity]:
        async with self.session_factory() as session:
            customer_model = CustomerModel(
                email=customer.email,
                first_name=customer.first_name,
                last_name=customer.last_name,
                phone=customer.phone,
            )
            session.add(customer_model)
            try:
                await session.commit()
            except IntegrityError:
                # Unique email: a concurrent request created this customer first
                await session.rollback()
                return None
            await session.refresh(customer_model)

            return self._model_to_entity(customer_model)

    @Logger.io
    async def update_contact(self, *, customer_id: int, changes: dict[str, str]) -> CustomerEntity:
        async with self.session_factory() as session:
            await session.execute(
                update(CustomerModel)
                .where(CustomerModel.id == customer_id)
                .values(**changes, updated_at=datetime.now(timezone.utc))
                .execution_options(synchronize_session=False)
            )
            await session.commit()

            customer_model = await session.get(CustomerModel, customer_id)
            if customer_model is None:
                raise NotFoundError(f'Customer not found: {customer_id}')

            return self._model_to_entity(customer_model)

    def _model_to_entity(self, customer_model: CustomerModel) -> CustomerEntity:
        return CustomerEntity(
            id=customer_model.id,
            email=customer_model.email,
            first_name=customer_model.first_name,
            last_name=customer_model.last_name,
            phone=customer_model.phone,
            created_at=customer_model.created_at,
            updated_at=customer_model.updated_at,
        )
