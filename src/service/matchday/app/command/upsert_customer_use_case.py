"""
Upsert Customer Use Case

Resolves supporter contact details to a single customer per normalized email.
The unique constraint on email settles concurrent first-time requests: the
loser re-fetches the winner's row and merges into it.
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import IntegrityViolationError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_customer_repo import ICustomerRepo
from src.service.matchday.domain.entity.customer_entity import CustomerEntity, normalize_email
from src.service.matchday.domain.value_object.supporter_name import SupporterName


def _clean(value: Optional[str]) -> Optional[str]:
    return (value or '').strip() or None


class UpsertCustomerUseCase:
    def __init__(self, customer_repo: ICustomerRepo) -> None:
        self.customer_repo = customer_repo

    @classmethod
    @inject
    def depends(
        cls,
        customer_repo: ICustomerRepo = Depends(Provide[Container.customer_repo]),
    ) -> Self:
        return cls(customer_repo=customer_repo)

    @Logger.io
    async def upsert_from_full_name(
        self, *, full_name: str, email: str, phone: Optional[str] = None
    ) -> CustomerEntity:
        supporter_name = SupporterName.parse(full_name)
        return await self.upsert(
            email=email,
            first_name=supporter_name.first_name,
            last_name=supporter_name.last_name,
            phone=phone,
        )

    @Logger.io
    async def upsert(
        self,
        *,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> CustomerEntity:
        normalized_email = normalize_email(email)
        if not normalized_email:
            raise ValidationError('Email is required')

        first_name, last_name, phone = _clean(first_name), _clean(last_name), _clean(phone)

        existing = await self.customer_repo.get_by_email(email=normalized_email)
        if existing is None:
            created = await self.customer_repo.create_if_absent(
                customer=CustomerEntity(
                    email=normalized_email,
                    first_name=first_name,
                    last_name=last_name,
                    phone=phone,
                )
            )
            if created is not None:
                Logger.base.info(f'👤 [CUSTOMER] Created customer {created.id}')
                return created

            # Lost the insert race on the unique email
            existing = await self.customer_repo.get_by_email(email=normalized_email)
            if existing is None:
                raise IntegrityViolationError(
                    'Customer email conflicted on insert but could not be loaded'
                )

        changes = existing.merge_contact(first_name=first_name, last_name=last_name, phone=phone)
        if not changes:
            return existing

        assert existing.id is not None
        Logger.base.info(f'👤 [CUSTOMER] Updating {sorted(changes)} for customer {existing.id}')
        return await self.customer_repo.update_contact(customer_id=existing.id, changes=changes)
