import logging
from typing import Optional

from mongoengine.errors import NotUniqueError

from carbooking.exceptions import DomainNotFoundError, DuplicateDomainError, InvalidPayloadError
from carbooking.models.domain import Domain
from carbooking.services.common import object_id_or_none
from carbooking.utils.wire import apply_wire_fields, document_to_wire

logger = logging.getLogger(__name__)

PROTECTED_DOMAIN_FIELDS = ("_id", "createdAt", "updatedAt")


class DomainService:
    """Tenant domains: per-domain car pricing/visibility and theme."""

    @staticmethod
    def list_domains() -> list[dict]:
        return [document_to_wire(d) for d in Domain.objects.order_by("-created_at", "-id")]

    @staticmethod
    def find_by_name(domain_name: str) -> Optional[Domain]:
        """Exact, case-insensitive match; the name is never treated as a pattern."""
        if not domain_name:
            return None
        return Domain.objects(domain_name__iexact=domain_name).first()

    @staticmethod
    def _get(domain_id) -> Domain:
        oid = object_id_or_none(domain_id)
        domain = Domain.objects(id=oid).first() if oid else None
        if domain is None:
            raise DomainNotFoundError()
        return domain

    @staticmethod
    def get_domain(domain_id) -> dict:
        return document_to_wire(DomainService._get(domain_id))

    @staticmethod
    def _save(domain: Domain) -> Domain:
        if not domain.domain_name:
            raise InvalidPayloadError("Domain name is required")
        clash = Domain.objects(domain_name=domain.domain_name, id__ne=domain.id).first()
        if clash is not None:
            raise DuplicateDomainError(f"Domain name '{domain.domain_name}' already exists")
        try:
            domain.save()
        except NotUniqueError:
            raise DuplicateDomainError(f"Domain name '{domain.domain_name}' already exists")
        return domain

    @staticmethod
    def create_domain(data) -> dict:
        if not isinstance(data, dict) or not data.get("domainName"):
            raise InvalidPayloadError("Domain name is required")
        domain = apply_wire_fields(Domain(), data, exclude=PROTECTED_DOMAIN_FIELDS)
        DomainService._save(domain)
        logger.info("Created domain %s", domain.domain_name)
        return document_to_wire(domain)

    @staticmethod
    def update_domain(domain_id, data) -> dict:
        domain = DomainService._get(domain_id)
        apply_wire_fields(domain, data, exclude=PROTECTED_DOMAIN_FIELDS)
        DomainService._save(domain)
        return document_to_wire(domain)

    @staticmethod
    def delete_domain(domain_id) -> None:
        domain = DomainService._get(domain_id)
        domain.delete()
        logger.info("Deleted domain %s", domain.domain_name)
