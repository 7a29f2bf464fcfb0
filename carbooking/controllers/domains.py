from flask import Blueprint, request

from ..services.domain_service import DomainService
from ..utils.wire import document_to_wire, envelope

bp = Blueprint("domains", __name__, url_prefix="/api/domains")


@bp.get("")
def list_domains():
    """All domains newest first, or the single match for ?domainName= (null when absent)."""
    name = request.args.get("domainName")
    if name:
        return envelope(document_to_wire(DomainService.find_by_name(name)))
    return envelope(DomainService.list_domains())


@bp.post("")
def create_domain():
    domain = DomainService.create_domain(request.get_json(silent=True))
    return envelope(domain, message="Domain created successfully", status=201)


@bp.get("/<domain_id>")
def get_domain(domain_id):
    return envelope(DomainService.get_domain(domain_id))


@bp.put("/<domain_id>")
def update_domain(domain_id):
    domain = DomainService.update_domain(domain_id, request.get_json(silent=True))
    return envelope(domain, message="Domain updated successfully")


@bp.delete("/<domain_id>")
def delete_domain(domain_id):
    DomainService.delete_domain(domain_id)
    return envelope(message="Domain deleted successfully")
