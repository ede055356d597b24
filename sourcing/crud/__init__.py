from .profile import (
    create_profile,
    get_profile,
    get_profile_by_email,
    verify_supplier,
    list_verified_suppliers,
)

from .quote import (
    create_quote,
    get_quote,
    list_unassigned_quotes,
    assign_quote_if_unassigned,
)

from .order import (
    create_order,
    get_order,
    update_order_status,
    order_stats_by_supplier,
)

__all__ = [
    # Profile functions
    "create_profile",
    "get_profile",
    "get_profile_by_email",
    "verify_supplier",
    "list_verified_suppliers",

    # Quote functions
    "create_quote",
    "get_quote",
    "list_unassigned_quotes",
    "assign_quote_if_unassigned",

    # Order functions
    "create_order",
    "get_order",
    "update_order_status",
    "order_stats_by_supplier",
]
