from .customer import (
    create_customer,
    get_customer,
    list_customers,
)

from .order import (
    create_order,
    get_order,
    list_orders,
    to_order_record,
    update_order_status,
    delete_order,
)

from .production_order import (
    list_production_orders,
    get_production_order,
    update_progress,
)

from .roll import (
    create_roll,
    get_roll,
    advance_roll,
    list_roll_records,
)

__all__ = [
    # Customer functions
    "create_customer",
    "get_customer",
    "list_customers",

    # Order functions
    "create_order",
    "get_order",
    "list_orders",
    "to_order_record",
    "update_order_status",
    "delete_order",

    # Production order functions
    "list_production_orders",
    "get_production_order",
    "update_progress",

    # Roll functions
    "create_roll",
    "get_roll",
    "advance_roll",
    "list_roll_records",
]
