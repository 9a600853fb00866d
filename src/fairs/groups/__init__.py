"""
Groups Package

A group is one bill-splitting session: priced items, the people sharing them,
and a tip.

Key Components:
- models: Item, Person, TipSpec and Group domain models
- allocation: Pure bill allocation engine (subtotal, tip, per-person amounts)
- editing: Pure editing operations; validates user-entered amounts
- summary: Shareable plain-text export
- datastore: JSON persistence of the group collection and backup files
"""

from .allocation import (
    Allocation,
    TipAssignmentStatus,
    compute_allocation,
    equal_split_per_person,
    equal_split_shares,
    is_balanced,
    person_amount,
    selected_item_names,
    subtotal,
    tip_amount,
    tip_assignment_status,
    total,
    total_assigned,
)
from .datastore import (
    BackupFormatError,
    GroupDataStore,
    export_backup,
    import_backup,
    read_backup,
    write_backup,
)
from .editing import (
    accept_scanned_items,
    add_item,
    add_person,
    delete_item,
    delete_person,
    edit_item,
    new_group,
    rename_group,
    rename_person,
    set_item_multiplier,
    set_split_mode,
    set_tip,
    toggle_assignment,
    toggle_person_paid,
)
from .models import TIP_REF, Group, Item, Person, SplitMode, TipMode, TipSpec
from .summary import format_group_summary

__all__ = [
    "Allocation",
    "BackupFormatError",
    "Group",
    "GroupDataStore",
    "Item",
    "Person",
    "SplitMode",
    "TIP_REF",
    "TipAssignmentStatus",
    "TipMode",
    "TipSpec",
    "accept_scanned_items",
    "add_item",
    "add_person",
    "compute_allocation",
    "delete_item",
    "delete_person",
    "edit_item",
    "equal_split_per_person",
    "equal_split_shares",
    "export_backup",
    "format_group_summary",
    "import_backup",
    "is_balanced",
    "new_group",
    "person_amount",
    "read_backup",
    "rename_group",
    "rename_person",
    "selected_item_names",
    "set_item_multiplier",
    "set_split_mode",
    "set_tip",
    "subtotal",
    "tip_amount",
    "tip_assignment_status",
    "toggle_assignment",
    "toggle_person_paid",
    "total",
    "total_assigned",
    "write_backup",
]
