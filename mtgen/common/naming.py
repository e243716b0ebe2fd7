# mtgen/common/naming.py
PERMISSION_PREFIX = "A_AX_BP_"
MICROTRIGGER_TYPE = "Microtrigger"


def derive_permission_name(developer_name: str) -> str:
    """Bypass custom permission for a microtrigger, e.g. A_AX_BP_AccountBeforeInsert."""
    return PERMISSION_PREFIX + developer_name


def derive_microtrigger_member(developer_name: str) -> str:
    return f"{MICROTRIGGER_TYPE}.{developer_name}"
