from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    rule_id: str
    symbol: str
    display_name: str
    short_description: str
    severity: str
    node_kind: str
    pylint_number: str
    manual_instructions: str
    references: list[str]
