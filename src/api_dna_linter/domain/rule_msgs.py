"""Pure message-building from the rule registry. No I/O or infrastructure imports."""

from collections.abc import Iterable, Mapping
from typing import cast

from api_dna_linter.domain.constants import RULE_PREFIX
from api_dna_linter.domain.registry_types import RuleRegistryEntry
from api_dna_linter.domain.rules import RuleDescriptor, Severity


class RuleMsgBuilder:
    """
    Builds Pylint msgs dicts for registered rules.

    Pylint msgids are a category letter plus four digits; the letter follows
    the effective severity (E for deny, W for warn) and the digits come from
    the catalogue's pylint_number.
    """

    @staticmethod
    def get_entry(
        catalogue: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return the catalogue entry for a rule by code or symbol."""
        entry = catalogue.get(f"{RULE_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in catalogue.items():
            if not rid.startswith(RULE_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def msgid_for(descriptor: RuleDescriptor) -> str:
        letter = "E" if descriptor.severity is Severity.DENY else "W"
        return f"{letter}{descriptor.pylint_number}"

    @staticmethod
    def build_msgs(
        descriptors: Iterable[RuleDescriptor],
    ) -> dict[str, tuple[str, str, str]]:
        """
        Return { msgid: ("%s", symbol, description) } for checker.msgs.

        The template is a bare "%s": each violation carries its full primary
        message, which differs between sub-cases of the same rule.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for descriptor in descriptors:
            if not descriptor.pylint_number:
                continue
            result[RuleMsgBuilder.msgid_for(descriptor)] = (
                "%s",
                descriptor.symbol,
                f"{descriptor.description} ({descriptor.code})",
            )
        return result
