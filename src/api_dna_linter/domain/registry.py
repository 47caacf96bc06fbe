"""Explicit rule registry built once at the composition root."""

from collections.abc import Iterator, Mapping
from dataclasses import replace

from api_dna_linter.domain.chain import ChainWalker
from api_dna_linter.domain.config import ConfigurationLoader
from api_dna_linter.domain.registry_types import RuleRegistryEntry
from api_dna_linter.domain.rule_msgs import RuleMsgBuilder
from api_dna_linter.domain.rules import Checkable, NodeKind, RuleDescriptor, Severity
from api_dna_linter.domain.rules.dto_rename import ApiSnakeCaseRule, DtoSnakeCaseRenameAllRule
from api_dna_linter.domain.rules.endpoint_summary import ApiEndpointSummaryRule
from api_dna_linter.domain.rules.problem_details import ApiProblemDetailsRule
from api_dna_linter.domain.scope import PathScopeGate


class RuleRegistryError(ValueError):
    """Raised when the rule set is inconsistent (duplicate code, missing entry)."""


class RuleRegistry:
    """
    Ordered (descriptor, rule) pairs. Registration order is invocation order.

    Codes and symbols are unique across the registry; a code is never reused
    for a different rule.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[RuleDescriptor, Checkable]] = []
        self._codes: set[str] = set()
        self._symbols: set[str] = set()

    def register(self, descriptor: RuleDescriptor, rule: Checkable) -> None:
        if descriptor.code != rule.code:
            raise RuleRegistryError(
                f"Descriptor {descriptor.code} does not describe rule {rule.code}"
            )
        if descriptor.code in self._codes:
            raise RuleRegistryError(f"Duplicate rule code: {descriptor.code}")
        if descriptor.symbol in self._symbols:
            raise RuleRegistryError(f"Duplicate rule symbol: {descriptor.symbol}")
        self._entries.append((descriptor, rule))
        self._codes.add(descriptor.code)
        self._symbols.add(descriptor.symbol)

    def __iter__(self) -> Iterator[tuple[RuleDescriptor, Checkable]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def codes(self) -> list[str]:
        return [descriptor.code for descriptor, _ in self._entries]

    def descriptors(self) -> list[RuleDescriptor]:
        return [descriptor for descriptor, _ in self._entries]

    def get(self, code: str) -> tuple[RuleDescriptor, Checkable] | None:
        for descriptor, rule in self._entries:
            if descriptor.code == code:
                return descriptor, rule
        return None

    def for_kind(self, kind: NodeKind) -> list[tuple[RuleDescriptor, Checkable]]:
        return [(d, r) for d, r in self._entries if d.node_kind is kind]

    def only(self, code: str) -> "RuleRegistry":
        """A registry holding just the rule with code, for isolated runs."""
        found = self.get(code)
        if found is None:
            raise RuleRegistryError(f"Unknown rule code: {code}")
        subset = RuleRegistry()
        subset.register(*found)
        return subset


class RuleRegistryFactory:
    """Instantiates the built-in rules and joins them with their catalogue entries."""

    @staticmethod
    def builtin_rules(config: ConfigurationLoader) -> list[Checkable]:
        scope_gate = PathScopeGate(config.scope_paths)
        chain_walker = ChainWalker(
            builder_types=config.builder_types,
            constructors=config.builder_constructors,
            max_links=config.max_chain_length,
        )
        return [
            DtoSnakeCaseRenameAllRule(scope_gate),
            ApiProblemDetailsRule(chain_walker, config.error_status_names),
            ApiEndpointSummaryRule(chain_walker),
            ApiSnakeCaseRule(scope_gate),
        ]

    @staticmethod
    def descriptor_from_entry(rule: Checkable, entry: RuleRegistryEntry) -> RuleDescriptor:
        try:
            severity = Severity.parse(entry.get("severity", "warn"))
        except ValueError as exc:
            raise RuleRegistryError(f"Bad severity for {rule.code}: {entry.get('severity')}") from exc
        return RuleDescriptor(
            code=rule.code,
            symbol=entry.get("symbol") or rule.code.lower(),
            severity=severity,
            description=entry.get("short_description") or rule.description,
            node_kind=rule.node_kind,
            pylint_number=entry.get("pylint_number", ""),
        )

    @staticmethod
    def build(
        config: ConfigurationLoader,
        catalogue: Mapping[str, RuleRegistryEntry],
        rules: list[Checkable] | None = None,
    ) -> RuleRegistry:
        """Build the registry: enabled rules only, configured severities applied."""
        registry = RuleRegistry()
        for rule in rules if rules is not None else RuleRegistryFactory.builtin_rules(config):
            if not config.is_enabled(rule.code):
                continue
            entry = RuleMsgBuilder.get_entry(catalogue, rule.code)
            if entry is None:
                raise RuleRegistryError(f"No catalogue entry for rule {rule.code}")
            descriptor = RuleRegistryFactory.descriptor_from_entry(rule, entry)
            descriptor = replace(
                descriptor, severity=config.severity_for(rule.code, descriptor.severity)
            )
            registry.register(descriptor, rule)
        return registry
