"""Defaults for the API DNA rule set. Overridable from [tool.api-dna]."""

RULE_PREFIX: str = "dna."

DEFAULT_SCOPE_PATHS: tuple[tuple[str, ...], ...] = (("api", "rest"),)

DEFAULT_BUILDER_TYPES: frozenset[str] = frozenset({"OperationBuilder"})

# Constructors that open an OperationBuilder chain.
DEFAULT_BUILDER_CONSTRUCTORS: frozenset[str] = frozenset(
    {"get", "post", "put", "patch", "delete", "head", "options"}
)

# Statuses that must be answered with RFC 9457 Problem Details.
DEFAULT_ERROR_STATUS_NAMES: frozenset[str] = frozenset(
    {
        "BAD_REQUEST",
        "UNAUTHORIZED",
        "FORBIDDEN",
        "NOT_FOUND",
        "METHOD_NOT_ALLOWED",
        "CONFLICT",
        "GONE",
        "UNPROCESSABLE_ENTITY",
        "UNPROCESSABLE_CONTENT",  # HTTPStatus(422).name from Python 3.13
        "TOO_MANY_REQUESTS",
        "INTERNAL_SERVER_ERROR",
        "BAD_GATEWAY",
        "SERVICE_UNAVAILABLE",
        "GATEWAY_TIMEOUT",
    }
)

DEFAULT_MAX_CHAIN_LENGTH: int = 256

ENUM_BASE_NAMES: frozenset[str] = frozenset(
    {"Enum", "StrEnum", "IntEnum", "Flag", "IntFlag"}
)

# Annotation namespaces (terminal callee names) and keys read by the DTO rules.
SERDE_NAMESPACE: str = "serde"
FIELD_NAMESPACE: str = "field"
RENAME_ALL_KEY: str = "rename_all"
RENAME_KEY: str = "rename"

SNAKE_CASE_CONVENTION: str = "snake_case"
