"""Domain constants shared by rules, config and reporters."""

DIAGNOSTIC_SOURCE = "jakarta-cdi"
"""Source tag stamped on every diagnostic emitted by the CDI rules."""

RULE_PREFIX = "jakarta."

DEPENDENT_SCOPE = "Dependent"

# Built-in CDI scopes recognised as marking a managed bean.
SCOPES: frozenset[str] = frozenset(
    {
        DEPENDENT_SCOPE,
        "ApplicationScoped",
        "ConversationScoped",
        "RequestScoped",
        "SessionScoped",
    }
)

MANAGED_BEAN_PUBLIC_FIELD_MESSAGE = (
    "A managed bean with a non-static public field must not declare any scope "
    "other than @Dependent"
)

CONFIG_SECTION = "jakarta-cdi-lint"
DEFAULT_FILE_EXTENSIONS = (".java",)
