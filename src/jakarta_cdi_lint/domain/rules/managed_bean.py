"""Managed Bean Rule - public instance fields require @Dependent scope.

If a managed bean has a non-static public field, it must have scope
@Dependent. A managed bean with a non-static public field that declares any
other scope is a definition error:
https://jakarta.ee/specifications/cdi/2.0/cdi-spec-2.0.html#managed_beans
"""

from collections.abc import Callable, Collection, Iterable

from jakarta_cdi_lint.domain.constants import (
    DEPENDENT_SCOPE,
    DIAGNOSTIC_SOURCE,
    MANAGED_BEAN_PUBLIC_FIELD_MESSAGE,
    SCOPES,
)
from jakarta_cdi_lint.domain.entities import (
    CompilationUnit,
    Diagnostic,
    DiagnosticSeverity,
    FieldDeclaration,
    ScanOutcome,
    TypeDeclaration,
)
from jakarta_cdi_lint.domain.errors import PositionResolutionFailure
from jakarta_cdi_lint.domain.protocols import (
    FailureLoggerProtocol,
    PositionResolverProtocol,
)
from jakarta_cdi_lint.domain.rules import DiagnosticsCollector, FieldStep


class ScopeAnnotationRegistry:
    """Read-only set of annotation names that make a type a managed bean."""

    def __init__(self, names: Iterable[str] = SCOPES) -> None:
        self._names = frozenset(names)

    def contains(self, name: str) -> bool:
        return name in self._names


SCOPE_REGISTRY = ScopeAnnotationRegistry()


class TypeAnnotationResolver:
    """Derives a type's managed-bean scopes from its annotations."""

    def __init__(self, registry: ScopeAnnotationRegistry = SCOPE_REGISTRY) -> None:
        self._registry = registry

    def resolve_managed_scopes(self, type_decl: TypeDeclaration) -> frozenset[str]:
        """Distinct annotation names of the type that are recognised scopes."""
        return frozenset(
            name for name in type_decl.annotations if self._registry.contains(name)
        )

    def is_managed_bean(self, type_decl: TypeDeclaration) -> bool:
        """A type with at least one recognised scope is a managed bean."""
        return bool(self.resolve_managed_scopes(type_decl))


class FieldRule:
    """Pure predicate over already resolved type scopes and a field's flags."""

    @staticmethod
    def violates(
        is_managed_bean: bool,
        managed_scopes: Collection[str],
        field_decl: FieldDeclaration,
    ) -> bool:
        # A type declaring Dependent alongside another scope still fires.
        return (
            is_managed_bean
            and field_decl.is_public
            and not field_decl.is_static
            and any(scope != DEPENDENT_SCOPE for scope in managed_scopes)
        )


class DiagnosticFactory:
    """Builds positioned, classified diagnostics for violating fields."""

    def __init__(
        self,
        position_resolver: PositionResolverProtocol,
        finalize: Callable[[Diagnostic], Diagnostic],
        message: str = MANAGED_BEAN_PUBLIC_FIELD_MESSAGE,
    ) -> None:
        self._position_resolver = position_resolver
        self._finalize = finalize
        self._message = message

    def build(self, unit: CompilationUnit, field_decl: FieldDeclaration) -> Diagnostic:
        """Raises PositionResolutionFailure when the field cannot be located."""
        range_ = self._position_resolver.resolve(unit, field_decl)
        return self._finalize(Diagnostic(range=range_, message=self._message))

    def try_build(self, unit: CompilationUnit, field_decl: FieldDeclaration) -> FieldStep:
        try:
            return FieldStep(diagnostic=self.build(unit, field_decl))
        except PositionResolutionFailure as exc:
            return FieldStep(error=exc)


class ManagedBeanDiagnosticsCollector(DiagnosticsCollector):
    """
    Collects managed-bean public field diagnostics for a compilation unit.

    Types are visited in source-model order and fields in declaration order.
    The first position failure aborts the rest of the unit: it is logged once,
    diagnostics appended before it are kept, and nothing is raised.
    """

    code: str = "managed-bean-public-field"

    def __init__(
        self,
        position_resolver: PositionResolverProtocol,
        failure_logger: FailureLoggerProtocol,
        severity: DiagnosticSeverity = DiagnosticSeverity.ERROR,
        annotation_resolver: TypeAnnotationResolver | None = None,
    ) -> None:
        self._severity = severity
        self._failure_logger = failure_logger
        self._annotation_resolver = annotation_resolver or TypeAnnotationResolver()
        self._factory = DiagnosticFactory(position_resolver, self.finalize)

    def finalize(self, diagnostic: Diagnostic) -> Diagnostic:
        return diagnostic.with_classification(DIAGNOSTIC_SOURCE, self._severity)

    def collect(
        self, unit: CompilationUnit | None, diagnostics: list[Diagnostic]
    ) -> ScanOutcome:
        if unit is None:
            return ScanOutcome()

        added = 0
        for type_decl in unit.types:
            managed_scopes = self._annotation_resolver.resolve_managed_scopes(type_decl)
            is_managed_bean = self._annotation_resolver.is_managed_bean(type_decl)
            for field_decl in type_decl.fields:
                step = self.check_field(unit, field_decl, is_managed_bean, managed_scopes)
                if step.failed:
                    self._failure_logger.log_failure(
                        f"Cannot calculate diagnostics ({self.code}) for {unit.path}",
                        step.error,
                    )
                    return ScanOutcome(diagnostics_added=added, error=step.error)
                if step.diagnostic is not None:
                    diagnostics.append(step.diagnostic)
                    added += 1
        return ScanOutcome(diagnostics_added=added)

    def check_field(
        self,
        unit: CompilationUnit,
        field_decl: FieldDeclaration,
        is_managed_bean: bool,
        managed_scopes: frozenset[str],
    ) -> FieldStep:
        if not FieldRule.violates(is_managed_bean, managed_scopes, field_decl):
            return FieldStep()
        return self._factory.try_build(unit, field_decl)
