"""Layout inspection: report where the build lives without validating it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildgate.domain.layout import BuildLayoutConfiguration
from buildgate.services.result import ServiceResult

if TYPE_CHECKING:
    from buildgate.domain.invocation import InvocationParameters
    from buildgate.infrastructure.layout import BuildLayoutResolver


def inspect_layout(resolver: BuildLayoutResolver, params: InvocationParameters) -> ServiceResult:
    """Resolve the layout for *params*; a missing definition is a warning, not an error."""
    layout = resolver.resolve(BuildLayoutConfiguration.from_invocation(params))
    warnings: list[str] = []
    if layout.definition_missing:
        warnings.append(f"No build definition found for '{params.current_dir}'")
    return ServiceResult(ok=True, op="layout", data=layout.to_dict(), warnings=warnings)
