"""Reserved-pattern substitution for ``re.sub``."""

from .casing import preserve_case
from .interceptor import SubstitutionInterceptor, install_substitution, substitute

__all__ = [
    "SubstitutionInterceptor",
    "install_substitution",
    "preserve_case",
    "substitute",
]
