# gibson/common - shared, dependency-free helpers
#
# Configuration types used by gibson.core live here.

from gibson.common.options import ParseOptions

__all__ = ["ParseOptions"]
