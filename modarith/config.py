"""Global configuration for the modarith service.

The arithmetic engine itself reads no configuration.
"""

import os

# ---------- HTTP service ----------
JOURNAL_ENABLED = os.environ.get("MODARITH_JOURNAL_ENABLED", "1").lower() not in ("0", "false", "no")

# Operands wider than this are rejected by the service before any arithmetic.
MAX_OPERAND_BITS = int(os.environ.get("MODARITH_MAX_OPERAND_BITS", "4096"))
