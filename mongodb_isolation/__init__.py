from mongodb_isolation.models import Account
from mongodb_isolation.prober import IsolationReport, IsolationState

__all__ = ["Account", "IsolationReport", "IsolationState"]
