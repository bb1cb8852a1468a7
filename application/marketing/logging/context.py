"""
Evaluation scope utilities using contextvars.
Each promotion evaluation gets its own scope so concurrent evaluations never share log context.
"""
from contextvars import ContextVar, Token
import uuid


class EvaluationScope:
    def __init__(self):
        self.evaluation_id: str | None = None
        self.store_id: str | None = None
        self.customer_id: str | None = None


_evaluation_scope_var: ContextVar[EvaluationScope] = ContextVar("evaluation_scope", default=EvaluationScope())


class _EvaluationScopeProxy:
    def __getattr__(self, name):
        return getattr(_evaluation_scope_var.get(), name)

    def __setattr__(self, name, value):
        # always write to the scope of the current context
        setattr(_evaluation_scope_var.get(), name, value)


evaluation_scope = _EvaluationScopeProxy()


def open_evaluation_scope(store_id: str | None = None, customer_id: str | None = None) -> Token:
    """Start a fresh scope for the current task; pass the token to close_evaluation_scope."""
    scope = EvaluationScope()
    scope.evaluation_id = str(uuid.uuid4())
    scope.store_id = store_id
    scope.customer_id = customer_id
    return _evaluation_scope_var.set(scope)


def close_evaluation_scope(token: Token) -> None:
    """Restore whatever scope was active before the matching open"""
    _evaluation_scope_var.reset(token)
