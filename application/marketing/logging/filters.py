"""
Logging filters that copy the evaluation scope onto each record
"""
import logging
from marketing.logging.context import evaluation_scope


class EvaluationContextFilter(logging.Filter):
    def filter(self, record):
        record.evaluation_id = getattr(evaluation_scope, 'evaluation_id', None) or ''
        record.store_id = getattr(evaluation_scope, 'store_id', None) or ''
        record.customer_id = getattr(evaluation_scope, 'customer_id', None) or ''
        return True
