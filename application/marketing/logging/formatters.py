"""
JSON formatters for promotion engine logs
"""
import json
import logging
from datetime import datetime

# Settings
from marketing.config.settings import MarketingConfigs
configs = MarketingConfigs()

APPLICATION_ENVIRONMENT = configs.APPLICATION_ENVIRONMENT
SERVICE_NAME = configs.APP_NAME


class BaseJSONFormatter(logging.Formatter):

    def __init__(self):
        super().__init__()
        self.application_environment = APPLICATION_ENVIRONMENT

    def base_entry(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line_number': record.lineno,
            'environment': self.application_environment,
            'service': SERVICE_NAME
        }
        if record.exc_info:
            log_entry['exception'] = str(record.exc_info[1])
        return log_entry

    def format(self, record):
        log_entry = self.base_entry(record)
        log_entry['message'] = record.getMessage()
        self.add_extra_fields(log_entry, record)
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def add_extra_fields(self, log_entry, record):
        pass


class AppLogsJSONFormatter(BaseJSONFormatter):
    def add_extra_fields(self, log_entry, record):
        log_entry['evaluation_id'] = getattr(record, 'evaluation_id', '')
        log_entry['store_id'] = getattr(record, 'store_id', '')
        log_entry['customer_id'] = getattr(record, 'customer_id', '')


class AuditLogsJSONFormatter(BaseJSONFormatter):
    def format(self, record):
        """Audit records carry structured fields only, no free-text message."""
        log_entry = self.base_entry(record)
        self.add_extra_fields(log_entry, record)
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def add_extra_fields(self, log_entry, record):
        log_entry['evaluation_id'] = getattr(record, 'evaluation_id', '')
        log_entry['store_id'] = getattr(record, 'store_id', '')
        log_entry['customer_id'] = getattr(record, 'customer_id', '')

        log_entry['duration'] = getattr(record, 'duration', 0.0)
        log_entry['candidate_count'] = getattr(record, 'candidate_count', 0)
        log_entry['applied_count'] = getattr(record, 'applied_count', 0)
        log_entry['applied_promotions'] = getattr(record, 'applied_promotions', [])
        log_entry['shipment_price'] = getattr(record, 'shipment_price', None)
        entry_prices = getattr(record, 'entry_prices', None)
        log_entry['entry_prices'] = json.dumps(entry_prices, ensure_ascii=False, default=str) if entry_prices else ''
